"""SDK version model and the interfaces around version lists and caches."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class VersionType(str, Enum):
    """Release channel of an SDK version."""

    STABLE = "stable"
    UNSTABLE = "unstable"
    ARCHIVED = "archived"


@dataclass
class SDKVersion:
    """A single SDK version as known to a plugin."""

    id: str = ""
    type: VersionType | None = None
    installed: bool = False

    def print(self) -> str:
        """Render the version with its type and installed marker."""
        return self.print_with_options(True, True, False)

    def print_with_options(
        self, out_type: bool, out_installed: bool, out_not_installed: bool
    ) -> str:
        """Render the version, choosing which annotations to include."""
        if not self.id:
            return ""

        out = self.id
        if out_type:
            out += _type_suffix(self.type)

        if out_installed and self.installed:
            out += " [installed]"
        elif out_not_installed and not self.installed:
            out += " [not installed]"

        return out


def _type_suffix(version_type: VersionType | None) -> str:
    if version_type is VersionType.STABLE:
        logger.debug("skip SDK version type: %s", version_type.value)
        return ""
    if version_type in (VersionType.UNSTABLE, VersionType.ARCHIVED):
        return f" ({version_type.value})"
    logger.error("unknown SDK version type: %s", version_type)
    return ""


VersionMap = dict[VersionType, list[SDKVersion]]


class CacheStorage(ABC):
    """Persistent backing store for cached version lists."""

    @abstractmethod
    def valid(self) -> bool:
        """Whether the stored data can still be used."""

    @abstractmethod
    def load(self) -> VersionMap:
        """Return all stored version lists."""

    @abstractmethod
    def store(self, versions: VersionMap) -> None:
        """Persist all version lists."""


class Cache(ABC):
    """Cache of version lists keyed by version type."""

    @abstractmethod
    def with_external_store(self, storage: CacheStorage) -> Cache:
        """Attach a persistent storage and return the cache."""

    @abstractmethod
    def valid(self) -> bool:
        """Whether the cache holds usable data."""

    @abstractmethod
    def load(self, version_type: VersionType) -> list[SDKVersion]:
        """Return the versions of one type."""

    @abstractmethod
    def store(self, version_type: VersionType, versions: list[SDKVersion]) -> None:
        """Remember the versions of one type."""


class SDKVersions(ABC):
    """Source of the versions available for an SDK."""

    @abstractmethod
    def with_cache(self, cache: Cache) -> SDKVersions:
        """Use the given cache and return self."""

    @abstractmethod
    def all_versions(self, rebuild_cache: bool) -> list[SDKVersion]:
        """Return every known version."""

    @abstractmethod
    def latest_version(self, rebuild_cache: bool) -> SDKVersion:
        """Return the newest stable version."""