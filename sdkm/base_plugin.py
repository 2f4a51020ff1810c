"""Shared plugin services: where SDKs live and whether one is installed."""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)


def default_sdk_root() -> str:
    """The default directory that holds installed SDKs."""
    return str(Path.home() / "sdk")


class BasePlugin(ABC):
    """Services every SDK plugin relies on."""

    @abstractmethod
    def get_sdk_dir(self) -> str:
        """Root directory of all SDKs."""

    @abstractmethod
    def get_sdk_version_dir(self, plugin_id: str, version: str) -> str:
        """Directory of one SDK version."""

    @abstractmethod
    def has_installed(self, plugin_id: str, version: str) -> bool:
        """Whether the SDK version is present on disk."""


class LocalBasePlugin(BasePlugin):
    """Base plugin backed by a directory on the local file system."""

    def __init__(self, sdk_dir: str | None = None) -> None:
        logger.debug("apply SDK directory option root_dir=%s", sdk_dir or "")
        self._sdk_dir = sdk_dir or default_sdk_root()

    def __repr__(self) -> str:
        return f"LocalBasePlugin(sdk_dir={self._sdk_dir!r})"

    def get_sdk_dir(self) -> str:
        return self._sdk_dir

    def get_sdk_version_dir(self, plugin_id: str, version: str) -> str:
        return os.path.join(self.get_sdk_dir(), str(plugin_id), version)

    def has_installed(self, plugin_id: str, version: str) -> bool:
        sdk_path = self.get_sdk_version_dir(plugin_id, version)
        try:
            is_dir = Path(sdk_path).is_dir()
            exists = Path(sdk_path).exists()
        except OSError:
            raise
        if not exists:
            return False
        if not is_dir:
            raise NotADirectoryError(f"sdk path is not a folder: {sdk_path}")
        return True