"""Go release versions scraped from the downloads page."""

from __future__ import annotations

import dataclasses
import logging
import re
import threading

import requests

from .cache import VersionCache
from .errors import SDKVersionNotFoundError
from .http_client import HTTPClient
from .sdk_version import Cache, SDKVersion, SDKVersions, VersionType

logger = logging.getLogger(__name__)

FAILED_GET_VERSION = "failed to get version"

_RE_STABLE_GROUP = re.compile(r'<h2 id="stable">.*?<h2')
_RE_UNSTABLE_GROUP = re.compile(r'<h2 id="unstable">.*?<div.*?id="archive"')
_RE_ARCHIVED_GROUP = re.compile(r'id="archive">.+?</article')
_RE_GO_VERSION = re.compile(r'id="go(.+?)"')

_GROUPS = {
    VersionType.STABLE: _RE_STABLE_GROUP,
    VersionType.UNSTABLE: _RE_UNSTABLE_GROUP,
    VersionType.ARCHIVED: _RE_ARCHIVED_GROUP,
}

_ORDER = (VersionType.STABLE, VersionType.UNSTABLE, VersionType.ARCHIVED)


class GoVersions(SDKVersions):
    """Lists Go versions from a releases page, caching the result."""

    def __init__(self, url_releases: str, http_client: HTTPClient | None = None) -> None:
        self.url_releases = url_releases
        self._http = http_client or HTTPClient()
        self._cache: Cache = VersionCache()
        self._lock = threading.Lock()
        self._content = ""

    def __repr__(self) -> str:
        return f"versions{{{self.url_releases}}}"

    def with_cache(self, cache: Cache) -> GoVersions:
        logger.debug("setting cache: %r", cache)
        self._cache = cache
        return self

    def all_versions(self, rebuild_cache: bool) -> list[SDKVersion]:
        if rebuild_cache or not self._cache.valid():
            self._update_cache(_ORDER)

        result = self._collect()
        if result:
            return result

        logger.debug("trying to force refresh cache to search for versions")
        self._update_cache(_ORDER)
        return self._collect()

    def latest_version(self, rebuild_cache: bool) -> SDKVersion:
        if rebuild_cache or not self._cache.valid():
            self._update_cache((VersionType.STABLE,))

        stable = self._cache.load(VersionType.STABLE)
        if not stable:
            logger.debug("trying to force a cache refresh to find the latest stable version")
            self._update_cache((VersionType.STABLE,))
            stable = self._cache.load(VersionType.STABLE)

        if not stable:
            raise SDKVersionNotFoundError("latest")
        return dataclasses.replace(stable[0])

    def _collect(self) -> list[SDKVersion]:
        return [
            dataclasses.replace(version)
            for version_type in _ORDER
            for version in self._cache.load(version_type)
        ]

    def _get_content(self, url: str) -> str:
        logger.debug("getting content for url: %s", url)
        try:
            response = self._http.get(url)
        except requests.RequestException as exc:
            logger.error("%s: %s", FAILED_GET_VERSION, exc)
            return ""
        content = response.text.replace("\n", "")
        logger.debug("received content size: %d", len(content))
        return content

    def _parse_versions(self, version_type: VersionType) -> None:
        with self._lock:
            if not self._content:
                self._content = self._get_content(self.url_releases)

            match = _GROUPS[version_type].search(self._content)
            if match is None or not match.group(0):
                logger.debug("content is empty for version: %s", version_type.value)
                return

            versions = [
                SDKVersion(id=version_id, type=version_type)
                for version_id in _RE_GO_VERSION.findall(match.group(0))
            ]
            logger.debug(
                "found %d SDK versions for version type: %s", len(versions), version_type.value
            )
            self._cache.store(version_type, versions)

    def _update_cache(self, version_types: tuple[VersionType, ...]) -> None:
        for version_type in version_types:
            self._parse_versions(version_type)
        self._content = ""