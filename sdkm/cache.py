"""In-memory version cache with optional persistent storage."""

from __future__ import annotations

import threading

from .sdk_version import Cache, CacheStorage, SDKVersion, VersionMap, VersionType


class VersionCache(Cache):
    """Thread-safe version cache, optionally mirrored to a storage."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._storage: CacheStorage | None = None
        self._cache: VersionMap = {}

    def with_external_store(self, storage: CacheStorage) -> VersionCache:
        self._storage = storage
        self._cache.clear()
        return self

    def valid(self) -> bool:
        if self._storage is not None:
            return self._storage.valid()
        return bool(self._cache)

    def load(self, version_type: VersionType) -> list[SDKVersion]:
        with self._lock:
            storage = self._storage
            if storage is not None and (not self._cache or not storage.valid()):
                self._cache = dict(storage.load())
            return self._cache.get(version_type, [])

    def store(self, version_type: VersionType, versions: list[SDKVersion]) -> None:
        with self._lock:
            self._cache[version_type] = versions
            if self._storage is not None:
                self._storage.store(self._cache)

    def __repr__(self) -> str:
        if self._storage is not None:
            return f"SDKVersionCache ({self._storage!r})"
        return "SDKVersionCache"