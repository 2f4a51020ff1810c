"""Cache storage kept as a JSON file that expires after a day."""

from __future__ import annotations

import json
import logging
import os
import sys
import threading
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Callable

from .sdk_version import CacheStorage, SDKVersion, VersionMap, VersionType

logger = logging.getLogger(__name__)

CACHE_EXPIRATION = timedelta(hours=24)
_UPDATED_FORMAT = "%Y-%m-%d"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _executable_dir() -> str:
    program = sys.argv[0] if sys.argv and sys.argv[0] else ""
    if program:
        return os.path.dirname(os.path.abspath(program))
    return os.getcwd()


class _CacheFormatError(ValueError):
    pass


def _version_to_json(version: SDKVersion) -> dict[str, str]:
    return {"ID": version.id, "Type": version.type.value if version.type else ""}


def _version_from_json(raw: Any) -> SDKVersion:
    if not isinstance(raw, dict):
        raise _CacheFormatError("version entry is not an object")
    type_value = raw.get("Type") or ""
    try:
        version_type = VersionType(type_value) if type_value else None
    except ValueError as exc:
        raise _CacheFormatError(str(exc)) from exc
    return SDKVersion(id=str(raw.get("ID") or ""), type=version_type)


def _decode(text: str) -> VersionMap:
    raw = json.loads(text)
    if not isinstance(raw, dict):
        raise _CacheFormatError("cache document is not an object")
    updated = raw.get("Updated")
    if updated is not None:
        datetime.strptime(str(updated), _UPDATED_FORMAT)
    versions = raw.get("Versions") or {}
    if not isinstance(versions, dict):
        raise _CacheFormatError("versions are not an object")
    result: VersionMap = {}
    for key, entries in versions.items():
        try:
            version_type = VersionType(key)
        except ValueError as exc:
            raise _CacheFormatError(str(exc)) from exc
        result[version_type] = [_version_from_json(entry) for entry in entries or []]
    return result


def _encode(updated: date, versions: VersionMap) -> str:
    return json.dumps(
        {
            "Updated": updated.strftime(_UPDATED_FORMAT),
            "Versions": {
                VersionType(key).value: [_version_to_json(v) for v in entries]
                for key, entries in versions.items()
            },
        }
    )


class FileCacheStorage(CacheStorage):
    """Stores version lists in a JSON file."""

    def __init__(self, file_path: str, clock: Callable[[], datetime] = _utc_now) -> None:
        logger.debug("using cache with file path: %s", file_path)
        self.file_path = file_path
        self._clock = clock
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"FileCacheStorage[file={self.file_path}]"

    def valid(self) -> bool:
        file_path = self.file_path
        logger.debug("validating with file path: %s", file_path)
        if not file_path:
            logger.debug("file path is empty")
            return False
        try:
            stat = os.stat(file_path)
        except FileNotFoundError:
            logger.debug("cache file not found: %s", file_path)
            return False
        except OSError as exc:
            logger.error("error accessing cache file: %s", exc)
            return False

        modified = datetime.fromtimestamp(stat.st_mtime, timezone.utc)
        if self._clock() - modified >= CACHE_EXPIRATION:
            logger.debug("cache file has expired: %s", file_path)
            return False
        return True

    def load(self) -> VersionMap:
        with self._lock:
            logger.debug("loading cache from file: %s", self.file_path)
            if not self.valid():
                return {}
            try:
                text = Path(self.file_path).read_text(encoding="utf-8")
            except OSError as exc:
                logger.error("error reading cache file %s: %s", self.file_path, exc)
                return {}
            try:
                versions = _decode(text)
            except (ValueError, TypeError) as exc:
                logger.error("error unmarshalling cache file %s: %s", self.file_path, exc)
                return {}
            logger.debug("loaded cache from file: %s", self.file_path)
            return versions

    def store(self, versions: VersionMap) -> None:
        with self._lock:
            logger.debug("storing cache to file: %s", self.file_path)
            try:
                text = _encode(self._clock().date(), versions)
            except (ValueError, TypeError) as exc:
                logger.error("error marshalling cache file %s: %s", self.file_path, exc)
                return
            target = Path(self.file_path)
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                logger.error("error creating cache dir %s: %s", target.parent, exc)
                return
            try:
                target.write_text(text, encoding="utf-8")
            except OSError as exc:
                logger.error("error writing cache file %s: %s", self.file_path, exc)


def for_plugin(plugin_id: str) -> FileCacheStorage:
    """Cache storage for a plugin, next to the running program."""
    return FileCacheStorage(os.path.join(_executable_dir(), ".cache", f"{plugin_id}.json"))