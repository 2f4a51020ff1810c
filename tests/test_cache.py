from sdkm.cache import VersionCache
from sdkm.sdk_version import CacheStorage, SDKVersion, VersionType


class MemoryStorage(CacheStorage):
    def __init__(self, data=None, is_valid=True):
        self.data = dict(data or {})
        self.is_valid = is_valid
        self.stored = []
        self.loads = 0

    def valid(self):
        return self.is_valid

    def load(self):
        self.loads += 1
        return dict(self.data)

    def store(self, versions):
        self.stored.append(dict(versions))
        self.data = dict(versions)

    def __repr__(self):
        return "MemoryStorage"


STABLE = [SDKVersion(id="1.22.5", type=VersionType.STABLE)]


def test_empty_cache_is_invalid():
    assert VersionCache().valid() is False


def test_store_then_load():
    cache = VersionCache()
    cache.store(VersionType.STABLE, STABLE)
    assert cache.valid() is True
    assert cache.load(VersionType.STABLE) == STABLE


def test_load_unknown_type_gives_empty_list():
    cache = VersionCache()
    cache.store(VersionType.STABLE, STABLE)
    assert cache.load(VersionType.ARCHIVED) == []


def test_validity_comes_from_storage():
    storage = MemoryStorage(is_valid=False)
    cache = VersionCache().with_external_store(storage)
    cache.store(VersionType.STABLE, STABLE)
    assert cache.valid() is False
    storage.is_valid = True
    assert cache.valid() is True


def test_load_pulls_from_storage():
    storage = MemoryStorage({VersionType.UNSTABLE: STABLE})
    cache = VersionCache().with_external_store(storage)
    assert cache.load(VersionType.UNSTABLE) == STABLE
    assert storage.loads == 1
    cache.load(VersionType.UNSTABLE)
    assert storage.loads == 1


def test_invalid_storage_reloaded_each_time():
    storage = MemoryStorage({VersionType.STABLE: STABLE}, is_valid=False)
    cache = VersionCache().with_external_store(storage)
    cache.load(VersionType.STABLE)
    cache.load(VersionType.STABLE)
    assert storage.loads == 2


def test_store_writes_whole_map_to_storage():
    storage = MemoryStorage()
    cache = VersionCache().with_external_store(storage)
    archived = [SDKVersion(id="1.3rc1", type=VersionType.ARCHIVED)]
    cache.store(VersionType.STABLE, STABLE)
    cache.store(VersionType.ARCHIVED, archived)
    assert storage.stored[-1] == {VersionType.STABLE: STABLE, VersionType.ARCHIVED: archived}


def test_with_external_store_clears_memory():
    cache = VersionCache()
    cache.store(VersionType.STABLE, STABLE)
    returned = cache.with_external_store(MemoryStorage())
    assert returned is cache
    assert cache.load(VersionType.STABLE) == []


def test_repr():
    assert repr(VersionCache()) == "SDKVersionCache"
    assert repr(VersionCache().with_external_store(MemoryStorage())) == "SDKVersionCache (MemoryStorage)"