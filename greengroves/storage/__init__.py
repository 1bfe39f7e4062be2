"""Persisted client state."""

from greengroves.config.settings import Settings
from greengroves.storage.base import JsonFileStorage, KeyValueStorage, MemoryStorage
from greengroves.storage.token_store import TokenStore


def build_storage(settings: Settings) -> KeyValueStorage:
    """Create the storage backend selected by ``settings.storage_backend``."""
    if settings.storage_backend == "file":
        return JsonFileStorage(settings.storage_path)
    if settings.storage_backend == "redis":
        from greengroves.storage.redis_storage import RedisStorage

        return RedisStorage.from_url(settings.redis_url, settings.storage_namespace)
    return MemoryStorage()


__all__ = [
    "JsonFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "TokenStore",
    "build_storage",
]
