"""Key-value store selection from settings.

Supports an in-memory store (tests, single process), a JSON file store
(local persistence) and Redis (shared across processes) behind the same port.
"""

from typing import Optional

from config import Settings, get_settings
from domain.storage.ports.key_value_store_port import KeyValueStorePort
from .in_memory_store import InMemoryKeyValueStore
from .json_file_store import JsonFileKeyValueStore
from .redis_store import RedisKeyValueStore

SUPPORTED_BACKENDS = ("memory", "file", "redis")


def build_key_value_store(settings: Optional[Settings] = None, prefix: str = "") -> KeyValueStorePort:
    """Create the key-value store configured by KV_STORE_BACKEND.

    Args:
        settings: Settings to use (default: cached application settings)
        prefix: Key prefix for the redis backend (e.g. per browsing session)

    Returns:
        KeyValueStorePort implementation

    Raises:
        ValueError: If the backend is unknown or REDIS_URL is missing for redis
    """
    settings = settings or get_settings()
    backend = settings.KV_STORE_BACKEND.lower()

    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "file":
        return JsonFileKeyValueStore(settings.KV_STORE_PATH)
    if backend == "redis":
        if not settings.REDIS_URL:
            raise ValueError("REDIS_URL is required for the redis key-value store")
        return RedisKeyValueStore.from_url(settings.REDIS_URL, prefix=prefix)

    raise ValueError(
        f"Invalid KV_STORE_BACKEND: {settings.KV_STORE_BACKEND}. "
        f"Must be one of: {', '.join(SUPPORTED_BACKENDS)}"
    )
