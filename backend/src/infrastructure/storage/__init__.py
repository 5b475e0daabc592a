"""Key-value store adapters"""

from .in_memory_store import InMemoryKeyValueStore
from .json_file_store import JsonFileKeyValueStore
from .redis_store import RedisKeyValueStore
from .storage_config import build_key_value_store

__all__ = [
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "RedisKeyValueStore",
    "build_key_value_store",
]
