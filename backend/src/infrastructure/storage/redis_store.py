"""Redis Key-Value Store Adapter - shared storefront state.

Lets several storefront processes see the same cart for a session.

Architecture: Hexagonal - Adapter implementation in infrastructure layer
"""

import logging
from typing import Optional

from redis import Redis
from redis.exceptions import RedisError

from domain.storage.ports.key_value_store_port import KeyValueStoreError, KeyValueStorePort

logger = logging.getLogger(__name__)


class RedisKeyValueStore(KeyValueStorePort):
    """Redis-backed key-value store.

    Keys are namespaced with an optional prefix, e.g. a browsing session id,
    so that "price-inquiry-cart" of two sessions never collide.

    Example:
        store = RedisKeyValueStore.from_url("redis://localhost:6379/0", prefix="session:abc:")
    """

    def __init__(self, client: Redis, prefix: str = ""):
        self.client = client
        self.prefix = prefix

    @classmethod
    def from_url(cls, url: str, prefix: str = "") -> "RedisKeyValueStore":
        return cls(Redis.from_url(url, decode_responses=True), prefix=prefix)

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def get(self, key: str) -> Optional[str]:
        try:
            value = self.client.get(self._key(key))
        except RedisError as e:
            raise KeyValueStoreError(f"Redis read failed for {key}: {e}") from e
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def set(self, key: str, value: str) -> None:
        try:
            self.client.set(self._key(key), value)
        except RedisError as e:
            raise KeyValueStoreError(f"Redis write failed for {key}: {e}") from e

    def delete(self, key: str) -> bool:
        try:
            return bool(self.client.delete(self._key(key)))
        except RedisError as e:
            raise KeyValueStoreError(f"Redis delete failed for {key}: {e}") from e
