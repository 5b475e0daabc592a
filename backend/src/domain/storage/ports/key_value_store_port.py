"""Key-Value Store Port - Domain interface for persisted storefront state.

The cart and the remembered contact identity survive a session restart by
writing string values under fixed keys. Adapters decide where the strings
live (process memory, a JSON file, Redis).

Architecture: Hexagonal - Port interface in domain layer
"""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStoreError(Exception):
    """Raised when the backing store cannot be read or written"""
    pass


class KeyValueStorePort(ABC):
    """Port interface for a string key-value store.

    Example Usage:
        store = InMemoryKeyValueStore()
        store.set("price-inquiry-cart", "[]")
        raw = store.get("price-inquiry-cart")
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Read the value stored under key.

        Args:
            key: Storage key

        Returns:
            Stored string, or None if the key is absent

        Raises:
            KeyValueStoreError: If the backend cannot be read
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value.

        Args:
            key: Storage key
            value: String value to store

        Raises:
            KeyValueStoreError: If the backend cannot be written
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Delete key.

        Returns:
            bool: True if the key existed, False otherwise

        Raises:
            KeyValueStoreError: If the backend cannot be written
        """
        pass
