"""In-memory Key-Value Store Adapter - process-local storefront state.

Used by tests and by single-process deployments that don't need state to
outlive the process.

Architecture: Hexagonal - Adapter implementation in infrastructure layer
"""

import threading
from typing import Dict, Optional

from domain.storage.ports.key_value_store_port import KeyValueStorePort


class InMemoryKeyValueStore(KeyValueStorePort):
    """Dict-backed key-value store."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._data.pop(key, None) is not None
