"""JSON File Key-Value Store Adapter - storefront state in a local file.

All keys live in one JSON object. Writes go to a temporary file that
replaces the original, so a crash mid-write never leaves a truncated file.

Architecture: Hexagonal - Adapter implementation in infrastructure layer
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict, Optional, Union

from domain.storage.ports.key_value_store_port import KeyValueStoreError, KeyValueStorePort

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(KeyValueStorePort):
    """Key-value store persisted as a single JSON object on disk.

    Example:
        store = JsonFileKeyValueStore("storefront_state.json")
        store.set("price-inquiry-cart", "[]")
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise KeyValueStoreError(f"Failed to read {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise KeyValueStoreError(f"{self.path} does not contain a JSON object")
        return data

    def _write_all(self, data: Dict[str, str]) -> None:
        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=f".{self.path.name}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise KeyValueStoreError(f"Failed to write {self.path}: {e}") from e

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        with self._lock:
            try:
                data = self._read_all()
            except KeyValueStoreError:
                logger.warning(
                    "Discarding unreadable key-value file",
                    extra={"storage_key": key},
                )
                data = {}
            data[key] = value
            self._write_all(data)

    def delete(self, key: str) -> bool:
        with self._lock:
            data = self._read_all()
            if key not in data:
                return False
            del data[key]
            self._write_all(data)
            return True
