"""Price-inquiry cart with write-through persistence.

Line lifecycle: absent -> quantity 1 -> quantity n -> absent (removed, or
quantity set to zero or below). Every mutation writes the full line list
to the key-value store so the cart survives a session restart.
"""

import json
import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from pydantic import ValidationError

from catalog.schemas import CatalogueRecord, VariantCombination
from domain.inquiry.models import InquiryItem
from domain.storage.ports.key_value_store_port import KeyValueStoreError, KeyValueStorePort
from .models import CartLine, cart_line_id

logger = logging.getLogger(__name__)

DEFAULT_CART_STORAGE_KEY = "price-inquiry-cart"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CartAggregator:
    """Cart lines keyed by line id.

    Adding the same (product, variant) pair twice increments the existing
    line instead of creating a second one. Reads return immutable
    CartLine snapshots in insertion order.

    Example:
        cart = CartAggregator(InMemoryKeyValueStore())
        line = cart.add(record, variant)
        cart.set_quantity(line.id, 3)
        cart.count()  # 3
    """

    def __init__(
        self,
        store: KeyValueStorePort,
        storage_key: str = DEFAULT_CART_STORAGE_KEY,
        clock: Callable[[], datetime] = _utcnow,
    ):
        """Initialize the cart and load its persisted state.

        Args:
            store: Key-value store holding the serialized cart
            storage_key: Key of the cart entry in the store
            clock: Source of line creation timestamps
        """
        self.store = store
        self.storage_key = storage_key
        self._clock = clock
        self._lock = threading.RLock()
        self._lines: Dict[str, CartLine] = self._load()

    def _load(self) -> Dict[str, CartLine]:
        """Read persisted lines; anything missing or unreadable means an empty cart."""
        try:
            raw = self.store.get(self.storage_key)
        except KeyValueStoreError as e:
            logger.warning(f"Cart state unavailable, starting empty: {e}", extra={"storage_key": self.storage_key})
            return {}

        if not raw:
            return {}

        try:
            items = json.loads(raw)
        except ValueError as e:
            logger.warning(f"Cart state is not valid JSON, starting empty: {e}", extra={"storage_key": self.storage_key})
            return {}

        if not isinstance(items, list):
            logger.warning("Cart state is not a list, starting empty", extra={"storage_key": self.storage_key})
            return {}

        lines: Dict[str, CartLine] = {}
        for item in items:
            try:
                line = CartLine.model_validate(item)
            except ValidationError as e:
                logger.warning(f"Skipping invalid cart line: {e.error_count()} errors", extra={"storage_key": self.storage_key})
                continue
            if line.id in lines:
                logger.warning("Skipping duplicate cart line", extra={"line_id": line.id})
                continue
            lines[line.id] = line

        return lines

    def _save(self) -> None:
        """Write all lines through to the store.

        A failed write is logged; the in-memory cart stays authoritative
        for the rest of the session.
        """
        payload = json.dumps(
            [line.model_dump(by_alias=True, mode="json") for line in self._lines.values()]
        )
        try:
            self.store.set(self.storage_key, payload)
        except KeyValueStoreError as e:
            logger.error(f"Failed to persist cart: {e}", extra={"storage_key": self.storage_key})

    def add(self, catalogue: CatalogueRecord, variant: Optional[VariantCombination] = None) -> CartLine:
        """Add one unit of a product (optionally a specific variant).

        Args:
            catalogue: Catalogue record being added
            variant: Variant combination, or None for the record itself

        Returns:
            The created or incremented cart line
        """
        line_id = cart_line_id(catalogue, variant)
        with self._lock:
            existing = self._lines.get(line_id)
            if existing is not None:
                line = existing.model_copy(update={"quantity": existing.quantity + 1})
            else:
                line = CartLine(
                    id=line_id,
                    catalogue_id=catalogue.id,
                    catalogue=catalogue.model_copy(deep=True),
                    variant=variant.model_copy(deep=True) if variant is not None else None,
                    quantity=1,
                    added_at=self._clock(),
                )
            self._lines[line_id] = line
            self._save()

        logger.debug("Cart line added", extra={"line_id": line_id, "catalogue_id": catalogue.id})
        return line

    def remove(self, line_id: str) -> None:
        """Delete a line; unknown ids are ignored."""
        with self._lock:
            removed = self._lines.pop(line_id, None)
            self._save()

        if removed is not None:
            logger.debug("Cart line removed", extra={"line_id": line_id})

    def set_quantity(self, line_id: str, quantity: int) -> None:
        """Overwrite a line's quantity; zero or below removes the line.

        Unknown ids are ignored.
        """
        if quantity <= 0:
            self.remove(line_id)
            return

        with self._lock:
            existing = self._lines.get(line_id)
            if existing is not None:
                self._lines[line_id] = existing.model_copy(update={"quantity": int(quantity)})
            self._save()

    def clear(self) -> None:
        """Delete all lines."""
        with self._lock:
            self._lines.clear()
            self._save()

        logger.debug("Cart cleared")

    def count(self) -> int:
        """Total quantity across all lines."""
        with self._lock:
            return sum(line.quantity for line in self._lines.values())

    def get(self, line_id: str) -> Optional[CartLine]:
        with self._lock:
            return self._lines.get(line_id)

    def lines(self) -> List[CartLine]:
        """Snapshot of all lines in insertion order."""
        with self._lock:
            return list(self._lines.values())

    def is_empty(self) -> bool:
        with self._lock:
            return not self._lines

    def inquiry_items(self) -> List[InquiryItem]:
        """Cart lines as price inquiry items."""
        return [
            InquiryItem(
                catalogue_id=line.catalogue_id,
                variant_combination_id=line.variant_combination_id,
                quantity=line.quantity,
            )
            for line in self.lines()
        ]
