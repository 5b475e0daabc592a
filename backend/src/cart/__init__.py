"""Price-inquiry cart"""

from .models import CartLine, cart_line_id
from .aggregator import CartAggregator, DEFAULT_CART_STORAGE_KEY

__all__ = [
    "CartLine",
    "cart_line_id",
    "CartAggregator",
    "DEFAULT_CART_STORAGE_KEY",
]
