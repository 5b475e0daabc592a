"""Storage domain module - persistent key-value state for the storefront"""

from .ports import KeyValueStorePort, KeyValueStoreError

__all__ = ["KeyValueStorePort", "KeyValueStoreError"]
