"""Port interfaces for storage domain.

Defines abstract interfaces that infrastructure adapters must implement.
This maintains hexagonal architecture - domain doesn't depend on infrastructure.
"""

from .key_value_store_port import KeyValueStorePort, KeyValueStoreError

__all__ = ["KeyValueStorePort", "KeyValueStoreError"]
