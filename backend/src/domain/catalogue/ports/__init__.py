"""Port interfaces for catalogue domain."""

from .catalogue_source_port import CatalogueSourcePort

__all__ = ["CatalogueSourcePort"]
