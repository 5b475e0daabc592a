"""Catalogue domain module - access to the remote content API"""

from .ports import CatalogueSourcePort

__all__ = ["CatalogueSourcePort"]
