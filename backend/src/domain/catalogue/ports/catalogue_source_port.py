"""Catalogue Source Port - Domain interface for fetching catalogue records.

Architecture: Hexagonal - Port interface in domain layer
"""

from abc import ABC, abstractmethod
from typing import Optional

from catalog.schemas import CatalogueRecord, CataloguePage


class CatalogueSourcePort(ABC):
    """Port interface for the remote catalogue.

    Implementations must never propagate fetch failures: search and
    variant filtering downstream only ever see records or nothing.
    """

    @abstractmethod
    def list_catalogues(self, page: int = 1, limit: int = 100, search: str = "") -> CataloguePage:
        """Fetch one page of catalogue records.

        Args:
            page: 1-based page number
            limit: Records per page
            search: Optional server-side search term

        Returns:
            CataloguePage (empty on any failure)
        """
        pass

    @abstractmethod
    def get_catalogue(self, catalogue_id: str) -> Optional[CatalogueRecord]:
        """Fetch a single record with its variant combinations.

        Returns:
            The record, or None if it doesn't exist or the fetch failed
        """
        pass
