"""HTTP Catalogue Source - CatalogueSourcePort over the remote content API.

Architecture: Hexagonal - Adapter implementation in infrastructure layer
"""

import logging
from typing import Any, List, Optional

from pydantic import ValidationError

from catalog.schemas import CatalogueRecord, CataloguePage, Pagination
from domain.catalogue.ports.catalogue_source_port import CatalogueSourcePort
from .base_client import ContentApiClient, ContentApiError

logger = logging.getLogger(__name__)


def parse_records(items: Any) -> List[CatalogueRecord]:
    """Validate raw records, skipping entries that aren't records at all."""
    if not isinstance(items, list):
        return []

    records = []
    for item in items:
        if not isinstance(item, dict):
            continue
        try:
            records.append(CatalogueRecord.model_validate(item))
        except ValidationError as e:
            logger.warning(f"Skipping invalid catalogue record: {e.error_count()} errors")
    return records


class HttpCatalogueSource(ContentApiClient, CatalogueSourcePort):
    """Catalogue reads from ``/catalogues``.

    Any failure yields an empty page or None; it is logged, never raised.

    Example:
        with HttpCatalogueSource("https://api.example.com/api") as source:
            page = source.list_catalogues(page=1, limit=100)
    """

    def list_catalogues(self, page: int = 1, limit: int = 100, search: str = "") -> CataloguePage:
        params = {"page": str(page), "limit": str(limit)}
        if search:
            params["search"] = search

        try:
            body = self.request_json("GET", "/catalogues", params=params)
        except ContentApiError as e:
            logger.error(f"Error fetching catalogues: {e}")
            return CataloguePage()

        if body.get("success") is not True:
            return CataloguePage()

        pagination = body.get("pagination")
        try:
            parsed_pagination = Pagination.model_validate(pagination) if isinstance(pagination, dict) else Pagination()
        except ValidationError:
            parsed_pagination = Pagination()

        return CataloguePage(records=tuple(parse_records(body.get("data") or [])), pagination=parsed_pagination)

    def get_catalogue(self, catalogue_id: str) -> Optional[CatalogueRecord]:
        try:
            body = self.request_json("GET", f"/catalogues/{catalogue_id}")
        except ContentApiError as e:
            logger.error(f"Error fetching catalogue: {e}", extra={"catalogue_id": catalogue_id})
            return None

        data = body.get("data")
        if body.get("success") is not True or not isinstance(data, dict):
            return None

        try:
            return CatalogueRecord.model_validate(data)
        except ValidationError as e:
            logger.error(f"Invalid catalogue record: {e.error_count()} errors", extra={"catalogue_id": catalogue_id})
            return None
