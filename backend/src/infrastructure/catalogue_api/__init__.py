"""Content API Infrastructure - HTTP adapters for catalogue and inquiry ports."""

from .base_client import ContentApiClient, ContentApiError
from .catalogue_source import HttpCatalogueSource, parse_records
from .inquiry_client import HttpInquiryClient

__all__ = [
    "ContentApiClient",
    "ContentApiError",
    "HttpCatalogueSource",
    "parse_records",
    "HttpInquiryClient",
]
