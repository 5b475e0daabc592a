"""Storefront wiring from settings."""

from typing import Optional

import httpx

from config import Settings, get_settings
from infrastructure.catalogue_api.catalogue_source import HttpCatalogueSource
from infrastructure.catalogue_api.inquiry_client import HttpInquiryClient
from infrastructure.storage.storage_config import build_key_value_store
from observability.logging_config import configure_logging
from observability.session_id import generate_session_id
from .service import Storefront


def build_storefront(settings: Optional[Settings] = None, session_id: Optional[str] = None) -> Storefront:
    """Create a Storefront backed by the HTTP content API and the configured store.

    Both HTTP adapters share one httpx.Client; Storefront.close() releases it.
    The session id is bound to the logging context only inside
    ``with storefront:`` blocks.

    Args:
        settings: Settings to use (default: cached application settings)
        session_id: Browsing session id for log correlation and redis key prefix

    Returns:
        Storefront ready for use

    Example:
        with build_storefront(session_id="abc") as storefront:
            storefront.cart.add(record)
    """
    settings = settings or get_settings()
    configure_logging(level=settings.LOG_LEVEL, json_format=settings.LOG_JSON)

    session_id = session_id or generate_session_id()
    store = build_key_value_store(settings, prefix=f"session:{session_id}:")

    http_client = httpx.Client(timeout=settings.CATALOGUE_API_TIMEOUT)
    source = HttpCatalogueSource(settings.CATALOGUE_API_URL, client=http_client, owns_client=True)
    inquiries = HttpInquiryClient(settings.CATALOGUE_API_URL, client=http_client, owns_client=True)
    return Storefront(source, inquiries, store, settings=settings, session_id=session_id)
