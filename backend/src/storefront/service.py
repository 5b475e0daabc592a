"""Storefront facade over catalogue source, search, cart and inquiries."""

import logging
from contextvars import Token
from typing import Any, List, Mapping, Optional

from catalog.display import featured_catalogues
from catalog.schemas import CatalogueRecord, VariantCombination
from cart.aggregator import CartAggregator
from config import Settings, get_settings
from contacts.store import ContactInfoStore, RememberedContact
from domain.catalogue.ports.catalogue_source_port import CatalogueSourcePort
from domain.inquiry.models import ContactInquiry, InquiryItem, InquiryResult, PriceInquiryContact
from domain.inquiry.ports.inquiry_port import InquirySubmissionPort
from domain.storage.ports.key_value_store_port import KeyValueStorePort
from matching.search import search_catalogue
from observability.session_id import session_id_var, set_session_id
from .product_finder import ProductFinder

logger = logging.getLogger(__name__)


class Storefront:
    """Entry point for the presentation layer.

    Example:
        storefront = Storefront(source, inquiries, InMemoryKeyValueStore())
        records = storefront.load_catalogues()
        hits = storefront.search(records, "dump")
        storefront.cart.add(hits[0])
        storefront.ask_for_cart_prices({"name": "Ana", "email": "ana@example.com", "phone": "123"})
    """

    def __init__(
        self,
        catalogue_source: CatalogueSourcePort,
        inquiries: InquirySubmissionPort,
        store: KeyValueStorePort,
        settings: Optional[Settings] = None,
        session_id: Optional[str] = None,
    ):
        self.settings = settings or get_settings()
        self.session_id = session_id
        self._session_token: Optional[Token] = None
        self.catalogue_source = catalogue_source
        self.inquiries = inquiries
        self.cart = CartAggregator(store, storage_key=self.settings.CART_STORAGE_KEY)
        self.contacts = ContactInfoStore(store, storage_key=self.settings.CONTACT_STORAGE_KEY)

    def close(self) -> None:
        """Release the collaborators' resources (e.g. HTTP connection pools)."""
        for collaborator in (self.catalogue_source, self.inquiries):
            close = getattr(collaborator, "close", None)
            if callable(close):
                close()

    def __enter__(self) -> "Storefront":
        if self.session_id:
            self._session_token = set_session_id(self.session_id)
        return self

    def __exit__(self, *exc_info) -> None:
        try:
            self.close()
        finally:
            if self._session_token is not None:
                session_id_var.reset(self._session_token)
                self._session_token = None

    def load_catalogues(self, page: int = 1, limit: Optional[int] = None) -> List[CatalogueRecord]:
        """Fetch a page of records (empty on any fetch failure)."""
        result = self.catalogue_source.list_catalogues(page=page, limit=limit or self.settings.CATALOGUE_PAGE_LIMIT)
        return list(result.records)

    def search(self, records: Optional[List[CatalogueRecord]], term: Any) -> List[CatalogueRecord]:
        return search_catalogue(records, term, threshold=self.settings.SEARCH_MATCH_THRESHOLD)

    def search_featured(self, records: Optional[List[CatalogueRecord]], term: Any) -> List[CatalogueRecord]:
        """Search restricted to featured records."""
        return self.search(featured_catalogues(records), term)

    def product_finder(self, catalogue_id: str) -> Optional[ProductFinder]:
        """Finder for one product page, None if the record can't be fetched."""
        record = self.catalogue_source.get_catalogue(catalogue_id)
        if record is None:
            return None
        return ProductFinder(record)

    def prefill_contact(self) -> RememberedContact:
        return self.contacts.load()

    def ask_for_price(
        self,
        contact_fields: Mapping[str, Any],
        catalogue: CatalogueRecord,
        variant: Optional[VariantCombination] = None,
    ) -> InquiryResult:
        """Ask for the price of one product or variant (quantity 1).

        Raises:
            ValueError: If the contact fields are invalid
        """
        contact = PriceInquiryContact.model_validate(dict(contact_fields))
        items = [
            InquiryItem(
                catalogue_id=catalogue.id,
                variant_combination_id=(variant.combination_id or None) if variant is not None else None,
                quantity=1,
            )
        ]
        result = self.inquiries.submit_price_inquiry(items, contact)
        if result.success:
            self.contacts.save(contact)
        return result

    def ask_for_cart_prices(self, contact_fields: Mapping[str, Any]) -> InquiryResult:
        """Ask for prices of everything in the cart; the cart is cleared on success.

        Raises:
            ValueError: If the cart is empty or the contact fields are invalid
        """
        if self.cart.is_empty():
            raise ValueError("Cart is empty")

        contact = PriceInquiryContact.model_validate(dict(contact_fields))
        result = self.inquiries.submit_price_inquiry(self.cart.inquiry_items(), contact)
        if result.success:
            self.contacts.save(contact)
            self.cart.clear()
            logger.info("Cart price inquiry submitted")
        else:
            logger.warning(f"Cart price inquiry rejected: {result.message}")
        return result

    def send_contact_inquiry(self, contact_fields: Mapping[str, Any]) -> InquiryResult:
        """Send a general contact inquiry.

        Raises:
            ValueError: If the contact fields are invalid
        """
        contact = ContactInquiry.model_validate(dict(contact_fields))
        result = self.inquiries.submit_contact_inquiry(contact)
        if result.success:
            self.contacts.save(contact)
        return result
