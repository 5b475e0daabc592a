"""HTTP Inquiry Client - InquirySubmissionPort over the remote content API.

Architecture: Hexagonal - Adapter implementation in infrastructure layer
"""

import logging
from typing import Sequence

from domain.inquiry.models import ContactDetails, InquiryItem, InquiryResult
from domain.inquiry.ports.inquiry_port import InquirySubmissionPort
from .base_client import ContentApiClient, ContentApiError

logger = logging.getLogger(__name__)

PRICE_INQUIRY_PATH = "/price-inquiries"
CONTACT_INQUIRY_PATH = "/companies/contact-inquiry"

DEFAULT_PRICE_INQUIRY_ERROR = "Failed to submit inquiry. Please try again."
DEFAULT_CONTACT_INQUIRY_ERROR = "Failed to send inquiry. Please try again."


class HttpInquiryClient(ContentApiClient, InquirySubmissionPort):
    """Posts price and contact inquiries."""

    def _post(self, path: str, payload: dict, default_error: str) -> InquiryResult:
        try:
            body = self.request_json("POST", path, json=payload)
        except ContentApiError as e:
            logger.error(f"Inquiry submission failed: {e}")
            return InquiryResult(success=False, message=e.server_message or default_error)

        if body.get("success") is False:
            return InquiryResult(success=False, message=body.get("message") or default_error)

        return InquiryResult(success=True, message=body.get("message") or "")

    def submit_price_inquiry(self, items: Sequence[InquiryItem], contact: ContactDetails) -> InquiryResult:
        payload = {"items": [item.to_payload() for item in items], **contact.to_payload()}
        return self._post(PRICE_INQUIRY_PATH, payload, DEFAULT_PRICE_INQUIRY_ERROR)

    def submit_contact_inquiry(self, contact: ContactDetails) -> InquiryResult:
        return self._post(CONTACT_INQUIRY_PATH, contact.to_payload(), DEFAULT_CONTACT_INQUIRY_ERROR)
