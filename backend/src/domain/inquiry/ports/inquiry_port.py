"""Inquiry Submission Port - Domain interface for sending inquiries.

Architecture: Hexagonal - Port interface in domain layer
"""

from abc import ABC, abstractmethod
from typing import Sequence

from ..models import ContactDetails, InquiryItem, InquiryResult


class InquirySubmissionPort(ABC):
    """Port interface for the remote inquiry endpoints.

    Implementations report failures through InquiryResult.success instead
    of raising, so the caller can keep the cart intact and show the message.
    """

    @abstractmethod
    def submit_price_inquiry(self, items: Sequence[InquiryItem], contact: ContactDetails) -> InquiryResult:
        """Ask for prices of one or more products/variants.

        Args:
            items: Requested items (a single item for one-off inquiries)
            contact: Validated contact details

        Returns:
            InquiryResult with success flag and server message
        """
        pass

    @abstractmethod
    def submit_contact_inquiry(self, contact: ContactDetails) -> InquiryResult:
        """Send a general contact inquiry (no items)."""
        pass
