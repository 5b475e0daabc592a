"""Inquiry domain module - price and contact inquiries"""

from .models import (
    InquiryType,
    InquiryItem,
    InquiryResult,
    ContactDetails,
    PriceInquiryContact,
    ContactInquiry,
)
from .ports import InquirySubmissionPort

__all__ = [
    "InquiryType",
    "InquiryItem",
    "InquiryResult",
    "ContactDetails",
    "PriceInquiryContact",
    "ContactInquiry",
    "InquirySubmissionPort",
]
