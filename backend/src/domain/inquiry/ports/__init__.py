"""Port interfaces for inquiry domain."""

from .inquiry_port import InquirySubmissionPort

__all__ = ["InquirySubmissionPort"]
