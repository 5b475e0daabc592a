"""Inquiry domain models: requested items, contact details and results"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

PRICE_INQUIRY_MESSAGE_MAX = 100
CONTACT_INQUIRY_MESSAGE_MAX = 500


class InquiryType(str, Enum):
    """Who is asking: a private person or a company"""
    PERSONAL = "personal"
    COMPANY = "company"


@dataclass(frozen=True)
class InquiryItem:
    """One requested product/variant with quantity.

    Attributes:
        catalogue_id: Catalogue record id
        variant_combination_id: Variant combination id, None for the record itself
        quantity: Requested quantity
    """
    catalogue_id: str
    variant_combination_id: Optional[str]
    quantity: int

    def to_payload(self) -> Dict[str, Any]:
        return {
            "catalogueId": self.catalogue_id,
            "variantCombinationId": self.variant_combination_id,
            "quantity": self.quantity,
        }


@dataclass(frozen=True)
class InquiryResult:
    """Opaque outcome of an inquiry submission"""
    success: bool
    message: str = ""


class ContactDetails(BaseModel):
    """Contact fields of an inquiry form, trimmed and validated.

    Company name is required (and kept) only for company inquiries.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    inquiry_type: InquiryType = Field(InquiryType.PERSONAL, alias="inquiryType")
    name: str
    company_name: str = Field("", alias="companyName")
    gender: str = "Male"
    email: str
    phone: str
    message: str = ""

    @field_validator("name", "company_name", "email", "phone", "message", mode="before")
    @classmethod
    def strip_strings(cls, v: Any) -> Any:
        """Strip whitespace from string fields"""
        if v is None:
            return ""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v:
            raise ValueError("Name is required")
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        if not v:
            raise ValueError("Email is required")
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Please enter a valid email address")
        return v

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        if not v:
            raise ValueError("Phone is required")
        return v

    @model_validator(mode="after")
    def validate_company_name(self) -> "ContactDetails":
        if self.inquiry_type == InquiryType.COMPANY and not self.company_name:
            raise ValueError("Company name is required")
        return self

    @property
    def effective_company_name(self) -> str:
        """Company name as submitted: personal inquiries never carry one"""
        return self.company_name if self.inquiry_type == InquiryType.COMPANY else ""

    def to_payload(self) -> Dict[str, Any]:
        return {
            "inquiryType": self.inquiry_type.value,
            "name": self.name,
            "companyName": self.effective_company_name,
            "gender": self.gender,
            "email": self.email,
            "phone": self.phone,
            "message": self.message,
        }


class PriceInquiryContact(ContactDetails):
    """Contact details of an ask-for-price form (short optional message)"""

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        if len(v) > PRICE_INQUIRY_MESSAGE_MAX:
            raise ValueError(f"Message cannot exceed {PRICE_INQUIRY_MESSAGE_MAX} characters")
        return v


class ContactInquiry(ContactDetails):
    """Contact details of a general contact form (message required)"""

    message: str = Field("", validate_default=True)

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        if not v:
            raise ValueError("Please enter your message")
        if len(v) > CONTACT_INQUIRY_MESSAGE_MAX:
            raise ValueError(f"Message cannot exceed {CONTACT_INQUIRY_MESSAGE_MAX} characters")
        return v
