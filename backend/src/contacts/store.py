"""Last-used contact identity, kept so inquiry forms can be prefilled.

The message is never remembered; it belongs to one inquiry only.
"""

import json
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from domain.inquiry.models import ContactDetails, InquiryType
from domain.storage.ports.key_value_store_port import KeyValueStoreError, KeyValueStorePort

logger = logging.getLogger(__name__)

DEFAULT_CONTACT_STORAGE_KEY = "asb_customer_info"


class RememberedContact(BaseModel):
    """Prefill values for an inquiry form (every field optional)"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    inquiry_type: InquiryType = Field(InquiryType.PERSONAL, alias="inquiryType")
    name: str = ""
    company_name: str = Field("", alias="companyName")
    gender: str = "Male"
    email: str = ""
    phone: str = ""

    @field_validator("inquiry_type", mode="before")
    @classmethod
    def default_inquiry_type(cls, v: Any) -> Any:
        return v if v in (InquiryType.PERSONAL.value, InquiryType.COMPANY.value) else InquiryType.PERSONAL

    @field_validator("name", "company_name", "email", "phone", mode="before")
    @classmethod
    def normalize_text(cls, v: Any) -> str:
        return v if isinstance(v, str) else ""

    @field_validator("gender", mode="before")
    @classmethod
    def default_gender(cls, v: Any) -> str:
        return v if isinstance(v, str) and v else "Male"


class ContactInfoStore:
    """Load/save the remembered contact under its own store key."""

    def __init__(self, store: KeyValueStorePort, storage_key: str = DEFAULT_CONTACT_STORAGE_KEY):
        self.store = store
        self.storage_key = storage_key

    def load(self) -> RememberedContact:
        """Return the remembered contact, or defaults if none is readable."""
        try:
            raw = self.store.get(self.storage_key)
            if not raw:
                return RememberedContact()
            data = json.loads(raw)
            if not isinstance(data, dict):
                return RememberedContact()
            return RememberedContact.model_validate(data)
        except (KeyValueStoreError, ValueError, ValidationError) as e:
            logger.warning(f"Error loading saved customer info: {e}", extra={"storage_key": self.storage_key})
            return RememberedContact()

    def save(self, contact: ContactDetails) -> None:
        """Remember the identity part of submitted contact details.

        Failures are logged and ignored: the inquiry has already been sent.
        """
        remembered = RememberedContact(
            inquiry_type=contact.inquiry_type,
            name=contact.name,
            company_name=contact.effective_company_name,
            gender=contact.gender,
            email=contact.email,
            phone=contact.phone,
        )
        try:
            self.store.set(self.storage_key, json.dumps(remembered.model_dump(by_alias=True, mode="json")))
        except KeyValueStoreError as e:
            logger.error(f"Error saving customer info: {e}", extra={"storage_key": self.storage_key})
