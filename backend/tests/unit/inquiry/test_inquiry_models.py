"""Unit tests for inquiry form validation"""

import pytest
from pydantic import ValidationError

from domain.inquiry.models import (
    ContactInquiry,
    InquiryItem,
    InquiryType,
    PriceInquiryContact,
)


VALID = {"name": "Ann", "email": "ann@example.com", "phone": "+31 6 1234"}


def error_messages(exc_info):
    return " ".join(error["msg"] for error in exc_info.value.errors())


class TestContactDetails:
    """Test shared contact field validation"""

    def test_strips_whitespace(self):
        contact = PriceInquiryContact(name="  Ann ", email=" ann@example.com ", phone=" 1 ")
        assert contact.name == "Ann"
        assert contact.email == "ann@example.com"
        assert contact.phone == "1"
        assert contact.inquiry_type == InquiryType.PERSONAL

    @pytest.mark.parametrize(
        "field,value,message",
        [
            ("name", "   ", "Name is required"),
            ("email", "", "Email is required"),
            ("email", "ann@example", "Please enter a valid email address"),
            ("email", "ann @example.com", "Please enter a valid email address"),
            ("phone", None, "Phone is required"),
        ],
    )
    def test_required_fields(self, field, value, message):
        data = dict(VALID, **{field: value})
        with pytest.raises(ValidationError) as exc_info:
            PriceInquiryContact(**data)
        assert message in error_messages(exc_info)

    def test_company_name_required_for_company(self):
        with pytest.raises(ValidationError) as exc_info:
            PriceInquiryContact(inquiryType="company", **VALID)
        assert "Company name is required" in error_messages(exc_info)

    def test_company_name_not_sent_for_personal(self):
        contact = PriceInquiryContact(companyName="Acme", **VALID)
        assert contact.effective_company_name == ""
        assert contact.to_payload()["companyName"] == ""

    def test_payload(self):
        contact = PriceInquiryContact(inquiryType="company", companyName="Acme", message="hi", **VALID)
        assert contact.to_payload() == {
            "inquiryType": "company",
            "name": "Ann",
            "companyName": "Acme",
            "gender": "Male",
            "email": "ann@example.com",
            "phone": "+31 6 1234",
            "message": "hi",
        }


class TestMessageLimits:
    """Test per-form message rules"""

    def test_price_inquiry_message_optional(self):
        assert PriceInquiryContact(**VALID).message == ""

    def test_price_inquiry_message_limit(self):
        PriceInquiryContact(message="x" * 100, **VALID)
        with pytest.raises(ValidationError):
            PriceInquiryContact(message="x" * 101, **VALID)

    def test_contact_inquiry_message_required(self):
        with pytest.raises(ValidationError) as exc_info:
            ContactInquiry(message="  ", **VALID)
        assert "Please enter your message" in error_messages(exc_info)

    def test_contact_inquiry_message_missing(self):
        with pytest.raises(ValidationError) as exc_info:
            ContactInquiry(**VALID)
        assert "Please enter your message" in error_messages(exc_info)

    def test_contact_inquiry_message_limit(self):
        ContactInquiry(message="x" * 500, **VALID)
        with pytest.raises(ValidationError):
            ContactInquiry(message="x" * 501, **VALID)


class TestInquiryItem:
    def test_payload(self):
        item = InquiryItem(catalogue_id="P1", variant_combination_id=None, quantity=3)
        assert item.to_payload() == {"catalogueId": "P1", "variantCombinationId": None, "quantity": 3}
