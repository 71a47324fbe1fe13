import pytest
from pydantic import ValidationError

from estate.db import schemas


@pytest.mark.parametrize("email", ["a@b.", "not-an-email", "jordan@", "@example.com"])
def test_malformed_emails_are_rejected(email):
    with pytest.raises(ValidationError):
        schemas.UserCreate(name="Jordan Smith", email=email, password="secret123")


def test_emails_are_lower_cased():
    user = schemas.UserCreate(name="Jordan Smith", email="Jordan.Smith@Example.com", password="secret123")
    assert user.email == "jordan.smith@example.com"
    assert schemas.UserLogin(email="Jordan.Smith@example.com", password="x").email == "jordan.smith@example.com"
    assert schemas.UserUpdate(email=None).email is None


def test_contact_email_and_numbers():
    contact = schemas.ContactCreate(
        first_name="Made", contact_type="owner", email="Made@Example.com", mobile="081234567890"
    )
    assert contact.email == "made@example.com"

    with pytest.raises(ValidationError):
        schemas.ContactCreate(first_name="Made", contact_type="owner", email="made@example.")
    with pytest.raises(ValidationError):
        schemas.ContactCreate(first_name="Made", contact_type="owner", phone="0361-123456")


def test_vendor_postal_code_digits_only():
    vendor = schemas.VendorCreate(company_name="Bali Plumbing", npwp="012345678901", postal_code="80361")
    assert vendor.postal_code == "80361"

    with pytest.raises(ValidationError):
        schemas.VendorCreate(company_name="Bali Plumbing", npwp="012345678901", postal_code="80 361")
