from datetime import datetime
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from .summaries import PropertySummary
from .validators import DIGITS, lower_email


class ContactBase(BaseModel):
    first_name: str = Field(min_length=2, max_length=36)
    last_name: str | None = Field(default=None, min_length=2, max_length=36)
    contact_type: str = Field(min_length=1, max_length=36)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, min_length=7, max_length=16, pattern=DIGITS)
    mobile: str | None = Field(default=None, min_length=7, max_length=16, pattern=DIGITS)
    contact_notes: str | None = Field(default=None, min_length=5, max_length=320)

    @field_validator("email")
    @classmethod
    def _email(cls, v):
        return lower_email(v)


class ContactCreate(ContactBase):
    property_ids: list[int] = Field(default_factory=list)


class ContactUpdate(ContactBase):
    first_name: str | None = Field(default=None, min_length=2, max_length=36)
    contact_type: str | None = Field(default=None, min_length=1, max_length=36)
    property_ids: list[int] | None = None


class Contact(BaseModel):
    id: int
    first_name: str
    last_name: str | None = None
    contact_type: str
    email: str | None = None
    phone: str | None = None
    mobile: str | None = None
    contact_notes: str | None = None
    created_at: datetime
    updated_at: datetime | None = None
    properties: list[PropertySummary] = []
    model_config = ConfigDict(from_attributes=True)
