from datetime import datetime
from typing import Literal
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from .summaries import WorkTypeSummary
from .validators import DIGITS, lower_email

Province = Literal[
    "Aceh", "Bali", "Banten", "Bengkulu", "Central Java", "Central Kalimantan",
    "Central Sulawesi", "East Java", "East Kalimantan", "East Nusa Tenggara",
    "Gorontalo", "Jakarta Special Capital Region", "Jambi", "Lampung", "Maluku",
    "North Kalimantan", "North Maluku", "North Sulawesi", "North Sumatra", "Papua",
    "Riau", "Riau Islands", "South Kalimantan", "South Sulawesi", "South Sumatra",
    "Southeast Sulawesi", "West Java", "West Kalimantan", "West Nusa Tenggara",
    "West Papua", "West Sulawesi", "West Sumatra", "Yogyakarta Special Region",
]


class VendorBase(BaseModel):
    company_name: str = Field(min_length=1, max_length=255)
    npwp: str = Field(min_length=12, max_length=20)
    nib: str | None = Field(default=None, min_length=12, max_length=20)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, min_length=8, max_length=20)
    street_address_1: str | None = Field(default=None, max_length=255)
    street_address_2: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=100)
    postal_code: str | None = Field(default=None, max_length=10, pattern=DIGITS)
    suburb: str | None = Field(default=None, max_length=100)
    province: Province | None = None

    @field_validator("email")
    @classmethod
    def _email(cls, v):
        return lower_email(v)


class VendorCreate(VendorBase):
    work_type_ids: list[int] = Field(default_factory=list)


class VendorUpdate(VendorBase):
    company_name: str | None = Field(default=None, min_length=1, max_length=255)
    npwp: str | None = Field(default=None, min_length=12, max_length=20)
    work_type_ids: list[int] | None = None


class Vendor(BaseModel):
    id: int
    company_name: str
    npwp: str
    nib: str | None = None
    email: str | None = None
    phone: str | None = None
    street_address_1: str | None = None
    street_address_2: str | None = None
    city: str | None = None
    postal_code: str | None = None
    suburb: str | None = None
    province: str | None = None
    created_at: datetime
    updated_at: datetime | None = None
    work_types: list[WorkTypeSummary] = []
    model_config = ConfigDict(from_attributes=True)


class WorkTypeCreate(BaseModel):
    name: str = Field(min_length=2, max_length=255)


class WorkTypeUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=2, max_length=255)


class WorkType(BaseModel):
    id: int
    name: str
    created_at: datetime
    updated_at: datetime | None = None
    model_config = ConfigDict(from_attributes=True)
