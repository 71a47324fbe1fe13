from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from .summaries import ContactSummary, FeatureSummary, UserSummary


class PropertyBase(BaseModel):
    postcode: int | None = Field(default=None, ge=10000, le=999999)
    property_name: str = Field(min_length=6, max_length=25)
    suburb: str | None = Field(default=None, min_length=4, max_length=25)
    city: str | None = Field(default=None, min_length=4, max_length=25)
    street_address_1: str = Field(min_length=6, max_length=32)
    street_address_2: str | None = Field(default=None, min_length=6, max_length=32)
    bedrooms: float | None = None
    bathrooms: float | None = None
    land_area: float | None = None
    land_metric: str | None = Field(default=None, min_length=2, max_length=10)
    description: str | None = Field(default=None, min_length=5, max_length=250)
    notes: str | None = Field(default=None, min_length=5, max_length=250)


class PropertyCreate(PropertyBase):
    feature_ids: list[int] = Field(default_factory=list)
    contact_ids: list[int] = Field(default_factory=list)


class PropertyUpdate(BaseModel):
    postcode: int | None = Field(default=None, ge=10000, le=999999)
    property_name: str | None = Field(default=None, min_length=6, max_length=25)
    suburb: str | None = Field(default=None, min_length=4, max_length=25)
    city: str | None = Field(default=None, min_length=4, max_length=25)
    street_address_1: str | None = Field(default=None, min_length=6, max_length=32)
    street_address_2: str | None = Field(default=None, min_length=6, max_length=32)
    bedrooms: float | None = None
    bathrooms: float | None = None
    land_area: float | None = None
    land_metric: str | None = Field(default=None, min_length=2, max_length=10)
    description: str | None = Field(default=None, min_length=5, max_length=250)
    notes: str | None = Field(default=None, min_length=5, max_length=250)
    feature_ids: list[int] | None = None
    contact_ids: list[int] | None = None


class PropertyLogEntry(BaseModel):
    id: int
    log_message: str
    type: str
    user: UserSummary | None = None
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class Property(BaseModel):
    id: int
    postcode: int | None = None
    property_name: str
    suburb: str | None = None
    city: str | None = None
    street_address_1: str | None = None
    street_address_2: str | None = None
    bedrooms: float | None = None
    bathrooms: float | None = None
    land_area: float | None = None
    land_metric: str | None = None
    description: str | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime | None = None
    features: list[FeatureSummary] = []
    contacts: list[ContactSummary] = []
    property_logs: list[PropertyLogEntry] = []
    model_config = ConfigDict(from_attributes=True)
