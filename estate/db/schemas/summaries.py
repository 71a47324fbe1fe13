"""Compact nested shapes used inside read schemas to avoid recursion."""
from pydantic import BaseModel, ConfigDict


class UserSummary(BaseModel):
    id: int
    name: str | None = None
    username: str | None = None
    email: str
    model_config = ConfigDict(from_attributes=True)


class PropertySummary(BaseModel):
    id: int
    property_name: str
    suburb: str | None = None
    city: str | None = None
    model_config = ConfigDict(from_attributes=True)


class FeatureSummary(BaseModel):
    id: int
    feature_name: str
    model_config = ConfigDict(from_attributes=True)


class ContactSummary(BaseModel):
    id: int
    first_name: str
    last_name: str | None = None
    contact_type: str
    email: str | None = None
    model_config = ConfigDict(from_attributes=True)


class TaskSummary(BaseModel):
    id: int
    task_name: str | None = None
    type: str | None = None
    status: str | None = None
    model_config = ConfigDict(from_attributes=True)


class WorkTypeSummary(BaseModel):
    id: int
    name: str
    model_config = ConfigDict(from_attributes=True)
