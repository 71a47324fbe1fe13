from datetime import datetime
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field

from .summaries import ContactSummary, PropertySummary, TaskSummary
from .tasks import WorkflowStatus

TransactionType = Literal["buy", "sell", "rent", "lease"]
Agency = Literal["own", "other"]


class TransactionCreate(BaseModel):
    type: TransactionType
    agency: Agency
    agency_name: str | None = Field(default=None, max_length=80)
    status: WorkflowStatus
    is_lease: bool = False
    tenancy_type: str | None = Field(default=None, max_length=36)
    transaction_notes: str | None = Field(default=None, min_length=5, max_length=320)
    transaction_value: float | None = None
    fee: float | None = None
    transaction_completion: datetime | None = None
    snoozed: bool = False
    snoozed_till: datetime | None = None
    property_id: int
    task_id: int | None = None
    contact_ids: list[int] = Field(default_factory=list)


class TransactionUpdate(BaseModel):
    type: TransactionType | None = None
    agency: Agency | None = None
    agency_name: str | None = Field(default=None, max_length=80)
    status: WorkflowStatus | None = None
    is_lease: bool | None = None
    tenancy_type: str | None = Field(default=None, max_length=36)
    transaction_notes: str | None = Field(default=None, min_length=5, max_length=320)
    transaction_value: float | None = None
    fee: float | None = None
    transaction_completion: datetime | None = None
    snoozed: bool | None = None
    snoozed_till: datetime | None = None
    # Contacts are appended, never removed, through an update
    contact_ids: list[int] | None = None


class Transaction(BaseModel):
    id: int
    type: str | None = None
    agency: str | None = None
    agency_name: str | None = None
    status: str | None = None
    is_lease: bool
    tenancy_type: str | None = None
    transaction_notes: str | None = None
    transaction_value: float | None = None
    fee: float | None = None
    transaction_completion: datetime | None = None
    snoozed: bool
    snoozed_till: datetime | None = None
    property_id: int | None = None
    task_id: int | None = None
    created_at: datetime
    updated_at: datetime | None = None
    property: PropertySummary | None = None
    task: TaskSummary | None = None
    contacts: list[ContactSummary] = []
    model_config = ConfigDict(from_attributes=True)
