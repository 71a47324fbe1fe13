from datetime import datetime
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field

from .summaries import PropertySummary, TaskSummary

WorkDefinition = Literal["Repair", "Replacement", "Project", "Investigation", "Pest Control", "Other"]
MaintenanceType = Literal["Electrical", "Plumbing", "Painting", "HVAC", "Civil", "Other"]
Scale = Literal["Urgent", "High", "Medium", "Low"]


class MaintenanceRequestCreate(BaseModel):
    work_definition: WorkDefinition
    type: MaintenanceType | None = None
    notes: str | None = Field(default=None, min_length=5, max_length=500)
    scale: Scale
    total_cost: float | None = None
    tax: float | None = None
    property_id: int
    task_id: int | None = None


class MaintenanceRequestUpdate(BaseModel):
    work_definition: WorkDefinition | None = None
    type: MaintenanceType | None = None
    notes: str | None = Field(default=None, min_length=5, max_length=500)
    scale: Scale | None = None
    total_cost: float | None = None
    tax: float | None = None
    property_id: int | None = None


class MaintenanceRequest(BaseModel):
    id: int
    work_definition: str | None = None
    type: str | None = None
    notes: str | None = None
    scale: str | None = None
    total_cost: float | None = None
    tax: float | None = None
    property_id: int | None = None
    task_id: int | None = None
    created_at: datetime
    updated_at: datetime | None = None
    property: PropertySummary | None = None
    task: TaskSummary | None = None
    model_config = ConfigDict(from_attributes=True)
