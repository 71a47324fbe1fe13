from datetime import datetime
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field

from .summaries import UserSummary

TaskType = Literal["maintenance", "inspection", "transaction", "other"]
WorkflowStatus = Literal["created", "open", "pending", "cancelled", "processing", "active", "completed", "archived"]


class TaskCreate(BaseModel):
    task_name: str = Field(min_length=2, max_length=36)
    type: TaskType
    status: WorkflowStatus | None = "created"
    notes: str | None = Field(default=None, min_length=5, max_length=320)
    snoozed: bool = False
    snoozed_till: datetime | None = None
    completed: bool = False
    assignment_ids: list[int] = Field(default_factory=list)


class TaskUpdate(BaseModel):
    task_name: str | None = Field(default=None, min_length=2, max_length=36)
    type: TaskType | None = None
    status: WorkflowStatus | None = None
    notes: str | None = Field(default=None, min_length=5, max_length=320)
    snoozed: bool | None = None
    snoozed_till: datetime | None = None
    completed: bool | None = None
    assignment_ids: list[int] | None = None


class TaskLogEntry(BaseModel):
    id: int
    log_message: str
    type: str | None = None
    user: UserSummary | None = None
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class Task(BaseModel):
    id: int
    task_name: str | None = None
    type: str | None = None
    status: str | None = None
    notes: str | None = None
    snoozed: bool
    snoozed_till: datetime | None = None
    completed: bool
    created_at: datetime
    updated_at: datetime | None = None
    assignment: list[UserSummary] = []
    log: list[TaskLogEntry] = []
    model_config = ConfigDict(from_attributes=True)
