from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from .summaries import TaskSummary, UserSummary


class TaskLogCreate(BaseModel):
    task_id: int
    log_message: str = Field(min_length=3, max_length=300)
    type: str | None = "user"
    # Filled from the request identity when omitted
    user_id: int | None = None


class TaskLogUpdate(BaseModel):
    log_message: str | None = Field(default=None, min_length=3, max_length=300)
    type: str | None = None


class TaskLog(BaseModel):
    id: int
    task_id: int
    user_id: int | None = None
    log_message: str
    type: str | None = None
    created_at: datetime
    updated_at: datetime | None = None
    user: UserSummary | None = None
    task: TaskSummary | None = None
    model_config = ConfigDict(from_attributes=True)
