from datetime import datetime
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field

from .summaries import PropertySummary, UserSummary

LogType = Literal["user", "gen"]


class PropertyLogCreate(BaseModel):
    property_id: int
    log_message: str = Field(min_length=3, max_length=300)
    type: LogType = "user"
    # Filled from the request identity when omitted
    user_id: int | None = None


class PropertyLogUpdate(BaseModel):
    log_message: str | None = Field(default=None, min_length=3, max_length=300)
    type: LogType | None = None


class PropertyLog(BaseModel):
    id: int
    property_id: int
    user_id: int | None = None
    log_message: str
    type: str
    created_at: datetime
    updated_at: datetime | None = None
    user: UserSummary | None = None
    property: PropertySummary | None = None
    model_config = ConfigDict(from_attributes=True)
