import os
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .summaries import PropertySummary


class PropertyAttachmentCreate(BaseModel):
    label: str | None = Field(default=None, min_length=4, max_length=32)
    file_name: str = Field(min_length=1, max_length=255)
    file_size: int | None = Field(default=None, ge=0)
    file_type: str | None = Field(default=None, max_length=32)
    etag: str | None = None
    object_key: str = Field(min_length=1, max_length=1024)
    property_id: int

    @field_validator("file_name")
    @classmethod
    def _file_name(cls, v):
        if not os.path.basename(v):
            raise ValueError("file_name must name a file")
        return v


class PropertyAttachmentUpdate(BaseModel):
    label: str | None = Field(default=None, min_length=4, max_length=32)


class PropertyAttachment(BaseModel):
    id: int
    label: str | None = None
    file_name: str
    file_size: int | None = None
    file_type: str | None = None
    etag: str | None = None
    object_key: str
    property_id: int
    created_at: datetime
    updated_at: datetime | None = None
    property: PropertySummary | None = None
    model_config = ConfigDict(from_attributes=True)
