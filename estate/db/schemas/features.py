from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class FeatureBase(BaseModel):
    feature_name: str = Field(min_length=4, max_length=25)


class FeatureCreate(FeatureBase):
    pass


class FeatureUpdate(BaseModel):
    feature_name: str | None = Field(default=None, min_length=4, max_length=25)


class Feature(BaseModel):
    id: int
    feature_name: str
    created_at: datetime
    updated_at: datetime | None = None
    model_config = ConfigDict(from_attributes=True)
