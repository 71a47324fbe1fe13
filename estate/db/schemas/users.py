from datetime import datetime
from typing import Literal
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from .validators import lower_email

Role = Literal["user", "admin"]


class UserBase(BaseModel):
    name: str | None = Field(default=None, min_length=6, max_length=80)
    username: str | None = Field(default=None, min_length=6, max_length=25)
    email: EmailStr

    @field_validator("email")
    @classmethod
    def _email(cls, v):
        return lower_email(v)


class UserCreate(UserBase):
    password: str = Field(min_length=6, max_length=30)
    role: Role | None = None


class UserUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=6, max_length=80)
    username: str | None = Field(default=None, min_length=6, max_length=25)
    email: EmailStr | None = None
    # Empty string leaves the stored hash untouched
    password: str | None = Field(default=None, max_length=30)
    role: Role | None = None

    @field_validator("email")
    @classmethod
    def _email(cls, v):
        return lower_email(v)

    @field_validator("password")
    @classmethod
    def _password(cls, v):
        if v and len(v) < 6:
            raise ValueError("password must be at least 6 characters")
        return v


class UserLogin(BaseModel):
    email: EmailStr
    password: str

    @field_validator("email")
    @classmethod
    def _email(cls, v):
        return lower_email(v)


class User(BaseModel):
    id: int
    name: str | None = None
    username: str | None = None
    email: str
    role: str
    created_at: datetime
    updated_at: datetime | None = None
    model_config = ConfigDict(from_attributes=True)
