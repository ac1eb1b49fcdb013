from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

from devconnector.schemas.base import require

INVALID_EMAIL = "Please include a valid email"


def _check_email(value):
    if not isinstance(value, str):
        raise PydanticCustomError("email", INVALID_EMAIL)
    try:
        _, email = validate_email(value.strip())
    except PydanticCustomError:
        raise PydanticCustomError("email", INVALID_EMAIL)
    return email


class UserCreate(BaseModel):
    name: str = Field(default="", validate_default=True)
    email: str = Field(default="", validate_default=True)
    password: str = Field(default="", validate_default=True)

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, v):
        return require(v, "Name is required")

    @field_validator("email", mode="before")
    @classmethod
    def check_email(cls, v):
        return _check_email(v)

    @field_validator("password", mode="before")
    @classmethod
    def check_password(cls, v):
        if not isinstance(v, str) or len(v) < 6:
            raise PydanticCustomError("password", "Please enter a password with 6 or more characters")
        return v


class UserLogin(BaseModel):
    email: str = Field(default="", validate_default=True)
    password: str = Field(default="", validate_default=True)

    @field_validator("email", mode="before")
    @classmethod
    def check_email(cls, v):
        return _check_email(v)

    @field_validator("password", mode="before")
    @classmethod
    def check_password(cls, v):
        return require(v, "Password is required")


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    avatar: Optional[str] = None
    date: datetime

    class Config:
        from_attributes = True


class UserSummary(BaseModel):
    id: str
    name: str
    avatar: Optional[str] = None

    class Config:
        from_attributes = True
