"""Authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from tusk.models.enums import UserRole

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class UserResponse(BaseModel):
    """User information response. Never carries the password hash."""

    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )

    id: int
    role: UserRole
    name: str
    email: str
    created_at: str
    updated_at: str

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def format_timestamp(cls, value):
        if isinstance(value, datetime):
            return value.strftime(TIMESTAMP_FORMAT)
        return value


class LoginResponse(BaseModel):
    """Login response with user info and access token."""

    message: str = "Login successful"
    user: UserResponse
    access_token: str
    token_type: str = "bearer"  # noqa: S105
