"""User account schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from tusk.schemas.auth import UserResponse

# bcrypt only looks at the first 72 bytes
BCRYPT_MAX_BYTES = 72


class UserCreate(BaseModel):
    """Create a new employee account."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=6, max_length=BCRYPT_MAX_BYTES)

    @field_validator("password")
    @classmethod
    def check_password_bytes(cls, value: str) -> str:
        if len(value.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")
        return value


class UserCreateResponse(BaseModel):
    """Created account response."""

    message: str = "User created successfully"
    user: UserResponse


class DeletedUser(BaseModel):
    """Minimal echo of a deleted account."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class UserDeleteResponse(BaseModel):
    """Deleted account response."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str = "User deleted successfully"
    deleted_user: DeletedUser


class EmployeeListResponse(BaseModel):
    """List of employee accounts."""

    message: str = "Employees retrieved successfully"
    count: int
    employees: list[UserResponse]
