"""Pydantic schemas for API requests and responses."""

from tusk.schemas.auth import LoginResponse, UserLogin, UserResponse
from tusk.schemas.user import (
    DeletedUser,
    EmployeeListResponse,
    UserCreate,
    UserCreateResponse,
    UserDeleteResponse,
)

__all__ = [
    "UserLogin",
    "UserResponse",
    "LoginResponse",
    "UserCreate",
    "UserCreateResponse",
    "DeletedUser",
    "UserDeleteResponse",
    "EmployeeListResponse",
]
