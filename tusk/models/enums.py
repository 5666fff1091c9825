"""Enums for model fields."""

from enum import Enum


class UserRole(str, Enum):
    """Account roles. New accounts are always employees."""

    ADMIN = "Admin"
    EMPLOYEE = "Employee"
