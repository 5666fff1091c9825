"""SQLAlchemy models."""

from tusk.models.task import Task
from tusk.models.user import User

__all__ = [
    "User",
    "Task",
]
