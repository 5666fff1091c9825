"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from tusk.database import Base
from tusk.models.enums import UserRole
from tusk.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and task ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    role = Column(String(20), nullable=False, default=UserRole.EMPLOYEE.value, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    # Relationships
    tasks = relationship("Task", back_populates="user", cascade="all, delete-orphan")
