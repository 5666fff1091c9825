"""User account API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from tusk.database import get_db
from tusk.models.user import User
from tusk.schemas.auth import UserResponse
from tusk.schemas.user import (
    DeletedUser,
    EmployeeListResponse,
    UserCreate,
    UserCreateResponse,
    UserDeleteResponse,
)
from tusk.services.auth import create_user, list_employees

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])

# Ids are 64-bit integer primary keys
UserId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


@router.post("/users", response_model=UserCreateResponse, status_code=status.HTTP_201_CREATED)
def create_account(
    user_data: UserCreate,
    db: Annotated[Session, Depends(get_db)],
):
    """Create a new employee account."""
    try:
        user = create_user(db, user_data.name, user_data.email, user_data.password)
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already exists",
        ) from None
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create user")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create user",
        ) from None

    logger.info(f"Created user {user.id}")
    return UserCreateResponse(user=UserResponse.model_validate(user))


@router.delete("/users/{user_id}", response_model=UserDeleteResponse)
def delete_account(
    user_id: UserId,
    db: Annotated[Session, Depends(get_db)],
):
    """Delete a user account and its tasks."""
    user = db.get(User, user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    # Snapshot before the row is gone
    deleted = DeletedUser.model_validate(user)

    try:
        db.delete(user)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to delete user {user_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete user",
        ) from None

    logger.info(f"Deleted user {user_id}")
    return UserDeleteResponse(deleted_user=deleted)


@router.get("/employees", response_model=EmployeeListResponse)
def get_employees(
    db: Annotated[Session, Depends(get_db)],
):
    """Get all employee accounts."""
    try:
        employees = list_employees(db)
    except SQLAlchemyError:
        logger.exception("Failed to retrieve employees")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employees",
        ) from None

    items = [UserResponse.model_validate(employee) for employee in employees]
    return EmployeeListResponse(count=len(items), employees=items)
