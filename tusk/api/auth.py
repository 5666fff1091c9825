"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from tusk.api.dependencies import get_current_user
from tusk.database import get_db
from tusk.models.user import User
from tusk.schemas.auth import LoginResponse, UserLogin, UserResponse
from tusk.services.auth import authenticate_user, create_access_token

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

# Same message for unknown email and wrong password
INVALID_CREDENTIALS = "Email or Password is Wrong"


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    user = authenticate_user(db, credentials.email, credentials.password)

    if not user:
        logger.warning(f"Failed login attempt for {credentials.email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS,
            headers={"WWW-Authenticate": "Bearer"},
        )

    return LoginResponse(
        user=UserResponse.model_validate(user),
        access_token=create_access_token(user.id, user.email),
    )


@router.get("/users/me", response_model=UserResponse)
def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return UserResponse.model_validate(current_user)
