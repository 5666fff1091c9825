"""Seed routine for the default administrator account."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tusk.config import Settings, get_settings
from tusk.models.enums import UserRole
from tusk.services.auth import create_user

logger = logging.getLogger(__name__)


def create_owner_account(db: Session, settings: Settings | None = None) -> bool:
    """Create the owner account if it does not exist yet.

    Relies on the unique email constraint rather than a lookup, so concurrent
    startups cannot produce two owners. Returns True if a row was inserted.
    """
    settings = settings or get_settings()

    try:
        owner = create_user(
            db,
            name=settings.owner_name,
            email=settings.owner_email,
            password=settings.owner_password,
            role=UserRole.ADMIN,
        )
    except IntegrityError:
        db.rollback()
        logger.info(f"Owner account {settings.owner_email} already exists")
        return False

    logger.info(f"Owner account created: id={owner.id} email={owner.email}")
    return True
