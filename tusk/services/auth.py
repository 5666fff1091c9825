"""Authentication service for JWT and password handling."""

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session, load_only

from tusk.config import get_settings
from tusk.models.enums import UserRole
from tusk.models.user import User

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: int, email: str) -> str:
    """Create a JWT access token."""
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": str(user_id),
        "email": email,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token."""
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password.

    Unknown emails and wrong passwords both return None, so callers cannot
    tell the two apart.
    """
    user = get_user_by_email(db, email)
    if not user:
        # Spend the same bcrypt time as a real check
        pwd_context.dummy_verify()
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def create_user(
    db: Session,
    name: str,
    email: str,
    password: str,
    role: UserRole = UserRole.EMPLOYEE,
) -> User:
    """Create a new user with a single insert.

    Raises ``sqlalchemy.exc.IntegrityError`` if the email is already taken;
    the caller is responsible for rolling back.
    """
    user = User(
        name=name,
        email=email,
        password_hash=get_password_hash(password),
        role=role.value,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def list_employees(db: Session) -> list[User]:
    """Get all non-privileged accounts, oldest first."""
    return (
        db.query(User)
        .options(
            load_only(
                User.id,
                User.name,
                User.email,
                User.role,
                User.created_at,
                User.updated_at,
            )
        )
        .filter(User.role == UserRole.EMPLOYEE.value)
        .order_by(User.id)
        .all()
    )
