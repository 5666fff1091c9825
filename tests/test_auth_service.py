"""Authentication service tests."""

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt
from sqlalchemy.exc import IntegrityError

from tusk.config import get_settings
from tusk.models.enums import UserRole
from tusk.models.user import User
from tusk.services import auth as auth_service
from tusk.services.auth import (
    authenticate_user,
    create_access_token,
    create_user,
    decode_access_token,
    get_password_hash,
    get_user_by_email,
    list_employees,
    verify_password,
)


def test_password_hash_is_salted():
    """Test hashing the same password twice gives different verifiable hashes."""
    first = get_password_hash("secret1")
    second = get_password_hash("secret1")

    assert first != second
    assert first != "secret1"
    assert verify_password("secret1", first)
    assert verify_password("secret1", second)
    assert not verify_password("secret2", first)


def test_access_token_round_trip():
    """Test a freshly issued token decodes to its subject."""
    token = create_access_token(42, "a@x.com")
    payload = decode_access_token(token)

    assert payload is not None
    assert payload["sub"] == "42"
    assert payload["email"] == "a@x.com"


def test_decode_rejects_garbage_and_expired_tokens():
    """Test invalid and expired tokens decode to None."""
    settings = get_settings()
    expired = jwt.encode(
        {"sub": "1", "exp": datetime.now(UTC) - timedelta(minutes=1)},
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )
    forged = jwt.encode({"sub": "1"}, "some-other-secret", algorithm=settings.jwt_algorithm)

    assert decode_access_token("not-a-token") is None
    assert decode_access_token(expired) is None
    assert decode_access_token(forged) is None


def test_create_user_defaults_to_employee(db):
    """Test new users get the employee role and a hashed password."""
    user = create_user(db, "Alice", "alice@example.com", "secret1")

    assert user.id is not None
    assert user.role == UserRole.EMPLOYEE.value
    assert user.password_hash != "secret1"
    assert user.created_at is not None
    assert user.updated_at is not None


def test_create_user_duplicate_email_hits_constraint(db):
    """Test the unique email constraint rejects a second insert."""
    create_user(db, "Alice", "alice@example.com", "secret1")

    with pytest.raises(IntegrityError):
        create_user(db, "Another Alice", "alice@example.com", "secret2")
    db.rollback()

    assert db.query(User).filter(User.email == "alice@example.com").count() == 1


def test_authenticate_user(db):
    """Test authentication succeeds only with the right email and password."""
    user = create_user(db, "Alice", "alice@example.com", "secret1")

    assert authenticate_user(db, "alice@example.com", "secret1").id == user.id
    assert authenticate_user(db, "alice@example.com", "wrong") is None
    assert authenticate_user(db, "bob@example.com", "secret1") is None


def test_get_user_by_email(db):
    """Test looking a user up by email."""
    create_user(db, "Alice", "alice@example.com", "secret1")

    assert get_user_by_email(db, "alice@example.com").name == "Alice"
    assert get_user_by_email(db, "missing@example.com") is None


def test_list_employees_filters_role(db):
    """Test only employee accounts are listed, in creation order."""
    create_user(db, "Boss", "boss@example.com", "secret1", role=UserRole.ADMIN)
    create_user(db, "Alice", "alice@example.com", "secret1")
    create_user(db, "Bob", "bob@example.com", "secret1")

    employees = list_employees(db)

    assert [e.name for e in employees] == ["Alice", "Bob"]
    assert all(e.role == UserRole.EMPLOYEE.value for e in employees)


def test_list_employees_empty(db):
    """Test an empty table yields an empty list."""
    assert list_employees(db) == []


def test_authenticate_unknown_email_still_hashes(db, monkeypatch):
    """Test a missing user still pays for a bcrypt check."""
    calls = []
    monkeypatch.setattr(auth_service.pwd_context, "dummy_verify", lambda: calls.append(1))

    assert authenticate_user(db, "ghost@example.com", "secret1") is None
    assert calls == [1]
