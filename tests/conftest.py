"""Pytest configuration and fixtures."""

import os

# Settings are read at import time, so point them at the test database first.
# PostgreSQL when TEST_DATABASE_URL is set (e.g. in Docker), SQLite otherwise.
SQLALCHEMY_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")
os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL
os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from tusk.database import Base, SessionLocal, engine, get_db  # noqa: E402
from tusk.main import app  # noqa: E402

EMPLOYEE_PASSWORD = "secret123"  # noqa: S105


class AuthHeaders(dict):
    """Dict subclass that also stores the authenticated user's id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    from tusk import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    yield
    engine.dispose()


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = SessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override.

    Entering the client runs the app lifespan, which seeds the owner account.
    """

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def employee(client):
    """Create an employee account through the API and return its payload."""
    response = client.post(
        "/users",
        json={
            "name": "Test Employee",
            "email": "employee@example.com",
            "password": EMPLOYEE_PASSWORD,
        },
    )
    assert response.status_code == 201
    return response.json()["user"]


@pytest.fixture
def auth_headers(client, employee):
    """Log the employee in and return bearer auth headers."""
    response = client.post(
        "/login", json={"email": employee["email"], "password": EMPLOYEE_PASSWORD}
    )
    assert response.status_code == 200
    token = response.json()["access_token"]

    return AuthHeaders(
        {"Authorization": f"Bearer {token}"}, user_id=employee["id"], email=employee["email"]
    )
