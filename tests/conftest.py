"""
Pytest configuration and fixtures.
Provides test database, client, and common test utilities.
"""

import os

# Must be set before the app and its settings are imported.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("DISABLE_BOOTSTRAP_USERS", "true")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "1000")
os.environ.setdefault("JWT_SECRET", "test-secret-key")

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from app.core.config import settings
from app.core.security import password_hasher
from app.db.session import get_session
from app.main import app
from app.models.user import User, UserRole
from app.services.user_service import UserService

USER_EMAIL = "user@test.com"
USER_PASSWORD = "User123!"
ADMIN_EMAIL = "admin@test.com"
ADMIN_PASSWORD = "Admin123!"


@pytest.fixture(name="session")
def session_fixture() -> Generator[Session, None, None]:
    """
    Create a test database session.
    Uses an in-memory SQLite database for fast tests.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)

    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with dependency overrides.
    """

    def get_session_override() -> Generator[Session, None, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def _create_user(session: Session, email: str, password: str, role: UserRole, first_name: str) -> User:
    return UserService(session).create(
        email=email,
        hashed_password=password_hasher.hash(password),
        first_name=first_name,
        last_name="User",
        role=role,
    ).unwrap()


@pytest.fixture(name="test_user")
def test_user_fixture(session: Session) -> User:
    """Create a user with role ``user``."""
    return _create_user(session, USER_EMAIL, USER_PASSWORD, UserRole.USER, "Regular")


@pytest.fixture(name="test_admin")
def test_admin_fixture(session: Session) -> User:
    """Create a user with role ``admin``."""
    return _create_user(session, ADMIN_EMAIL, ADMIN_PASSWORD, UserRole.ADMIN, "Admin")


@pytest.fixture(name="user_token")
def user_token_fixture(client: TestClient, test_user: User) -> str:
    """Get an access token for a regular user."""
    response = client.post(
        f"{settings.API_V1_PREFIX}/auth/login",
        json={"email": USER_EMAIL, "password": USER_PASSWORD},
    )
    assert response.status_code == 200
    return response.json()["accessToken"]


@pytest.fixture(name="admin_token")
def admin_token_fixture(client: TestClient, test_admin: User) -> str:
    """Get an access token for an admin user."""
    response = client.post(
        f"{settings.API_V1_PREFIX}/auth/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return response.json()["accessToken"]


@pytest.fixture(name="movie_payload")
def movie_payload_fixture() -> dict:
    return {
        "title": "Test Movie",
        "description": "A test movie",
        "releaseDate": "2024-01-01",
        "duration": 120,
    }
