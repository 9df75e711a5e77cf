# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up test environment variables before any imports
# - Points the database at a fresh in-memory SQLite per test
# - Provides a TestClient and user/joke fixtures
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SESSION_SECRET", "test-session-secret-0123456789")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from app.auth.session import create_session_token
from app.config import settings
from app.main import app
from core.services import JokeService, UserService
from lib.database import Database
from lib.tables import Joke, User


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest.fixture
def database():
    """Fresh in-memory database shared by the app and the test."""
    Database.configure("sqlite://", poolclass=StaticPool)
    Database.create_tables()
    yield Database
    Database.drop_tables()


@pytest.fixture
def db(database):
    """ORM session for arranging and asserting on data."""
    session = database.new_session()
    yield session
    session.close()


# =============================================================================
# Data Fixtures
# =============================================================================

@pytest.fixture
def kody(db):
    """A registered user who owns jokes."""
    return UserService.register(db, "kody", "twixrox")


@pytest.fixture
def other_user(db):
    """A registered user who owns nothing."""
    return UserService.register(db, "mallory", "hunter22")


@pytest.fixture
def joke(db, kody):
    """A joke owned by kody."""
    return JokeService.create_joke(
        db,
        jokester_id=kody.id,
        name="Frisbee",
        content="I was wondering why the frisbee was getting bigger, then it hit me.",
    )


# =============================================================================
# HTTP Fixtures
# =============================================================================

@pytest.fixture
def client(database):
    """FastAPI TestClient that does not follow redirects."""
    with TestClient(app, follow_redirects=False) as client:
        yield client


@pytest.fixture
def login_as(client):
    """Put a valid session cookie for a user on the client."""

    def _login_as(user):
        client.cookies.set(settings.SESSION_COOKIE_NAME, create_session_token(user.id))
        return client

    return _login_as


# =============================================================================
# Store Inspection Fixtures
# =============================================================================
# These read through a fresh session so nothing cached in `db` hides a change
# made by a request.

@pytest.fixture
def joke_exists(database):
    def _joke_exists(joke_id: str) -> bool:
        with database.new_session() as session:
            return session.get(Joke, joke_id) is not None

    return _joke_exists


@pytest.fixture
def count_users(database):
    def _count_users(username: str) -> int:
        with database.new_session() as session:
            return session.query(User).filter_by(username=username).count()

    return _count_users


@pytest.fixture
def count_jokes(database):
    def _count_jokes() -> int:
        with database.new_session() as session:
            return JokeService.count_jokes(session)

    return _count_jokes
