"""
Shared fixtures for the userbase test suite.

Every test gets its own in-memory SQLite database and rate limiter.
"""

import pytest
from fastapi.testclient import TestClient

from userbase.core.config import Settings
from userbase.infrastructure.db import build_engine, build_session_factory, create_schema
from userbase.infrastructure.users.repository import SqlAlchemyUserRepository
from userbase.main import create_app

SQLITE_MEMORY_URL = "sqlite://"


def make_settings(**overrides) -> Settings:
    """Settings for tests: in-memory database, no .env file."""
    overrides.setdefault("database_url", SQLITE_MEMORY_URL)
    overrides.setdefault("environment", "test")
    return Settings(_env_file=None, **overrides)


@pytest.fixture
def new_user() -> dict:
    """Field values of a valid user."""
    return {
        "name": "Ada Lovelace",
        "email": "ada.lovelace@mailbox.org",
        "password": "somepasswordhere1",
        "role": "user",
    }


@pytest.fixture
def engine():
    engine = build_engine(SQLITE_MEMORY_URL)
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    session = build_session_factory(engine)()
    yield session
    session.close()


@pytest.fixture
def user_repo(session) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(session)


@pytest.fixture
def app_factory():
    """Build an application for the given settings overrides."""

    def factory(**overrides):
        return create_app(make_settings(**overrides))

    return factory


@pytest.fixture
def app(app_factory):
    return app_factory()


@pytest.fixture
def client(app):
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def dev_client(app_factory):
    dev_app = app_factory(environment="development")
    with TestClient(dev_app, raise_server_exceptions=False) as test_client:
        yield test_client
