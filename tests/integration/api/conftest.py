"""Pytest fixtures for API integration tests.

Uses an in-memory SQLite database shared through a single connection.
"""

import asyncio

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from stockroom.infrastructure.persistence.sqlalchemy.models import Base
from stockroom.presentation.api.app import create_app
from stockroom.presentation.api.dependencies import get_db_session
from stockroom_auth.persistence.sqlalchemy import AuthBase
from stockroom_config.settings import Settings

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only-0123456789"


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        _env_file=None,
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        password_hash_rounds=4,  # Low rounds for fast tests
        api_host="127.0.0.1",
        api_port=5000,
        api_debug=True,
        api_cors_origins="http://localhost:8081",
        log_level="WARNING",
    )


def _run_in_fresh_loop(coro) -> None:
    """Run a coroutine outside the TestClient's event loop."""
    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(coro)
    finally:
        loop.close()


@pytest.fixture
def test_db_engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )

    async def _setup():
        async with engine.begin() as conn:
            # Create all tables (both stockroom and stockroom_auth)
            await conn.run_sync(Base.metadata.create_all)
            await conn.run_sync(AuthBase.metadata.create_all)

    _run_in_fresh_loop(_setup())

    yield engine

    _run_in_fresh_loop(engine.dispose())


@pytest.fixture
def api_app(api_settings, test_db_engine) -> FastAPI:
    """Create the application wired to the in-memory database."""
    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Override the database session dependency
    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session

    return app


@pytest.fixture
def test_client(api_app) -> TestClient:
    """Create a test client with an in-memory database."""
    return TestClient(api_app)


def make_registration(email: str = "ada@example.com", **overrides) -> dict:
    data = {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": email,
        "password": "SecurePassword123!",
        "phone": "555-0100",
    }
    data.update(overrides)
    return data


@pytest.fixture
def registered_user_data() -> dict:
    """Test user registration data."""
    return make_registration()


@pytest.fixture
def register_user(test_client):
    """Register a user and return the bearer headers for it."""

    def _register(email: str) -> dict:
        response = test_client.post(
            "/api/auth/register",
            json=make_registration(email=email),
        )
        assert response.status_code == 201, response.text
        token = response.json()["data"]["token"]
        return {"Authorization": f"Bearer {token}"}

    return _register


@pytest.fixture
def auth_headers(register_user) -> dict:
    """Get auth headers for a registered user."""
    return register_user("owner@example.com")
