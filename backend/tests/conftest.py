"""
NoteKeeper Backend: Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Environment is overridden before any `app` import so the settings
       singleton, the engine and the token service pick up test values.

Fixture Hierarchy:
    Function-scoped:
    ├── mock_db_session: Mock AsyncSession for service unit tests
    ├── make_account: Builds unsaved Account ORM objects
    ├── database: Fresh SQLite schema per test (aiosqlite)
    ├── test_client: HTTPX AsyncClient over ASGITransport
    ├── signup: Coroutine creating an account through the API
    └── account_a / account_b: Two registered accounts with auth headers
"""

import os
import tempfile

# ══════════════════════════════════════════════════════════════════════════
# Environment Setup (must run before importing app modules)
# ══════════════════════════════════════════════════════════════════════════

_TEST_DIR = tempfile.mkdtemp(prefix="notekeeper_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR}/test.db"
os.environ["ACCESS_TOKEN_SECRET"] = "test-secret-not-for-production"
os.environ["BCRYPT_ROUNDS"] = "4"  # minimum cost keeps the suite fast
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import datetime, timezone  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402
from uuid import uuid4  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.database import dispose_engine, drop_models, init_models  # noqa: E402
from app.models.account import Account  # noqa: E402
from app.security.passwords import hash_password  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Unit-test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_x(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = obj
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.delete = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def make_account():
    """Factory for unsaved Account rows with a real bcrypt hash."""

    def _make(email="a@x.com", username="ann", password="pw1"):
        return Account(
            id=uuid4(),
            username=username,
            email=email,
            password_hash=hash_password(password),
            created_at=datetime.now(timezone.utc),
        )

    return _make


# ══════════════════════════════════════════════════════════════════════════
# API Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def database():
    """Creates all tables before the test and drops them afterwards."""
    await init_models()
    yield
    await drop_models()
    # Pooled aiosqlite connections are bound to this test's event loop
    await dispose_engine()


@pytest_asyncio.fixture
async def test_client(database):
    """
    HTTPX AsyncClient wired straight into the FastAPI app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
    """
    from app.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def signup(test_client):
    """Returns a coroutine that registers an account and returns auth info."""

    async def _signup(username: str, email: str, password: str) -> dict:
        response = await test_client.post(
            "/account",
            json={"username": username, "email": email, "password": password},
        )
        assert response.status_code == 200, response.text
        body = response.json()
        token = body["accessToken"]
        return {
            "id": body["data"]["_id"],
            "token": token,
            "headers": {"Authorization": f"Bearer {token}"},
        }

    return _signup


@pytest_asyncio.fixture
async def account_a(signup):
    return await signup("ann", "a@x.com", "pw1")


@pytest_asyncio.fixture
async def account_b(signup):
    return await signup("bob", "b@x.com", "pw2")
