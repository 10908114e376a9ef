"""
Notekeep Backend — Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Points the app at a throwaway SQLite file (aiosqlite), rebuilds the
       tables for every test, and talks to the app through httpx's
       ASGITransport (no server process).

Fixture Hierarchy (all function-scoped):
    ├── database:        fresh empty tables; engine disposed afterwards
    ├── db_session:      AsyncSession on the test database
    ├── seeded_notes:    the three INITIAL_NOTES from helpers.py
    ├── root_user:       user "root" with password "secret"
    ├── test_client:     HTTPX AsyncClient bound to the FastAPI app
    └── mock_db_session: AsyncMock session for error-path unit tests
"""

import os
import tempfile

# Settings are read at import time, so the environment must be set first
_TEST_DIR = tempfile.mkdtemp(prefix="notekeep_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_TEST_DIR, 'test.db')}"
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["PASSWORD_HASH_ITERATIONS"] = "1000"
os.environ["NOTES_REQUIRE_AUTH"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from helpers import INITIAL_NOTES  # noqa: E402
from notekeep.database import (  # noqa: E402
    async_session_factory,
    create_tables,
    dispose_engine,
    drop_tables,
)
from notekeep.models.note import Note  # noqa: E402
from notekeep.models.user import User  # noqa: E402
from notekeep.services.auth_service import auth_service  # noqa: E402


@pytest_asyncio.fixture
async def database():
    """
    Provides empty tables for one test.

    The engine is disposed on teardown so no pooled connection outlives the
    test's event loop.
    """
    await drop_tables()
    await create_tables()
    yield
    await dispose_engine()


@pytest_asyncio.fixture
async def db_session(database):
    """An AsyncSession on the test database; uncommitted work is rolled back."""
    async with async_session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def seeded_notes(database):
    """Stores INITIAL_NOTES and returns their ids in insertion order."""
    async with async_session_factory() as session:
        notes = [Note(**data) for data in INITIAL_NOTES]
        session.add_all(notes)
        await session.commit()
        return [note.id for note in notes]


@pytest_asyncio.fixture
async def root_user(database):
    """Stores user 'root' whose password is 'secret'; returns its id."""
    async with async_session_factory() as session:
        user = User(
            username="root",
            password_hash=auth_service.hash_password("secret"),
            notes=[],
        )
        session.add(user)
        await session.commit()
        return user.id


@pytest_asyncio.fixture
async def test_client(database):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from notekeep.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.side_effect = OperationalError(...)
        await note_repository.find_all(mock_db_session)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session
