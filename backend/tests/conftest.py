"""
Social Media API Backend: Test Configuration (conftest.py)
============================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session:  AsyncMock session for service unit tests
    ├── db_engine:        fresh SQLite file database with all tables created
    ├── session_factory:  async_sessionmaker bound to db_engine
    ├── db_session:       one AsyncSession for repository tests
    ├── test_client:      HTTPX AsyncClient with get_db_session overridden
    └── seeded_data:      2 accounts and 5 messages (2 posted by the first)
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

# Override settings BEFORE any social_api import: the module-level engine
# is built from DATABASE_URL at import time.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="social_api_test_"), "health.db"
)
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from social_api.database import Base, get_db_session  # noqa: E402
from social_api.models.account import Account  # noqa: E402
from social_api.models.message import Message  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_register(mock_db_session):
            result = await account_service.register(mock_db_session, candidate)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """A throwaway SQLite database with the full schema."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    Provides an async HTTP client wired to the FastAPI app.

    Each request gets its own session from the test database, committed on
    success and rolled back on error, mirroring get_db_session.
    """
    from social_api.main import app

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def seeded_data(session_factory):
    """
    Two accounts and five messages; account 1 ("testuser1") posted exactly two.

    Returns a dict with the committed ORM objects.
    """
    async with session_factory() as session:
        first = Account(username="testuser1", password="password")
        second = Account(username="testuser2", password="password")
        session.add_all([first, second])
        await session.flush()

        messages = [
            Message(posted_by=first.id, message_text="test message 1", posted_at=1669947792),
            Message(posted_by=second.id, message_text="test message 2", posted_at=1669947793),
            Message(posted_by=first.id, message_text="test message 3", posted_at=1669947794),
            Message(posted_by=second.id, message_text="test message 4", posted_at=1669947795),
            Message(posted_by=second.id, message_text="test message 5", posted_at=1669947796),
        ]
        session.add_all(messages)
        await session.commit()

    return {"accounts": [first, second], "messages": messages}
