"""
Schedule API — Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the entire test suite.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: AsyncMock session for service unit tests (no DB)
    ├── database:        Database over a fresh aiosqlite file with tables created
    └── test_client:     HTTPX AsyncClient bound to an app using `database`
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

from datetime import datetime, timezone
from itertools import count
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from schedule_api.database import Database


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    `flush` behaves like a real INSERT: every object passed to `add` gets an
    integer id and a created_at timestamp.

    Usage:
        async def test_get(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = row
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()

    ids = count(1)

    async def flush():
        for call in session.add.call_args_list:
            obj = call.args[0]
            if getattr(obj, "id", None) is None:
                obj.id = next(ids)
            if getattr(obj, "created_at", None) is None:
                obj.created_at = datetime.now(timezone.utc)

    session.flush = AsyncMock(side_effect=flush)
    return session


@pytest_asyncio.fixture
async def database(tmp_path):
    """A scratch SQLite database with the schema created."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'schedule.db'}")
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def test_client(database):
    """
    Provides an async HTTP test client for endpoint testing.

    ASGITransport does not run the lifespan, which is why `database`
    creates the tables itself.

    Usage:
        async def test_info(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    from schedule_api.main import create_app

    app = create_app(database=database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
