"""
Notes Backend — Test Configuration (conftest.py)
==================================================

What:  Shared pytest fixtures for the test suite.
How:   Every test that touches the store gets its own on-disk SQLite database
       (aiosqlite) under pytest's tmp_path, so tests never share rows.

Fixtures:
    ├── db_engine:        AsyncEngine bound to a fresh SQLite file, schema created
    ├── db_session:       AsyncSession on that engine
    ├── mock_db_session:  AsyncMock session for store-failure tests
    ├── app:              FastAPI app whose session dependency uses db_engine
    ├── test_client:      HTTPX AsyncClient talking to the app in-process
    └── controller:       NotesController wired to the same in-process app
"""

import os
from unittest.mock import AsyncMock, MagicMock

# Override settings BEFORE any notesapp import
# In-memory: the module-level engine is never used for rows, only built
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from notesapp.client.controller import NotesController
from notesapp.database import get_db_session, init_store


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'notes.db'}")
    await init_store(engine, create_tables=True)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    factory = async_sessionmaker(db_engine, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
def mock_db_session():
    """
    A mock AsyncSession.

    Usage:
        mock_db_session.execute.side_effect = OperationalError(...)
        with pytest.raises(StoreUnavailableError):
            await note_service.list_notes(mock_db_session)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.delete = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def app(db_engine):
    """The application with get_db_session pointed at the per-test database."""
    from notesapp.main import app as application

    factory = async_sessionmaker(db_engine, expire_on_commit=False)

    async def override_session():
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_db_session] = override_session
    yield application
    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_client(app):
    """
    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/notes")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def controller(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test/api") as client:
        yield NotesController(client=client)


@pytest.fixture
def sample_note_data():
    return {"title": "Groceries", "content": "Milk, eggs"}
