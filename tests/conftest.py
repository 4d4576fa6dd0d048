"""Pytest configuration and fixtures for the task tracker.

Uses task_tracker.main:app for HTTP tests and an in-memory SQLite database
(aiosqlite) created and dropped around every test that needs it.
"""

import os

# Must be set before task_tracker.main is imported (create_app reads settings).
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from task_tracker.infrastructure.persistence import database
from task_tracker.main import app


@pytest.fixture
async def database_schema():
    """Create the schema on a fresh engine; drop it and dispose the engine after the test."""
    await database.create_schema()
    yield
    await database.drop_schema()
    await database.dispose_engine()


@pytest.fixture
async def client(database_schema) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def unsafe_client(database_schema) -> AsyncClient:
    """Like client, but unhandled app exceptions become 500 responses instead of propagating."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def db_session(database_schema) -> AsyncSession:
    """Database session for repository tests. Rolls back after the test."""
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
