from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from leave_api.db import get_session
from leave_api.main import app
from leave_api.models import SQLModel
from leave_api.models.enums import EmployeeRole
from leave_api.repositories.employee import EmployeeRepository

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from sqlalchemy.ext.asyncio import AsyncEngine

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    """Fresh in-memory database per test.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    _engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with _engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield _engine
    await _engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    """Yield the session shared by the API under test and the assertions."""
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
async def async_client(db_session: AsyncSession) -> AsyncIterator[AsyncClient]:
    """Async HTTP client with the database session dependency overridden."""

    async def _override_get_session() -> AsyncIterator[AsyncSession]:
        yield db_session

    app.dependency_overrides[get_session] = _override_get_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
async def request_scoped_client(engine: AsyncEngine) -> AsyncIterator[AsyncClient]:
    """Client whose requests each get their own session, closed (and rolled
    back if uncommitted) when the request ends, the way ``get_session`` does.

    Unhandled application errors come back as 500 responses.
    """

    async def _override_get_session() -> AsyncIterator[AsyncSession]:
        async with AsyncSession(engine, expire_on_commit=False) as session:
            yield session

    app.dependency_overrides[get_session] = _override_get_session
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
async def manager_id(engine: AsyncEngine) -> str:
    """Seed a manager directly; managers cannot self-register over the API."""
    async with AsyncSession(engine, expire_on_commit=False) as session:
        manager = await EmployeeRepository(session).create(
            email="maria@example.com",
            full_name="Maria",
            password="correct-horse-battery",
            role=EmployeeRole.MANAGER,
        )
        await session.commit()
        return str(manager.id)
