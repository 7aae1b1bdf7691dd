"""
Pytest fixtures for MoodRoom backend tests.
"""

import os
from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

# Set test environment variables before importing app
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_LEVEL", "WARNING")


class FakeClock:
    """Controllable clock returning aware UTC datetimes."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs: float) -> datetime:
        self.current += timedelta(**kwargs)
        return self.current


@pytest.fixture
def clock() -> FakeClock:
    """Clock starting at a fixed instant."""
    return FakeClock(datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
async def engine() -> AsyncGenerator[Any, None]:
    """Fresh in-memory database with the schema created."""
    from db.session import create_engine, create_tables

    test_engine = create_engine("sqlite+aiosqlite:///:memory:", echo=False)
    await create_tables(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine: Any) -> Any:
    """Session factory bound to the test engine."""
    from sqlalchemy.ext.asyncio import async_sessionmaker

    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
async def session(session_factory: Any) -> AsyncGenerator[Any, None]:
    """A session whose uncommitted work is rolled back afterwards."""
    async with session_factory() as db_session:
        yield db_session
        await db_session.rollback()


@pytest.fixture
def room(session_factory: Any, clock: FakeClock) -> Any:
    """Room service on the test database and fake clock."""
    from services.room_service import RoomService

    return RoomService(session_factory, clock=clock)


@pytest.fixture
async def app(room: Any) -> AsyncGenerator[Any, None]:
    """FastAPI application with the test room installed."""
    from main import app as fastapi_app

    fastapi_app.state.room = room
    yield fastapi_app
    fastapi_app.state.room = None


@pytest.fixture
async def client(app: Any) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def sample_votes() -> list[tuple[str, str]]:
    """Five Happy and two Calm participants."""
    return [(f"happy-{i}", "Happy") for i in range(5)] + [(f"calm-{i}", "Calm") for i in range(2)]
