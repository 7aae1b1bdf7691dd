"""
Async SQLAlchemy session management.

The engine and session factory are process-wide singletons, lazily created
from settings and disposed on shutdown.
"""

import structlog
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from core.config import settings
from db.base import Base

logger = structlog.get_logger(__name__)

# Global instances (lazy-initialized)
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def create_engine(database_url: str | None = None, echo: bool | None = None) -> AsyncEngine:
    """
    Create an async engine for the given URL.

    In-memory SQLite needs a single shared connection, otherwise every
    pooled connection would see its own empty database.
    """
    url = database_url or settings.DATABASE_URL
    kwargs: dict = {"echo": settings.DATABASE_ECHO if echo is None else echo}
    if url.startswith("sqlite") and ":memory:" in url:
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
    return create_async_engine(url, **kwargs)


def get_engine() -> AsyncEngine:
    """Get or create the application engine."""
    global _engine

    if _engine is None:
        _engine = create_engine()
        logger.info("Database engine created", url=_engine.url.render_as_string(hide_password=True))

    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get or create the session factory bound to the application engine."""
    global _session_factory

    if _session_factory is None:
        _session_factory = async_sessionmaker(get_engine(), expire_on_commit=False)

    return _session_factory


async def create_tables(engine: AsyncEngine) -> None:
    """Create all tables known to the declarative base."""
    # Register models on the metadata
    import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def init_db() -> None:
    """Initialize the database schema."""
    await create_tables(get_engine())
    logger.info("Database schema ready")


async def close_db() -> None:
    """Dispose of the engine and drop cached singletons."""
    global _engine, _session_factory

    if _engine is not None:
        await _engine.dispose()
        logger.info("Database connections closed")

    _engine = None
    _session_factory = None
