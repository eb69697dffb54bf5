"""Database engine and session management for PostgreSQL."""

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from board.config import Settings

APPLICATION_NAME = "board-core"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine.

    Waiting for a pooled connection is bounded by the store operation
    timeout, so an exhausted pool surfaces as an unavailable store instead
    of a hung request.

    Args:
        settings: Application settings

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        pool_timeout=settings.store.operation_timeout_seconds,
        connect_args={"server_settings": {"application_name": APPLICATION_NAME}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory.

    Sessions keep loaded rows usable after commit and never autoflush;
    repositories flush explicitly where a later statement depends on it.

    Args:
        engine: Database engine

    Returns:
        Session factory
    """
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


def raw_dsn(database_url: str) -> str:
    """Convert a SQLAlchemy URL into a plain libpq DSN for asyncpg.

    Args:
        database_url: e.g. ``postgresql+asyncpg://user:pw@host/db``

    Returns:
        e.g. ``postgresql://user:pw@host/db``
    """
    url = make_url(database_url).set(drivername="postgresql")
    return url.render_as_string(hide_password=False)
