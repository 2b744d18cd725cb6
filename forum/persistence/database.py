"""Async engine and sessions for the forum database."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from forum.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the asyncpg engine; SQL is echoed when ``debug`` is on."""
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions for request-scoped transactions.

    Repositories issue Core statements and flush explicitly, so autoflush
    is off, and rows stay readable after the commit at the end of the
    request.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
