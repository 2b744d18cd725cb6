"""Shared helpers for the PostgreSQL repositories."""

from typing import Any

import logfire
from sqlalchemy import ColumnElement, func
from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from forum.domain.error import StoreError


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so user input matches literally."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def contains_ci(column: Any, query: str) -> ColumnElement[bool]:
    """Case-insensitive substring match on ``column``."""
    return column.ilike(f"%{escape_like(query)}%", escape="\\")


def floored(column: Any, delta: int) -> ColumnElement[int]:
    """``column + delta``, never below zero, evaluated by the database."""
    return func.greatest(column + delta, 0)


class PostgresRepository:
    """Base for repositories backed by an ``AsyncSession``.

    Driver and constraint failures surface as ``StoreError`` so callers
    deal in domain errors only.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _execute(self, stmt: Executable) -> Result[Any]:
        try:
            return await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logfire.error(
                "Database statement failed",
                repository=type(self).__name__,
                error=str(e),
            )
            raise StoreError(f"Database operation failed: {type(e).__name__}") from e

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except SQLAlchemyError as e:
            logfire.error("Database flush failed", error=str(e))
            raise StoreError(f"Database operation failed: {type(e).__name__}") from e
