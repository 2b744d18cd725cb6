"""Storage component: PostgreSQL in production."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from forum.config import Settings
from forum.domain.repository import (
    CommentRepository,
    GroupRepository,
    LikeRepository,
    PostRepository,
)
from forum.persistence.database import create_engine, create_session_factory
from forum.persistence.repository import (
    PostgresCommentRepository,
    PostgresGroupRepository,
    PostgresLikeRepository,
    PostgresPostRepository,
)
from forum.util.di.base import ProviderBase
from forum.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Provides the four repositories."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories over one PostgreSQL transaction per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def provide_engine(self, settings: Settings) -> AsyncEngine:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def provide_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def provide_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Open the request's transaction.

        An entity write and the counter updates that accompany it land in
        this one transaction: committed when the request finishes, rolled
        back if it raised.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logfire.warn("Request transaction rolled back", error=str(e))
                raise
            else:
                await session.commit()

    @provide(scope=Scope.REQUEST)
    def provide_groups(self, session: AsyncSession) -> GroupRepository:
        return PostgresGroupRepository(session)

    @provide(scope=Scope.REQUEST)
    def provide_posts(self, session: AsyncSession) -> PostRepository:
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def provide_comments(self, session: AsyncSession) -> CommentRepository:
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def provide_likes(self, session: AsyncSession) -> LikeRepository:
        return PostgresLikeRepository(session)
