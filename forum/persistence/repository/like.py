"""PostgreSQL implementation of Like repository."""

from typing import Sequence
from uuid import UUID

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert

from forum.domain.model import Like
from forum.domain.repository import LikeRepository
from forum.domain.value import LikeTargetType, UserId
from forum.persistence.mappers import like_to_dict
from forum.persistence.repository.base import PostgresRepository
from forum.persistence.tables import likes_table


class PostgresLikeRepository(PostgresRepository, LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    async def add(self, like: Like) -> bool:
        """Record a like unless the user already liked the target.

        The unique constraint decides, so two concurrent likes by the same
        user record exactly one row.
        """
        stmt = (
            insert(likes_table)
            .values(**like_to_dict(like))
            .on_conflict_do_nothing(constraint="unique_like")
            .returning(likes_table.c.id)
        )
        result = await self._execute(stmt)
        inserted = result.fetchone() is not None
        await self._flush()
        return inserted

    async def remove(
        self, uid: UserId, target_type: LikeTargetType, target_id: UUID
    ) -> bool:
        """Remove a user's like on a target."""
        stmt = delete(likes_table).where(
            and_(
                likes_table.c.uid == uid,
                likes_table.c.target_type == target_type.value,
                likes_table.c.target_id == target_id,
            )
        )
        result = await self._execute(stmt)
        await self._flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def find_liked(
        self,
        uid: UserId,
        target_type: LikeTargetType,
        target_ids: Sequence[UUID],
    ) -> set[UUID]:
        """Which of the targets the user has liked (batch query)."""
        if not target_ids:
            return set()

        stmt = select(likes_table.c.target_id).where(
            and_(
                likes_table.c.uid == uid,
                likes_table.c.target_type == target_type.value,
                likes_table.c.target_id.in_(list(target_ids)),
            )
        )
        result = await self._execute(stmt)
        return {row.target_id for row in result.fetchall()}

    async def count_for_target(self, target_type: LikeTargetType, target_id: UUID) -> int:
        """Count likes on one target."""
        stmt = (
            select(func.count())
            .select_from(likes_table)
            .where(
                and_(
                    likes_table.c.target_type == target_type.value,
                    likes_table.c.target_id == target_id,
                )
            )
        )
        result = await self._execute(stmt)
        return result.scalar() or 0
