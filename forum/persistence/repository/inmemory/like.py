"""In-memory like repository for testing."""

from typing import Sequence
from uuid import UUID

from forum.domain.model.like import Like
from forum.domain.repository.like import LikeRepository
from forum.domain.value import LikeTargetType, UserId

from .database import InMemoryDatabase


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing.

    Likes are keyed by (uid, target_type, target_id), which plays the part
    of the unique constraint.
    """

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self._db = db or InMemoryDatabase()

    async def add(self, like: Like) -> bool:
        """Record a like unless it already exists."""
        key = (like.uid, like.target_type, like.target_id)
        if key in self._db.likes:
            return False
        self._db.likes[key] = like
        return True

    async def remove(
        self, uid: UserId, target_type: LikeTargetType, target_id: UUID
    ) -> bool:
        """Remove a user's like on a target."""
        return self._db.likes.pop((uid, target_type, target_id), None) is not None

    async def find_liked(
        self,
        uid: UserId,
        target_type: LikeTargetType,
        target_ids: Sequence[UUID],
    ) -> set[UUID]:
        """Which of the targets the user has liked."""
        return {
            tid for tid in target_ids if (uid, target_type, tid) in self._db.likes
        }

    async def count_for_target(self, target_type: LikeTargetType, target_id: UUID) -> int:
        """Count likes on one target."""
        return sum(
            1 for (_, ttype, tid) in self._db.likes if ttype == target_type and tid == target_id
        )
