"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence
from uuid import UUID

from forum.domain.model.like import Like
from forum.domain.value import LikeTargetType, UserId


class LikeRepository(ABC):
    """Repository for Like entity.

    The store enforces one like per (uid, target_type, target_id).
    """

    @abstractmethod
    async def add(self, like: Like) -> bool:
        """Record a like.

        Args:
            like: The like to record

        Returns:
            True if recorded, False if the user already liked the target
        """
        pass

    @abstractmethod
    async def remove(
        self, uid: UserId, target_type: LikeTargetType, target_id: UUID
    ) -> bool:
        """Remove a user's like from a target.

        Returns:
            True if a like was removed, False if none existed
        """
        pass

    @abstractmethod
    async def find_liked(
        self,
        uid: UserId,
        target_type: LikeTargetType,
        target_ids: Sequence[UUID],
    ) -> set[UUID]:
        """Return the subset of ``target_ids`` the user has liked.

        Batch lookup so list endpoints avoid one query per row.
        """
        pass

    @abstractmethod
    async def count_for_target(self, target_type: LikeTargetType, target_id: UUID) -> int:
        """Count likes on one target (used to rebuild like counters)."""
        pass
