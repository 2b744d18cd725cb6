"""Like domain service."""

from typing import Sequence
from uuid import UUID, uuid4

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model import Like
from forum.domain.repository import CommentRepository, LikeRepository, PostRepository
from forum.domain.value import (
    CommentId,
    LikeId,
    LikeTargetType,
    PostId,
    UserId,
    utc_now,
)

from .base import Service
from .counter_service import CounterService


class LikeService(Service):
    """Domain service for likes on posts and comments.

    A user holds at most one like per target. Liking again and unliking
    something never liked are both no-ops, so the counter moves only when
    the like set actually changes.
    """

    def __init__(
        self,
        like_repository: LikeRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        counter_service: CounterService,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            post_repository: Post repository
            comment_repository: Comment repository
            counter_service: Counter maintenance service
        """
        self.like_repository = like_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.counter_service = counter_service

    async def like(
        self, uid: UserId, target_type: LikeTargetType, target_id: UUID
    ) -> bool:
        """Like a post or comment.

        Args:
            uid: User ID
            target_type: Post or comment
            target_id: Target ID

        Returns:
            True if the like was recorded, False if it already existed

        Raises:
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "like_service.like",
            uid=uid,
            target_type=target_type.value,
            target_id=str(target_id),
        ):
            await self._ensure_target(target_type, target_id)

            like = Like(
                id=LikeId(uuid4()),
                uid=uid,
                target_type=target_type,
                target_id=target_id,
                created_at=utc_now(),
            )
            added = await self.like_repository.add(like)
            if added:
                await self.counter_service.on_liked(target_type, target_id)
                logfire.info("Like recorded", target_id=str(target_id), uid=uid)
            else:
                logfire.info("Already liked", target_id=str(target_id), uid=uid)
            return added

    async def unlike(
        self, uid: UserId, target_type: LikeTargetType, target_id: UUID
    ) -> bool:
        """Remove a like from a post or comment.

        Returns:
            True if a like was removed, False if there was none

        Raises:
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "like_service.unlike",
            uid=uid,
            target_type=target_type.value,
            target_id=str(target_id),
        ):
            await self._ensure_target(target_type, target_id)

            removed = await self.like_repository.remove(uid, target_type, target_id)
            if removed:
                await self.counter_service.on_unliked(target_type, target_id)
                logfire.info("Like removed", target_id=str(target_id), uid=uid)
            else:
                logfire.info("No like to remove", target_id=str(target_id), uid=uid)
            return removed

    async def liked_ids(
        self,
        uid: UserId | None,
        target_type: LikeTargetType,
        target_ids: Sequence[UUID],
    ) -> set[UUID]:
        """Return which of ``target_ids`` the user has liked.

        Anonymous callers have liked nothing.
        """
        if uid is None or not target_ids:
            return set()
        return await self.like_repository.find_liked(uid, target_type, target_ids)

    async def _ensure_target(self, target_type: LikeTargetType, target_id: UUID) -> None:
        if target_type == LikeTargetType.POST:
            found = await self.post_repository.find_by_id(PostId(target_id))
            resource = "Post"
        else:
            found = await self.comment_repository.find_by_id(CommentId(target_id))
            resource = "Comment"
        if not found:
            logfire.warn(
                "Like on non-existent target",
                target_type=target_type.value,
                target_id=str(target_id),
            )
            raise NotFoundError(resource, str(target_id))
