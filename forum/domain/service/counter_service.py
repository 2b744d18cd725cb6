"""Counter maintenance service.

Keeps the denormalized counters (group post counts, reply counts and like
counts) in step with the entities they count. Every adjustment is a single
atomic storage update, never a read followed by a write.
"""

from uuid import UUID

import logfire

from forum.domain.repository import (
    CommentRepository,
    GroupRepository,
    LikeRepository,
    PostRepository,
)
from forum.domain.value import (
    CommentId,
    CommentParent,
    GroupId,
    LikeTargetType,
    PostId,
    PostParent,
)

from .base import Service


class CounterService(Service):
    """Domain service for aggregate counters."""

    def __init__(
        self,
        group_repository: GroupRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        like_repository: LikeRepository,
    ) -> None:
        """Initialize counter service.

        Args:
            group_repository: Group repository
            post_repository: Post repository
            comment_repository: Comment repository
            like_repository: Like repository
        """
        self.group_repository = group_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.like_repository = like_repository

    async def on_post_created(self, group_id: GroupId) -> None:
        await self.group_repository.adjust_post_count(group_id, 1)
        logfire.debug("Group post count incremented", group_id=str(group_id))

    async def on_post_deleted(self, group_id: GroupId) -> None:
        await self.group_repository.adjust_post_count(group_id, -1)
        logfire.debug("Group post count decremented", group_id=str(group_id))

    async def on_reply_created(self, parent: PostParent | CommentParent) -> None:
        """Count a new reply against its parent.

        Root comments count towards the post's ``replies``; nested replies
        count towards the parent comment's ``replies``.

        Args:
            parent: Parent of the reply that was created
        """
        await self._adjust_parent_replies(parent, 1)

    async def on_reply_deleted(self, parent: PostParent | CommentParent) -> None:
        """Uncount a deleted reply from its parent.

        Args:
            parent: Parent of the reply that was deleted
        """
        await self._adjust_parent_replies(parent, -1)

    async def on_liked(self, target_type: LikeTargetType, target_id: UUID) -> None:
        await self._adjust_likes(target_type, target_id, 1)

    async def on_unliked(self, target_type: LikeTargetType, target_id: UUID) -> None:
        await self._adjust_likes(target_type, target_id, -1)

    async def _adjust_parent_replies(
        self, parent: PostParent | CommentParent, delta: int
    ) -> None:
        if isinstance(parent, PostParent):
            await self.post_repository.adjust_replies(parent.id, delta)
        else:
            await self.comment_repository.adjust_replies(parent.id, delta)
        logfire.debug(
            "Reply count adjusted",
            parent_type=parent.parent_type.value,
            parent_id=str(parent.id),
            delta=delta,
        )

    async def _adjust_likes(
        self, target_type: LikeTargetType, target_id: UUID, delta: int
    ) -> None:
        if target_type == LikeTargetType.POST:
            await self.post_repository.adjust_likes(PostId(target_id), delta)
        else:
            await self.comment_repository.adjust_likes(CommentId(target_id), delta)
        logfire.debug(
            "Like count adjusted",
            target_type=target_type.value,
            target_id=str(target_id),
            delta=delta,
        )

    # Reconciliation. These rebuild a counter from a scan of the rows it
    # counts and are meant for maintenance scripts, not request handling.

    async def recount_group_posts(self, group_id: GroupId) -> int:
        """Rebuild a group's ``post_count``.

        Args:
            group_id: Group ID

        Returns:
            The corrected count
        """
        with logfire.span("counter_service.recount_group_posts", group_id=str(group_id)):
            group = await self.group_repository.find_by_id(group_id)
            if not group:
                return 0
            actual = await self.post_repository.count_by_group(group_id)
            if actual != group.post_count:
                logfire.warn(
                    "Group post count drifted",
                    group_id=str(group_id),
                    stored=group.post_count,
                    actual=actual,
                )
                await self.group_repository.adjust_post_count(
                    group_id, actual - group.post_count
                )
            return actual

    async def recount_post_replies(self, post_id: PostId) -> int:
        """Rebuild a post's root reply count."""
        with logfire.span("counter_service.recount_post_replies", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                return 0
            actual = await self.comment_repository.count_children(PostParent(id=post_id))
            if actual != post.replies:
                logfire.warn(
                    "Post reply count drifted",
                    post_id=str(post_id),
                    stored=post.replies,
                    actual=actual,
                )
                await self.post_repository.adjust_replies(post_id, actual - post.replies)
            return actual

    async def recount_comment_replies(self, comment_id: CommentId) -> int:
        """Rebuild a comment's direct reply count."""
        with logfire.span(
            "counter_service.recount_comment_replies", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                return 0
            actual = await self.comment_repository.count_children(
                CommentParent(id=comment_id)
            )
            if actual != comment.replies:
                logfire.warn(
                    "Comment reply count drifted",
                    comment_id=str(comment_id),
                    stored=comment.replies,
                    actual=actual,
                )
                await self.comment_repository.adjust_replies(
                    comment_id, actual - comment.replies
                )
            return actual

    async def recount_likes(self, target_type: LikeTargetType, target_id: UUID) -> int:
        """Rebuild a post's or comment's like count from recorded likes."""
        with logfire.span(
            "counter_service.recount_likes",
            target_type=target_type.value,
            target_id=str(target_id),
        ):
            if target_type == LikeTargetType.POST:
                target = await self.post_repository.find_by_id(PostId(target_id))
            else:
                target = await self.comment_repository.find_by_id(CommentId(target_id))
            if not target:
                return 0
            actual = await self.like_repository.count_for_target(target_type, target_id)
            if actual != target.likes:
                logfire.warn(
                    "Like count drifted",
                    target_type=target_type.value,
                    target_id=str(target_id),
                    stored=target.likes,
                    actual=actual,
                )
                await self._adjust_likes(target_type, target_id, actual - target.likes)
            return actual
