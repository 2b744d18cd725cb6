"""Comment domain service."""

from uuid import uuid4

import logfire

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model import Comment
from forum.domain.repository import CommentRepository, PostRepository
from forum.domain.value import (
    CommentId,
    CommentParent,
    PostId,
    PostParent,
    UserId,
    utc_now,
)

from .base import Service
from .counter_service import CounterService


class CommentService(Service):
    """Domain service for comment operations.

    A reply attaches to either a post or another comment. Whichever it is,
    the parent must already exist, which keeps every parent chain acyclic
    and ending at a post.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        counter_service: CounterService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository
            counter_service: Counter maintenance service
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.counter_service = counter_service

    async def create_reply(
        self, parent: PostParent | CommentParent, uid: UserId, text: str
    ) -> Comment:
        """Reply to a post or to another comment.

        Args:
            parent: The post or comment being replied to
            uid: Author user ID
            text: Comment text

        Returns:
            Created comment

        Raises:
            NotFoundError: If the parent does not exist
            ValidationError: If the text is blank
        """
        with logfire.span(
            "comment_service.create_reply",
            parent_type=parent.parent_type.value,
            parent_id=str(parent.id),
            uid=uid,
        ):
            if not text.strip():
                raise ValidationError("Comment text must not be blank")

            post_id = await self._resolve_thread(parent)

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                parent=parent,
                comment=text,
                uid=uid,
                created_at=utc_now(),
            )
            saved = await self.comment_repository.save(comment)
            await self.counter_service.on_reply_created(parent)

            logfire.info(
                "Reply created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                parent_type=parent.parent_type.value,
            )
            return saved

    async def _resolve_thread(self, parent: PostParent | CommentParent) -> PostId:
        """Return the post at the root of the parent's thread.

        Raises:
            NotFoundError: If the parent does not exist
        """
        if isinstance(parent, PostParent):
            post = await self.post_repository.find_by_id(parent.id)
            if not post:
                logfire.warn("Reply to non-existent post", post_id=str(parent.id))
                raise NotFoundError("Post", str(parent.id))
            return post.id

        parent_comment = await self.comment_repository.find_by_id(parent.id)
        if not parent_comment:
            logfire.warn("Reply to non-existent comment", comment_id=str(parent.id))
            raise NotFoundError("Comment", str(parent.id))
        return parent_comment.post_id

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.get_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def update_text(self, comment: Comment, text: str) -> Comment:
        """Replace the text of a comment.

        Raises:
            ValidationError: If the text is blank
        """
        with logfire.span(
            "comment_service.update_text",
            comment_id=str(comment.id),
            text_length=len(text),
        ):
            if not text.strip():
                raise ValidationError("Comment text must not be blank")
            updated = await self.comment_repository.save(comment.evolve(comment=text))
            logfire.info("Comment text updated", comment_id=str(comment.id))
            return updated

    async def delete_comment(self, comment: Comment) -> None:
        """Delete a comment and its replies, and uncount it from its parent."""
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment.id),
            parent_id=str(comment.parent.id),
        ):
            await self.comment_repository.delete(comment.id)
            await self.counter_service.on_reply_deleted(comment.parent)
            logfire.info(
                "Comment deleted", comment_id=str(comment.id), replies=comment.replies
            )
