"""Create reply use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from forum.domain.service import CommentService
from forum.domain.value import ParentType, UserId, parent_from_columns

from ..base import BaseUseCase
from ..items import CommentItem


class CreateReplyRequest(BaseModel):
    """Create reply request.

    ``parent_type`` says whether ``parent_id`` names a post (a root
    comment) or a comment (a nested reply).
    """

    uid: str
    parent_type: ParentType
    parent_id: UUID
    content: str = Field(min_length=1, max_length=10000)


class CreateReplyUseCase(BaseUseCase):
    """Use case for replying to a post or a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create reply use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateReplyRequest) -> CommentItem:
        """Execute create reply flow.

        The parent's reply count goes up in the same transaction.

        Args:
            request: Parent reference, text and author

        Returns:
            Created comment

        Raises:
            NotFoundError: If the parent does not exist
        """
        with logfire.span(
            "create_reply.execute",
            parent_type=request.parent_type.value,
            parent_id=str(request.parent_id),
        ):
            parent = parent_from_columns(request.parent_id, request.parent_type.value)
            comment = await self.comment_service.create_reply(
                parent=parent, uid=UserId(request.uid), text=request.content
            )
            return CommentItem.from_comment(comment)
