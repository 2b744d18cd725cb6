"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from forum.domain.service import CommentService, OwnershipService
from forum.domain.value import CommentId, UserId

from ..base import BaseUseCase
from ..items import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    uid: str
    comment_id: UUID
    content: str = Field(min_length=1, max_length=10000)


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment (author only)."""

    def __init__(
        self, comment_service: CommentService, ownership_service: OwnershipService
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            ownership_service: Ownership authorization gate
        """
        self.comment_service = comment_service
        self.ownership_service = ownership_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Raises:
            ForbiddenError: If the caller did not write the comment
        """
        comment = await self.ownership_service.ensure_owns_comment(
            UserId(request.uid), CommentId(request.comment_id)
        )
        updated = await self.comment_service.update_text(comment, request.content)
        return CommentItem.from_comment(updated)
