"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import CommentService, OwnershipService
from forum.domain.value import CommentId, ParentType, UserId

from ..base import BaseUseCase


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    uid: str
    comment_id: UUID


class DeleteCommentResponse(BaseModel):
    """Delete comment response.

    Carries the parent so clients can drop the node from the right level
    of their tree.
    """

    comment_id: str
    parent_id: str
    parent_type: ParentType
    deleted: bool = True


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment and its replies (author only)."""

    def __init__(
        self, comment_service: CommentService, ownership_service: OwnershipService
    ) -> None:
        self.comment_service = comment_service
        self.ownership_service = ownership_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            ForbiddenError: If the caller did not write the comment
        """
        comment = await self.ownership_service.ensure_owns_comment(
            UserId(request.uid), CommentId(request.comment_id)
        )
        await self.comment_service.delete_comment(comment)
        return DeleteCommentResponse(
            comment_id=str(comment.id),
            parent_id=str(comment.parent.id),
            parent_type=comment.parent.parent_type,
        )
