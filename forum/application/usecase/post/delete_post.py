"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import OwnershipService, PostService
from forum.domain.value import PostId, UserId

from ..base import BaseUseCase


class DeletePostRequest(BaseModel):
    """Delete post request."""

    uid: str
    post_id: UUID


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: str
    deleted: bool = True


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post with its thread (author only)."""

    def __init__(
        self, post_service: PostService, ownership_service: OwnershipService
    ) -> None:
        self.post_service = post_service
        self.ownership_service = ownership_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        The group's post count goes down in the same transaction.

        Raises:
            ForbiddenError: If the caller did not write the post
        """
        post = await self.ownership_service.ensure_owns_post(
            UserId(request.uid), PostId(request.post_id)
        )
        await self.post_service.delete_post(post)
        return DeletePostResponse(post_id=str(post.id))
