"""Update post use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from forum.domain.service import OwnershipService, PostService
from forum.domain.value import PostId, UserId

from ..base import BaseUseCase
from ..items import PostItem


class UpdatePostRequest(BaseModel):
    """Update post request."""

    uid: str
    post_id: UUID
    title: str | None = Field(default=None, min_length=1, max_length=300)
    details: str | None = Field(default=None, max_length=10000)


class UpdatePostUseCase(BaseUseCase):
    """Use case for editing a post (author only)."""

    def __init__(
        self, post_service: PostService, ownership_service: OwnershipService
    ) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            ownership_service: Ownership authorization gate
        """
        self.post_service = post_service
        self.ownership_service = ownership_service

    async def execute(self, request: UpdatePostRequest) -> PostItem:
        """Execute update post flow.

        Raises:
            ForbiddenError: If the caller did not write the post
        """
        post = await self.ownership_service.ensure_owns_post(
            UserId(request.uid), PostId(request.post_id)
        )
        updated = await self.post_service.update_post(
            post, title=request.title, details=request.details
        )
        return PostItem.from_post(updated)
