"""Create post use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from forum.domain.service import PostService
from forum.domain.value import GroupId, UserId

from ..base import BaseUseCase
from ..items import PostItem


class CreatePostRequest(BaseModel):
    """Create post request."""

    uid: str
    group_id: UUID
    title: str = Field(min_length=1, max_length=300)
    details: str = Field(default="", max_length=10000)


class CreatePostUseCase(BaseUseCase):
    """Use case for posting to a group."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostItem:
        """Execute create post flow.

        The group's post count goes up in the same transaction.

        Raises:
            NotFoundError: If the group does not exist
        """
        post = await self.post_service.create_post(
            group_id=GroupId(request.group_id),
            uid=UserId(request.uid),
            title=request.title,
            details=request.details,
        )
        return PostItem.from_post(post)
