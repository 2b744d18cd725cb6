"""Like use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import LikeService
from forum.domain.value import LikeTargetType, UserId

from ..base import BaseUseCase


class LikeRequest(BaseModel):
    """Like or unlike request."""

    uid: str
    target_type: LikeTargetType
    target_id: UUID


class LikeResponse(BaseModel):
    """Like or unlike response.

    ``changed`` is False when the call was a no-op (liking twice, or
    unliking something never liked).
    """

    target_type: LikeTargetType
    target_id: str
    is_liked: bool
    changed: bool


class LikeUseCase(BaseUseCase):
    """Use case for liking a post or comment."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize like use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: LikeRequest) -> LikeResponse:
        """Execute like flow.

        Raises:
            NotFoundError: If the target does not exist
        """
        changed = await self.like_service.like(
            UserId(request.uid), request.target_type, request.target_id
        )
        return LikeResponse(
            target_type=request.target_type,
            target_id=str(request.target_id),
            is_liked=True,
            changed=changed,
        )
