"""Unlike use case."""

from forum.domain.service import LikeService
from forum.domain.value import UserId

from ..base import BaseUseCase
from .like import LikeRequest, LikeResponse


class UnlikeUseCase(BaseUseCase):
    """Use case for removing a like from a post or comment."""

    def __init__(self, like_service: LikeService) -> None:
        self.like_service = like_service

    async def execute(self, request: LikeRequest) -> LikeResponse:
        """Execute unlike flow.

        Raises:
            NotFoundError: If the target does not exist
        """
        changed = await self.like_service.unlike(
            UserId(request.uid), request.target_type, request.target_id
        )
        return LikeResponse(
            target_type=request.target_type,
            target_id=str(request.target_id),
            is_liked=False,
            changed=changed,
        )
