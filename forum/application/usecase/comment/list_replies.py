"""List replies use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from forum.config import PaginationSettings
from forum.domain.service import CommentService, LikeService, SearchService
from forum.domain.value import (
    CommentId,
    CommentParent,
    LikeTargetType,
    PageRequest,
    UserId,
)

from ..base import BaseUseCase
from ..items import CommentItem, PageResponse


class ListRepliesRequest(BaseModel):
    """List replies request."""

    comment_id: UUID
    page: int = Field(default=1, ge=1)
    viewer_id: str | None = None


class ListRepliesUseCase(BaseUseCase):
    """Use case for expanding one level of a comment's replies."""

    def __init__(
        self,
        comment_service: CommentService,
        search_service: SearchService,
        like_service: LikeService,
        pagination: PaginationSettings,
    ) -> None:
        self.comment_service = comment_service
        self.search_service = search_service
        self.like_service = like_service
        self.pagination = pagination

    async def execute(self, request: ListRepliesRequest) -> PageResponse[CommentItem]:
        """Execute list replies flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.comment_service.get_comment(CommentId(request.comment_id))
        page = await self.search_service.list_children(
            CommentParent(id=comment.id),
            PageRequest(
                page=request.page, page_size=self.pagination.children_page_size
            ),
        )

        viewer = UserId(request.viewer_id) if request.viewer_id else None
        liked = await self.like_service.liked_ids(
            viewer, LikeTargetType.COMMENT, [c.id for c in page.rows]
        )
        return PageResponse[CommentItem].from_page(
            page, [CommentItem.from_comment(c, c.id in liked) for c in page.rows]
        )
