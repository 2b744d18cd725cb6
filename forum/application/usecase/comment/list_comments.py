"""List root comments use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from forum.config import PaginationSettings
from forum.domain.service import LikeService, PostService, SearchService
from forum.domain.value import LikeTargetType, PageRequest, PostId, PostParent, UserId

from ..base import BaseUseCase
from ..items import CommentItem, PageResponse


class ListCommentsRequest(BaseModel):
    """List root comments request."""

    post_id: UUID
    page: int = Field(default=1, ge=1)
    viewer_id: str | None = None


class ListCommentsUseCase(BaseUseCase):
    """Use case for one page of a post's root comments.

    Fetching the first page counts as opening the thread and bumps the
    post's view count.
    """

    def __init__(
        self,
        post_service: PostService,
        search_service: SearchService,
        like_service: LikeService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize list comments use case.

        Args:
            post_service: Post domain service
            search_service: Search domain service
            like_service: Like domain service
            pagination: Page size settings
        """
        self.post_service = post_service
        self.search_service = search_service
        self.like_service = like_service
        self.pagination = pagination

    async def execute(self, request: ListCommentsRequest) -> PageResponse[CommentItem]:
        """Execute list root comments flow.

        Args:
            request: Post ID and page number

        Returns:
            Root comments, newest first

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "list_comments.execute", post_id=str(request.post_id), page=request.page
        ):
            post = await self.post_service.get_post(PostId(request.post_id))
            if request.page == 1:
                await self.post_service.record_view(post.id)

            page = await self.search_service.list_children(
                PostParent(id=post.id),
                PageRequest(page=request.page, page_size=self.pagination.page_size),
            )

            viewer = UserId(request.viewer_id) if request.viewer_id else None
            liked = await self.like_service.liked_ids(
                viewer, LikeTargetType.COMMENT, [c.id for c in page.rows]
            )
            return PageResponse[CommentItem].from_page(
                page, [CommentItem.from_comment(c, c.id in liked) for c in page.rows]
            )
