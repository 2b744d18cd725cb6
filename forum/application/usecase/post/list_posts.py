"""List posts use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from forum.config import PaginationSettings
from forum.domain.service import GroupService, LikeService, SearchService
from forum.domain.value import GroupId, LikeTargetType, PageRequest, UserId

from ..base import BaseUseCase
from ..items import PageResponse, PostItem


class ListPostsRequest(BaseModel):
    """List posts request.

    Without ``group_id`` every post is searched.
    """

    q: str | None = None
    page: int = Field(default=1, ge=1)
    group_id: UUID | None = None
    viewer_id: str | None = None  # Authenticated caller, fills is_liked


class ListPostsResponse(PageResponse[PostItem]):
    """Page of posts; ``group_name`` is set when listing one group."""

    group_name: str | None = None


class ListPostsUseCase(BaseUseCase):
    """Use case for searching posts by title, newest first."""

    def __init__(
        self,
        search_service: SearchService,
        group_service: GroupService,
        like_service: LikeService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize list posts use case.

        Args:
            search_service: Search domain service
            group_service: Group domain service
            like_service: Like domain service
            pagination: Page size settings
        """
        self.search_service = search_service
        self.group_service = group_service
        self.like_service = like_service
        self.pagination = pagination

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: Query, page and optional group scope

        Returns:
            Page of posts

        Raises:
            NotFoundError: If ``group_id`` names a group that does not exist
        """
        with logfire.span(
            "list_posts.execute",
            q=request.q,
            page=request.page,
            group_id=str(request.group_id) if request.group_id else None,
        ):
            group_name = None
            group_id = None
            if request.group_id:
                group = await self.group_service.get_group(GroupId(request.group_id))
                group_name = group.group_name
                group_id = group.id

            page = await self.search_service.search_posts(
                request.q,
                PageRequest(page=request.page, page_size=self.pagination.page_size),
                group_id=group_id,
            )

            viewer = UserId(request.viewer_id) if request.viewer_id else None
            liked = await self.like_service.liked_ids(
                viewer, LikeTargetType.POST, [p.id for p in page.rows]
            )

            return ListPostsResponse(
                current_page=page.current_page,
                total_count=page.total_count,
                total_pages=page.total_pages,
                rows=[PostItem.from_post(p, p.id in liked) for p in page.rows],
                group_name=group_name,
            )
