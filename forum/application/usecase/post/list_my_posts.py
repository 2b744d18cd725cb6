"""List my posts use case."""

from pydantic import BaseModel, Field

from forum.config import PaginationSettings
from forum.domain.service import LikeService, SearchService
from forum.domain.value import LikeTargetType, PageRequest, UserId

from ..base import BaseUseCase
from ..items import PostItem


class ListMyPostsRequest(BaseModel):
    """List my posts request."""

    uid: str
    q: str | None = None
    page: int = Field(default=1, ge=1)


class ListMyPostsUseCase(BaseUseCase):
    """Use case for listing the caller's own posts as a bare list."""

    def __init__(
        self,
        search_service: SearchService,
        like_service: LikeService,
        pagination: PaginationSettings,
    ) -> None:
        self.search_service = search_service
        self.like_service = like_service
        self.pagination = pagination

    async def execute(self, request: ListMyPostsRequest) -> list[PostItem]:
        uid = UserId(request.uid)
        page = await self.search_service.search_posts(
            request.q,
            PageRequest(page=request.page, page_size=self.pagination.page_size),
            author_id=uid,
        )
        liked = await self.like_service.liked_ids(
            uid, LikeTargetType.POST, [p.id for p in page.rows]
        )
        return [PostItem.from_post(p, p.id in liked) for p in page.rows]
