"""List my groups use case."""

from pydantic import BaseModel, Field

from forum.config import PaginationSettings
from forum.domain.service import SearchService
from forum.domain.value import OwnerRef, PageRequest, UserId

from ..base import BaseUseCase
from ..items import GroupItem


class ListMyGroupsRequest(BaseModel):
    """List my groups request."""

    uid: str
    q: str | None = None
    page: int = Field(default=1, ge=1)


class ListMyGroupsUseCase(BaseUseCase):
    """Use case for listing the groups the caller owns.

    Returns a bare list; clients page until an empty list comes back.
    """

    def __init__(
        self, search_service: SearchService, pagination: PaginationSettings
    ) -> None:
        self.search_service = search_service
        self.pagination = pagination

    async def execute(self, request: ListMyGroupsRequest) -> list[GroupItem]:
        page = await self.search_service.search_groups(
            request.q,
            PageRequest(page=request.page, page_size=self.pagination.page_size),
            owner=OwnerRef.user(UserId(request.uid)),
        )
        return [GroupItem.from_group(g) for g in page.rows]
