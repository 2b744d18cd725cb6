"""List groups use case."""

from pydantic import BaseModel, Field

from forum.config import PaginationSettings
from forum.domain.service import SearchService
from forum.domain.value import PageRequest

from ..base import BaseUseCase
from ..items import GroupItem, PageResponse


class ListGroupsRequest(BaseModel):
    """List groups request."""

    q: str | None = None
    page: int = Field(default=1, ge=1)


class ListGroupsUseCase(BaseUseCase):
    """Use case for searching groups by name, a page at a time."""

    def __init__(
        self, search_service: SearchService, pagination: PaginationSettings
    ) -> None:
        """Initialize list groups use case.

        Args:
            search_service: Search domain service
            pagination: Page size settings
        """
        self.search_service = search_service
        self.pagination = pagination

    async def execute(self, request: ListGroupsRequest) -> PageResponse[GroupItem]:
        """Execute list groups flow.

        Args:
            request: Query and page number

        Returns:
            Page of groups ordered by name
        """
        page = await self.search_service.search_groups(
            request.q,
            PageRequest(page=request.page, page_size=self.pagination.page_size),
        )
        return PageResponse[GroupItem].from_page(
            page, [GroupItem.from_group(g) for g in page.rows]
        )
