"""Get group use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import GroupService
from forum.domain.value import GroupId

from ..base import BaseUseCase
from ..items import GroupItem


class GetGroupRequest(BaseModel):
    """Get group request."""

    group_id: UUID


class GetGroupUseCase(BaseUseCase):
    """Use case for fetching a single group."""

    def __init__(self, group_service: GroupService) -> None:
        self.group_service = group_service

    async def execute(self, request: GetGroupRequest) -> GroupItem:
        """Execute get group flow.

        Raises:
            NotFoundError: If the group does not exist
        """
        group = await self.group_service.get_group(GroupId(request.group_id))
        return GroupItem.from_group(group)
