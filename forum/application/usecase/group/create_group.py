"""Create group use case."""

import logfire
from pydantic import BaseModel, Field

from forum.domain.service import GroupService
from forum.domain.value import UserId

from ..base import BaseUseCase
from ..items import GroupItem


class CreateGroupRequest(BaseModel):
    """Create group request."""

    uid: str  # Authenticated user, becomes the owner
    name: str = Field(min_length=1, max_length=100)
    description: str = Field(default="", max_length=2000)


class CreateGroupUseCase(BaseUseCase):
    """Use case for creating a group."""

    def __init__(self, group_service: GroupService) -> None:
        """Initialize create group use case.

        Args:
            group_service: Group domain service
        """
        self.group_service = group_service

    async def execute(self, request: CreateGroupRequest) -> GroupItem:
        """Execute create group flow.

        Args:
            request: Group name and description with the owner's ID

        Returns:
            Created group
        """
        with logfire.span("create_group.execute", uid=request.uid):
            group = await self.group_service.create_group(
                owner_id=UserId(request.uid),
                group_name=request.name,
                description=request.description,
            )
            return GroupItem.from_group(group)
