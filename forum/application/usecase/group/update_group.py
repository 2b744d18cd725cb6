"""Update group use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from forum.domain.service import GroupService, OwnershipService
from forum.domain.value import GroupId, UserId

from ..base import BaseUseCase
from ..items import GroupItem


class UpdateGroupRequest(BaseModel):
    """Update group request."""

    uid: str
    group_id: UUID
    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=2000)


class UpdateGroupUseCase(BaseUseCase):
    """Use case for renaming or re-describing a group (owner only)."""

    def __init__(
        self, group_service: GroupService, ownership_service: OwnershipService
    ) -> None:
        """Initialize update group use case.

        Args:
            group_service: Group domain service
            ownership_service: Ownership authorization gate
        """
        self.group_service = group_service
        self.ownership_service = ownership_service

    async def execute(self, request: UpdateGroupRequest) -> GroupItem:
        """Execute update group flow.

        Raises:
            ForbiddenError: If the caller does not own the group
        """
        group = await self.ownership_service.ensure_owns_group(
            UserId(request.uid), GroupId(request.group_id)
        )
        updated = await self.group_service.update_group(
            group, group_name=request.name, description=request.description
        )
        return GroupItem.from_group(updated)
