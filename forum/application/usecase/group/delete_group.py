"""Delete group use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import GroupService, OwnershipService
from forum.domain.value import GroupId, UserId

from ..base import BaseUseCase


class DeleteGroupRequest(BaseModel):
    """Delete group request."""

    uid: str
    group_id: UUID


class DeleteGroupResponse(BaseModel):
    """Delete group response."""

    group_id: str
    deleted: bool = True


class DeleteGroupUseCase(BaseUseCase):
    """Use case for deleting a group and everything posted in it (owner only)."""

    def __init__(
        self, group_service: GroupService, ownership_service: OwnershipService
    ) -> None:
        self.group_service = group_service
        self.ownership_service = ownership_service

    async def execute(self, request: DeleteGroupRequest) -> DeleteGroupResponse:
        """Execute delete group flow.

        Raises:
            ForbiddenError: If the caller does not own the group
        """
        group = await self.ownership_service.ensure_owns_group(
            UserId(request.uid), GroupId(request.group_id)
        )
        await self.group_service.delete_group(group)
        return DeleteGroupResponse(group_id=str(group.id))
