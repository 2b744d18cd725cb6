"""Group domain service."""

from uuid import uuid4

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model import Group
from forum.domain.repository import GroupRepository
from forum.domain.value import GroupId, OwnerRef, UserId, utc_now

from .base import Service


class GroupService(Service):
    """Domain service for group operations."""

    def __init__(self, group_repository: GroupRepository) -> None:
        """Initialize group service.

        Args:
            group_repository: Group repository
        """
        self.group_repository = group_repository

    async def create_group(
        self, owner_id: UserId, group_name: str, description: str = ""
    ) -> Group:
        """Create a group owned by ``owner_id``.

        Args:
            owner_id: User who becomes the owner
            group_name: Group name
            description: Group description

        Returns:
            Created group
        """
        with logfire.span(
            "group_service.create_group", owner_id=owner_id, group_name=group_name
        ):
            group = Group(
                id=GroupId(uuid4()),
                group_name=group_name,
                description=description,
                post_count=0,
                owner=OwnerRef.user(owner_id),
                created_at=utc_now(),
            )
            saved = await self.group_repository.save(group)
            logfire.info("Group created", group_id=str(saved.id), owner_id=owner_id)
            return saved

    async def get_group(self, group_id: GroupId) -> Group:
        """Get a group by ID.

        Raises:
            NotFoundError: If the group does not exist
        """
        with logfire.span("group_service.get_group", group_id=str(group_id)):
            group = await self.group_repository.find_by_id(group_id)
            if not group:
                logfire.warn("Group not found", group_id=str(group_id))
                raise NotFoundError("Group", str(group_id))
            return group

    async def update_group(
        self,
        group: Group,
        group_name: str | None = None,
        description: str | None = None,
    ) -> Group:
        """Update a group's name and/or description.

        Args:
            group: The group, already checked for ownership
            group_name: New name (unchanged if None)
            description: New description (unchanged if None)

        Returns:
            Updated group
        """
        with logfire.span("group_service.update_group", group_id=str(group.id)):
            changes: dict[str, str] = {}
            if group_name is not None:
                changes["group_name"] = group_name
            if description is not None:
                changes["description"] = description
            if not changes:
                return group

            updated = await self.group_repository.save(group.evolve(**changes))
            logfire.info(
                "Group updated", group_id=str(group.id), fields=sorted(changes)
            )
            return updated

    async def delete_group(self, group: Group) -> None:
        """Delete a group with all of its posts and their threads."""
        with logfire.span("group_service.delete_group", group_id=str(group.id)):
            await self.group_repository.delete(group.id)
            logfire.info(
                "Group deleted", group_id=str(group.id), post_count=group.post_count
            )
