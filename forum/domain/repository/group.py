"""Group repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.group import Group
from forum.domain.value import GroupId, OwnerRef


class GroupRepository(ABC):
    """Repository for Group entity.

    Defines the contract for group persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, group_id: GroupId) -> Optional[Group]:
        """Find a group by ID.

        Args:
            group_id: The group's unique identifier

        Returns:
            The group if found, None otherwise
        """
        pass

    @abstractmethod
    async def search(
        self,
        query: str | None = None,
        owner: Optional[OwnerRef] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Group]:
        """Find groups whose name contains ``query``, case-insensitively.

        Results are ordered by group name ascending, then by ID, so that
        pages never overlap or skip rows.

        Args:
            query: Substring to match; None or blank matches every group
            owner: Restrict to groups owned by this owner
            limit: Maximum number of groups to return
            offset: Number of groups to skip

        Returns:
            Groups matching the criteria
        """
        pass

    @abstractmethod
    async def count(
        self,
        query: str | None = None,
        owner: Optional[OwnerRef] = None,
    ) -> int:
        """Count groups matching the same filters as ``search``."""
        pass

    @abstractmethod
    async def save(self, group: Group) -> Group:
        """Save a group (create or update).

        Counters are never written by ``save`` on update; they change only
        through ``adjust_post_count``.

        Args:
            group: The group to save

        Returns:
            The saved group
        """
        pass

    @abstractmethod
    async def delete(self, group_id: GroupId) -> None:
        """Delete a group together with its posts and their threads."""
        pass

    @abstractmethod
    async def adjust_post_count(self, group_id: GroupId, delta: int) -> None:
        """Atomically add ``delta`` to the post count (never below 0).

        Uses a single storage-level update to avoid lost updates.

        Args:
            group_id: The group ID
            delta: +1 or -1
        """
        pass
