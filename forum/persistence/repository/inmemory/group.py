"""In-memory group repository for testing."""

from typing import Optional

from forum.domain.model.group import Group
from forum.domain.repository.group import GroupRepository
from forum.domain.value import GroupId, OwnerRef

from .database import InMemoryDatabase


class InMemoryGroupRepository(GroupRepository):
    """In-memory implementation of GroupRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self._db = db or InMemoryDatabase()

    def _matching(self, query: str | None, owner: Optional[OwnerRef]) -> list[Group]:
        groups = list(self._db.groups.values())
        if query:
            needle = query.casefold()
            groups = [g for g in groups if needle in g.group_name.casefold()]
        if owner:
            groups = [g for g in groups if g.owner == owner]
        return groups

    async def find_by_id(self, group_id: GroupId) -> Optional[Group]:
        """Find a group by ID."""
        return self._db.groups.get(group_id)

    async def search(
        self,
        query: str | None = None,
        owner: Optional[OwnerRef] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Group]:
        """Find groups by name, ordered by name then ID."""
        groups = self._matching(query, owner)
        groups.sort(key=lambda g: (g.group_name, g.id))
        return groups[offset : offset + limit]

    async def count(
        self,
        query: str | None = None,
        owner: Optional[OwnerRef] = None,
    ) -> int:
        """Count groups matching the search filters."""
        return len(self._matching(query, owner))

    async def save(self, group: Group) -> Group:
        """Insert a group, or update name and description of an existing one."""
        existing = self._db.groups.get(group.id)
        if existing:
            group = existing.evolve(
                group_name=group.group_name, description=group.description
            )
        self._db.groups[group.id] = group
        return group

    async def delete(self, group_id: GroupId) -> None:
        """Delete a group with its posts and their threads."""
        for post_id in [p.id for p in self._db.posts.values() if p.group_id == group_id]:
            self._db.drop_post(post_id)
        self._db.groups.pop(group_id, None)

    async def adjust_post_count(self, group_id: GroupId, delta: int) -> None:
        """Adjust the post count, floored at zero."""
        group = self._db.groups.get(group_id)
        if group:
            self._db.groups[group_id] = group.model_copy(
                update={"post_count": max(group.post_count + delta, 0)}
            )
