"""PostgreSQL implementation of Group repository."""

from typing import List, Optional

import logfire
from sqlalchemy import and_, delete, func, insert, select, update

from forum.domain.model import Group
from forum.domain.repository import GroupRepository
from forum.domain.value import GroupId, LikeTargetType, OwnerRef
from forum.persistence.mappers import group_to_dict, row_to_group
from forum.persistence.repository.base import PostgresRepository, contains_ci, floored
from forum.persistence.tables import (
    comments_table,
    groups_table,
    likes_table,
    posts_table,
)


class PostgresGroupRepository(PostgresRepository, GroupRepository):
    """PostgreSQL implementation of GroupRepository."""

    def _filtered(self, stmt, query: str | None, owner: Optional[OwnerRef]):
        if query:
            stmt = stmt.where(contains_ci(groups_table.c.group_name, query))
        if owner:
            stmt = stmt.where(
                groups_table.c.owner_id == owner.owner_id,
                groups_table.c.owner_type == owner.owner_type.value,
            )
        return stmt

    async def find_by_id(self, group_id: GroupId) -> Optional[Group]:
        """Find a group by ID."""
        stmt = select(groups_table).where(groups_table.c.id == group_id)
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_group(row._asdict()) if row else None

    async def search(
        self,
        query: str | None = None,
        owner: Optional[OwnerRef] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Group]:
        """Find groups by name, ordered by name then ID."""
        with logfire.span(
            "group_repository.search", query=query, limit=limit, offset=offset
        ):
            stmt = self._filtered(select(groups_table), query, owner)
            stmt = (
                stmt.order_by(groups_table.c.group_name.asc(), groups_table.c.id.asc())
                .limit(limit)
                .offset(offset)
            )
            result = await self._execute(stmt)
            return [row_to_group(row._asdict()) for row in result.fetchall()]

    async def count(
        self,
        query: str | None = None,
        owner: Optional[OwnerRef] = None,
    ) -> int:
        """Count groups matching the search filters."""
        stmt = self._filtered(
            select(func.count()).select_from(groups_table), query, owner
        )
        result = await self._execute(stmt)
        return result.scalar() or 0

    async def save(self, group: Group) -> Group:
        """Insert a new group or update name and description of an existing one."""
        with logfire.span("group_repository.save", group_id=str(group.id)):
            existing = await self.find_by_id(group.id)
            if existing:
                stmt = (
                    update(groups_table)
                    .where(groups_table.c.id == group.id)
                    .values(group_name=group.group_name, description=group.description)
                    .returning(groups_table)
                )
                result = await self._execute(stmt)
                row = result.fetchone()
                await self._flush()
                return row_to_group(row._asdict()) if row else group

            result = await self._execute(
                insert(groups_table)
                .values(**group_to_dict(group))
                .returning(groups_table)
            )
            row = result.fetchone()
            await self._flush()
            return row_to_group(row._asdict()) if row else group

    async def delete(self, group_id: GroupId) -> None:
        """Delete a group.

        Posts and comments go with it through ``ON DELETE CASCADE``; likes
        reference their targets polymorphically and are removed here.
        """
        with logfire.span("group_repository.delete", group_id=str(group_id)):
            post_ids = select(posts_table.c.id).where(posts_table.c.group_id == group_id)
            comment_ids = select(comments_table.c.id).where(
                comments_table.c.post_id.in_(post_ids)
            )
            await self._execute(
                delete(likes_table).where(
                    and_(
                        likes_table.c.target_type == LikeTargetType.COMMENT.value,
                        likes_table.c.target_id.in_(comment_ids),
                    )
                )
            )
            await self._execute(
                delete(likes_table).where(
                    and_(
                        likes_table.c.target_type == LikeTargetType.POST.value,
                        likes_table.c.target_id.in_(post_ids),
                    )
                )
            )
            await self._execute(delete(groups_table).where(groups_table.c.id == group_id))
            await self._flush()

    async def adjust_post_count(self, group_id: GroupId, delta: int) -> None:
        """Atomically adjust the post count, floored at zero."""
        stmt = (
            update(groups_table)
            .where(groups_table.c.id == group_id)
            .values(post_count=floored(groups_table.c.post_count, delta))
        )
        if delta < 0:
            stmt = stmt.where(groups_table.c.post_count > 0)
        await self._execute(stmt)
        await self._flush()
