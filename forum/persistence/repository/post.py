"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import and_, delete, func, insert, select, update

from forum.domain.model import Post
from forum.domain.repository import PostRepository
from forum.domain.value import GroupId, LikeTargetType, PostId, UserId
from forum.persistence.mappers import post_to_dict, row_to_post
from forum.persistence.repository.base import PostgresRepository, contains_ci, floored
from forum.persistence.tables import comments_table, likes_table, posts_table


class PostgresPostRepository(PostgresRepository, PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def _filtered(
        self,
        stmt,
        query: str | None,
        group_id: Optional[GroupId],
        author_id: Optional[UserId],
    ):
        if query:
            stmt = stmt.where(contains_ci(posts_table.c.title, query))
        if group_id:
            stmt = stmt.where(posts_table.c.group_id == group_id)
        if author_id:
            stmt = stmt.where(posts_table.c.uid == author_id)
        return stmt

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self._execute(stmt)
            row = result.fetchone()
            return row_to_post(row._asdict()) if row else None

    async def search(
        self,
        query: str | None = None,
        group_id: Optional[GroupId] = None,
        author_id: Optional[UserId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts by title, newest first."""
        with logfire.span(
            "post_repository.search",
            query=query,
            group_id=str(group_id) if group_id else None,
            limit=limit,
            offset=offset,
        ):
            stmt = self._filtered(select(posts_table), query, group_id, author_id)
            stmt = (
                stmt.order_by(posts_table.c.created_at.desc(), posts_table.c.id.asc())
                .limit(limit)
                .offset(offset)
            )
            result = await self._execute(stmt)
            posts = [row_to_post(row._asdict()) for row in result.fetchall()]
            logfire.info("Found posts", count=len(posts))
            return posts

    async def count(
        self,
        query: str | None = None,
        group_id: Optional[GroupId] = None,
        author_id: Optional[UserId] = None,
    ) -> int:
        """Count posts matching the search filters."""
        stmt = self._filtered(
            select(func.count()).select_from(posts_table), query, group_id, author_id
        )
        result = await self._execute(stmt)
        return result.scalar() or 0

    async def count_by_group(self, group_id: GroupId) -> int:
        """Count every post in a group."""
        return await self.count(group_id=group_id)

    async def save(self, post: Post) -> Post:
        """Insert a new post or update title and details of an existing one."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            existing = await self.find_by_id(post.id)
            if existing:
                stmt = (
                    update(posts_table)
                    .where(posts_table.c.id == post.id)
                    .values(title=post.title, details=post.details)
                    .returning(posts_table)
                )
                result = await self._execute(stmt)
                row = result.fetchone()
                await self._flush()
                return row_to_post(row._asdict()) if row else post

            result = await self._execute(
                insert(posts_table).values(**post_to_dict(post)).returning(posts_table)
            )
            row = result.fetchone()
            await self._flush()
            return row_to_post(row._asdict()) if row else post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post; its comments go with it through ``ON DELETE CASCADE``."""
        with logfire.span("post_repository.delete", post_id=str(post_id)):
            comment_ids = select(comments_table.c.id).where(
                comments_table.c.post_id == post_id
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
                        likes_table.c.target_id == post_id,
                    )
                )
            )
            await self._execute(delete(posts_table).where(posts_table.c.id == post_id))
            await self._flush()

    async def adjust_replies(self, post_id: PostId, delta: int) -> None:
        """Atomically adjust the root reply count, floored at zero."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(replies=floored(posts_table.c.replies, delta))
        )
        if delta < 0:
            stmt = stmt.where(posts_table.c.replies > 0)
        await self._execute(stmt)
        await self._flush()

    async def adjust_likes(self, post_id: PostId, delta: int) -> None:
        """Atomically adjust the like count, floored at zero."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(likes=floored(posts_table.c.likes, delta))
        )
        if delta < 0:
            stmt = stmt.where(posts_table.c.likes > 0)
        await self._execute(stmt)
        await self._flush()

    async def increment_views(self, post_id: PostId) -> None:
        """Atomically increment views by 1."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(views=posts_table.c.views + 1)
        )
        await self._execute(stmt)
        await self._flush()
