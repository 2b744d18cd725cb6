"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

import logfire
from sqlalchemy import and_, delete, func, insert, select, update

from forum.domain.model import Comment
from forum.domain.repository import CommentRepository
from forum.domain.value import (
    CommentId,
    CommentParent,
    LikeTargetType,
    ParentType,
    PostParent,
)
from forum.persistence.mappers import comment_to_dict, row_to_comment
from forum.persistence.repository.base import PostgresRepository, floored
from forum.persistence.tables import comments_table, likes_table


def _subtree_ids(comment_id: CommentId):
    """Select the IDs of a comment and every reply beneath it.

    Walks ``parent_id`` downwards with a recursive CTE.
    """
    subtree = (
        select(comments_table.c.id)
        .where(comments_table.c.id == comment_id)
        .cte("subtree", recursive=True)
    )
    subtree = subtree.union_all(
        select(comments_table.c.id).join(
            subtree,
            and_(
                comments_table.c.parent_type == ParentType.COMMENT.value,
                comments_table.c.parent_id == subtree.c.id,
            ),
        )
    )
    return select(subtree.c.id)


class PostgresCommentRepository(PostgresRepository, CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def _children_of(self, stmt, parent: PostParent | CommentParent):
        return stmt.where(
            comments_table.c.parent_type == parent.parent_type.value,
            comments_table.c.parent_id == parent.id,
        )

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_children(
        self,
        parent: PostParent | CommentParent,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find direct replies to a post or comment, newest first."""
        with logfire.span(
            "comment_repository.find_children",
            parent_type=parent.parent_type.value,
            parent_id=str(parent.id),
            limit=limit,
            offset=offset,
        ):
            stmt = self._children_of(select(comments_table), parent)
            stmt = (
                stmt.order_by(
                    comments_table.c.created_at.desc(), comments_table.c.id.asc()
                )
                .limit(limit)
                .offset(offset)
            )
            result = await self._execute(stmt)
            comments = [row_to_comment(row._asdict()) for row in result.fetchall()]
            logfire.info("Found replies", count=len(comments))
            return comments

    async def count_children(self, parent: PostParent | CommentParent) -> int:
        """Count direct replies to a post or comment."""
        stmt = self._children_of(
            select(func.count()).select_from(comments_table), parent
        )
        result = await self._execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment or update the text of an existing one."""
        with logfire.span("comment_repository.save", comment_id=str(comment.id)):
            existing = await self.find_by_id(comment.id)
            if existing:
                stmt = (
                    update(comments_table)
                    .where(comments_table.c.id == comment.id)
                    .values(comment=comment.comment)
                    .returning(comments_table)
                )
                result = await self._execute(stmt)
                row = result.fetchone()
                await self._flush()
                return row_to_comment(row._asdict()) if row else comment

            result = await self._execute(
                insert(comments_table)
                .values(**comment_to_dict(comment))
                .returning(comments_table)
            )
            row = result.fetchone()
            await self._flush()
            return row_to_comment(row._asdict()) if row else comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment, its whole reply subtree and likes on any of them."""
        with logfire.span("comment_repository.delete", comment_id=str(comment_id)):
            await self._execute(
                delete(likes_table).where(
                    and_(
                        likes_table.c.target_type == LikeTargetType.COMMENT.value,
                        likes_table.c.target_id.in_(_subtree_ids(comment_id)),
                    )
                )
            )
            result = await self._execute(
                delete(comments_table).where(
                    comments_table.c.id.in_(_subtree_ids(comment_id))
                )
            )
            await self._flush()
            logfire.info(
                "Comment subtree deleted",
                comment_id=str(comment_id),
                deleted=result.rowcount,  # type: ignore[attr-defined]
            )

    async def adjust_replies(self, comment_id: CommentId, delta: int) -> None:
        """Atomically adjust the direct reply count, floored at zero."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(replies=floored(comments_table.c.replies, delta))
        )
        if delta < 0:
            stmt = stmt.where(comments_table.c.replies > 0)
        await self._execute(stmt)
        await self._flush()

    async def adjust_likes(self, comment_id: CommentId, delta: int) -> None:
        """Atomically adjust the like count, floored at zero."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(likes=floored(comments_table.c.likes, delta))
        )
        if delta < 0:
            stmt = stmt.where(comments_table.c.likes > 0)
        await self._execute(stmt)
        await self._flush()
