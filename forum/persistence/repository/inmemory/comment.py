"""In-memory comment repository for testing."""

from typing import Optional

from forum.domain.model.comment import Comment
from forum.domain.repository.comment import CommentRepository
from forum.domain.value import CommentId, CommentParent, LikeTargetType, PostParent

from .database import InMemoryDatabase


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self._db = db or InMemoryDatabase()

    def _children(self, parent: PostParent | CommentParent) -> list[Comment]:
        return [c for c in self._db.comments.values() if c.parent == parent]

    def _update(self, comment_id: CommentId, **changes: int) -> None:
        comment = self._db.comments.get(comment_id)
        if comment:
            self._db.comments[comment_id] = comment.model_copy(update=changes)

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._db.comments.get(comment_id)

    async def find_children(
        self,
        parent: PostParent | CommentParent,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Comment]:
        """Find direct replies, newest first, ties by ID."""
        children = self._children(parent)
        children.sort(key=lambda c: c.id)
        children.sort(key=lambda c: c.created_at, reverse=True)
        return children[offset : offset + limit]

    async def count_children(self, parent: PostParent | CommentParent) -> int:
        """Count direct replies."""
        return len(self._children(parent))

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment, or update the text of an existing one."""
        existing = self._db.comments.get(comment.id)
        if existing:
            comment = existing.evolve(comment=comment.comment)
        self._db.comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and every reply beneath it."""
        subtree: set[CommentId] = set()
        frontier = [comment_id]
        while frontier:
            current = frontier.pop()
            if current in subtree or current not in self._db.comments:
                continue
            subtree.add(current)
            frontier.extend(c.id for c in self._children(CommentParent(id=current)))

        for cid in subtree:
            del self._db.comments[cid]
        self._db.drop_likes(LikeTargetType.COMMENT, set(subtree))

    async def adjust_replies(self, comment_id: CommentId, delta: int) -> None:
        """Adjust the direct reply count, floored at zero."""
        comment = self._db.comments.get(comment_id)
        if comment:
            self._update(comment_id, replies=max(comment.replies + delta, 0))

    async def adjust_likes(self, comment_id: CommentId, delta: int) -> None:
        """Adjust the like count, floored at zero."""
        comment = self._db.comments.get(comment_id)
        if comment:
            self._update(comment_id, likes=max(comment.likes + delta, 0))
