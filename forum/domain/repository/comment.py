"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.comment import Comment
from forum.domain.value import CommentId, CommentParent, PostParent


class CommentRepository(ABC):
    """Repository for Comment entity.

    Reads are deliberately one level deep: callers fetch the direct
    children of a parent, a page at a time, and never a whole subtree.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_children(
        self,
        parent: PostParent | CommentParent,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find direct children of a post or comment.

        Ordered newest first, ties broken by ID ascending.

        Args:
            parent: The post or comment whose replies to fetch
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            One page of direct replies
        """
        pass

    @abstractmethod
    async def count_children(self, parent: PostParent | CommentParent) -> int:
        """Count direct children of a post or comment."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Updates write the text only; counters change only through the
        ``adjust_*`` methods.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and every reply beneath it."""
        pass

    @abstractmethod
    async def adjust_replies(self, comment_id: CommentId, delta: int) -> None:
        """Atomically add ``delta`` to the child count (never below 0)."""
        pass

    @abstractmethod
    async def adjust_likes(self, comment_id: CommentId, delta: int) -> None:
        """Atomically add ``delta`` to the like count (never below 0)."""
        pass
