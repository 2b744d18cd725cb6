"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.post import Post
from forum.domain.value import GroupId, PostId, UserId


class PostRepository(ABC):
    """Repository for Post entity.

    Listings are newest first with ties broken by ID, so that fixed-size
    pages never overlap. Counters change only through the atomic
    ``adjust_*`` and ``increment_views`` methods.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def search(
        self,
        query: str | None = None,
        group_id: Optional[GroupId] = None,
        author_id: Optional[UserId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts whose title contains ``query``, case-insensitively.

        Results are ordered newest first, ties broken by ID ascending.

        Args:
            query: Substring to match; None or blank matches every post
            group_id: Restrict to posts in this group
            author_id: Restrict to posts by this author
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            Posts matching the criteria
        """
        pass

    @abstractmethod
    async def count(
        self,
        query: str | None = None,
        group_id: Optional[GroupId] = None,
        author_id: Optional[UserId] = None,
    ) -> int:
        """Count posts matching the same filters as ``search``."""
        pass

    @abstractmethod
    async def count_by_group(self, group_id: GroupId) -> int:
        """Count every post in a group (used to rebuild ``post_count``)."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Updates write title and details only; counters change only through
        the ``adjust_*`` methods.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post together with every comment in its thread."""
        pass

    @abstractmethod
    async def adjust_replies(self, post_id: PostId, delta: int) -> None:
        """Atomically add ``delta`` to the root reply count (never below 0)."""
        pass

    @abstractmethod
    async def adjust_likes(self, post_id: PostId, delta: int) -> None:
        """Atomically add ``delta`` to the like count (never below 0)."""
        pass

    @abstractmethod
    async def increment_views(self, post_id: PostId) -> None:
        """Atomically increment the view count by 1."""
        pass
