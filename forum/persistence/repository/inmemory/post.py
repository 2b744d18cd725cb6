"""In-memory post repository for testing."""

from typing import Optional

from forum.domain.model.post import Post
from forum.domain.repository.post import PostRepository
from forum.domain.value import GroupId, PostId, UserId

from .database import InMemoryDatabase


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self._db = db or InMemoryDatabase()

    def _matching(
        self,
        query: str | None,
        group_id: Optional[GroupId],
        author_id: Optional[UserId],
    ) -> list[Post]:
        posts = list(self._db.posts.values())
        if query:
            needle = query.casefold()
            posts = [p for p in posts if needle in p.title.casefold()]
        if group_id:
            posts = [p for p in posts if p.group_id == group_id]
        if author_id:
            posts = [p for p in posts if p.uid == author_id]
        return posts

    def _update(self, post_id: PostId, **changes: int) -> None:
        post = self._db.posts.get(post_id)
        if post:
            self._db.posts[post_id] = post.model_copy(update=changes)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._db.posts.get(post_id)

    async def search(
        self,
        query: str | None = None,
        group_id: Optional[GroupId] = None,
        author_id: Optional[UserId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts by title, newest first, ties by ID."""
        posts = self._matching(query, group_id, author_id)
        posts.sort(key=lambda p: p.id)
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts[offset : offset + limit]

    async def count(
        self,
        query: str | None = None,
        group_id: Optional[GroupId] = None,
        author_id: Optional[UserId] = None,
    ) -> int:
        """Count posts matching the search filters."""
        return len(self._matching(query, group_id, author_id))

    async def count_by_group(self, group_id: GroupId) -> int:
        """Count every post in a group."""
        return sum(1 for p in self._db.posts.values() if p.group_id == group_id)

    async def save(self, post: Post) -> Post:
        """Insert a post, or update title and details of an existing one."""
        existing = self._db.posts.get(post.id)
        if existing:
            post = existing.evolve(title=post.title, details=post.details)
        self._db.posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post with its thread."""
        self._db.drop_post(post_id)

    async def adjust_replies(self, post_id: PostId, delta: int) -> None:
        """Adjust the root reply count, floored at zero."""
        post = self._db.posts.get(post_id)
        if post:
            self._update(post_id, replies=max(post.replies + delta, 0))

    async def adjust_likes(self, post_id: PostId, delta: int) -> None:
        """Adjust the like count, floored at zero."""
        post = self._db.posts.get(post_id)
        if post:
            self._update(post_id, likes=max(post.likes + delta, 0))

    async def increment_views(self, post_id: PostId) -> None:
        """Increment views by 1."""
        post = self._db.posts.get(post_id)
        if post:
            self._update(post_id, views=post.views + 1)
