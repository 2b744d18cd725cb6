"""Shared in-memory store for the in-memory repositories."""

from dataclasses import dataclass, field
from uuid import UUID

from forum.domain.model import Comment, Group, Like, Post
from forum.domain.value import CommentId, GroupId, LikeTargetType, PostId


@dataclass
class InMemoryDatabase:
    """Tables as dicts keyed by ID.

    One instance is shared by all in-memory repositories of a container so
    that cascades and counters see each other's writes, the way the
    PostgreSQL repositories share one database.
    """

    groups: dict[GroupId, Group] = field(default_factory=dict)
    posts: dict[PostId, Post] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    likes: dict[tuple[str, LikeTargetType, UUID], Like] = field(default_factory=dict)

    def drop_likes(self, target_type: LikeTargetType, target_ids: set[UUID]) -> None:
        for key in [k for k in self.likes if k[1] == target_type and k[2] in target_ids]:
            del self.likes[key]

    def drop_post(self, post_id: PostId) -> None:
        """Remove a post with its whole thread and every like on it."""
        thread = {cid for cid, c in self.comments.items() if c.post_id == post_id}
        for comment_id in thread:
            del self.comments[comment_id]
        self.drop_likes(LikeTargetType.COMMENT, set(thread))
        self.drop_likes(LikeTargetType.POST, {post_id})
        self.posts.pop(post_id, None)
