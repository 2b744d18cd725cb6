"""Domain model entities for the forum."""

from forum.domain.model.comment import Comment
from forum.domain.model.group import Group
from forum.domain.model.like import Like
from forum.domain.model.post import Post

__all__ = [
    "Group",
    "Post",
    "Comment",
    "Like",
]
