"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from forum.domain.repository.comment import CommentRepository
from forum.domain.repository.group import GroupRepository
from forum.domain.repository.like import LikeRepository
from forum.domain.repository.post import PostRepository

__all__ = [
    "GroupRepository",
    "PostRepository",
    "CommentRepository",
    "LikeRepository",
]
