"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .database import InMemoryDatabase
from .group import InMemoryGroupRepository
from .like import InMemoryLikeRepository
from .post import InMemoryPostRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryDatabase",
    "InMemoryGroupRepository",
    "InMemoryLikeRepository",
    "InMemoryPostRepository",
]
