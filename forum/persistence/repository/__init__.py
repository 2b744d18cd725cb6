"""PostgreSQL repository implementations."""

from forum.persistence.repository.comment import PostgresCommentRepository
from forum.persistence.repository.group import PostgresGroupRepository
from forum.persistence.repository.like import PostgresLikeRepository
from forum.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresGroupRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresLikeRepository",
]
