"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .counter_service import CounterService
from .group_service import GroupService
from .identity_service import IdentityService, TokenVerifier
from .like_service import LikeService
from .ownership_service import OwnershipService
from .post_service import PostService
from .search_service import SearchKind, SearchService, normalize_query

__all__ = [
    "CommentService",
    "CounterService",
    "GroupService",
    "IdentityService",
    "LikeService",
    "OwnershipService",
    "PostService",
    "SearchKind",
    "SearchService",
    "Service",
    "TokenVerifier",
    "normalize_query",
]
