"""Domain value objects for the forum."""

from forum.domain.value.identifiers import (
    CommentId,
    GroupId,
    LikeId,
    PostId,
    UserId,
)
from forum.domain.value.paging import Page, PageRequest, coerce_page
from forum.domain.value.timestamp import UtcDateTime, as_utc, utc_now
from forum.domain.value.types import (
    CommentParent,
    LikeTargetType,
    OwnerRef,
    OwnerType,
    ParentRef,
    ParentType,
    PostParent,
    parent_from_columns,
)

__all__ = [
    # Identifiers
    "UserId",
    "GroupId",
    "PostId",
    "CommentId",
    "LikeId",
    # Types
    "ParentType",
    "ParentRef",
    "PostParent",
    "CommentParent",
    "parent_from_columns",
    "OwnerType",
    "OwnerRef",
    "LikeTargetType",
    # Paging
    "Page",
    "PageRequest",
    "coerce_page",
    # Timestamps
    "UtcDateTime",
    "as_utc",
    "utc_now",
]
