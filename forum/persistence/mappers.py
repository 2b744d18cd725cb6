"""Mappers for converting between database rows and domain models.

Domain models are frozen pydantic models, so rows are mapped by hand rather
than through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from forum.domain.model import Comment, Group, Like, Post
from forum.domain.value import (
    CommentId,
    GroupId,
    LikeId,
    LikeTargetType,
    OwnerRef,
    OwnerType,
    PostId,
    UserId,
    parent_from_columns,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_group(row: Dict[str, Any]) -> Group:
    """Convert database row to Group domain model."""
    return Group(
        id=GroupId(_uuid(row["id"])),
        group_name=row["group_name"],
        description=row["description"] or "",
        post_count=row["post_count"],
        owner=OwnerRef(
            owner_id=UserId(row["owner_id"]),
            owner_type=OwnerType(row["owner_type"]),
        ),
        created_at=row["created_at"],
    )


def group_to_dict(group: Group) -> Dict[str, Any]:
    """Convert Group domain model to database dict."""
    return {
        "id": group.id,
        "group_name": group.group_name,
        "description": group.description,
        "post_count": group.post_count,
        "owner_id": group.owner.owner_id,
        "owner_type": group.owner.owner_type.value,
        "created_at": group.created_at,
    }


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(_uuid(row["id"])),
        group_id=GroupId(_uuid(row["group_id"])),
        title=row["title"],
        details=row["details"] or "",
        uid=UserId(row["uid"]),
        likes=row["likes"],
        replies=row["replies"],
        views=row["views"],
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    The two parent columns are folded back into the tagged parent.
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        parent=parent_from_columns(_uuid(row["parent_id"]), row["parent_type"]),
        comment=row["comment"],
        uid=UserId(row["uid"]),
        replies=row["replies"],
        likes=row["likes"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    The tagged parent is split into ``parent_id`` and ``parent_type``.
    """
    return {
        "id": comment.id,
        "post_id": comment.post_id,
        "parent_id": comment.parent.id,
        "parent_type": comment.parent.parent_type.value,
        "comment": comment.comment,
        "uid": comment.uid,
        "replies": comment.replies,
        "likes": comment.likes,
        "created_at": comment.created_at,
    }


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model."""
    return Like(
        id=LikeId(_uuid(row["id"])),
        uid=UserId(row["uid"]),
        target_type=LikeTargetType(row["target_type"]),
        target_id=_uuid(row["target_id"]),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to database dict."""
    return {
        "id": like.id,
        "uid": like.uid,
        "target_type": like.target_type.value,
        "target_id": like.target_id,
        "created_at": like.created_at,
    }
