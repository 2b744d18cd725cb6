"""Response items shared by the use cases."""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel

from forum.domain.model import Comment, Group, Post
from forum.domain.value import OwnerType, Page, ParentType

T = TypeVar("T")


class GroupItem(BaseModel):
    """Group in responses."""

    group_id: str
    group_name: str
    description: str
    post_count: int
    owner_id: str
    owner_type: OwnerType
    created_at: datetime

    @classmethod
    def from_group(cls, group: Group) -> "GroupItem":
        return cls(
            group_id=str(group.id),
            group_name=group.group_name,
            description=group.description,
            post_count=group.post_count,
            owner_id=group.owner.owner_id,
            owner_type=group.owner.owner_type,
            created_at=group.created_at,
        )


class PostItem(BaseModel):
    """Post in responses."""

    post_id: str
    group_id: str
    title: str
    details: str
    uid: str
    likes: int
    replies: int
    views: int
    created_at: datetime
    is_liked: bool = False

    @classmethod
    def from_post(cls, post: Post, is_liked: bool = False) -> "PostItem":
        return cls(
            post_id=str(post.id),
            group_id=str(post.group_id),
            title=post.title,
            details=post.details,
            uid=post.uid,
            likes=post.likes,
            replies=post.replies,
            views=post.views,
            created_at=post.created_at,
            is_liked=is_liked,
        )


class CommentItem(BaseModel):
    """Comment in responses.

    The tagged parent is flattened to ``parent_id`` and ``parent_type`` on
    the wire, matching the storage columns.
    """

    comment_id: str
    post_id: str
    parent_id: str
    parent_type: ParentType
    comment: str
    uid: str
    replies: int
    likes: int
    created_at: datetime
    is_liked: bool = False

    @classmethod
    def from_comment(cls, comment: Comment, is_liked: bool = False) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            parent_id=str(comment.parent.id),
            parent_type=comment.parent.parent_type,
            comment=comment.comment,
            uid=comment.uid,
            replies=comment.replies,
            likes=comment.likes,
            created_at=comment.created_at,
            is_liked=is_liked,
        )


class PageResponse(BaseModel, Generic[T]):
    """One page of a listing."""

    current_page: int
    total_count: int
    total_pages: int
    rows: list[T]

    @classmethod
    def from_page(cls, page: Page, rows: list[T]) -> "PageResponse[T]":
        """Carry a domain page's totals over to converted rows."""
        return cls(
            current_page=page.current_page,
            total_count=page.total_count,
            total_pages=page.total_pages,
            rows=rows,
        )
