"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire
import pytest

from forum.domain.model import Comment, Group, Post
from forum.domain.value import (
    CommentId,
    CommentParent,
    GroupId,
    OwnerRef,
    PostId,
    PostParent,
    UserId,
)

logfire.configure(send_to_logfire=False, console=False)


def make_group(
    owner: str = "alice", group_name: str = "Linear Algebra", **kwargs
) -> Group:
    """Build a group entity for tests."""
    return Group(
        id=GroupId(uuid4()),
        group_name=group_name,
        owner=OwnerRef.user(UserId(owner)),
        **kwargs,
    )


def make_post(group_id: GroupId, uid: str = "alice", title: str = "Exam", **kwargs) -> Post:
    """Build a post entity for tests."""
    return Post(id=PostId(uuid4()), group_id=group_id, title=title, uid=UserId(uid), **kwargs)


def make_root_comment(post_id: PostId, uid: str = "alice", text: str = "hi", **kwargs) -> Comment:
    """Build a root comment entity for tests."""
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        parent=PostParent(id=post_id),
        comment=text,
        uid=UserId(uid),
        **kwargs,
    )


def make_reply(parent: Comment, uid: str = "bob", text: str = "re", **kwargs) -> Comment:
    """Build a nested reply to ``parent`` for tests."""
    return Comment(
        id=CommentId(uuid4()),
        post_id=parent.post_id,
        parent=CommentParent(id=parent.id),
        comment=text,
        uid=UserId(uid),
        **kwargs,
    )


@pytest.fixture
def clock():
    """Strictly increasing timestamps, one minute apart."""
    start = datetime(2024, 1, 1, 12, 0, 0)
    counter = iter(range(10_000))
    return lambda: start + timedelta(minutes=next(counter))
