"""Unit tests for the tagged comment parent."""

from uuid import uuid4

import pydantic
import pytest

from forum.domain.model import Comment
from forum.domain.value import (
    CommentParent,
    ParentType,
    PostId,
    PostParent,
    UserId,
    parent_from_columns,
)


class TestParentFromColumns:
    """Tests for parent_from_columns."""

    def test_post_tag_builds_post_parent(self):
        post_id = uuid4()

        parent = parent_from_columns(post_id, "ParentPost")

        assert isinstance(parent, PostParent)
        assert parent.id == post_id

    def test_comment_tag_builds_comment_parent(self):
        comment_id = uuid4()

        parent = parent_from_columns(str(comment_id), ParentType.COMMENT.value)

        assert isinstance(parent, CommentParent)
        assert parent.id == comment_id

    def test_unknown_tag_is_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            parent_from_columns(uuid4(), "ParentGroup")

    def test_same_id_different_kind_is_not_equal(self):
        same = uuid4()

        assert PostParent(id=same) != CommentParent(id=same)


class TestCommentParent:
    """Tests for Comment's parent field."""

    def test_comment_parses_tagged_parent_from_dict(self):
        post_id = PostId(uuid4())

        comment = Comment.model_validate(
            {
                "id": uuid4(),
                "post_id": post_id,
                "parent": {"parent_type": "ParentPost", "id": post_id},
                "comment": "hello",
                "uid": UserId("alice"),
            }
        )

        assert comment.is_root
        assert comment.parent == PostParent(id=post_id)
