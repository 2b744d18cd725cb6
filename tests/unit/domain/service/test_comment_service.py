"""Unit tests for CommentService."""

import asyncio
from uuid import uuid4

import pytest

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.repository import CommentRepository
from forum.domain.service import CommentService, GroupService, PostService
from forum.domain.value import CommentId, CommentParent, PostId, PostParent, UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def _make_post(unit_env):
    group_service = await unit_env.get(GroupService)
    post_service = await unit_env.get(PostService)
    group = await group_service.create_group(UserId("alice"), "Algebra")
    return await post_service.create_post(group.id, UserId("bob"), "Exam")


class TestCreateReply:
    """Tests for create_reply method."""

    @pytest.mark.asyncio
    async def test_reply_to_post_is_root_comment(self, unit_env):
        """Replying to a post should create a root comment and count it."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_service = await unit_env.get(PostService)
        post = await _make_post(unit_env)

        # Act
        comment = await comment_service.create_reply(
            PostParent(id=post.id), UserId("carol"), "First!"
        )

        # Assert
        assert comment.is_root
        assert comment.parent == PostParent(id=post.id)
        assert comment.post_id == post.id
        assert comment.replies == 0
        assert (await post_service.get_post(post.id)).replies == 1

    @pytest.mark.asyncio
    async def test_reply_to_comment_counts_against_parent_comment(self, unit_env):
        """Nested replies should bump the parent comment, not the post."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_service = await unit_env.get(PostService)
        post = await _make_post(unit_env)
        root = await comment_service.create_reply(
            PostParent(id=post.id), UserId("carol"), "Root"
        )

        # Act
        nested = await comment_service.create_reply(
            CommentParent(id=root.id), UserId("dave"), "Nested"
        )

        # Assert
        assert not nested.is_root
        assert nested.parent == CommentParent(id=root.id)
        assert nested.post_id == post.id
        assert (await comment_service.get_comment(root.id)).replies == 1
        assert (await post_service.get_post(post.id)).replies == 1

    @pytest.mark.asyncio
    async def test_deep_reply_inherits_thread_post(self, unit_env):
        """A reply several levels down should still point at the thread's post."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await _make_post(unit_env)
        parent = await comment_service.create_reply(
            PostParent(id=post.id), UserId("carol"), "Level 0"
        )

        # Act
        for level in range(1, 6):
            parent = await comment_service.create_reply(
                CommentParent(id=parent.id), UserId("carol"), f"Level {level}"
            )

        # Assert
        assert parent.post_id == post.id

    @pytest.mark.asyncio
    async def test_reply_to_missing_post_raises_not_found(self, unit_env):
        """Unknown post parent should raise NotFoundError."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.create_reply(
                PostParent(id=PostId(uuid4())), UserId("carol"), "Hello?"
            )

    @pytest.mark.asyncio
    async def test_reply_to_missing_comment_raises_not_found(self, unit_env):
        """Unknown comment parent should raise NotFoundError."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.create_reply(
                CommentParent(id=CommentId(uuid4())), UserId("carol"), "Hello?"
            )

    @pytest.mark.asyncio
    async def test_blank_reply_raises_validation_error(self, unit_env):
        """Whitespace-only text should be rejected before anything is stored."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_service = await unit_env.get(PostService)
        post = await _make_post(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError):
            await comment_service.create_reply(
                PostParent(id=post.id), UserId("carol"), "  \n "
            )
        assert (await post_service.get_post(post.id)).replies == 0

    @pytest.mark.asyncio
    async def test_concurrent_replies_are_all_counted(self, unit_env):
        """Replies created concurrently should each be counted exactly once."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_service = await unit_env.get(PostService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await _make_post(unit_env)
        parent = PostParent(id=post.id)

        # Act
        await asyncio.gather(
            *(
                comment_service.create_reply(parent, UserId(f"user{i}"), f"Reply {i}")
                for i in range(20)
            )
        )

        # Assert
        assert (await post_service.get_post(post.id)).replies == 20
        assert await comment_repo.count_children(parent) == 20


class TestUpdateText:
    """Tests for update_text method."""

    @pytest.mark.asyncio
    async def test_update_text_keeps_parent_and_counters(self, unit_env):
        """Editing should only change the text."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await _make_post(unit_env)
        root = await comment_service.create_reply(
            PostParent(id=post.id), UserId("carol"), "Tpyo"
        )
        await comment_service.create_reply(
            CommentParent(id=root.id), UserId("dave"), "You have a typo"
        )
        root = await comment_service.get_comment(root.id)

        # Act
        updated = await comment_service.update_text(root, "Typo")

        # Assert
        assert updated.comment == "Typo"
        assert updated.parent == root.parent
        assert updated.replies == 1


class TestDeleteComment:
    """Tests for delete_comment method."""

    @pytest.mark.asyncio
    async def test_delete_root_comment_decrements_post_replies(self, unit_env):
        """Deleting a root comment should uncount it from the post."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_service = await unit_env.get(PostService)
        post = await _make_post(unit_env)
        root = await comment_service.create_reply(
            PostParent(id=post.id), UserId("carol"), "Root"
        )

        # Act
        await comment_service.delete_comment(root)

        # Assert
        assert (await post_service.get_post(post.id)).replies == 0
        with pytest.raises(NotFoundError):
            await comment_service.get_comment(root.id)

    @pytest.mark.asyncio
    async def test_delete_nested_comment_removes_subtree(self, unit_env):
        """Deleting a reply should drop its descendants and uncount it once."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await _make_post(unit_env)
        root = await comment_service.create_reply(
            PostParent(id=post.id), UserId("carol"), "Root"
        )
        child = await comment_service.create_reply(
            CommentParent(id=root.id), UserId("dave"), "Child"
        )
        sibling = await comment_service.create_reply(
            CommentParent(id=root.id), UserId("erin"), "Sibling"
        )
        grandchild = await comment_service.create_reply(
            CommentParent(id=child.id), UserId("frank"), "Grandchild"
        )

        # Act
        await comment_service.delete_comment(child)

        # Assert
        assert await comment_repo.find_by_id(child.id) is None
        assert await comment_repo.find_by_id(grandchild.id) is None
        assert await comment_repo.find_by_id(sibling.id) is not None
        assert (await comment_service.get_comment(root.id)).replies == 1
