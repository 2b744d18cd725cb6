"""Unit tests for CounterService reconciliation."""

import pytest

from forum.domain.repository import (
    CommentRepository,
    GroupRepository,
    PostRepository,
)
from forum.domain.service import (
    CommentService,
    CounterService,
    GroupService,
    LikeService,
    PostService,
)
from forum.domain.value import CommentParent, LikeTargetType, PostParent, UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def _make_post(unit_env):
    group_service = await unit_env.get(GroupService)
    post_service = await unit_env.get(PostService)
    group = await group_service.create_group(UserId("alice"), "Algebra")
    return await post_service.create_post(group.id, UserId("bob"), "Exam")


class TestRecount:
    """Tests for the recount_* methods."""

    @pytest.mark.asyncio
    async def test_recount_group_posts_repairs_drift(self, unit_env):
        """A drifted post count should be rebuilt from the posts."""
        # Arrange
        counter_service = await unit_env.get(CounterService)
        group_repo = await unit_env.get(GroupRepository)
        post = await _make_post(unit_env)
        await group_repo.adjust_post_count(post.group_id, 4)

        # Act
        actual = await counter_service.recount_group_posts(post.group_id)

        # Assert
        assert actual == 1
        assert (await group_repo.find_by_id(post.group_id)).post_count == 1

    @pytest.mark.asyncio
    async def test_recount_post_replies_counts_root_comments_only(self, unit_env):
        """Post replies should count direct children, not the whole thread."""
        # Arrange
        counter_service = await unit_env.get(CounterService)
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await _make_post(unit_env)
        root = await comment_service.create_reply(
            PostParent(id=post.id), UserId("carol"), "Root"
        )
        await comment_service.create_reply(
            CommentParent(id=root.id), UserId("dave"), "Nested"
        )
        await post_repo.adjust_replies(post.id, -1)

        # Act
        actual = await counter_service.recount_post_replies(post.id)

        # Assert
        assert actual == 1
        assert (await post_repo.find_by_id(post.id)).replies == 1

    @pytest.mark.asyncio
    async def test_recount_comment_replies_repairs_drift(self, unit_env):
        """A drifted comment reply count should be rebuilt."""
        # Arrange
        counter_service = await unit_env.get(CounterService)
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await _make_post(unit_env)
        root = await comment_service.create_reply(
            PostParent(id=post.id), UserId("carol"), "Root"
        )
        await comment_service.create_reply(
            CommentParent(id=root.id), UserId("dave"), "One"
        )
        await comment_service.create_reply(
            CommentParent(id=root.id), UserId("erin"), "Two"
        )
        await comment_repo.adjust_replies(root.id, 7)

        # Act
        actual = await counter_service.recount_comment_replies(root.id)

        # Assert
        assert actual == 2
        assert (await comment_repo.find_by_id(root.id)).replies == 2

    @pytest.mark.asyncio
    async def test_recount_likes_matches_recorded_likes(self, unit_env):
        """Like count should equal the number of recorded likes."""
        # Arrange
        counter_service = await unit_env.get(CounterService)
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        post = await _make_post(unit_env)
        await like_service.like(UserId("carol"), LikeTargetType.POST, post.id)
        await like_service.like(UserId("dave"), LikeTargetType.POST, post.id)
        await post_repo.adjust_likes(post.id, -2)

        # Act
        actual = await counter_service.recount_likes(LikeTargetType.POST, post.id)

        # Assert
        assert actual == 2
        assert (await post_repo.find_by_id(post.id)).likes == 2

    @pytest.mark.asyncio
    async def test_recount_consistent_counter_is_unchanged(self, unit_env):
        """Recounting an accurate counter should change nothing."""
        # Arrange
        counter_service = await unit_env.get(CounterService)
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await _make_post(unit_env)
        await comment_service.create_reply(PostParent(id=post.id), UserId("carol"), "A")

        # Act
        actual = await counter_service.recount_post_replies(post.id)

        # Assert
        assert actual == 1
        assert (await post_repo.find_by_id(post.id)).replies == 1
