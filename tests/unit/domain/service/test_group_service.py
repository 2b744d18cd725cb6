"""Unit tests for GroupService."""

from uuid import uuid4

import pytest

from forum.domain.error import NotFoundError
from forum.domain.repository import (
    CommentRepository,
    GroupRepository,
    LikeRepository,
    PostRepository,
)
from forum.domain.service import (
    CommentService,
    GroupService,
    LikeService,
    PostService,
)
from forum.domain.value import (
    GroupId,
    LikeTargetType,
    OwnerRef,
    OwnerType,
    PostParent,
    UserId,
)
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateGroup:
    """Tests for create_group method."""

    @pytest.mark.asyncio
    async def test_create_group_owned_by_creator(self, unit_env):
        """New group should be owned by its creator and start with no posts."""
        # Arrange
        group_service = await unit_env.get(GroupService)
        group_repo = await unit_env.get(GroupRepository)

        # Act
        group = await group_service.create_group(
            UserId("alice"), "Linear Algebra", "Matrices and more"
        )

        # Assert
        assert group.owner == OwnerRef.user(UserId("alice"))
        assert group.owner.owner_type == OwnerType.USER
        assert group.post_count == 0
        assert await group_repo.find_by_id(group.id) == group


class TestGetGroup:
    """Tests for get_group method."""

    @pytest.mark.asyncio
    async def test_get_missing_group_raises_not_found(self, unit_env):
        """Unknown group ID should raise NotFoundError."""
        # Arrange
        group_service = await unit_env.get(GroupService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await group_service.get_group(GroupId(uuid4()))


class TestUpdateGroup:
    """Tests for update_group method."""

    @pytest.mark.asyncio
    async def test_update_only_given_fields(self, unit_env):
        """Fields left as None should keep their values."""
        # Arrange
        group_service = await unit_env.get(GroupService)
        group = await group_service.create_group(UserId("alice"), "Algebra", "Old")

        # Act
        updated = await group_service.update_group(group, description="New")

        # Assert
        assert updated.group_name == "Algebra"
        assert updated.description == "New"
        assert (await group_service.get_group(group.id)).description == "New"

    @pytest.mark.asyncio
    async def test_update_without_changes_returns_group(self, unit_env):
        """No fields given should leave the group untouched."""
        # Arrange
        group_service = await unit_env.get(GroupService)
        group = await group_service.create_group(UserId("alice"), "Algebra")

        # Act
        updated = await group_service.update_group(group)

        # Assert
        assert updated is group

    @pytest.mark.asyncio
    async def test_update_keeps_post_count(self, unit_env):
        """Renaming a group should not reset its counter."""
        # Arrange
        group_service = await unit_env.get(GroupService)
        post_service = await unit_env.get(PostService)
        group = await group_service.create_group(UserId("alice"), "Algebra")
        await post_service.create_post(group.id, UserId("bob"), "Homework 1")
        group = await group_service.get_group(group.id)

        # Act
        updated = await group_service.update_group(group, group_name="Algebra I")

        # Assert
        assert updated.post_count == 1


class TestDeleteGroup:
    """Tests for delete_group method."""

    @pytest.mark.asyncio
    async def test_delete_group_cascades_to_posts_comments_and_likes(self, unit_env):
        """Deleting a group should remove everything posted in it."""
        # Arrange
        group_service = await unit_env.get(GroupService)
        post_service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        like_repo = await unit_env.get(LikeRepository)

        group = await group_service.create_group(UserId("alice"), "Algebra")
        post = await post_service.create_post(group.id, UserId("bob"), "Exam")
        comment = await comment_service.create_reply(
            PostParent(id=post.id), UserId("carol"), "Good luck"
        )
        await like_service.like(UserId("dave"), LikeTargetType.POST, post.id)
        await like_service.like(UserId("dave"), LikeTargetType.COMMENT, comment.id)

        # Act
        await group_service.delete_group(group)

        # Assert
        with pytest.raises(NotFoundError):
            await group_service.get_group(group.id)
        assert await post_repo.find_by_id(post.id) is None
        assert await comment_repo.find_by_id(comment.id) is None
        assert await like_repo.count_for_target(LikeTargetType.POST, post.id) == 0
        assert await like_repo.count_for_target(LikeTargetType.COMMENT, comment.id) == 0
