"""Unit tests for the comment listing use cases."""

from uuid import UUID, uuid4

import pytest

from forum.application.usecase.comment import (
    CreateReplyRequest,
    CreateReplyUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    ListRepliesRequest,
    ListRepliesUseCase,
)
from forum.application.usecase.group import CreateGroupRequest, CreateGroupUseCase
from forum.application.usecase.like import LikeRequest, LikeUseCase
from forum.application.usecase.post import CreatePostRequest, CreatePostUseCase
from forum.domain.error import NotFoundError
from forum.domain.service import PostService
from forum.domain.value import LikeTargetType, ParentType, PostId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _make_post(unit_env):
    create_group = await unit_env.get(CreateGroupUseCase)
    create_post = await unit_env.get(CreatePostUseCase)
    group = await create_group.execute(CreateGroupRequest(uid="alice", name="Algebra"))
    return await create_post.execute(
        CreatePostRequest(uid="bob", group_id=group.group_id, title="Exam")
    )


async def _reply(unit_env, parent_type: ParentType, parent_id: str, content: str):
    use_case = await unit_env.get(CreateReplyUseCase)
    return await use_case.execute(
        CreateReplyRequest(
            uid="carol", parent_type=parent_type, parent_id=parent_id, content=content
        )
    )


class TestListCommentsUseCase:
    """Tests for ListCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_root_comments_only(self, unit_env):
        """Nested replies should not appear among the root comments."""
        # Arrange
        post = await _make_post(unit_env)
        root = await _reply(unit_env, ParentType.POST, post.post_id, "Root")
        await _reply(unit_env, ParentType.COMMENT, root.comment_id, "Nested")
        use_case = await unit_env.get(ListCommentsUseCase)

        # Act
        page = await use_case.execute(ListCommentsRequest(post_id=post.post_id))

        # Assert
        assert [c.comment_id for c in page.rows] == [root.comment_id]
        assert page.rows[0].replies == 1
        assert page.total_count == 1

    @pytest.mark.asyncio
    async def test_first_page_counts_a_view(self, unit_env):
        """Opening the thread counts a view; later pages do not."""
        # Arrange
        post = await _make_post(unit_env)
        use_case = await unit_env.get(ListCommentsUseCase)
        post_service = await unit_env.get(PostService)

        # Act
        await use_case.execute(ListCommentsRequest(post_id=post.post_id, page=1))
        await use_case.execute(ListCommentsRequest(post_id=post.post_id, page=2))

        # Assert
        assert (await post_service.get_post(PostId(UUID(post.post_id)))).views == 1

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListCommentsUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(ListCommentsRequest(post_id=uuid4()))

    @pytest.mark.asyncio
    async def test_is_liked_for_viewer(self, unit_env):
        # Arrange
        post = await _make_post(unit_env)
        root = await _reply(unit_env, ParentType.POST, post.post_id, "Root")
        like_use_case = await unit_env.get(LikeUseCase)
        await like_use_case.execute(
            LikeRequest(
                uid="dave", target_type=LikeTargetType.COMMENT, target_id=root.comment_id
            )
        )
        use_case = await unit_env.get(ListCommentsUseCase)

        # Act
        page = await use_case.execute(
            ListCommentsRequest(post_id=post.post_id, viewer_id="dave")
        )

        # Assert
        assert page.rows[0].is_liked is True
        assert page.rows[0].likes == 1


class TestListRepliesUseCase:
    """Tests for ListRepliesUseCase."""

    @pytest.mark.asyncio
    async def test_lists_direct_children_only(self, unit_env):
        """Expanding a comment should return one level."""
        # Arrange
        post = await _make_post(unit_env)
        root = await _reply(unit_env, ParentType.POST, post.post_id, "Root")
        child = await _reply(unit_env, ParentType.COMMENT, root.comment_id, "Child")
        await _reply(unit_env, ParentType.COMMENT, child.comment_id, "Grandchild")
        use_case = await unit_env.get(ListRepliesUseCase)

        # Act
        page = await use_case.execute(ListRepliesRequest(comment_id=root.comment_id))

        # Assert
        assert [c.comment for c in page.rows] == ["Child"]
        assert page.rows[0].parent_type == ParentType.COMMENT
        assert page.rows[0].parent_id == root.comment_id
        assert page.rows[0].post_id == post.post_id

    @pytest.mark.asyncio
    async def test_missing_comment_raises_not_found(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListRepliesUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(ListRepliesRequest(comment_id=uuid4()))
