"""Tests for the client views, run against the app in-process."""

import asyncio

import httpx
import pytest
import pytest_asyncio

from forum.client import ForumAPIError, ForumClient, ListView, PageResult, ThreadView
from forum.client.tree import find_comment
from forum.interface.api.app import create_app
from tests.di import build_test_container


@pytest_asyncio.fixture
async def client():
    """Forum client signed in as alice, talking to a fresh app."""
    container = build_test_container()
    transport = httpx.ASGITransport(app=create_app(container))
    http_client = httpx.AsyncClient(transport=transport, base_url="http://test")
    async with ForumClient(token="alice", http_client=http_client) as forum_client:
        yield forum_client
    await container.close()


@pytest_asyncio.fixture
async def post_id(client):
    group = await client.create_group("Linear Algebra")
    post = await client.create_post(group.group_id, "Exam 1", "When is it?")
    return post.post_id


class TestThreadView:
    """Tests for ThreadView."""

    @pytest.mark.asyncio
    async def test_reply_expand_like_and_delete(self, client, post_id):
        # Arrange
        view = ThreadView(client, post_id)
        root = await view.reply_to_post("Next Tuesday")
        child = await view.reply_to_comment(root.comment_id, "Which room?")

        # Act
        fresh = ThreadView(client, post_id)
        await fresh.load_page()
        await fresh.expand(root.comment_id)
        await fresh.toggle_like(child.comment_id)

        # Assert
        held_root = find_comment(fresh.tree, root.comment_id)
        assert held_root.replies == 1
        assert [c.comment_id for c in held_root.children] == [child.comment_id]
        held_child = find_comment(fresh.tree, child.comment_id)
        assert held_child.is_liked is True
        assert held_child.likes == 1
        server_page = await client.list_replies(root.comment_id)
        assert server_page.rows[0].is_liked is True
        assert fresh.has_more is False

        # Act
        await fresh.delete(child.comment_id)

        # Assert
        held_root = find_comment(fresh.tree, root.comment_id)
        assert held_root.children == ()
        assert held_root.replies == 0
        assert (await client.list_replies(root.comment_id)).total_count == 0

    @pytest.mark.asyncio
    async def test_edit_and_delete_root(self, client, post_id):
        # Arrange
        view = ThreadView(client, post_id)
        root = await view.reply_to_post("Tuesday")

        # Act
        await view.edit(root.comment_id, "Thursday")

        # Assert
        assert find_comment(view.tree, root.comment_id).comment == "Thursday"

        # Act
        await view.delete(root.comment_id)

        # Assert
        assert view.tree == ()

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, client, post_id):
        # Arrange
        view = ThreadView(client, post_id)
        root = await view.reply_to_post("Mine")
        client.token = "bob"

        # Act & Assert
        with pytest.raises(ForumAPIError) as exc_info:
            await view.edit(root.comment_id, "Not mine")
        assert exc_info.value.status_code == 403
        assert find_comment(view.tree, root.comment_id).comment == "Mine"

    @pytest.mark.asyncio
    async def test_pages_do_not_duplicate_roots(self, client, post_id):
        # Arrange
        for i in range(12):
            await client.reply_to_post(post_id, f"Comment {i}")
        view = ThreadView(client, post_id)

        # Act
        await view.load_page()
        await view.load_page()
        await view.load_page(1)

        # Assert
        ids = [r.comment_id for r in view.tree]
        assert len(ids) == 12
        assert len(set(ids)) == 12
        assert view.has_more is False


def _page(rows: list[str]) -> PageResult[str]:
    return PageResult[str](current_page=1, total_count=len(rows), total_pages=1, rows=rows)


class TestListView:
    """Tests for ListView."""

    @pytest.mark.asyncio
    async def test_newer_load_supersedes_slow_one(self):
        """A slow response for an old query must not replace a newer one."""
        # Arrange
        gate = asyncio.Event()

        async def fetch(query, page):
            if query == "slow":
                await gate.wait()
            return _page([query])

        view = ListView(fetch)

        # Act
        slow = asyncio.create_task(view.load("slow"))
        await asyncio.sleep(0)
        fast = await view.load("fast")
        gate.set()
        superseded = await slow

        # Assert
        assert superseded is None
        assert fast.rows == ["fast"]
        assert view.rows == ["fast"]
        assert view.query == "fast"

    @pytest.mark.asyncio
    async def test_failure_of_superseded_load_is_dropped(self):
        """An old load that failed before a newer one started stays quiet."""
        # Arrange
        failed = asyncio.Event()

        async def fetch(query, page):
            if query == "broken":
                failed.set()
                raise ForumAPIError(500, "Internal server error")
            return _page([query])

        view = ListView(fetch)

        # Act
        broken = asyncio.create_task(view.load("broken"))
        await failed.wait()
        fresh = await view.load("fresh")
        superseded = await broken

        # Assert
        assert superseded is None
        assert fresh.rows == ["fresh"]
        assert view.rows == ["fresh"]

    @pytest.mark.asyncio
    async def test_failure_of_current_load_propagates(self):
        async def fetch(query, page):
            raise ForumAPIError(500, "Internal server error")

        view = ListView(fetch)

        with pytest.raises(ForumAPIError):
            await view.load("alg")
        assert view.result is None

    @pytest.mark.asyncio
    async def test_refresh_reloads_current_parameters(self):
        # Arrange
        calls = []

        async def fetch(query, page):
            calls.append((query, page))
            return _page([f"{query}:{page}"])

        view = ListView(fetch)
        await view.load("alg", 2)

        # Act
        await view.refresh()

        # Assert
        assert calls == [("alg", 2), ("alg", 2)]
        assert view.rows == ["alg:2"]

    @pytest.mark.asyncio
    async def test_lists_groups_through_client(self, client):
        # Arrange
        await client.create_group("Algebra")
        await client.create_group("Biology")
        view = ListView(client.list_groups)

        # Act
        result = await view.load("alg")

        # Assert
        assert [g.group_name for g in result.rows] == ["Algebra"]
