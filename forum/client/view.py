"""Stateful client views over the forum API.

Views hold what the reader currently sees and commit every change through
the reconciler functions in ``forum.client.tree``.
"""

import asyncio
from typing import Awaitable, Callable, Generic, TypeVar

import logfire

from forum.client.api import ForumClient, PageResult
from forum.client.tree import (
    Reply,
    Tree,
    add_comment_replies,
    add_comment_reply,
    add_root_comment,
    delete_comment_reply,
    edit_comment,
    find_comment,
    merge_root_page,
    remove_root_comment,
    toggle_comment_like,
)
from forum.domain.value import ParentType

T = TypeVar("T")


class ThreadView:
    """One post's comment thread, materialized as far as the reader expanded it."""

    def __init__(self, client: ForumClient, post_id: str) -> None:
        self.client = client
        self.post_id = post_id
        self.tree: Tree = ()
        self.loaded_pages = 0
        self.total_pages: int | None = None
        self.child_pages: dict[str, int] = {}

    @property
    def has_more(self) -> bool:
        """Whether more root pages remain to be loaded."""
        return self.total_pages is None or self.loaded_pages < self.total_pages

    async def load_page(self, page: int | None = None) -> Tree:
        """Load a page of root comments, by default the next one.

        Args:
            page: Page to load; the page after the last one loaded if None

        Returns:
            The updated tree
        """
        page = page or self.loaded_pages + 1
        result = await self.client.list_comments(self.post_id, page=page)
        self.tree = merge_root_page(self.tree, result.rows)
        self.loaded_pages = max(self.loaded_pages, page)
        self.total_pages = result.total_pages
        return self.tree

    async def expand(self, comment_id: str, page: int | None = None) -> Tree:
        """Load a page of a comment's children, by default the next one."""
        page = page or self.child_pages.get(comment_id, 0) + 1
        result = await self.client.list_replies(comment_id, page=page)
        self.tree = add_comment_replies(self.tree, comment_id, result.rows)
        self.child_pages[comment_id] = max(self.child_pages.get(comment_id, 0), page)
        return self.tree

    async def reply_to_post(self, text: str) -> Reply:
        reply = await self.client.reply_to_post(self.post_id, text)
        self.tree = add_root_comment(self.tree, reply)
        return reply

    async def reply_to_comment(self, parent_id: str, text: str) -> Reply:
        reply = await self.client.reply_to_comment(parent_id, text)
        self.tree = add_comment_reply(self.tree, parent_id, reply)
        return reply

    async def edit(self, comment_id: str, text: str) -> Tree:
        updated = await self.client.update_comment(comment_id, text)
        self.tree = edit_comment(self.tree, comment_id, updated.comment)
        return self.tree

    async def delete(self, comment_id: str) -> Tree:
        """Delete a comment and drop it, with its subtree, from the tree."""
        deleted = await self.client.delete_comment(comment_id)
        if deleted.parent_type == ParentType.POST:
            self.tree = remove_root_comment(self.tree, comment_id)
        else:
            self.tree = delete_comment_reply(self.tree, deleted.parent_id, comment_id)
        self.child_pages.pop(comment_id, None)
        return self.tree

    async def toggle_like(self, comment_id: str) -> Tree:
        """Like the comment, or unlike it if the reader already has.

        The tree changes only after the API accepted the change.
        """
        node = find_comment(self.tree, comment_id)
        if node is None:
            return self.tree
        if node.is_liked:
            await self.client.unlike_comment(comment_id)
        else:
            await self.client.like_comment(comment_id)
        self.tree = toggle_comment_like(self.tree, comment_id)
        return self.tree


class ListView(Generic[T]):
    """A paged group or post listing keyed by ``(query, page)``.

    Loading new parameters cancels the fetch still running for the old
    ones, and a generation counter makes sure a response that arrives late
    never replaces a newer one.
    """

    def __init__(
        self, fetch: Callable[[str | None, int], Awaitable[PageResult[T]]]
    ) -> None:
        """Initialize list view.

        Args:
            fetch: Fetches one page for a query, e.g. ``client.list_posts``
        """
        self.fetch = fetch
        self.query: str | None = None
        self.page = 1
        self.result: PageResult[T] | None = None
        self._generation = 0
        self._task: asyncio.Task[PageResult[T]] | None = None

    @property
    def rows(self) -> list[T]:
        return self.result.rows if self.result else []

    async def load(self, query: str | None = None, page: int = 1) -> PageResult[T] | None:
        """Show one page for a query.

        Returns:
            The page, or None if a later ``load`` superseded this one
        """
        if self._task and not self._task.done():
            self._task.cancel()

        self._generation += 1
        generation = self._generation
        task = asyncio.create_task(self._fetch(query, page))
        self._task = task

        try:
            result = await task
        except asyncio.CancelledError:
            if generation != self._generation:
                logfire.debug("List load superseded", query=query, page=page)
                return None
            raise
        except Exception as e:
            if generation != self._generation:
                logfire.debug(
                    "Discarding failed stale list load",
                    query=query,
                    page=page,
                    error=str(e),
                )
                return None
            raise

        if generation != self._generation:
            logfire.debug("Discarding stale list page", query=query, page=page)
            return None

        self.query = query
        self.page = page
        self.result = result
        return result

    async def refresh(self) -> PageResult[T] | None:
        return await self.load(self.query, self.page)

    async def _fetch(self, query: str | None, page: int) -> PageResult[T]:
        return await self.fetch(query, page)
