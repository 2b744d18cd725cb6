"""Pagination and search over groups, posts and comment children."""

from enum import Enum
from typing import Optional

import logfire

from forum.domain.model import Comment, Group, Post
from forum.domain.repository import CommentRepository, GroupRepository, PostRepository
from forum.domain.value import (
    CommentParent,
    GroupId,
    OwnerRef,
    Page,
    PageRequest,
    PostParent,
    UserId,
)

from .base import Service


class SearchKind(str, Enum):
    """Entity kinds that can be searched by text."""

    GROUP = "group"
    POST = "post"


def normalize_query(query: str | None) -> str | None:
    """Map a blank search query to no filter.

    Surrounding whitespace only decides blankness; a non-blank query is
    matched as typed, so ``" exam"`` does not match ``"examples"``.
    """
    if query is None or not query.strip():
        return None
    return query


class SearchService(Service):
    """Domain service for paged listings.

    Every listing is totally ordered (see the repository contracts), so a
    fixed page size yields non-overlapping pages that together cover the
    whole result set.
    """

    def __init__(
        self,
        group_repository: GroupRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize search service.

        Args:
            group_repository: Group repository
            post_repository: Post repository
            comment_repository: Comment repository
        """
        self.group_repository = group_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def search(
        self, kind: SearchKind, query: str | None, request: PageRequest
    ) -> Page[Group] | Page[Post]:
        """Search groups by name or posts by title.

        Args:
            kind: Which entity to search
            query: Case-insensitive substring; blank means unfiltered
            request: Page to return

        Returns:
            One page of matches with totals
        """
        if kind == SearchKind.GROUP:
            return await self.search_groups(query, request)
        return await self.search_posts(query, request)

    async def search_groups(
        self,
        query: str | None,
        request: PageRequest,
        owner: Optional[OwnerRef] = None,
    ) -> Page[Group]:
        """Search groups by name, optionally scoped to one owner."""
        query = normalize_query(query)
        with logfire.span(
            "search_service.search_groups",
            query=query,
            page=request.page,
            page_size=request.page_size,
        ):
            rows = await self.group_repository.search(
                query=query, owner=owner, limit=request.limit, offset=request.offset
            )
            total = await self.group_repository.count(query=query, owner=owner)
            logfire.info("Groups searched", count=len(rows), total_count=total)
            return Page.build(rows, request, total)

    async def search_posts(
        self,
        query: str | None,
        request: PageRequest,
        group_id: Optional[GroupId] = None,
        author_id: Optional[UserId] = None,
    ) -> Page[Post]:
        """Search posts by title, optionally scoped to a group or an author."""
        query = normalize_query(query)
        with logfire.span(
            "search_service.search_posts",
            query=query,
            group_id=str(group_id) if group_id else None,
            author_id=author_id,
            page=request.page,
            page_size=request.page_size,
        ):
            rows = await self.post_repository.search(
                query=query,
                group_id=group_id,
                author_id=author_id,
                limit=request.limit,
                offset=request.offset,
            )
            total = await self.post_repository.count(
                query=query, group_id=group_id, author_id=author_id
            )
            logfire.info("Posts searched", count=len(rows), total_count=total)
            return Page.build(rows, request, total)

    async def list_children(
        self, parent: PostParent | CommentParent, request: PageRequest
    ) -> Page[Comment]:
        """List one level of replies under a post or a comment.

        Args:
            parent: Post (root comments) or comment (nested replies)
            request: Page to return

        Returns:
            Direct replies, newest first
        """
        with logfire.span(
            "search_service.list_children",
            parent_type=parent.parent_type.value,
            parent_id=str(parent.id),
            page=request.page,
        ):
            rows = await self.comment_repository.find_children(
                parent, limit=request.limit, offset=request.offset
            )
            total = await self.comment_repository.count_children(parent)
            return Page.build(rows, request, total)
