"""Async HTTP client for the forum API."""

from typing import Any, Generic, TypeVar

import httpx
import logfire
from pydantic import BaseModel

from forum.application.usecase.comment import DeleteCommentResponse
from forum.application.usecase.items import GroupItem, PostItem
from forum.client.tree import Reply

T = TypeVar("T")


class ForumAPIError(Exception):
    """The forum API answered with an error status."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Forum API error {status_code}: {detail}")


class PageResult(BaseModel, Generic[T]):
    """One page of a listing as returned by the API."""

    current_page: int
    total_count: int
    total_pages: int
    rows: list[T]
    group_name: str | None = None


class ForumClient:
    """Client for the forum REST API.

    Wraps an ``httpx.AsyncClient``; pass one in to share a connection pool
    or to talk to an app in-process through ``httpx.ASGITransport``.
    """

    def __init__(
        self,
        base_url: str = "",
        token: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize forum client.

        Args:
            base_url: API root, e.g. ``http://localhost:9001``
            token: Bearer token sent with every request, if any
            http_client: Client to use instead of creating one
        """
        self.http_client = http_client or httpx.AsyncClient(
            base_url=base_url, timeout=10.0
        )
        self.token = token

    async def aclose(self) -> None:
        await self.http_client.aclose()

    async def __aenter__(self) -> "ForumClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Raises:
            ForumAPIError: If the API answers with a 4xx or 5xx status
        """
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        response = await self.http_client.request(
            method, path, params=params, json=json, headers=headers
        )
        if response.is_error:
            try:
                detail = response.json().get("detail", response.text)
            except ValueError:
                detail = response.text
            logfire.warn(
                "Forum API request failed",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise ForumAPIError(response.status_code, str(detail))
        return response.json()

    # Groups

    async def list_groups(
        self, q: str | None = None, page: int = 1
    ) -> PageResult[GroupItem]:
        data = await self._request("GET", "/forum/groups", params={"q": q, "page": page})
        return PageResult[GroupItem].model_validate(data)

    async def get_group(self, group_id: str) -> GroupItem:
        data = await self._request("GET", f"/forum/groups/{group_id}")
        return GroupItem.model_validate(data)

    async def create_group(self, name: str, description: str = "") -> GroupItem:
        data = await self._request(
            "POST", "/forum/groups", json={"name": name, "description": description}
        )
        return GroupItem.model_validate(data)

    async def update_group(
        self,
        group_id: str,
        name: str | None = None,
        description: str | None = None,
    ) -> GroupItem:
        body = {"name": name, "description": description}
        data = await self._request(
            "PUT",
            f"/forum/group/{group_id}",
            json={k: v for k, v in body.items() if v is not None},
        )
        return GroupItem.model_validate(data)

    async def delete_group(self, group_id: str) -> None:
        await self._request("DELETE", f"/forum/group/{group_id}")

    async def my_groups(self, q: str | None = None, page: int = 1) -> list[GroupItem]:
        data = await self._request(
            "GET", "/forum/myGroups", params={"q": q, "page": page}
        )
        return [GroupItem.model_validate(row) for row in data]

    # Posts

    async def list_posts(
        self, q: str | None = None, page: int = 1, group_id: str | None = None
    ) -> PageResult[PostItem]:
        """List posts, across the forum or within one group.

        Args:
            q: Title substring filter
            page: 1-indexed page
            group_id: Restrict to this group

        Returns:
            One page of posts, newest first
        """
        path = f"/forum/group/{group_id}" if group_id else "/forum/posts"
        data = await self._request("GET", path, params={"q": q, "page": page})
        return PageResult[PostItem].model_validate(data)

    async def create_post(self, group_id: str, title: str, details: str = "") -> PostItem:
        data = await self._request(
            "POST",
            f"/forum/group/{group_id}",
            json={"title": title, "details": details},
        )
        return PostItem.model_validate(data)

    async def update_post(
        self, post_id: str, title: str | None = None, details: str | None = None
    ) -> PostItem:
        body = {"title": title, "details": details}
        data = await self._request(
            "PUT",
            f"/forum/post/{post_id}",
            json={k: v for k, v in body.items() if v is not None},
        )
        return PostItem.model_validate(data)

    async def delete_post(self, post_id: str) -> None:
        await self._request("DELETE", f"/forum/post/{post_id}")

    async def my_posts(self, q: str | None = None, page: int = 1) -> list[PostItem]:
        data = await self._request("GET", "/forum/myPosts", params={"q": q, "page": page})
        return [PostItem.model_validate(row) for row in data]

    async def like_post(self, post_id: str) -> None:
        await self._request("POST", f"/forum/likePost/{post_id}")

    async def unlike_post(self, post_id: str) -> None:
        await self._request("DELETE", f"/forum/likePost/{post_id}")

    # Comments

    async def list_comments(self, post_id: str, page: int = 1) -> PageResult[Reply]:
        """Fetch one page of a post's root comments."""
        data = await self._request(
            "GET", f"/forum/post/{post_id}", params={"page": page}
        )
        return PageResult[Reply].model_validate(data)

    async def list_replies(self, comment_id: str, page: int = 1) -> PageResult[Reply]:
        """Fetch one page of a comment's direct replies."""
        data = await self._request(
            "GET", f"/forum/comment/{comment_id}", params={"page": page}
        )
        return PageResult[Reply].model_validate(data)

    async def reply_to_post(self, post_id: str, content: str) -> Reply:
        data = await self._request(
            "POST", f"/forum/post/{post_id}", json={"content": content}
        )
        return Reply.model_validate(data)

    async def reply_to_comment(self, comment_id: str, content: str) -> Reply:
        data = await self._request(
            "POST", f"/forum/comment/{comment_id}", json={"content": content}
        )
        return Reply.model_validate(data)

    async def update_comment(self, comment_id: str, content: str) -> Reply:
        data = await self._request(
            "PUT", f"/forum/comment/{comment_id}", json={"content": content}
        )
        return Reply.model_validate(data)

    async def delete_comment(self, comment_id: str) -> DeleteCommentResponse:
        """Delete a comment and its replies.

        Returns:
            The deleted comment's parent, to drop it from the right level
        """
        data = await self._request("DELETE", f"/forum/comment/{comment_id}")
        return DeleteCommentResponse.model_validate(data)

    async def like_comment(self, comment_id: str) -> None:
        await self._request("POST", f"/forum/likeComment/{comment_id}")

    async def unlike_comment(self, comment_id: str) -> None:
        await self._request("DELETE", f"/forum/likeComment/{comment_id}")
