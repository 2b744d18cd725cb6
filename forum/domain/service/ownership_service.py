"""Ownership authorization gate."""

from typing import NoReturn

import logfire

from forum.domain.error import ForbiddenError
from forum.domain.model import Comment, Group, Post
from forum.domain.repository import CommentRepository, GroupRepository, PostRepository
from forum.domain.value import CommentId, GroupId, OwnerRef, PostId, UserId

from .base import Service


class OwnershipService(Service):
    """Checks that a user owns the entity they are about to mutate.

    A missing target and a target owned by someone else produce the same
    ``ForbiddenError``, so mutation endpoints never reveal whether an ID
    exists.
    """

    def __init__(
        self,
        group_repository: GroupRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        self.group_repository = group_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def ensure_owns_group(self, uid: UserId, group_id: GroupId) -> Group:
        """Return the group if ``uid`` owns it.

        Raises:
            ForbiddenError: If the group is missing or owned by another user
        """
        group = await self.group_repository.find_by_id(group_id)
        if not group or group.owner != OwnerRef.user(uid):
            self._deny("group", group_id, uid)
        return group

    async def ensure_owns_post(self, uid: UserId, post_id: PostId) -> Post:
        """Return the post if ``uid`` wrote it.

        Raises:
            ForbiddenError: If the post is missing or written by another user
        """
        post = await self.post_repository.find_by_id(post_id)
        if not post or post.uid != uid:
            self._deny("post", post_id, uid)
        return post

    async def ensure_owns_comment(self, uid: UserId, comment_id: CommentId) -> Comment:
        """Return the comment if ``uid`` wrote it.

        Raises:
            ForbiddenError: If the comment is missing or written by another user
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment or comment.uid != uid:
            self._deny("comment", comment_id, uid)
        return comment

    def _deny(self, resource: str, resource_id: object, uid: UserId) -> NoReturn:
        logfire.warn(
            "Ownership check failed",
            resource=resource,
            resource_id=str(resource_id),
            user_id=uid,
        )
        raise ForbiddenError(resource, str(resource_id), uid)
