"""Post domain service."""

from uuid import uuid4

import logfire

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model import Post
from forum.domain.repository import GroupRepository, PostRepository
from forum.domain.value import GroupId, PostId, UserId, utc_now

from .base import Service
from .counter_service import CounterService


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        group_repository: GroupRepository,
        counter_service: CounterService,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            group_repository: Group repository
            counter_service: Counter maintenance service
        """
        self.post_repository = post_repository
        self.group_repository = group_repository
        self.counter_service = counter_service

    async def create_post(
        self, group_id: GroupId, uid: UserId, title: str, details: str = ""
    ) -> Post:
        """Create a post in a group and count it against the group.

        Args:
            group_id: Group to post in
            uid: Author user ID
            title: Post title
            details: Post body

        Returns:
            Created post

        Raises:
            NotFoundError: If the group does not exist
            ValidationError: If the title is blank
        """
        with logfire.span(
            "post_service.create_post", group_id=str(group_id), uid=uid
        ):
            if not title.strip():
                raise ValidationError("Post title must not be blank")

            group = await self.group_repository.find_by_id(group_id)
            if not group:
                logfire.warn("Post in non-existent group", group_id=str(group_id))
                raise NotFoundError("Group", str(group_id))

            post = Post(
                id=PostId(uuid4()),
                group_id=group_id,
                title=title,
                details=details,
                uid=uid,
                created_at=utc_now(),
            )
            saved = await self.post_repository.save(post)
            await self.counter_service.on_post_created(group_id)

            logfire.info("Post created", post_id=str(saved.id), group_id=str(group_id))
            return saved

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def update_post(
        self, post: Post, title: str | None = None, details: str | None = None
    ) -> Post:
        """Update a post's title and/or details.

        Args:
            post: The post, already checked for ownership
            title: New title (unchanged if None)
            details: New details (unchanged if None)

        Returns:
            Updated post

        Raises:
            ValidationError: If the new title is blank
        """
        with logfire.span("post_service.update_post", post_id=str(post.id)):
            changes: dict[str, str] = {}
            if title is not None:
                if not title.strip():
                    raise ValidationError("Post title must not be blank")
                changes["title"] = title
            if details is not None:
                changes["details"] = details
            if not changes:
                return post

            updated = await self.post_repository.save(post.evolve(**changes))
            logfire.info("Post updated", post_id=str(post.id), fields=sorted(changes))
            return updated

    async def delete_post(self, post: Post) -> None:
        """Delete a post and its thread, and uncount it from its group."""
        with logfire.span(
            "post_service.delete_post", post_id=str(post.id), group_id=str(post.group_id)
        ):
            await self.post_repository.delete(post.id)
            await self.counter_service.on_post_deleted(post.group_id)
            logfire.info("Post deleted", post_id=str(post.id))

    async def record_view(self, post_id: PostId) -> None:
        """Atomically count one view of a post's thread."""
        await self.post_repository.increment_views(post_id)
