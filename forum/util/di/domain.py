"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.domain.repository import (
    CommentRepository,
    GroupRepository,
    LikeRepository,
    PostRepository,
)
from forum.domain.service import (
    CommentService,
    CounterService,
    GroupService,
    IdentityService,
    LikeService,
    OwnershipService,
    PostService,
    SearchService,
    TokenVerifier,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Services are REQUEST-scoped to share the request's repositories, and so
    its database transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_counter_service(
        self,
        group_repository: GroupRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        like_repository: LikeRepository,
    ) -> CounterService:
        """Provide counter maintenance service."""
        return CounterService(
            group_repository=group_repository,
            post_repository=post_repository,
            comment_repository=comment_repository,
            like_repository=like_repository,
        )

    @provide
    def get_ownership_service(
        self,
        group_repository: GroupRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> OwnershipService:
        """Provide ownership authorization gate."""
        return OwnershipService(
            group_repository=group_repository,
            post_repository=post_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_search_service(
        self,
        group_repository: GroupRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> SearchService:
        """Provide search and pagination service."""
        return SearchService(
            group_repository=group_repository,
            post_repository=post_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_group_service(self, group_repository: GroupRepository) -> GroupService:
        """Provide group domain service."""
        return GroupService(group_repository=group_repository)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        group_repository: GroupRepository,
        counter_service: CounterService,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            group_repository=group_repository,
            counter_service=counter_service,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        counter_service: CounterService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_repository=post_repository,
            counter_service=counter_service,
        )

    @provide
    def get_like_service(
        self,
        like_repository: LikeRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        counter_service: CounterService,
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository,
            post_repository=post_repository,
            comment_repository=comment_repository,
            counter_service=counter_service,
        )

    @provide
    def get_identity_service(self, token_verifier: TokenVerifier) -> IdentityService:
        """Provide identity domain service."""
        return IdentityService(token_verifier=token_verifier)
