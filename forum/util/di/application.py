"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.comment import (
    CreateReplyUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
    ListRepliesUseCase,
    UpdateCommentUseCase,
)
from forum.application.usecase.group import (
    CreateGroupUseCase,
    DeleteGroupUseCase,
    GetGroupUseCase,
    ListGroupsUseCase,
    ListMyGroupsUseCase,
    UpdateGroupUseCase,
)
from forum.application.usecase.like import LikeUseCase, UnlikeUseCase
from forum.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    ListMyPostsUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from forum.config import PaginationSettings
from forum.domain.service import (
    CommentService,
    GroupService,
    LikeService,
    OwnershipService,
    PostService,
    SearchService,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider."""

    scope = Scope.REQUEST

    # Group use cases
    @provide
    def get_list_groups_use_case(
        self, search_service: SearchService, pagination: PaginationSettings
    ) -> ListGroupsUseCase:
        """Provide list groups use case."""
        return ListGroupsUseCase(search_service=search_service, pagination=pagination)

    @provide
    def get_list_my_groups_use_case(
        self, search_service: SearchService, pagination: PaginationSettings
    ) -> ListMyGroupsUseCase:
        """Provide list my groups use case."""
        return ListMyGroupsUseCase(
            search_service=search_service, pagination=pagination
        )

    @provide
    def get_get_group_use_case(self, group_service: GroupService) -> GetGroupUseCase:
        """Provide get group use case."""
        return GetGroupUseCase(group_service=group_service)

    @provide
    def get_create_group_use_case(
        self, group_service: GroupService
    ) -> CreateGroupUseCase:
        """Provide create group use case."""
        return CreateGroupUseCase(group_service=group_service)

    @provide
    def get_update_group_use_case(
        self, group_service: GroupService, ownership_service: OwnershipService
    ) -> UpdateGroupUseCase:
        """Provide update group use case."""
        return UpdateGroupUseCase(
            group_service=group_service, ownership_service=ownership_service
        )

    @provide
    def get_delete_group_use_case(
        self, group_service: GroupService, ownership_service: OwnershipService
    ) -> DeleteGroupUseCase:
        """Provide delete group use case."""
        return DeleteGroupUseCase(
            group_service=group_service, ownership_service=ownership_service
        )

    # Post use cases
    @provide
    def get_list_posts_use_case(
        self,
        search_service: SearchService,
        group_service: GroupService,
        like_service: LikeService,
        pagination: PaginationSettings,
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            search_service=search_service,
            group_service=group_service,
            like_service=like_service,
            pagination=pagination,
        )

    @provide
    def get_list_my_posts_use_case(
        self,
        search_service: SearchService,
        like_service: LikeService,
        pagination: PaginationSettings,
    ) -> ListMyPostsUseCase:
        """Provide list my posts use case."""
        return ListMyPostsUseCase(
            search_service=search_service,
            like_service=like_service,
            pagination=pagination,
        )

    @provide
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide
    def get_update_post_use_case(
        self, post_service: PostService, ownership_service: OwnershipService
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            post_service=post_service, ownership_service=ownership_service
        )

    @provide
    def get_delete_post_use_case(
        self, post_service: PostService, ownership_service: OwnershipService
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            post_service=post_service, ownership_service=ownership_service
        )

    # Comment use cases
    @provide
    def get_list_comments_use_case(
        self,
        post_service: PostService,
        search_service: SearchService,
        like_service: LikeService,
        pagination: PaginationSettings,
    ) -> ListCommentsUseCase:
        """Provide list root comments use case."""
        return ListCommentsUseCase(
            post_service=post_service,
            search_service=search_service,
            like_service=like_service,
            pagination=pagination,
        )

    @provide
    def get_list_replies_use_case(
        self,
        comment_service: CommentService,
        search_service: SearchService,
        like_service: LikeService,
        pagination: PaginationSettings,
    ) -> ListRepliesUseCase:
        """Provide list replies use case."""
        return ListRepliesUseCase(
            comment_service=comment_service,
            search_service=search_service,
            like_service=like_service,
            pagination=pagination,
        )

    @provide
    def get_create_reply_use_case(
        self, comment_service: CommentService
    ) -> CreateReplyUseCase:
        """Provide create reply use case."""
        return CreateReplyUseCase(comment_service=comment_service)

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService, ownership_service: OwnershipService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service, ownership_service=ownership_service
        )

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService, ownership_service: OwnershipService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, ownership_service=ownership_service
        )

    # Like use cases
    @provide
    def get_like_use_case(self, like_service: LikeService) -> LikeUseCase:
        """Provide like use case."""
        return LikeUseCase(like_service=like_service)

    @provide
    def get_unlike_use_case(self, like_service: LikeService) -> UnlikeUseCase:
        """Provide unlike use case."""
        return UnlikeUseCase(like_service=like_service)
