"""Comment routes.

Replies are addressed by their parent: ``/post/{id}`` for root comments,
``/comment/{id}`` for nested replies. Reads return one level at a time.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel, Field

from forum.application.usecase.comment import (
    CreateReplyRequest,
    CreateReplyUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    ListRepliesRequest,
    ListRepliesUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from forum.application.usecase.items import CommentItem, PageResponse
from forum.domain.service import IdentityService
from forum.domain.value import ParentType, coerce_page
from forum.interface.api.auth import optional_user, require_user

router = APIRouter(prefix="/forum", tags=["comments"], route_class=DishkaRoute)


class CommentAPIRequest(BaseModel):
    """API request carrying comment text."""

    content: str = Field(min_length=1, max_length=10000)


@router.get("/post/{post_id}", response_model=PageResponse[CommentItem])
async def list_post_comments(
    post_id: UUID,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    identity_service: FromDishka[IdentityService],
    authorization: str | None = Header(default=None),
    page: str | None = None,
) -> PageResponse[CommentItem]:
    """List one page of a post's root comments, newest first.

    Args:
        post_id: Post UUID
        list_comments_use_case: List comments use case from DI
        identity_service: Identity service for the optional caller
        authorization: Optional bearer token, fills ``is_liked``
        page: 1-indexed page; anything unparsable means page 1

    Returns:
        Root comments with empty reply lists for the client to expand
    """
    viewer = await optional_user(identity_service, authorization)
    return await list_comments_use_case.execute(
        ListCommentsRequest(post_id=post_id, page=coerce_page(page), viewer_id=viewer)
    )


@router.post(
    "/post/{post_id}", response_model=CommentItem, status_code=status.HTTP_201_CREATED
)
async def reply_to_post(
    post_id: UUID,
    request: CommentAPIRequest,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
    identity_service: FromDishka[IdentityService],
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Add a root comment to a post.

    Requires authentication.
    """
    uid = await require_user(identity_service, authorization)
    return await create_reply_use_case.execute(
        CreateReplyRequest(
            uid=uid,
            parent_type=ParentType.POST,
            parent_id=post_id,
            content=request.content,
        )
    )


@router.get("/comment/{comment_id}", response_model=PageResponse[CommentItem])
async def list_comment_replies(
    comment_id: UUID,
    list_replies_use_case: FromDishka[ListRepliesUseCase],
    identity_service: FromDishka[IdentityService],
    authorization: str | None = Header(default=None),
    page: str | None = None,
) -> PageResponse[CommentItem]:
    """List one page of a comment's direct replies, newest first."""
    viewer = await optional_user(identity_service, authorization)
    return await list_replies_use_case.execute(
        ListRepliesRequest(
            comment_id=comment_id, page=coerce_page(page), viewer_id=viewer
        )
    )


@router.post(
    "/comment/{comment_id}",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def reply_to_comment(
    comment_id: UUID,
    request: CommentAPIRequest,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
    identity_service: FromDishka[IdentityService],
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Reply to a comment.

    Requires authentication.
    """
    uid = await require_user(identity_service, authorization)
    return await create_reply_use_case.execute(
        CreateReplyRequest(
            uid=uid,
            parent_type=ParentType.COMMENT,
            parent_id=comment_id,
            content=request.content,
        )
    )


@router.put("/comment/{comment_id}", response_model=CommentItem)
async def update_comment(
    comment_id: UUID,
    request: CommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    identity_service: FromDishka[IdentityService],
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Edit a comment.

    Only the author can edit it.
    """
    uid = await require_user(identity_service, authorization)
    return await update_comment_use_case.execute(
        UpdateCommentRequest(uid=uid, comment_id=comment_id, content=request.content)
    )


@router.delete("/comment/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    identity_service: FromDishka[IdentityService],
    authorization: str | None = Header(default=None),
) -> DeleteCommentResponse:
    """Delete a comment with all replies beneath it.

    Only the author can delete it.
    """
    uid = await require_user(identity_service, authorization)
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(uid=uid, comment_id=comment_id)
    )
