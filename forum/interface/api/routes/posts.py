"""Post routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel, Field

from forum.application.usecase.items import PostItem
from forum.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    ListMyPostsRequest,
    ListMyPostsUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from forum.domain.service import IdentityService
from forum.domain.value import coerce_page
from forum.interface.api.auth import optional_user, require_user

router = APIRouter(prefix="/forum", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=300)
    details: str = Field(default="", max_length=10000)


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post; omitted fields stay unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=300)
    details: str | None = Field(default=None, max_length=10000)


@router.get("/posts", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    identity_service: FromDishka[IdentityService],
    authorization: str | None = Header(default=None),
    q: str | None = None,
    page: str | None = None,
) -> ListPostsResponse:
    """Search every post by title, newest first."""
    viewer = await optional_user(identity_service, authorization)
    return await list_posts_use_case.execute(
        ListPostsRequest(q=q, page=coerce_page(page), viewer_id=viewer)
    )


@router.get("/group/{group_id}", response_model=ListPostsResponse)
async def list_group_posts(
    group_id: UUID,
    list_posts_use_case: FromDishka[ListPostsUseCase],
    identity_service: FromDishka[IdentityService],
    authorization: str | None = Header(default=None),
    q: str | None = None,
    page: str | None = None,
) -> ListPostsResponse:
    """Search the posts of one group by title, newest first."""
    viewer = await optional_user(identity_service, authorization)
    return await list_posts_use_case.execute(
        ListPostsRequest(
            q=q, page=coerce_page(page), group_id=group_id, viewer_id=viewer
        )
    )


@router.post(
    "/group/{group_id}", response_model=PostItem, status_code=status.HTTP_201_CREATED
)
async def create_post(
    group_id: UUID,
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    identity_service: FromDishka[IdentityService],
    authorization: str | None = Header(default=None),
) -> PostItem:
    """Create a post in a group.

    Requires authentication.
    """
    uid = await require_user(identity_service, authorization)
    return await create_post_use_case.execute(
        CreatePostRequest(
            uid=uid, group_id=group_id, title=request.title, details=request.details
        )
    )


@router.put("/post/{post_id}", response_model=PostItem)
async def update_post(
    post_id: UUID,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    identity_service: FromDishka[IdentityService],
    authorization: str | None = Header(default=None),
) -> PostItem:
    """Update a post.

    Only the author can update it.
    """
    uid = await require_user(identity_service, authorization)
    return await update_post_use_case.execute(
        UpdatePostRequest(
            uid=uid, post_id=post_id, title=request.title, details=request.details
        )
    )


@router.delete("/post/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    identity_service: FromDishka[IdentityService],
    authorization: str | None = Header(default=None),
) -> DeletePostResponse:
    """Delete a post and its whole thread.

    Only the author can delete it.
    """
    uid = await require_user(identity_service, authorization)
    return await delete_post_use_case.execute(
        DeletePostRequest(uid=uid, post_id=post_id)
    )


@router.get("/myPosts", response_model=list[PostItem])
async def list_my_posts(
    list_my_posts_use_case: FromDishka[ListMyPostsUseCase],
    identity_service: FromDishka[IdentityService],
    authorization: str | None = Header(default=None),
    q: str | None = None,
    page: str | None = None,
) -> list[PostItem]:
    """List the caller's posts.

    Requires authentication.
    """
    uid = await require_user(identity_service, authorization)
    return await list_my_posts_use_case.execute(
        ListMyPostsRequest(uid=uid, q=q, page=coerce_page(page))
    )
