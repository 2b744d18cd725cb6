"""Like routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from forum.application.usecase.like import (
    LikeRequest,
    LikeResponse,
    LikeUseCase,
    UnlikeUseCase,
)
from forum.domain.service import IdentityService
from forum.domain.value import LikeTargetType
from forum.interface.api.auth import require_user

router = APIRouter(prefix="/forum", tags=["likes"], route_class=DishkaRoute)


@router.post("/likePost/{post_id}", response_model=LikeResponse)
async def like_post(
    post_id: UUID,
    like_use_case: FromDishka[LikeUseCase],
    identity_service: FromDishka[IdentityService],
    authorization: str | None = Header(default=None),
) -> LikeResponse:
    """Like a post. Liking twice changes nothing."""
    uid = await require_user(identity_service, authorization)
    return await like_use_case.execute(
        LikeRequest(uid=uid, target_type=LikeTargetType.POST, target_id=post_id)
    )


@router.delete("/likePost/{post_id}", response_model=LikeResponse)
async def unlike_post(
    post_id: UUID,
    unlike_use_case: FromDishka[UnlikeUseCase],
    identity_service: FromDishka[IdentityService],
    authorization: str | None = Header(default=None),
) -> LikeResponse:
    """Remove the caller's like from a post."""
    uid = await require_user(identity_service, authorization)
    return await unlike_use_case.execute(
        LikeRequest(uid=uid, target_type=LikeTargetType.POST, target_id=post_id)
    )


@router.post("/likeComment/{comment_id}", response_model=LikeResponse)
async def like_comment(
    comment_id: UUID,
    like_use_case: FromDishka[LikeUseCase],
    identity_service: FromDishka[IdentityService],
    authorization: str | None = Header(default=None),
) -> LikeResponse:
    """Like a comment. Liking twice changes nothing."""
    uid = await require_user(identity_service, authorization)
    return await like_use_case.execute(
        LikeRequest(uid=uid, target_type=LikeTargetType.COMMENT, target_id=comment_id)
    )


@router.delete("/likeComment/{comment_id}", response_model=LikeResponse)
async def unlike_comment(
    comment_id: UUID,
    unlike_use_case: FromDishka[UnlikeUseCase],
    identity_service: FromDishka[IdentityService],
    authorization: str | None = Header(default=None),
) -> LikeResponse:
    """Remove the caller's like from a comment."""
    uid = await require_user(identity_service, authorization)
    return await unlike_use_case.execute(
        LikeRequest(uid=uid, target_type=LikeTargetType.COMMENT, target_id=comment_id)
    )
