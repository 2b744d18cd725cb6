"""Group routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel, Field

from forum.application.usecase.group import (
    CreateGroupRequest,
    CreateGroupUseCase,
    DeleteGroupRequest,
    DeleteGroupResponse,
    DeleteGroupUseCase,
    GetGroupRequest,
    GetGroupUseCase,
    ListGroupsRequest,
    ListGroupsUseCase,
    ListMyGroupsRequest,
    ListMyGroupsUseCase,
    UpdateGroupRequest,
    UpdateGroupUseCase,
)
from forum.application.usecase.items import GroupItem, PageResponse
from forum.domain.service import IdentityService
from forum.domain.value import coerce_page
from forum.interface.api.auth import require_user

router = APIRouter(prefix="/forum", tags=["groups"], route_class=DishkaRoute)


class GroupAPIRequest(BaseModel):
    """API request for creating a group."""

    name: str = Field(min_length=1, max_length=100)
    description: str = Field(default="", max_length=2000)


class UpdateGroupAPIRequest(BaseModel):
    """API request for updating a group; omitted fields stay unchanged."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=2000)


@router.get("/groups", response_model=PageResponse[GroupItem])
async def list_groups(
    list_groups_use_case: FromDishka[ListGroupsUseCase],
    q: str | None = None,
    page: str | None = None,
) -> PageResponse[GroupItem]:
    """Search groups by name.

    Args:
        list_groups_use_case: List groups use case from DI
        q: Case-insensitive substring of the group name
        page: 1-indexed page; anything unparsable means page 1

    Returns:
        One page of groups ordered by name
    """
    return await list_groups_use_case.execute(
        ListGroupsRequest(q=q, page=coerce_page(page))
    )


@router.get("/groups/{group_id}", response_model=GroupItem)
async def get_group(
    group_id: UUID,
    get_group_use_case: FromDishka[GetGroupUseCase],
) -> GroupItem:
    """Get one group."""
    return await get_group_use_case.execute(GetGroupRequest(group_id=group_id))


@router.post("/groups", response_model=GroupItem, status_code=status.HTTP_201_CREATED)
async def create_group(
    request: GroupAPIRequest,
    create_group_use_case: FromDishka[CreateGroupUseCase],
    identity_service: FromDishka[IdentityService],
    authorization: str | None = Header(default=None),
) -> GroupItem:
    """Create a group owned by the caller.

    Requires authentication.
    """
    uid = await require_user(identity_service, authorization)
    return await create_group_use_case.execute(
        CreateGroupRequest(uid=uid, name=request.name, description=request.description)
    )


@router.put("/group/{group_id}", response_model=GroupItem)
async def update_group(
    group_id: UUID,
    request: UpdateGroupAPIRequest,
    update_group_use_case: FromDishka[UpdateGroupUseCase],
    identity_service: FromDishka[IdentityService],
    authorization: str | None = Header(default=None),
) -> GroupItem:
    """Update a group.

    Only the owner can update it.
    """
    uid = await require_user(identity_service, authorization)
    return await update_group_use_case.execute(
        UpdateGroupRequest(
            uid=uid,
            group_id=group_id,
            name=request.name,
            description=request.description,
        )
    )


@router.delete("/group/{group_id}", response_model=DeleteGroupResponse)
async def delete_group(
    group_id: UUID,
    delete_group_use_case: FromDishka[DeleteGroupUseCase],
    identity_service: FromDishka[IdentityService],
    authorization: str | None = Header(default=None),
) -> DeleteGroupResponse:
    """Delete a group with its posts and their threads.

    Only the owner can delete it.
    """
    uid = await require_user(identity_service, authorization)
    return await delete_group_use_case.execute(
        DeleteGroupRequest(uid=uid, group_id=group_id)
    )


@router.get("/myGroups", response_model=list[GroupItem])
async def list_my_groups(
    list_my_groups_use_case: FromDishka[ListMyGroupsUseCase],
    identity_service: FromDishka[IdentityService],
    authorization: str | None = Header(default=None),
    q: str | None = None,
    page: str | None = None,
) -> list[GroupItem]:
    """List the groups the caller owns.

    Requires authentication.
    """
    uid = await require_user(identity_service, authorization)
    return await list_my_groups_use_case.execute(
        ListMyGroupsRequest(uid=uid, q=q, page=coerce_page(page))
    )
