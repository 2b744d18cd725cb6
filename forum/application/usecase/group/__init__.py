"""Group use cases."""

from .create_group import CreateGroupRequest, CreateGroupUseCase
from .delete_group import DeleteGroupRequest, DeleteGroupResponse, DeleteGroupUseCase
from .get_group import GetGroupRequest, GetGroupUseCase
from .list_groups import ListGroupsRequest, ListGroupsUseCase
from .list_my_groups import ListMyGroupsRequest, ListMyGroupsUseCase
from .update_group import UpdateGroupRequest, UpdateGroupUseCase

__all__ = [
    "CreateGroupRequest",
    "CreateGroupUseCase",
    "DeleteGroupRequest",
    "DeleteGroupResponse",
    "DeleteGroupUseCase",
    "GetGroupRequest",
    "GetGroupUseCase",
    "ListGroupsRequest",
    "ListGroupsUseCase",
    "ListMyGroupsRequest",
    "ListMyGroupsUseCase",
    "UpdateGroupRequest",
    "UpdateGroupUseCase",
]
