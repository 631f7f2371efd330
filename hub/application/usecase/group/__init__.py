"""Group use cases."""

from .create_group import CreateGroupRequest, CreateGroupUseCase
from .delete_group import DeleteGroupRequest, DeleteGroupUseCase
from .get_group import GetGroupRequest, GetGroupUseCase
from .get_my_groups import GetMyGroupsRequest, GetMyGroupsUseCase
from .list_groups import ListGroupsRequest, ListGroupsResponse, ListGroupsUseCase
from .membership import (
    JoinGroupUseCase,
    LeaveGroupUseCase,
    MembershipRequest,
    RemoveMemberRequest,
    RemoveMemberUseCase,
)
from .update_group import UpdateGroupRequest, UpdateGroupUseCase

__all__ = [
    "CreateGroupRequest",
    "CreateGroupUseCase",
    "DeleteGroupRequest",
    "DeleteGroupUseCase",
    "GetGroupRequest",
    "GetGroupUseCase",
    "GetMyGroupsRequest",
    "GetMyGroupsUseCase",
    "JoinGroupUseCase",
    "LeaveGroupUseCase",
    "ListGroupsRequest",
    "ListGroupsResponse",
    "ListGroupsUseCase",
    "MembershipRequest",
    "RemoveMemberRequest",
    "RemoveMemberUseCase",
    "UpdateGroupRequest",
    "UpdateGroupUseCase",
]
