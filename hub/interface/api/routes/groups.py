"""Group routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel, Field

from hub.application.usecase.group import (
    CreateGroupRequest,
    CreateGroupUseCase,
    DeleteGroupRequest,
    DeleteGroupUseCase,
    GetGroupRequest,
    GetGroupUseCase,
    GetMyGroupsRequest,
    GetMyGroupsUseCase,
    JoinGroupUseCase,
    LeaveGroupUseCase,
    ListGroupsRequest,
    ListGroupsUseCase,
    MembershipRequest,
    RemoveMemberRequest,
    RemoveMemberUseCase,
    UpdateGroupRequest,
    UpdateGroupUseCase,
)
from hub.application.usecase.views import GroupView
from hub.domain.service import AuthService
from hub.domain.value import MAX_PAGE_SIZE
from hub.interface.api.envelope import Envelope, MessageResponse

router = APIRouter(prefix="/groups", tags=["groups"], route_class=DishkaRoute)


class CreateGroupAPIRequest(BaseModel):
    """API request for creating a group."""

    name: str = Field(min_length=3, max_length=100)
    description: str = Field(min_length=1, max_length=500)
    is_public: bool = True
    field_of_study: str | None = Field(default=None, max_length=100)


class UpdateGroupAPIRequest(BaseModel):
    """API request for updating a group. Omitted fields are unchanged."""

    name: str | None = Field(default=None, min_length=3, max_length=100)
    description: str | None = Field(default=None, min_length=1, max_length=500)
    is_public: bool | None = None
    field_of_study: str | None = Field(default=None, max_length=100)


@router.get("", response_model=Envelope[list[GroupView]])
async def list_groups(
    list_groups_use_case: FromDishka[ListGroupsUseCase],
    auth_service: FromDishka[AuthService],
    search: str | None = None,
    field_of_study: str | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=MAX_PAGE_SIZE),
    authorization: str | None = Header(default=None),
) -> Envelope[list[GroupView]]:
    """List active public groups, newest first.

    Args:
        list_groups_use_case: List groups use case from DI
        auth_service: Auth service from DI (optional caller)
        search: Case-insensitive match on name or description
        field_of_study: Case-insensitive match on field of study
        page: Page number (1-based)
        limit: Page size
        authorization: Optional bearer token, used for ``user_role``

    Returns:
        One page of groups
    """
    user = await auth_service.authenticate_optional(authorization)
    result = await list_groups_use_case.execute(
        ListGroupsRequest(
            search=search,
            field_of_study=field_of_study,
            page=page,
            limit=limit,
            user_id=str(user.id) if user else None,
        )
    )
    return Envelope(data=result.groups, pagination=result.pagination)


@router.get("/my-groups", response_model=Envelope[list[GroupView]])
async def get_my_groups(
    get_my_groups_use_case: FromDishka[GetMyGroupsUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> Envelope[list[GroupView]]:
    """Groups the caller owns or belongs to."""
    user = await auth_service.authenticate(authorization)
    groups = await get_my_groups_use_case.execute(
        GetMyGroupsRequest(user_id=str(user.id))
    )
    return Envelope(data=groups)


@router.post(
    "", response_model=Envelope[GroupView], status_code=status.HTTP_201_CREATED
)
async def create_group(
    body: CreateGroupAPIRequest,
    create_group_use_case: FromDishka[CreateGroupUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> Envelope[GroupView]:
    """Create a group owned by the caller."""
    user = await auth_service.authenticate(authorization)
    group = await create_group_use_case.execute(
        CreateGroupRequest(user_id=str(user.id), **body.model_dump())
    )
    return Envelope(message="Group created successfully", data=group)


@router.get("/{group_id}", response_model=Envelope[GroupView])
async def get_group(
    group_id: str,
    get_group_use_case: FromDishka[GetGroupUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> Envelope[GroupView]:
    """Get a group. Private groups are visible to their members only."""
    user = await auth_service.authenticate_optional(authorization)
    group = await get_group_use_case.execute(
        GetGroupRequest(group_id=group_id, user_id=str(user.id) if user else None)
    )
    return Envelope(data=group)


@router.put("/{group_id}", response_model=Envelope[GroupView])
async def update_group(
    group_id: str,
    body: UpdateGroupAPIRequest,
    update_group_use_case: FromDishka[UpdateGroupUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> Envelope[GroupView]:
    """Update a group's details (owner only)."""
    user = await auth_service.authenticate(authorization)
    group = await update_group_use_case.execute(
        UpdateGroupRequest(
            group_id=group_id,
            user_id=str(user.id),
            **body.model_dump(exclude_unset=True),
        )
    )
    return Envelope(message="Group updated successfully", data=group)


@router.delete("/{group_id}", response_model=MessageResponse)
async def delete_group(
    group_id: str,
    delete_group_use_case: FromDishka[DeleteGroupUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> MessageResponse:
    """Deactivate a group (owner only)."""
    user = await auth_service.authenticate(authorization)
    await delete_group_use_case.execute(
        DeleteGroupRequest(group_id=group_id, user_id=str(user.id))
    )
    return MessageResponse(message="Group deleted successfully")


@router.post("/{group_id}/join", response_model=Envelope[GroupView])
async def join_group(
    group_id: str,
    join_group_use_case: FromDishka[JoinGroupUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> Envelope[GroupView]:
    """Join a public group."""
    user = await auth_service.authenticate(authorization)
    group = await join_group_use_case.execute(
        MembershipRequest(group_id=group_id, user_id=str(user.id))
    )
    return Envelope(message="Successfully joined the group", data=group)


@router.post("/{group_id}/leave", response_model=MessageResponse)
async def leave_group(
    group_id: str,
    leave_group_use_case: FromDishka[LeaveGroupUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> MessageResponse:
    """Leave a group. The owner cannot leave."""
    user = await auth_service.authenticate(authorization)
    await leave_group_use_case.execute(
        MembershipRequest(group_id=group_id, user_id=str(user.id))
    )
    return MessageResponse(message="Successfully left the group")


@router.delete("/{group_id}/members/{member_id}", response_model=Envelope[GroupView])
async def remove_member(
    group_id: str,
    member_id: str,
    remove_member_use_case: FromDishka[RemoveMemberUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> Envelope[GroupView]:
    """Remove a member from a group (owner only)."""
    user = await auth_service.authenticate(authorization)
    group = await remove_member_use_case.execute(
        RemoveMemberRequest(
            group_id=group_id, user_id=str(user.id), member_id=member_id
        )
    )
    return Envelope(message="Member removed successfully", data=group)
