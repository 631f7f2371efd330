"""Join, leave and remove-member use cases."""

import logfire
from pydantic import BaseModel

from hub.application.usecase.group.common import present_group
from hub.application.usecase.views import GroupView
from hub.domain.access import Capability, require_access
from hub.domain.error import NotAuthorizedError
from hub.domain.service import GroupService, UserService
from hub.domain.value import GroupId, UserId, parse_id


class MembershipRequest(BaseModel):
    """The caller acting on their own membership."""

    group_id: str
    user_id: str


class RemoveMemberRequest(BaseModel):
    """Owner removing another member."""

    group_id: str
    user_id: str  # Owner, from the authenticated user
    member_id: str


class JoinGroupUseCase:
    """Use case for joining a public group."""

    def __init__(self, group_service: GroupService, user_service: UserService) -> None:
        """Initialize join group use case.

        Args:
            group_service: Group domain service
            user_service: User service for owner and member profiles
        """
        self.group_service = group_service
        self.user_service = user_service

    async def execute(self, request: MembershipRequest) -> GroupView:
        """Add the caller to the group.

        Private groups can only be joined through an invitation.

        Raises:
            NotFoundError: If the group does not exist
            NotAuthorizedError: If the group is private
            BusinessRuleViolationError: If the caller is already a member
        """
        with logfire.span("join_group.execute", group_id=request.group_id):
            group_id = GroupId(parse_id(request.group_id))
            group = await self.group_service.get_group(group_id)
            user_id = UserId(parse_id(request.user_id))
            if not group.is_public:
                logfire.warn("Join rejected: private group", group_id=request.group_id)
                raise NotAuthorizedError(
                    "This is a private group. You need an invitation to join."
                )

            joined = await self.group_service.join(group, user_id)
            return await present_group(self.user_service, joined, user_id)


class LeaveGroupUseCase:
    """Use case for leaving a group."""

    def __init__(self, group_service: GroupService) -> None:
        """Initialize leave group use case.

        Args:
            group_service: Group domain service
        """
        self.group_service = group_service

    async def execute(self, request: MembershipRequest) -> None:
        """Remove the caller from the group.

        Raises:
            NotFoundError: If the group does not exist
            BusinessRuleViolationError: If the caller is not a member or
                owns the group
        """
        with logfire.span("leave_group.execute", group_id=request.group_id):
            group_id = GroupId(parse_id(request.group_id))
            group = await self.group_service.get_group(group_id)
            await self.group_service.leave(group, UserId(parse_id(request.user_id)))


class RemoveMemberUseCase:
    """Use case for an owner removing a member."""

    def __init__(self, group_service: GroupService, user_service: UserService) -> None:
        """Initialize remove member use case.

        Args:
            group_service: Group domain service
            user_service: User service for owner and member profiles
        """
        self.group_service = group_service
        self.user_service = user_service

    async def execute(self, request: RemoveMemberRequest) -> GroupView:
        """Remove ``member_id`` from the group.

        Raises:
            NotFoundError: If the group does not exist
            NotAuthorizedError: If the caller is not the owner
            BusinessRuleViolationError: If the member is the owner or not in
                the group
        """
        with logfire.span(
            "remove_member.execute",
            group_id=request.group_id,
            member_id=request.member_id,
        ):
            group_id = GroupId(parse_id(request.group_id))
            group = await self.group_service.get_group(group_id)
            actor_id = UserId(parse_id(request.user_id))
            require_access(actor_id, group, Capability.MANAGE_GROUP)

            updated = await self.group_service.remove_member(
                group, UserId(parse_id(request.member_id))
            )
            return await present_group(self.user_service, updated, actor_id)
