"""Get group use case."""

import logfire
from pydantic import BaseModel

from hub.application.usecase.group.common import present_group
from hub.application.usecase.views import GroupView
from hub.domain.access import Capability, require_access
from hub.domain.service import GroupService, UserService
from hub.domain.value import GroupId, UserId, parse_id


class GetGroupRequest(BaseModel):
    """Get group request."""

    group_id: str
    user_id: str | None = None  # Current user ID (if authenticated)


class GetGroupUseCase:
    """Use case for reading one group with its members."""

    def __init__(self, group_service: GroupService, user_service: UserService) -> None:
        """Initialize get group use case.

        Args:
            group_service: Group domain service
            user_service: User service for owner and member profiles
        """
        self.group_service = group_service
        self.user_service = user_service

    async def execute(self, request: GetGroupRequest) -> GroupView:
        """Execute get group flow.

        Private groups are only visible to their members.

        Raises:
            NotFoundError: If the group does not exist or was deleted
            NotAuthorizedError: If the group is private and the caller is
                not a member
        """
        with logfire.span("get_group.execute", group_id=request.group_id):
            group_id = GroupId(parse_id(request.group_id))
            group = await self.group_service.get_group(group_id)
            actor_id = UserId(parse_id(request.user_id)) if request.user_id else None
            require_access(actor_id, group, Capability.VIEW_GROUP)
            return await present_group(self.user_service, group, actor_id)
