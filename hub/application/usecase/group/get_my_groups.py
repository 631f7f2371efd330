"""Get my groups use case."""

import logfire
from pydantic import BaseModel

from hub.application.usecase.group.common import present_groups
from hub.application.usecase.views import GroupView
from hub.domain.service import GroupService, UserService
from hub.domain.value import UserId, parse_id


class GetMyGroupsRequest(BaseModel):
    """Get my groups request."""

    user_id: str


class GetMyGroupsUseCase:
    """Use case for listing the groups the caller owns or belongs to."""

    def __init__(self, group_service: GroupService, user_service: UserService) -> None:
        """Initialize get my groups use case.

        Args:
            group_service: Group domain service
            user_service: User service for owner and member profiles
        """
        self.group_service = group_service
        self.user_service = user_service

    async def execute(self, request: GetMyGroupsRequest) -> list[GroupView]:
        with logfire.span("get_my_groups.execute", user_id=request.user_id):
            user_id = UserId(parse_id(request.user_id))
            groups = await self.group_service.list_for_member(user_id)
            return await present_groups(self.user_service, groups, user_id)
