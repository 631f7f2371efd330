"""Update group use case."""

import logfire
from pydantic import BaseModel, Field

from hub.application.usecase.group.common import present_group
from hub.application.usecase.views import GroupView
from hub.domain.access import Capability, require_access
from hub.domain.service import GroupService, UserService
from hub.domain.value import GroupId, UserId, parse_id


class UpdateGroupRequest(BaseModel):
    """Update group request. Omitted fields keep their value."""

    group_id: str
    user_id: str
    name: str | None = Field(default=None, min_length=3, max_length=100)
    description: str | None = Field(default=None, min_length=1, max_length=500)
    is_public: bool | None = None
    field_of_study: str | None = Field(default=None, max_length=100)


class UpdateGroupUseCase:
    """Use case for changing a group's settings (owner only)."""

    def __init__(self, group_service: GroupService, user_service: UserService) -> None:
        """Initialize update group use case.

        Args:
            group_service: Group domain service
            user_service: User service for owner and member profiles
        """
        self.group_service = group_service
        self.user_service = user_service

    async def execute(self, request: UpdateGroupRequest) -> GroupView:
        """Execute update group flow.

        Raises:
            NotFoundError: If the group does not exist
            NotAuthorizedError: If the caller is not the owner
            BusinessRuleViolationError: If the new name is taken
        """
        with logfire.span("update_group.execute", group_id=request.group_id):
            group_id = GroupId(parse_id(request.group_id))
            group = await self.group_service.get_group(group_id)
            actor_id = UserId(parse_id(request.user_id))
            require_access(actor_id, group, Capability.MANAGE_GROUP)

            updated = await self.group_service.update_group(
                group,
                name=request.name,
                description=request.description,
                is_public=request.is_public,
                field_of_study=request.field_of_study,
            )
            return await present_group(self.user_service, updated, actor_id)
