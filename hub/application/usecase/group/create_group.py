"""Create group use case."""

import logfire
from pydantic import BaseModel, Field

from hub.application.usecase.group.common import present_group
from hub.application.usecase.views import GroupView
from hub.domain.service import GroupService, UserService
from hub.domain.value import UserId, parse_id


class CreateGroupRequest(BaseModel):
    """Create group request."""

    user_id: str  # Owner, from the authenticated user
    name: str = Field(min_length=3, max_length=100)
    description: str = Field(min_length=1, max_length=500)
    is_public: bool = True
    field_of_study: str | None = Field(default=None, max_length=100)


class CreateGroupUseCase:
    """Use case for creating a research group."""

    def __init__(self, group_service: GroupService, user_service: UserService) -> None:
        """Initialize create group use case.

        Args:
            group_service: Group domain service
            user_service: User service for owner and member profiles
        """
        self.group_service = group_service
        self.user_service = user_service

    async def execute(self, request: CreateGroupRequest) -> GroupView:
        """Create the group with the caller as owner and first member.

        Raises:
            BusinessRuleViolationError: If an active group has the same name
        """
        with logfire.span("create_group.execute", user_id=request.user_id):
            owner_id = UserId(parse_id(request.user_id))
            group = await self.group_service.create_group(
                owner_id=owner_id,
                name=request.name,
                description=request.description,
                is_public=request.is_public,
                field_of_study=request.field_of_study,
            )
            return await present_group(self.user_service, group, owner_id)
