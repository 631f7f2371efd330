"""Delete group use case."""

import logfire
from pydantic import BaseModel

from hub.domain.access import Capability, require_access
from hub.domain.service import GroupService
from hub.domain.value import GroupId, UserId, parse_id


class DeleteGroupRequest(BaseModel):
    """Delete group request."""

    group_id: str
    user_id: str


class DeleteGroupUseCase:
    """Use case for soft-deleting a group (owner only)."""

    def __init__(self, group_service: GroupService) -> None:
        """Initialize delete group use case.

        Args:
            group_service: Group domain service
        """
        self.group_service = group_service

    async def execute(self, request: DeleteGroupRequest) -> None:
        """Deactivate the group. Its content is kept but no longer reachable.

        Raises:
            NotFoundError: If the group does not exist
            NotAuthorizedError: If the caller is not the owner
        """
        with logfire.span("delete_group.execute", group_id=request.group_id):
            group_id = GroupId(parse_id(request.group_id))
            group = await self.group_service.get_group(group_id)
            actor_id = UserId(parse_id(request.user_id))
            require_access(actor_id, group, Capability.MANAGE_GROUP)
            await self.group_service.deactivate(group)
