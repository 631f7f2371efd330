"""List pending invitations use case."""

import logfire
from pydantic import BaseModel

from hub.application.usecase.views import InvitationView
from hub.domain.access import Capability, require_access
from hub.domain.service import GroupService, InvitationService, UserService
from hub.domain.value import GroupId, UserId, parse_id


class ListInvitationsRequest(BaseModel):
    """List invitations request."""

    group_id: str
    user_id: str


class ListInvitationsUseCase:
    """Use case for an owner reviewing open invitations."""

    def __init__(
        self,
        group_service: GroupService,
        invitation_service: InvitationService,
        user_service: UserService,
    ) -> None:
        """Initialize list invitations use case.

        Args:
            group_service: Group domain service
            invitation_service: Invitation domain service
            user_service: User service for inviter profiles
        """
        self.group_service = group_service
        self.invitation_service = invitation_service
        self.user_service = user_service

    async def execute(self, request: ListInvitationsRequest) -> list[InvitationView]:
        """Pending invitations for the group, newest first.

        Raises:
            NotAuthorizedError: If the caller is not the owner
        """
        with logfire.span("list_invitations.execute", group_id=request.group_id):
            group_id = GroupId(parse_id(request.group_id))
            group = await self.group_service.get_group(group_id)
            require_access(
                UserId(parse_id(request.user_id)), group, Capability.MANAGE_GROUP
            )

            invitations = await self.invitation_service.list_pending(group.id)
            inviters = await self.user_service.get_many(
                [invitation.invited_by for invitation in invitations]
            )
            return [
                InvitationView.from_invitation(invitation, inviters)
                for invitation in invitations
            ]
