"""Send invitation use case."""

import logfire
from pydantic import BaseModel, Field

from hub.application.usecase.views import InvitationView
from hub.domain.access import Capability, require_access
from hub.domain.error import BusinessRuleViolationError
from hub.domain.service import GroupService, InvitationService, UserService
from hub.domain.value import GroupId, UserId, parse_id


class SendInvitationRequest(BaseModel):
    """Send invitation request."""

    group_id: str
    user_id: str  # Inviting member, from the authenticated user
    email: str
    message: str | None = Field(default=None, max_length=500)


class SendInvitationUseCase:
    """Use case for inviting someone to a group by email."""

    def __init__(
        self,
        group_service: GroupService,
        user_service: UserService,
        invitation_service: InvitationService,
    ) -> None:
        """Initialize send invitation use case.

        Args:
            group_service: Group domain service
            user_service: User service (sender profile, existing accounts)
            invitation_service: Invitation domain service
        """
        self.group_service = group_service
        self.user_service = user_service
        self.invitation_service = invitation_service

    async def execute(self, request: SendInvitationRequest) -> InvitationView:
        """Execute send invitation flow.

        Steps:
        1. Check the caller belongs to the group
        2. Refuse addresses that already belong to a member
        3. Create the invitation and email the link

        Raises:
            NotAuthorizedError: If the caller is not a member
            ValidationError: If the email is invalid
            BusinessRuleViolationError: If the invitee is already a member or
                already has a pending invitation
            EmailDeliveryError: If the email could not be sent
        """
        with logfire.span("send_invitation.execute", group_id=request.group_id):
            group_id = GroupId(parse_id(request.group_id))
            group = await self.group_service.get_group(group_id)
            sender_id = UserId(parse_id(request.user_id))
            require_access(sender_id, group, Capability.CONTRIBUTE)

            invitee = await self.user_service.find_by_email(request.email)
            if invitee and (group.is_member(invitee.id) or group.is_owner(invitee.id)):
                raise BusinessRuleViolationError("User is already a member of this group")

            invitation = await self.invitation_service.create_invitation(
                group_id=group.id,
                invited_by=sender_id,
                email=request.email,
                message=request.message,
            )
            sender = await self.user_service.get_by_id(sender_id)
            await self.invitation_service.deliver(invitation, group, sender)

            return InvitationView.from_invitation(invitation, {sender.id: sender})
