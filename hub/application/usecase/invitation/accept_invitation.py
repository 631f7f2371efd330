"""Accept invitation use case."""

import logfire
from pydantic import BaseModel

from hub.application.usecase.group.common import present_group
from hub.application.usecase.views import GroupView
from hub.domain.error import BusinessRuleViolationError
from hub.domain.service import GroupService, InvitationService, UserService


class AcceptInvitationRequest(BaseModel):
    """Accept invitation request."""

    token: str


class AcceptInvitationUseCase:
    """Use case for joining a group through an emailed invitation."""

    def __init__(
        self,
        invitation_service: InvitationService,
        group_service: GroupService,
        user_service: UserService,
    ) -> None:
        """Initialize accept invitation use case.

        Args:
            invitation_service: Invitation domain service
            group_service: Group domain service
            user_service: User service (account for the invited email)
        """
        self.invitation_service = invitation_service
        self.group_service = group_service
        self.user_service = user_service

    async def execute(self, request: AcceptInvitationRequest) -> GroupView:
        """Execute accept invitation flow.

        The invitation is matched to an account by its email address, so the
        invitee must register before accepting.

        Raises:
            BusinessRuleViolationError: If the token is invalid or expired,
                no account uses the invited email, or the account already
                belongs to the group (the invitation is then closed)
            NotFoundError: If the group was deleted
        """
        with logfire.span("accept_invitation.execute"):
            invitation = await self.invitation_service.get_acceptable(request.token)

            user = await self.user_service.find_by_email(invitation.email.root)
            if user is None:
                logfire.warn("Invitation accepted before registering")
                raise BusinessRuleViolationError(
                    "No account found for this email. Please register first."
                )

            group = await self.group_service.get_group(invitation.group_id)
            if group.is_member(user.id) or group.is_owner(user.id):
                await self.invitation_service.mark_expired(invitation)
                raise BusinessRuleViolationError("You are already a member of this group")

            joined = await self.group_service.add_member(group, user.id)
            await self.invitation_service.mark_accepted(invitation, user.id)
            return await present_group(self.user_service, joined, user.id)
