"""Invitation domain service."""

from datetime import timedelta
from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from hub.adapter.email import EmailSender, invitation_email
from hub.adapter.error import EmailDeliveryError
from hub.config import Settings
from hub.domain.error import BusinessRuleViolationError, ValidationError
from hub.domain.model import Group, Invitation, User, utcnow
from hub.domain.repository import InvitationRepository
from hub.domain.value import Email, GroupId, InvitationId, InvitationToken, UserId

from .base import Service


class InvitationService(Service):
    """Domain service for email invitations to groups."""

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        email_sender: EmailSender,
        settings: Settings,
    ) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
            email_sender: Outgoing mail adapter
            settings: Application settings (expiry, frontend URL)
        """
        self.invitation_repository = invitation_repository
        self.email_sender = email_sender
        self.settings = settings

    def invite_link(self, token: InvitationToken) -> str:
        """Frontend URL the invitee follows to accept."""
        return f"{self.settings.api.frontend_url}/accept-invitation/{token.root}"

    async def create_invitation(
        self,
        group_id: GroupId,
        invited_by: UserId,
        email: str,
        message: Optional[str] = None,
    ) -> Invitation:
        """Create a pending invitation with a fresh token.

        Args:
            group_id: Target group
            invited_by: Inviting member
            email: Invitee address
            message: Optional personal message

        Returns:
            Created invitation

        Raises:
            ValidationError: If the email or message is invalid
            BusinessRuleViolationError: If an open invitation already exists
        """
        with logfire.span(
            "invitation_service.create_invitation",
            group_id=str(group_id),
            invited_by=str(invited_by),
        ):
            if "@" not in email:
                raise ValidationError("Valid email address is required")

            try:
                invitee = Email(email)
                invitation = Invitation(
                    id=InvitationId(uuid4()),
                    group_id=group_id,
                    invited_by=invited_by,
                    email=invitee,
                    message=message.strip() if message else None,
                    token=InvitationToken.generate(),
                    expires_at=utcnow()
                    + timedelta(days=self.settings.invitations.expiry_days),
                )
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)

            existing = await self.invitation_repository.find_pending(invitee, group_id)
            if existing:
                logfire.warn("Invitation already pending", group_id=str(group_id))
                raise BusinessRuleViolationError(
                    "An invitation has already been sent to this email"
                )

            saved = await self.invitation_repository.save(invitation)
            logfire.info("Invitation created", invitation_id=str(saved.id))
            return saved

    async def deliver(self, invitation: Invitation, group: Group, sender: User) -> None:
        """Email an invitation. The invitation is deleted if delivery fails.

        Raises:
            EmailDeliveryError: If the mail could not be sent
        """
        with logfire.span(
            "invitation_service.deliver", invitation_id=str(invitation.id)
        ):
            email = invitation_email(
                recipient=invitation.email.root,
                sender_name=sender.full_name,
                group_name=group.name,
                group_description=group.description,
                invite_link=self.invite_link(invitation.token),
                expiry_days=self.settings.invitations.expiry_days,
                personal_message=invitation.message,
            )
            try:
                await self.email_sender.send(email)
            except EmailDeliveryError as e:
                logfire.error(
                    "Invitation email failed; removing invitation",
                    invitation_id=str(invitation.id),
                    error=str(e),
                )
                await self.invitation_repository.delete(invitation.id)
                raise
            logfire.info("Invitation delivered", invitation_id=str(invitation.id))

    async def get_acceptable(self, token: str) -> Invitation:
        """Find an invitation that can still be accepted.

        Raises:
            BusinessRuleViolationError: If the token is unknown, used or expired
        """
        with logfire.span("invitation_service.get_acceptable"):
            invitation = None
            if token:
                invitation = await self.invitation_repository.find_by_token(
                    InvitationToken(token)
                )
            if invitation is None or not invitation.is_acceptable:
                logfire.warn("Invalid or expired invitation token")
                raise BusinessRuleViolationError("Invalid or expired invitation")
            return invitation

    async def mark_accepted(self, invitation: Invitation, user_id: UserId) -> Invitation:
        """Record acceptance by ``user_id``."""
        with logfire.span(
            "invitation_service.mark_accepted", invitation_id=str(invitation.id)
        ):
            saved = await self.invitation_repository.save(invitation.accept(user_id))
            logfire.info("Invitation accepted", invitation_id=str(invitation.id))
            return saved

    async def mark_expired(self, invitation: Invitation) -> Invitation:
        """Close an invitation without accepting it."""
        with logfire.span(
            "invitation_service.mark_expired", invitation_id=str(invitation.id)
        ):
            saved = await self.invitation_repository.save(invitation.expire())
            logfire.info("Invitation expired", invitation_id=str(invitation.id))
            return saved

    async def list_pending(self, group_id: GroupId) -> list[Invitation]:
        """Open invitations for a group, newest first."""
        with logfire.span("invitation_service.list_pending", group_id=str(group_id)):
            invitations = await self.invitation_repository.find_pending_by_group(group_id)
            logfire.info("Pending invitations listed", count=len(invitations))
            return invitations
