"""Unit tests for InvitationService."""

from datetime import timedelta

import pytest

from hub.adapter.email import EmailSender
from hub.adapter.error import EmailDeliveryError
from hub.domain.error import BusinessRuleViolationError, ValidationError
from hub.domain.model import utcnow
from hub.domain.repository import InvitationRepository
from hub.domain.service import GroupService, InvitationService, UserService
from hub.domain.value import InvitationStatus
from tests.conftest import create_group, register_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateInvitation:
    """Tests for create_invitation."""

    @pytest.mark.asyncio
    async def test_creates_pending_invitation(self, unit_env):
        """A new invitation is pending, with a 64 hex character token."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        invitation_service = await unit_env.get(InvitationService)
        owner = await register_user(user_service)
        group = await create_group(group_service, owner)

        invitation = await invitation_service.create_invitation(
            group.id, owner.id, "Bob@Uni.edu", message="Join us"
        )

        assert invitation.status == InvitationStatus.PENDING
        assert invitation.email.root == "bob@uni.edu"
        assert len(invitation.token.root) == 64
        assert invitation.expires_at - utcnow() > timedelta(days=6)

    @pytest.mark.asyncio
    async def test_duplicate_pending_rejected(self, unit_env):
        """One open invitation per email and group."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        invitation_service = await unit_env.get(InvitationService)
        owner = await register_user(user_service)
        group = await create_group(group_service, owner)
        await invitation_service.create_invitation(group.id, owner.id, "bob@uni.edu")

        with pytest.raises(BusinessRuleViolationError, match="already been sent"):
            await invitation_service.create_invitation(group.id, owner.id, "bob@uni.edu")

    @pytest.mark.asyncio
    async def test_invalid_email_rejected(self, unit_env):
        """Addresses without an @ are rejected up front."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        invitation_service = await unit_env.get(InvitationService)
        owner = await register_user(user_service)
        group = await create_group(group_service, owner)

        with pytest.raises(ValidationError, match="Valid email address is required"):
            await invitation_service.create_invitation(group.id, owner.id, "bob")


class TestDeliver:
    """Tests for deliver."""

    @pytest.mark.asyncio
    async def test_sends_link_with_token(self, unit_env):
        """The email carries the accept link."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        invitation_service = await unit_env.get(InvitationService)
        email_sender = await unit_env.get(EmailSender)
        owner = await register_user(user_service)
        group = await create_group(group_service, owner)
        invitation = await invitation_service.create_invitation(
            group.id, owner.id, "bob@uni.edu"
        )

        await invitation_service.deliver(invitation, group, owner)

        assert len(email_sender.sent) == 1
        sent = email_sender.sent[0]
        assert sent.to == "bob@uni.edu"
        assert f"/accept-invitation/{invitation.token.root}" in sent.html
        assert group.name in sent.subject

    @pytest.mark.asyncio
    async def test_failed_delivery_removes_invitation(self, unit_env):
        """No invitation is left behind when the email cannot be sent."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        invitation_service = await unit_env.get(InvitationService)
        invitation_repo = await unit_env.get(InvitationRepository)
        email_sender = await unit_env.get(EmailSender)
        email_sender.fail = True
        owner = await register_user(user_service)
        group = await create_group(group_service, owner)
        invitation = await invitation_service.create_invitation(
            group.id, owner.id, "bob@uni.edu"
        )

        with pytest.raises(EmailDeliveryError):
            await invitation_service.deliver(invitation, group, owner)

        assert await invitation_repo.find_by_id(invitation.id) is None


class TestAcceptance:
    """Tests for get_acceptable and mark_accepted."""

    @pytest.mark.asyncio
    async def test_token_is_single_use(self, unit_env):
        """An accepted invitation cannot be used again."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        invitation_service = await unit_env.get(InvitationService)
        owner = await register_user(user_service)
        group = await create_group(group_service, owner)
        invitation = await invitation_service.create_invitation(
            group.id, owner.id, "bob@uni.edu"
        )

        found = await invitation_service.get_acceptable(invitation.token.root)
        accepted = await invitation_service.mark_accepted(found, owner.id)

        assert accepted.status == InvitationStatus.ACCEPTED
        assert accepted.accepted_at is not None
        with pytest.raises(BusinessRuleViolationError, match="Invalid or expired"):
            await invitation_service.get_acceptable(invitation.token.root)

    @pytest.mark.asyncio
    async def test_expired_token_rejected(self, unit_env):
        """Invitations past their expiry cannot be accepted."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        invitation_service = await unit_env.get(InvitationService)
        invitation_repo = await unit_env.get(InvitationRepository)
        owner = await register_user(user_service)
        group = await create_group(group_service, owner)
        invitation = await invitation_service.create_invitation(
            group.id, owner.id, "bob@uni.edu"
        )
        await invitation_repo.save(
            invitation.model_copy(update={"expires_at": utcnow() - timedelta(hours=1)})
        )

        with pytest.raises(BusinessRuleViolationError):
            await invitation_service.get_acceptable(invitation.token.root)

    @pytest.mark.asyncio
    async def test_unknown_token_rejected(self, unit_env):
        """Made-up tokens are rejected the same way."""
        invitation_service = await unit_env.get(InvitationService)

        with pytest.raises(BusinessRuleViolationError, match="Invalid or expired"):
            await invitation_service.get_acceptable("deadbeef")
