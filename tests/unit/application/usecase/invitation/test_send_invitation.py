"""Unit tests for SendInvitationUseCase."""

import pytest

from hub.adapter.email import EmailSender
from hub.application.usecase.invitation import (
    SendInvitationRequest,
    SendInvitationUseCase,
)
from hub.domain.error import BusinessRuleViolationError, NotAuthorizedError
from hub.domain.service import GroupService, UserService
from tests.conftest import create_group, register_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSendInvitationUseCase:
    """Tests for SendInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_member_invites_by_email(self, unit_env):
        """The invitee receives a link and the view hides the token."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        email_sender = await unit_env.get(EmailSender)
        owner = await register_user(user_service)
        group = await create_group(group_service, owner)
        use_case = await unit_env.get(SendInvitationUseCase)

        view = await use_case.execute(
            SendInvitationRequest(
                group_id=str(group.id),
                user_id=str(owner.id),
                email="bob@uni.edu",
                message="Come read with us",
            )
        )

        assert view.email == "bob@uni.edu"
        assert view.invited_by.full_name == "Alice Smith"
        assert not hasattr(view, "token")
        assert len(email_sender.sent) == 1
        assert email_sender.sent[0].to == "bob@uni.edu"

    @pytest.mark.asyncio
    async def test_existing_member_not_invited(self, unit_env):
        """Addresses belonging to a member are refused."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        owner = await register_user(user_service)
        bob = await register_user(user_service, email="bob@uni.edu")
        group = await create_group(group_service, owner)
        await group_service.join(group, bob.id)
        use_case = await unit_env.get(SendInvitationUseCase)

        with pytest.raises(BusinessRuleViolationError, match="already a member"):
            await use_case.execute(
                SendInvitationRequest(
                    group_id=str(group.id), user_id=str(owner.id), email="bob@uni.edu"
                )
            )

    @pytest.mark.asyncio
    async def test_outsider_cannot_invite(self, unit_env):
        """Only members can send invitations."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        owner = await register_user(user_service)
        outsider = await register_user(user_service, email="eve@uni.edu")
        group = await create_group(group_service, owner)
        use_case = await unit_env.get(SendInvitationUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                SendInvitationRequest(
                    group_id=str(group.id),
                    user_id=str(outsider.id),
                    email="bob@uni.edu",
                )
            )
