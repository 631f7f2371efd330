"""Unit tests for AcceptInvitationUseCase."""

import pytest

from hub.application.usecase.invitation import (
    AcceptInvitationRequest,
    AcceptInvitationUseCase,
)
from hub.domain.error import BusinessRuleViolationError
from hub.domain.repository import InvitationRepository
from hub.domain.service import GroupService, InvitationService, UserService
from hub.domain.value import GroupRole, InvitationStatus
from tests.conftest import create_group, register_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def invite(unit_env, email: str, is_public: bool = False):
    """Register an owner, create a group and invite ``email`` to it."""
    user_service = await unit_env.get(UserService)
    group_service = await unit_env.get(GroupService)
    invitation_service = await unit_env.get(InvitationService)
    owner = await register_user(user_service, email="owner@uni.edu")
    group = await create_group(group_service, owner, is_public=is_public)
    invitation = await invitation_service.create_invitation(group.id, owner.id, email)
    return group, invitation


class TestAcceptInvitationUseCase:
    """Tests for AcceptInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_accept_joins_private_group(self, unit_env):
        """A registered invitee joins the group and the invitation closes."""
        # Arrange
        user_service = await unit_env.get(UserService)
        invitation_repo = await unit_env.get(InvitationRepository)
        group, invitation = await invite(unit_env, "bob@uni.edu")
        bob = await register_user(user_service, email="bob@uni.edu", first_name="Bob")
        use_case = await unit_env.get(AcceptInvitationUseCase)

        # Act
        view = await use_case.execute(
            AcceptInvitationRequest(token=invitation.token.root)
        )

        # Assert
        assert view.id == str(group.id)
        assert view.user_role == GroupRole.MEMBER
        assert str(bob.id) in [m.user_id for m in view.members]
        stored = await invitation_repo.find_by_id(invitation.id)
        assert stored.status == InvitationStatus.ACCEPTED
        assert stored.accepted_by == bob.id

    @pytest.mark.asyncio
    async def test_token_cannot_be_used_twice(self, unit_env):
        """An accepted invitation is no longer acceptable."""
        user_service = await unit_env.get(UserService)
        _, invitation = await invite(unit_env, "bob@uni.edu")
        await register_user(user_service, email="bob@uni.edu")
        use_case = await unit_env.get(AcceptInvitationUseCase)
        request = AcceptInvitationRequest(token=invitation.token.root)
        await use_case.execute(request)

        with pytest.raises(BusinessRuleViolationError, match="Invalid or expired"):
            await use_case.execute(request)

    @pytest.mark.asyncio
    async def test_unregistered_invitee_must_register_first(self, unit_env):
        """The invitation stays pending until the invitee has an account."""
        invitation_repo = await unit_env.get(InvitationRepository)
        _, invitation = await invite(unit_env, "carol@uni.edu")
        use_case = await unit_env.get(AcceptInvitationUseCase)

        with pytest.raises(BusinessRuleViolationError, match="register first"):
            await use_case.execute(
                AcceptInvitationRequest(token=invitation.token.root)
            )

        stored = await invitation_repo.find_by_id(invitation.id)
        assert stored.status == InvitationStatus.PENDING

    @pytest.mark.asyncio
    async def test_existing_member_closes_invitation(self, unit_env):
        """Accepting as a current member expires the invitation."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        invitation_repo = await unit_env.get(InvitationRepository)
        group, invitation = await invite(unit_env, "bob@uni.edu", is_public=True)
        bob = await register_user(user_service, email="bob@uni.edu")
        await group_service.join(group, bob.id)
        use_case = await unit_env.get(AcceptInvitationUseCase)

        with pytest.raises(BusinessRuleViolationError, match="already a member"):
            await use_case.execute(
                AcceptInvitationRequest(token=invitation.token.root)
            )

        stored = await invitation_repo.find_by_id(invitation.id)
        assert stored.status == InvitationStatus.EXPIRED

    @pytest.mark.asyncio
    async def test_unknown_token(self, unit_env):
        """Unknown tokens are rejected."""
        use_case = await unit_env.get(AcceptInvitationUseCase)

        with pytest.raises(BusinessRuleViolationError):
            await use_case.execute(AcceptInvitationRequest(token="0" * 64))
