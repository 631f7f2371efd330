"""Unit tests for UserService."""

import pytest

from hub.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    ValidationError,
)
from hub.domain.repository import UserRepository
from hub.domain.service import UserService
from hub.domain.value import AcademicLevel
from tests.conftest import PASSWORD, register_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestRegister:
    """Tests for register method."""

    @pytest.mark.asyncio
    async def test_register_success(self, unit_env):
        """Registering stores a lowercased email and a bcrypt hash."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)

        # Act
        user = await register_user(user_service, email="  Alice@Uni.EDU ")

        # Assert
        assert user.email.root == "alice@uni.edu"
        assert user.password_hash != PASSWORD
        assert user.password_hash.startswith("$2")
        assert user.full_name == "Alice Smith"
        assert user.login_count == 0
        assert await user_repo.find_by_id(user.id) is not None

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self, unit_env):
        """A second account for the same email is rejected, case-insensitively."""
        user_service = await unit_env.get(UserService)
        await register_user(user_service, email="alice@uni.edu")

        with pytest.raises(BusinessRuleViolationError, match="already exists"):
            await register_user(user_service, email="ALICE@uni.edu")

    @pytest.mark.asyncio
    async def test_register_weak_password(self, unit_env):
        """Passwords failing the policy list every broken rule."""
        user_service = await unit_env.get(UserService)

        with pytest.raises(ValidationError) as exc_info:
            await register_user(user_service, password="abc")

        assert "Password must contain at least one number" in exc_info.value.errors

    @pytest.mark.asyncio
    async def test_register_invalid_email(self, unit_env):
        """Malformed addresses are a validation error."""
        user_service = await unit_env.get(UserService)

        with pytest.raises(ValidationError):
            await register_user(user_service, email="not-an-email")

    @pytest.mark.asyncio
    async def test_register_unknown_profile_field(self, unit_env):
        """Fields outside the profile allow list are rejected."""
        user_service = await unit_env.get(UserService)

        with pytest.raises(ValidationError) as exc_info:
            await register_user(user_service, role="admin")

        assert exc_info.value.errors == ["Unknown field: role"]


class TestAuthenticate:
    """Tests for authenticate method."""

    @pytest.mark.asyncio
    async def test_login_records_count_and_time(self, unit_env):
        """A successful login bumps the counter and sets last_login."""
        user_service = await unit_env.get(UserService)
        await register_user(user_service)

        user = await user_service.authenticate("alice@uni.edu", PASSWORD)

        assert user.login_count == 1
        assert user.last_login is not None

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_look_alike(self, unit_env):
        """Both failures give the same message."""
        user_service = await unit_env.get(UserService)
        await register_user(user_service)

        with pytest.raises(AuthenticationError) as wrong_password:
            await user_service.authenticate("alice@uni.edu", "wrong123")
        with pytest.raises(AuthenticationError) as unknown_email:
            await user_service.authenticate("bob@uni.edu", PASSWORD)

        assert str(wrong_password.value) == str(unknown_email.value)
        assert str(wrong_password.value) == "Invalid email or password"

    @pytest.mark.asyncio
    async def test_deactivated_account_rejected(self, unit_env):
        """Inactive accounts cannot log in."""
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await register_user(user_service)
        await user_repo.save(user.model_copy(update={"is_active": False}))

        with pytest.raises(AuthenticationError, match="deactivated"):
            await user_service.authenticate("alice@uni.edu", PASSWORD)


class TestProfileAndPassword:
    """Tests for update_profile and change_password."""

    @pytest.mark.asyncio
    async def test_update_profile_ignores_protected_fields(self, unit_env):
        """Only allow-listed fields change."""
        user_service = await unit_env.get(UserService)
        user = await register_user(user_service)

        updated = await user_service.update_profile(
            user.id,
            {"bio": "Studying synapses", "email": "evil@uni.edu", "role": "admin"},
        )

        assert updated.bio == "Studying synapses"
        assert updated.email.root == "alice@uni.edu"
        assert updated.role == user.role

    @pytest.mark.asyncio
    async def test_update_profile_validates(self, unit_env):
        """Invalid new values are rejected."""
        user_service = await unit_env.get(UserService)
        user = await register_user(user_service)

        with pytest.raises(ValidationError):
            await user_service.update_profile(user.id, {"first_name": ""})

    @pytest.mark.asyncio
    async def test_change_password(self, unit_env):
        """After a change only the new password logs in."""
        user_service = await unit_env.get(UserService)
        user = await register_user(user_service)

        await user_service.change_password(user.id, PASSWORD, "newpass456")

        with pytest.raises(AuthenticationError):
            await user_service.authenticate("alice@uni.edu", PASSWORD)
        assert await user_service.authenticate("alice@uni.edu", "newpass456")

    @pytest.mark.asyncio
    async def test_change_password_wrong_current(self, unit_env):
        """The current password must match."""
        user_service = await unit_env.get(UserService)
        user = await register_user(user_service)

        with pytest.raises(AuthenticationError, match="Current password is incorrect"):
            await user_service.change_password(user.id, "wrong123", "newpass456")

    @pytest.mark.asyncio
    async def test_change_password_must_differ(self, unit_env):
        """Reusing the current password is rejected."""
        user_service = await unit_env.get(UserService)
        user = await register_user(user_service)

        with pytest.raises(ValidationError):
            await user_service.change_password(user.id, PASSWORD, PASSWORD)


class TestStats:
    """Tests for get_stats."""

    @pytest.mark.asyncio
    async def test_counts_by_level(self, unit_env):
        """Statistics count users per academic level."""
        user_service = await unit_env.get(UserService)
        await register_user(user_service, email="a@uni.edu")
        await register_user(user_service, email="b@uni.edu")
        await register_user(
            user_service, email="c@uni.edu", academic_level=AcademicLevel.FACULTY
        )

        stats = await user_service.get_stats()

        assert stats.total_users == 3
        assert stats.active_users == 3
        assert stats.verified_users == 0
        assert stats.academic_levels[AcademicLevel.PHD] == 2
        assert stats.academic_levels[AcademicLevel.FACULTY] == 1
        assert len(stats.recent_users) == 3
