"""Unit tests for the register, login and change password use cases."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from hub.application.usecase.auth import (
    ChangePasswordRequest,
    ChangePasswordUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from hub.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    ValidationError,
)
from hub.domain.service import AuthService
from hub.domain.value import AcademicLevel
from tests.conftest import PASSWORD
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def register_request(**overrides) -> RegisterRequest:
    fields = {
        "email": "Alice@Uni.edu",
        "password": PASSWORD,
        "confirm_password": PASSWORD,
        "first_name": "Alice",
        "last_name": "Smith",
        "institution": "MIT",
        "field_of_study": "Biology",
        "academic_level": AcademicLevel.PHD,
    }
    fields.update(overrides)
    return RegisterRequest(**fields)


class TestRegisterUseCase:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_returns_working_token(self, unit_env):
        """The issued token authenticates the new account."""
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        auth_service = await unit_env.get(AuthService)

        # Act
        response = await register.execute(
            register_request(bio="Studying synapses", skills=["python"])
        )

        # Assert
        assert response.user.email == "alice@uni.edu"
        assert response.user.bio == "Studying synapses"
        assert response.expires_in > 0
        user = await auth_service.authenticate(f"Bearer {response.token}")
        assert str(user.id) == response.user.id

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, unit_env):
        """Emails are unique regardless of case."""
        register = await unit_env.get(RegisterUseCase)
        await register.execute(register_request())

        with pytest.raises(BusinessRuleViolationError):
            await register.execute(register_request(email="alice@UNI.edu"))

    @pytest.mark.asyncio
    async def test_weak_password_rejected(self, unit_env):
        """Passwords need six characters with a letter and a digit."""
        register = await unit_env.get(RegisterUseCase)

        with pytest.raises(ValidationError):
            await register.execute(
                register_request(password="abcdef", confirm_password="abcdef")
            )

    def test_confirmation_must_match(self):
        """A mismatched confirmation fails request validation."""
        with pytest.raises(PydanticValidationError, match="Passwords do not match"):
            register_request(confirm_password="other123")


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_counts_logins(self, unit_env):
        """Each login bumps the counter and sets the timestamp."""
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        await register.execute(register_request())

        await login.execute(LoginRequest(email="alice@uni.edu", password=PASSWORD))
        response = await login.execute(
            LoginRequest(email="ALICE@uni.edu", password=PASSWORD)
        )

        assert response.user.login_count == 2
        assert response.user.last_login is not None

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_look_alike(self, unit_env):
        """Both failures report the same message."""
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        await register.execute(register_request())

        with pytest.raises(AuthenticationError) as wrong_password:
            await login.execute(LoginRequest(email="alice@uni.edu", password="nope123"))
        with pytest.raises(AuthenticationError) as unknown:
            await login.execute(LoginRequest(email="bob@uni.edu", password=PASSWORD))

        assert str(wrong_password.value) == str(unknown.value)


class TestChangePasswordUseCase:
    """Tests for ChangePasswordUseCase."""

    @pytest.mark.asyncio
    async def test_new_password_replaces_old(self, unit_env):
        """After a change only the new password logs in."""
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        change = await unit_env.get(ChangePasswordUseCase)
        registered = await register.execute(register_request())

        await change.execute(
            ChangePasswordRequest(
                user_id=registered.user.id,
                current_password=PASSWORD,
                new_password="newpass456",
                confirm_password="newpass456",
            )
        )

        with pytest.raises(AuthenticationError):
            await login.execute(LoginRequest(email="alice@uni.edu", password=PASSWORD))
        response = await login.execute(
            LoginRequest(email="alice@uni.edu", password="newpass456")
        )
        assert response.user.id == registered.user.id

    @pytest.mark.asyncio
    async def test_wrong_current_password(self, unit_env):
        """The current password must be confirmed."""
        register = await unit_env.get(RegisterUseCase)
        change = await unit_env.get(ChangePasswordUseCase)
        registered = await register.execute(register_request())

        with pytest.raises(AuthenticationError, match="Current password is incorrect"):
            await change.execute(
                ChangePasswordRequest(
                    user_id=registered.user.id,
                    current_password="wrong999",
                    new_password="newpass456",
                    confirm_password="newpass456",
                )
            )
