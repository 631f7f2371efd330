"""Register use case."""

import logfire
from pydantic import Field, model_validator

from hub.application.usecase.auth.login import AuthResponse
from hub.application.usecase.auth.profile import ProfileInput
from hub.application.usecase.views import UserView
from hub.domain.service import AuthService, JWTService, UserService
from hub.domain.value import AcademicLevel


class RegisterRequest(ProfileInput):
    """New account details."""

    email: str
    password: str
    confirm_password: str
    first_name: str = Field(min_length=1, max_length=50)
    last_name: str = Field(min_length=1, max_length=50)
    institution: str = Field(min_length=1, max_length=100)
    field_of_study: str = Field(min_length=1, max_length=100)
    academic_level: AcademicLevel

    @model_validator(mode="after")
    def passwords_match(self) -> "RegisterRequest":
        """The confirmation must repeat the password."""
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class RegisterUseCase:
    """Use case for creating an account and signing it in."""

    def __init__(
        self,
        user_service: UserService,
        auth_service: AuthService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            auth_service: Auth service issuing tokens
            jwt_service: JWT service (token lifetime)
        """
        self.user_service = user_service
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute registration flow.

        Steps:
        1. Create the user (password policy, duplicate email)
        2. Issue a token for the new account

        Raises:
            ValidationError: If a field fails validation
            BusinessRuleViolationError: If the email is already registered
        """
        with logfire.span(
            "register.execute", academic_level=request.academic_level.value
        ):
            profile = request.model_dump(
                include=set(ProfileInput.model_fields), exclude_none=True
            )

            user = await self.user_service.register(
                email=request.email,
                password=request.password,
                first_name=request.first_name,
                last_name=request.last_name,
                institution=request.institution,
                field_of_study=request.field_of_study,
                academic_level=request.academic_level,
                **profile,
            )
            return AuthResponse(
                token=self.auth_service.issue_token(user),
                expires_in=self.jwt_service.expires_in,
                user=UserView.from_user(user),
            )
