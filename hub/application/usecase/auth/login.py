"""Login use case."""

import logfire
from pydantic import BaseModel

from hub.application.usecase.views import UserView
from hub.domain.service import AuthService, JWTService, UserService


class LoginRequest(BaseModel):
    """Email and password login."""

    email: str
    password: str


class AuthResponse(BaseModel):
    """Access token for a freshly authenticated user."""

    token: str
    expires_in: int
    user: UserView


class LoginUseCase:
    """Use case for logging in with email and password."""

    def __init__(
        self,
        user_service: UserService,
        auth_service: AuthService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            auth_service: Auth service issuing tokens
            jwt_service: JWT service (token lifetime)
        """
        self.user_service = user_service
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Raises:
            AuthenticationError: If the credentials are wrong or the account
                is deactivated
        """
        with logfire.span("login.execute"):
            user = await self.user_service.authenticate(request.email, request.password)
            return AuthResponse(
                token=self.auth_service.issue_token(user),
                expires_in=self.jwt_service.expires_in,
                user=UserView.from_user(user),
            )
