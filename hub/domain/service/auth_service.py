"""Authentication domain service.

Resolves the bearer token on a request to an active user.
"""

from typing import Optional

import logfire

from hub.domain.error import AuthenticationError, NotFoundError
from hub.domain.model import User
from hub.domain.value import UserId
from hub.util.jwt import JWTError

from .base import Service
from .jwt_service import JWTService
from .user_service import UserService

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Pull the token out of an ``Authorization: Bearer <token>`` header."""
    if authorization and authorization.startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :].strip()
        return token or None
    return None


class AuthService(Service):
    """Domain service turning credentials on a request into a user."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize auth service.

        Args:
            jwt_service: JWT service for token verification
            user_service: User service for loading the token's user
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def authenticate(self, authorization: Optional[str]) -> User:
        """Resolve an Authorization header to an active user.

        Args:
            authorization: Raw header value

        Returns:
            The authenticated user

        Raises:
            AuthenticationError: If the token is missing, invalid or expired,
                or its user no longer exists or is deactivated
        """
        with logfire.span("auth_service.authenticate"):
            token = extract_bearer_token(authorization)
            if token is None:
                raise AuthenticationError("Access denied. No token provided.")

            try:
                payload = self.jwt_service.verify_token(token)
            except JWTError as e:
                raise AuthenticationError(str(e))

            try:
                user = await self.user_service.get_by_id(UserId(payload.user_id))
            except NotFoundError:
                logfire.warn("Token refers to missing user", user_id=str(payload.user_id))
                raise AuthenticationError("Token is no longer valid. User not found.")

            if not user.is_active:
                logfire.warn("Token for deactivated account", user_id=str(user.id))
                raise AuthenticationError("Account has been deactivated.")

            return user

    async def authenticate_optional(self, authorization: Optional[str]) -> Optional[User]:
        """Like authenticate, but anonymous callers get None instead of an error.

        A token that is present but invalid is still rejected.
        """
        if extract_bearer_token(authorization) is None:
            return None
        return await self.authenticate(authorization)

    def issue_token(self, user: User) -> str:
        """Create an access token for a user."""
        return self.jwt_service.create_token(str(user.id), user.email.root)
