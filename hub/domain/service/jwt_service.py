"""Access token issuing and verification."""

import logfire

from hub.config import AuthSettings
from hub.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service

SECONDS_PER_DAY = 24 * 60 * 60


class JWTService(Service):
    """Issues and checks the bearer tokens returned by register and login."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    @property
    def expires_in(self) -> int:
        """Token lifetime in seconds, reported to clients alongside the token."""
        return self.auth_settings.jwt_expiry_days * SECONDS_PER_DAY

    def create_token(self, user_id: str, email: str) -> str:
        with logfire.span("jwt_service.create_token", user_id=user_id):
            return create_token(user_id, email, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a bearer token.

        Raises:
            JWTError: If the token is expired, forged or malformed
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.info("Token rejected", reason=str(e))
                raise
