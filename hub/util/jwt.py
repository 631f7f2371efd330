"""Signing and verifying access tokens with PyJWT."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from pydantic import BaseModel, ValidationError

from hub.config import AuthSettings

REQUIRED_CLAIMS = ["user_id", "email", "exp", "iat", "iss", "aud"]


class TokenPayload(BaseModel):
    """Claims identifying the caller."""

    user_id: UUID
    email: str
    iat: datetime
    exp: datetime


class JWTError(Exception):
    """Token could not be accepted."""

    pass


def create_token(user_id: str, email: str, settings: AuthSettings) -> str:
    """Sign a token for the user, valid for ``settings.jwt_expiry_days``."""
    issued_at = datetime.now(timezone.utc)
    claims = {
        "user_id": user_id,
        "email": email,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode a token, checking signature, lifetime, issuer and audience.

    Tokens missing any of ``REQUIRED_CLAIMS``, or whose ``user_id`` is not a
    UUID, are rejected like forged ones.

    Raises:
        JWTError: "Token has expired" or "Invalid token"
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
            options={"require": REQUIRED_CLAIMS},
        )
        return TokenPayload.model_validate(claims)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, ValidationError):
        raise JWTError("Invalid token")
