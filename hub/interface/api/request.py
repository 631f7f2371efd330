"""Helpers for reading the caller out of a request."""

import logging

from fastapi import Request

from hub.domain.service import RateLimitService

logger = logging.getLogger(__name__)

UNKNOWN_CLIENT = "unknown"


def client_ip(request: Request) -> str:
    """Client address, honouring the first X-Forwarded-For hop."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    if request.client:
        return request.client.host
    return UNKNOWN_CLIENT


async def throttle_auth_attempt(
    request: Request, rate_limit_service: RateLimitService, event: str
) -> None:
    """Log an authentication attempt and count it against the caller's IP.

    Args:
        request: Incoming request
        rate_limit_service: Limiter shared by the process
        event: Audit label, e.g. ``LOGIN_ATTEMPT``

    Raises:
        RateLimitExceededError: If the IP has used up its attempts
    """
    ip = client_ip(request)
    logger.info(
        f"{event}: ip={ip} user_agent={request.headers.get('user-agent', '')}"
    )
    await rate_limit_service.hit(ip)
