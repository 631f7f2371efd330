#!/usr/bin/env python3
"""Serve the Research Hub API with uvicorn.

Logfire and logging are configured before the app is imported so that errors
while building the container are reported too.
"""

import sys

import logfire
import uvicorn

from hub.config import Settings
from hub.util.error import ConfigurationError
from hub.util.logging import setup_logging
from hub.util.observability import configure_logfire

PLACEHOLDER_JWT_SECRET = "CHANGE_ME_IN_PRODUCTION"


def check_settings(settings: Settings) -> None:
    """Refuse to serve production traffic with unusable settings.

    Missing SMTP credentials only warn, since a relay may accept
    unauthenticated mail.

    Raises:
        ConfigurationError: If the JWT secret is the placeholder
    """
    if settings.environment != "production":
        return
    if settings.auth.jwt_secret == PLACEHOLDER_JWT_SECRET:
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")
    if not settings.email.is_configured:
        logfire.warn("SMTP credentials not set; invitation emails may be refused")


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    try:
        check_settings(settings)
        logfire.info(
            "Starting API",
            environment=settings.environment,
            port=settings.port,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "hub.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            # Keep uvicorn's records on the root logger, which feeds Logfire
            log_config=None,
            # Rate limiting keys on X-Forwarded-For set by the proxy
            proxy_headers=True,
        )
    except Exception as e:
        logfire.error(
            "API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
