"""Logfire setup for the API, the migration script and the database.

Application code logs and traces with ``logfire`` directly::

    logfire.info("Group created", group_id=str(group.id), owner_id=str(owner_id))

    with logfire.span("paper_service.upload", group_id=str(group_id)):
        ...
"""

from collections.abc import Callable
from importlib.metadata import PackageNotFoundError, version

import logfire
from fastapi import FastAPI, Request
from sqlalchemy.ext.asyncio import AsyncEngine

from hub.config import Settings

SERVICE_NAME = "research-hub-api"

# Attribute names Logfire redacts on top of its defaults (password, jwt, auth...)
SCRUBBED_FIELDS = [
    "token",
    "smtp_password",
    "file_path",
]


def service_version() -> str:
    try:
        return version(SERVICE_NAME)
    except PackageNotFoundError:
        return "unknown"


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the current process.

    Spans go to the console only unless a token is configured. Sending can be
    forced on or off with ``OBSERVABILITY__SEND_TO_LOGFIRE``. Invitation
    tokens, SMTP credentials and on-disk upload paths are scrubbed from
    attributes before anything leaves the process.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = observability.send_to_logfire
    if send_to_logfire is None:
        send_to_logfire = bool(observability.logfire_token)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=f"{service_version()}+{settings.git_sha}",
        environment=settings.environment,
        token=observability.logfire_token,
        send_to_logfire=send_to_logfire,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUBBED_FIELDS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(
    app: FastAPI, client_address: Callable[[Request], str] | None = None
) -> None:
    """Trace every request with its method, path and caller.

    Headers are not captured because they carry bearer tokens.

    Args:
        app: FastAPI application instance
        client_address: Resolves the caller's address, e.g. from
            ``X-Forwarded-For`` behind a proxy; the socket peer by default
    """

    def request_attributes(request, attributes):
        result = {**attributes, "method": request.method, "path": request.url.path}
        if client_address is not None:
            result["client_ip"] = client_address(request)
        elif request.client:
            result["client_ip"] = request.client.host
        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement the engine runs, tagging the SQL with span context."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
