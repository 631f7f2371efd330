"""Standard-library logging routed through Logfire.

Application code logs with ``logfire`` directly. Libraries that log through
``logging`` (uvicorn, aiosmtplib while delivering invitations, python-multipart
while parsing uploads) are sent to the same Logfire pipeline so their records land
inside the request span that triggered them.
"""

import logging

import logfire

from hub.config import Settings

# Floors for chatty libraries; they never log below these levels
LIBRARY_LEVELS = {
    "aiosmtplib": logging.WARNING,
    "multipart": logging.WARNING,
    "python_multipart": logging.WARNING,
}


def log_level(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Send ``logging`` records to Logfire.

    Call after ``configure_logfire`` so the handler has somewhere to send.

    Args:
        settings: Application settings
    """
    level = log_level(settings)
    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )
    for name, floor in LIBRARY_LEVELS.items():
        logging.getLogger(name).setLevel(max(level, floor))

    logfire.info(
        "Logging configured",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )
