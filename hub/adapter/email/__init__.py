"""Email adapter."""

from .mock import MockEmailSender
from .sender import EmailSender, OutgoingEmail
from .smtp import SmtpEmailSender
from .templates import invitation_email

__all__ = [
    "EmailSender",
    "MockEmailSender",
    "OutgoingEmail",
    "SmtpEmailSender",
    "invitation_email",
]
