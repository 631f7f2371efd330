"""Email infrastructure providers."""

from dishka import Scope, provide

from hub.adapter.email import EmailSender, SmtpEmailSender
from hub.config import EmailSettings
from hub.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider using SMTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_sender(self, email_settings: EmailSettings) -> EmailSender:
        """Provide SMTP email sender."""
        return SmtpEmailSender(settings=email_settings)
