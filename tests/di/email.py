"""Mock email provider for testing."""

from dishka import Scope, provide

from hub.adapter.email import EmailSender, MockEmailSender
from hub.util.di.infrastructure.email import EmailProvider


class MockEmailProvider(EmailProvider):
    """Records outgoing email instead of sending it."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_email_sender(self) -> EmailSender:
        """Provide recording email sender."""
        return MockEmailSender()
