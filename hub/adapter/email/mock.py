"""In-memory email sender for tests."""

from hub.adapter.email.sender import EmailSender, OutgoingEmail
from hub.adapter.error import EmailDeliveryError


class MockEmailSender(EmailSender):
    """Records messages instead of sending them.

    Set ``fail`` to make every send raise, to exercise delivery failures.
    """

    def __init__(self, fail: bool = False) -> None:
        self.sent: list[OutgoingEmail] = []
        self.fail = fail

    async def send(self, email: OutgoingEmail) -> None:
        """Record the message, or raise when ``fail`` is set."""
        if self.fail:
            raise EmailDeliveryError("Mock delivery failure")
        self.sent.append(email)
