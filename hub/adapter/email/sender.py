"""Outgoing email contract."""

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel


class OutgoingEmail(BaseModel):
    """One message to one recipient."""

    to: str
    subject: str
    html: str
    text: Optional[str] = None


class EmailSender(ABC):
    """Delivers outgoing email."""

    @abstractmethod
    async def send(self, email: OutgoingEmail) -> None:
        """Hand a message to the mail system.

        Args:
            email: Message to deliver

        Raises:
            EmailDeliveryError: If the message could not be sent
        """
        pass
