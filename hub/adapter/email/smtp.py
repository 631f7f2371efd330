"""SMTP email delivery using aiosmtplib."""

from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

import aiosmtplib
import logfire

from hub.adapter.email.sender import EmailSender, OutgoingEmail
from hub.adapter.error import EmailDeliveryError
from hub.config import EmailSettings


class SmtpEmailSender(EmailSender):
    """Sends mail through an SMTP relay with STARTTLS."""

    def __init__(self, settings: EmailSettings) -> None:
        """Initialize SMTP sender.

        Args:
            settings: SMTP host, credentials and sender identity
        """
        self.settings = settings

    def _build_message(self, email: OutgoingEmail) -> MIMEMultipart:
        message = MIMEMultipart("alternative")
        message["From"] = f"{self.settings.from_name} <{self.settings.from_address}>"
        message["To"] = email.to
        message["Subject"] = email.subject

        # Plain text first so clients prefer the HTML part
        if email.text:
            message.attach(MIMEText(email.text, "plain"))
        message.attach(MIMEText(email.html, "html"))
        return message

    async def send(self, email: OutgoingEmail) -> None:
        """Send one message over SMTP.

        Raises:
            EmailDeliveryError: If SMTP is not configured or the server rejects
                the message
        """
        with logfire.span("smtp_email_sender.send", to=email.to, subject=email.subject):
            if not self.settings.is_configured:
                logfire.error("SMTP credentials not configured")
                raise EmailDeliveryError("Email service is not configured")

            try:
                await aiosmtplib.send(
                    self._build_message(email),
                    hostname=self.settings.smtp_host,
                    port=self.settings.smtp_port,
                    username=self.settings.smtp_user,
                    password=self.settings.smtp_password,
                    start_tls=self.settings.use_tls,
                )
            except (aiosmtplib.SMTPException, OSError) as e:
                logfire.error("SMTP delivery failed", to=email.to, error=str(e))
                raise EmailDeliveryError(str(e)) from e

            logfire.info("Email sent", to=email.to)
