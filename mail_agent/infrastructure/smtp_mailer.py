"""
SMTP Mail Sender Implementation

MailSender backed by smtplib. The blocking SMTP session runs in a worker
thread (asyncio.to_thread) so the event loop stays free.
"""
import asyncio
import smtplib
import ssl
from email.message import EmailMessage
from email.utils import formataddr

from mail_agent.config import Settings
from mail_agent.ports.mail_sender import MailSender, MailDeliveryError, OutgoingEmail
from mail_agent.utils.logger import get_logger

logger = get_logger(__name__)


def format_sender(name: str, address: str) -> str:
    """RFC 5322 sender, e.g. 'AI Agent <me@example.com>'"""
    return formataddr((name, address))


def build_message(email: OutgoingEmail) -> EmailMessage:
    """Plain-text MIME message for an OutgoingEmail"""
    message = EmailMessage()
    message["From"] = email.sender
    message["To"] = email.to
    message["Subject"] = email.subject
    message.set_content(email.text)
    return message


class SmtpMailSender(MailSender):
    """
    SMTP delivery (Gmail by default)

    Example:
        sender = SmtpMailSender(host="smtp.gmail.com", port=465,
                                username="me@gmail.com", password="app-password")
        await sender.send(OutgoingEmail(...))
    """

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        use_ssl: bool = True,
        timeout: float = 30.0
    ):
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._use_ssl = use_ssl
        self._timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "SmtpMailSender":
        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.email_user,
            password=settings.email_pass,
            use_ssl=settings.smtp_use_ssl,
            timeout=settings.smtp_timeout
        )

    async def send(self, email: OutgoingEmail) -> None:
        message = build_message(email)
        logger.debug(f"Sending mail via {self._host}:{self._port} to {email.to}")

        try:
            await asyncio.to_thread(self._deliver, message)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"SMTP delivery failed: {e}")
            raise MailDeliveryError(f"Mail delivery failed: {e}") from e

        logger.info(f"Mail handed to SMTP server: to={email.to}")

    def _deliver(self, message: EmailMessage) -> None:
        context = ssl.create_default_context()

        if self._use_ssl:
            with smtplib.SMTP_SSL(self._host, self._port, timeout=self._timeout, context=context) as server:
                server.login(self._username, self._password)
                server.send_message(message)
        else:
            with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as server:
                server.starttls(context=context)
                server.login(self._username, self._password)
                server.send_message(message)

    def __repr__(self) -> str:
        return f"<SmtpMailSender host={self._host}:{self._port}>"
