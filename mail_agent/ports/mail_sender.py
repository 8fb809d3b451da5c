"""
Mail Sender Port (Interface)

Abstracts outbound mail delivery so the handler does not depend on SMTP.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class OutgoingEmail:
    """
    Email handed to the mail-delivery collaborator

    Attributes:
        sender: formatted sender address, e.g. '"AI Agent" <me@example.com>'
        to: recipient address
        subject: subject line
        text: plain-text body
    """
    sender: str
    to: str
    subject: str
    text: str


class MailSender(ABC):
    """
    Mail delivery interface

    Implementations:
        - SmtpMailSender: smtplib (Gmail by default)
        - fakes in tests

    A successful return means the message was handed over to the
    transport. It does not confirm delivery to the recipient.
    """

    @abstractmethod
    async def send(self, email: OutgoingEmail) -> None:
        """
        Send one email

        Args:
            email: message to send

        Raises:
            MailDeliveryError: the transport rejected the message or failed
        """
        pass


class MailDeliveryError(Exception):
    """Mail transport failure"""
    pass
