"""
Email Agent Service

prompt -> IntentGenerator -> parse_intent -> MailSender

Two sequential awaited calls, nothing retried. Every rejection is raised
to the caller; the HTTP layer turns it into a response.
"""
from typing import Optional

from mail_agent.core.intent_parser import parse_intent
from mail_agent.ports.intent_generator import IntentGenerator
from mail_agent.ports.mail_sender import MailSender, OutgoingEmail
from mail_agent.schemas.email import SentEmail
from mail_agent.utils.logger import get_logger

logger = get_logger(__name__)


class PromptRequiredError(ValueError):
    """Prompt missing or empty"""

    def __init__(self, message: str = "Prompt required"):
        super().__init__(message)
        self.message = message


class EmailAgentService:
    """
    Writes an email from a free-text prompt and sends it

    Example:
        service = EmailAgentService(generator, mail_sender, sender='"AI Agent" <me@gmail.com>')
        sent = await service.send_from_prompt("Send a thank-you note to alice@example.com")
        # sent = SentEmail(to="alice@example.com", subject="Thank You")
    """

    def __init__(self, generator: IntentGenerator, mail_sender: MailSender, sender: str):
        """
        Args:
            generator: language-model collaborator
            mail_sender: mail-delivery collaborator
            sender: formatted From address
        """
        self._generator = generator
        self._mail_sender = mail_sender
        self._sender = sender

    async def send_from_prompt(self, prompt: Optional[str]) -> SentEmail:
        """
        Generate, validate and dispatch one email

        Args:
            prompt: user prompt

        Returns:
            SentEmail: recipient and subject of the dispatched email

        Raises:
            PromptRequiredError: prompt missing or empty (no external call made)
            IntentValidationError: model output empty, not JSON, or incomplete
            LLMAPIError / LLMTimeoutError: language-model call failed
            MailDeliveryError: mail transport failed
        """
        if not prompt or not isinstance(prompt, str):
            raise PromptRequiredError()

        logger.info(f"Email agent request: {prompt[:100]}")

        raw = await self._generator.generate(prompt)
        intent = parse_intent(raw)
        logger.info(f"Intent parsed: to={intent.to}, subject={intent.subject[:50]}")

        await self._mail_sender.send(OutgoingEmail(
            sender=self._sender,
            to=intent.to,
            subject=intent.subject,
            text=intent.body
        ))

        return SentEmail(to=intent.to, subject=intent.subject)

    def __repr__(self) -> str:
        return f"<EmailAgentService generator={self._generator!r} mail_sender={self._mail_sender!r}>"
