"""
FastAPI Dependency Injection

Builds the collaborators and the email agent service from Settings and
injects them into the endpoints. Tests replace them through
app.dependency_overrides.
"""
import logging
from functools import lru_cache
from fastapi import Depends

from mail_agent.config import get_settings
from mail_agent.ports import IntentGenerator, MailSender
from mail_agent.infrastructure import SmtpMailSender, create_intent_generator
from mail_agent.infrastructure.smtp_mailer import format_sender
from mail_agent.services.email_agent_service import EmailAgentService


logger = logging.getLogger(__name__)


@lru_cache()
def get_intent_generator() -> IntentGenerator:
    """
    Singleton IntentGenerator (API shape chosen by settings.llm_api)
    """
    settings = get_settings()
    generator = create_intent_generator(settings)
    logger.info(f"Intent generator created: {generator!r}")
    return generator


@lru_cache()
def get_mail_sender() -> MailSender:
    """
    Singleton SMTP MailSender
    """
    sender = SmtpMailSender.from_settings(get_settings())
    logger.info(f"Mail sender created: {sender!r}")
    return sender


def get_email_agent_service(
    generator: IntentGenerator = Depends(get_intent_generator),
    mail_sender: MailSender = Depends(get_mail_sender)
) -> EmailAgentService:
    """
    EmailAgentService dependency (FastAPI Depends only)

    Args:
        generator: injected by FastAPI
        mail_sender: injected by FastAPI
    """
    settings = get_settings()
    return EmailAgentService(
        generator=generator,
        mail_sender=mail_sender,
        sender=format_sender(settings.sender_name, settings.email_user)
    )
