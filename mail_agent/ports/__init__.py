"""
Ports (Interfaces)

Inner layer of the service: the email agent handler only talks to these
abstractions, never to the OpenAI or SMTP clients directly.
"""
from mail_agent.ports.intent_generator import IntentGenerator, LLMAPIError, LLMTimeoutError
from mail_agent.ports.mail_sender import MailSender, MailDeliveryError, OutgoingEmail

__all__ = [
    "IntentGenerator",
    "LLMAPIError",
    "LLMTimeoutError",
    "MailSender",
    "MailDeliveryError",
    "OutgoingEmail",
]
