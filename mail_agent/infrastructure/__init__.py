"""
Infrastructure (Adapters)

Outer layer: concrete implementations of the port interfaces
(OpenAI, SMTP).
"""
from mail_agent.infrastructure.openai_llm import (
    OpenAIChatIntentGenerator,
    OpenAIResponsesIntentGenerator,
    create_intent_generator,
)
from mail_agent.infrastructure.smtp_mailer import SmtpMailSender

__all__ = [
    "OpenAIChatIntentGenerator",
    "OpenAIResponsesIntentGenerator",
    "SmtpMailSender",
    "create_intent_generator",
]
