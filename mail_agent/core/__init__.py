from mail_agent.core.intent_parser import (
    IntentErrorKind,
    IntentValidationError,
    parse_intent,
)

__all__ = ["IntentErrorKind", "IntentValidationError", "parse_intent"]
