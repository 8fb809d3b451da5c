"""
Email intent parsing

Turns the raw text returned by the language model into a validated
EmailIntent. Every rejection is an IntentValidationError whose kind lets
the HTTP layer pick the status code.
"""
import json
from enum import Enum
from typing import Any, Optional

from mail_agent.schemas.email import EmailIntent
from mail_agent.utils.logger import get_logger

logger = get_logger(__name__)

REQUIRED_FIELDS = ("to", "subject", "body")


class IntentErrorKind(str, Enum):
    """Why the model output could not be turned into an email"""
    EMPTY_OUTPUT = "empty_output"            # model returned no text
    PARSE_FAILURE = "parse_failure"          # text is not valid JSON
    INCOMPLETE_FIELDS = "incomplete_fields"  # to / subject / body missing or empty


class IntentValidationError(Exception):
    """
    Model output rejected before any send attempt

    Attributes:
        kind: IntentErrorKind
        raw: raw model text (PARSE_FAILURE)
        data: parsed JSON value (INCOMPLETE_FIELDS)
    """

    def __init__(
        self,
        kind: IntentErrorKind,
        message: str,
        raw: Optional[str] = None,
        data: Any = None
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.raw = raw
        self.data = data


def parse_intent(raw: Optional[str]) -> EmailIntent:
    """
    Parse and validate the model output

    Args:
        raw: raw model text

    Returns:
        EmailIntent: intent with non-empty to / subject / body

    Raises:
        IntentValidationError: EMPTY_OUTPUT, PARSE_FAILURE or INCOMPLETE_FIELDS
    """
    if raw is None or not raw.strip():
        raise IntentValidationError(IntentErrorKind.EMPTY_OUTPUT, "Empty AI response")

    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        logger.debug(f"Model output is not JSON: {e}")
        raise IntentValidationError(
            IntentErrorKind.PARSE_FAILURE,
            "AI response parsing failed",
            raw=raw
        ) from e

    if not is_complete(data):
        raise IntentValidationError(
            IntentErrorKind.INCOMPLETE_FIELDS,
            "Incomplete email data from AI",
            data=data
        )

    return EmailIntent(to=data["to"], subject=data["subject"], body=data["body"])


def is_complete(data: Any) -> bool:
    """True if data is a JSON object whose to / subject / body are non-empty strings"""
    if not isinstance(data, dict):
        return False
    return all(isinstance(data.get(field), str) and data.get(field) for field in REQUIRED_FIELDS)


def _reject_constant(token: str) -> Any:
    """NaN / Infinity / -Infinity are not JSON"""
    raise ValueError(f"Invalid JSON constant: {token}")
