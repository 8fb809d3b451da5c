"""
API Routes
"""
import logging
from typing import Any, Dict, Optional
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse

from mail_agent.core.intent_parser import IntentErrorKind, IntentValidationError
from mail_agent.dependencies import get_email_agent_service
from mail_agent.schemas.email import AgentRequest, SendEmailResponse
from mail_agent.services.email_agent_service import EmailAgentService, PromptRequiredError

router = APIRouter()
logger = logging.getLogger(__name__)

# Status code per intent rejection kind
INTENT_ERROR_STATUS = {
    IntentErrorKind.EMPTY_OUTPUT: 500,
    IntentErrorKind.PARSE_FAILURE: 500,
    IntentErrorKind.INCOMPLETE_FIELDS: 400,
}


def failure_response(status_code: int, **fields: Any) -> JSONResponse:
    """{"success": false, ...fields}"""
    content: Dict[str, Any] = {"success": False}
    content.update(fields)
    return JSONResponse(status_code=status_code, content=content)


def prompt_required_response() -> JSONResponse:
    return failure_response(400, message="Prompt required")


def intent_error_response(error: IntentValidationError) -> JSONResponse:
    """Map an IntentValidationError to its HTTP response"""
    fields: Dict[str, Any] = {"message": error.message}
    if error.kind == IntentErrorKind.PARSE_FAILURE:
        fields["raw"] = error.raw
    elif error.kind == IntentErrorKind.INCOMPLETE_FIELDS:
        fields["emailData"] = error.data
    return failure_response(INTENT_ERROR_STATUS[error.kind], **fields)


# ====== Health ======

@router.get("/", response_class=PlainTextResponse)
async def root():
    """Health check endpoint"""
    return "OK"


@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


# ====== Email Agent ======

@router.post("/agent/send-email", response_model=SendEmailResponse)
async def send_email(
    request: Optional[AgentRequest] = None,
    service: EmailAgentService = Depends(get_email_agent_service)
):
    """
    Write an email from a prompt with the LLM and send it

    Request example:
    {
        "prompt": "Send a thank-you note to alice@example.com"
    }
    """
    prompt = request.prompt if request else None

    try:
        sent = await service.send_from_prompt(prompt)
        return SendEmailResponse(email=sent)

    except PromptRequiredError:
        return prompt_required_response()

    except IntentValidationError as e:
        logger.warning(f"Model output rejected ({e.kind.value}): {e.message}")
        return intent_error_response(e)

    except Exception as e:
        logger.error(f"Error sending email: {e}", exc_info=True)
        return failure_response(500, error=str(e))
