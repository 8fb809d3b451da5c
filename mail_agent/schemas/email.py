from pydantic import BaseModel, Field
from typing import Optional


class AgentRequest(BaseModel):
    """Inbound payload of POST /agent/send-email"""
    prompt: Optional[str] = Field(None, description="Free-text description of the email to send")


class EmailIntent(BaseModel):
    """Email described by the model output"""
    to: str
    subject: str
    body: str


class SentEmail(BaseModel):
    """Compact echo of a dispatched email (body left out)"""
    to: str
    subject: str


class SendEmailResponse(BaseModel):
    """Successful send"""
    success: bool = True
    message: str = "Email sent successfully"
    email: SentEmail
