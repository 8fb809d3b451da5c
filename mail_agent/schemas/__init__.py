from mail_agent.schemas.email import AgentRequest, EmailIntent, SendEmailResponse, SentEmail

__all__ = ["AgentRequest", "EmailIntent", "SendEmailResponse", "SentEmail"]
