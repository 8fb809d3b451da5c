from mail_agent.services.email_agent_service import EmailAgentService, PromptRequiredError

__all__ = ["EmailAgentService", "PromptRequiredError"]
