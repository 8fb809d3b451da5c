from mail_agent.prompts.email_prompt import EMAIL_AGENT_SYSTEM_PROMPT

__all__ = ["EMAIL_AGENT_SYSTEM_PROMPT"]
