"""
Configuration management using .env file
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import List, Literal, Optional


class Settings(BaseSettings):
    """Application settings loaded from .env file"""
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # OpenAI
    openai_api_key: str = ""
    llm_api: Literal["chat", "responses"] = "chat"
    llm_model: str = "gpt-4o-mini"
    llm_temperature: float = 0.4
    llm_timeout: float = 30.0

    # Mail (SMTP)
    email_user: str = ""
    email_pass: str = ""
    sender_name: str = "AI Agent"
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    smtp_use_ssl: bool = True  # False -> plain connect + STARTTLS
    smtp_timeout: float = 30.0

    # Server
    host: str = "0.0.0.0"
    port: Optional[int] = None  # required at startup

    # Application
    environment: str = "development"
    debug: bool = False
    log_dir: str = "logs"
    static_dir: str = "public"

    # CORS
    cors_origins: List[str] = ["*"]

    @field_validator("port", mode="before")
    @classmethod
    def _empty_port_is_missing(cls, value):
        """PORT= (empty) counts as not set"""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def missing_required(self) -> List[str]:
        """
        Names of required environment variables that are not set

        Returns:
            List[str]: e.g. ["OPENAI_API_KEY", "EMAIL_PASS"]
        """
        required = {
            "OPENAI_API_KEY": self.openai_api_key,
            "EMAIL_USER": self.email_user,
            "EMAIL_PASS": self.email_pass,
            "PORT": self.port,
        }
        return [name for name, value in required.items() if not value]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
