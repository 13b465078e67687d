"""
Application configuration management using Pydantic Settings.
This file handles all environment variables and app settings.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic will automatically read from .env file and environment variables.
    Priority: Environment variables > .env file > default values
    """

    # Application
    APP_NAME: str = "Luna"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # CORS - Allow frontend to connect
    BACKEND_CORS_ORIGINS: list[str] = ["http://localhost:5173", "http://localhost:5000", "http://localhost:3000"]

    # LLM API Keys (both optional: without a key chat turns get the fallback reply)
    OPENAI_API_KEY: Optional[str] = None
    ANTHROPIC_API_KEY: Optional[str] = None

    # Completion provider
    LLM_MODEL: str = "gpt-4o"
    LLM_TEMPERATURE: float = 0.7
    LLM_MAX_TOKENS: int = 500
    LLM_TIMEOUT_SECONDS: float = 30.0
    LLM_MAX_RETRIES: int = 0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )


# Create a global settings instance
settings = Settings()
