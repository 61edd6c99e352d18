"""Configuration for the SalesAgent FastAPI service."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Service settings loaded from environment variables."""

    # OpenAI
    OPENAI_API_KEY: str
    OPENAI_CHAT_MODEL: str = "gpt-4.1-mini"

    # Business (single tenant)
    BUSINESS_ID: str = "b1"
    BUSINESS_NAME: str = "Volt Motors (Demo)"

    # Auth stub latency, in seconds
    AUTH_LOGIN_LATENCY_SECONDS: float = 1.2
    AUTH_VERIFY_LATENCY_SECONDS: float = 0.5

    # Session tokens (HS256 JWT)
    AUTH_TOKEN_SECRET: str = "change-this-secret-in-production-00"
    AUTH_TOKEN_EXPIRES_HOURS: int = 4


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()
