"""
Configuration management for the SalesAgent CRM core.

Loads settings from environment variables with sensible defaults.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from project root
_project_root = Path(__file__).parent.parent.parent
_env_file = _project_root / '.env'
if _env_file.exists():
    load_dotenv(_env_file)


class Config:
    """Configuration settings loaded from environment."""

    # OpenAI
    OPENAI_API_KEY: str = os.getenv('OPENAI_API_KEY', '')
    OPENAI_CHAT_MODEL: str = os.getenv('OPENAI_CHAT_MODEL', 'gpt-4.1-mini')

    # Business (single tenant)
    BUSINESS_ID: str = os.getenv('BUSINESS_ID', 'b1')
    BUSINESS_NAME: str = os.getenv('BUSINESS_NAME', 'Volt Motors (Demo)')

    # Auth stub latency, in seconds
    AUTH_LOGIN_LATENCY_SECONDS: float = float(os.getenv('AUTH_LOGIN_LATENCY_SECONDS', '1.2'))
    AUTH_VERIFY_LATENCY_SECONDS: float = float(os.getenv('AUTH_VERIFY_LATENCY_SECONDS', '0.5'))

    # Session tokens (HS256 JWT)
    AUTH_TOKEN_SECRET: str = os.getenv('AUTH_TOKEN_SECRET', 'change-this-secret-in-production-00')
    AUTH_TOKEN_EXPIRES_HOURS: int = int(os.getenv('AUTH_TOKEN_EXPIRES_HOURS', '4'))

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def validate(cls) -> list[str]:
        """
        Validate that required configuration is present.

        Returns:
            List of missing required configuration keys
        """
        missing = []
        if not cls.OPENAI_API_KEY:
            missing.append('OPENAI_API_KEY')
        return missing


# Singleton config instance
config = Config()
