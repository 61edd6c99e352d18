"""
Pytest configuration and shared fixtures.

Key fixtures:
- openai_api_key: OpenAI API key from environment (live tests only)
- fixed_now: Reference time the demo inbox is built around
- demo_store: InboxStore seeded with the demo inbox
- mock_openai_client: OpenAIClient stand-in with AsyncMock methods
- fast_auth: AuthService without simulated latency

Unit tests never call the real OpenAI API.
"""

import os
import sys
from datetime import datetime
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

# Load environment variables
from dotenv import load_dotenv

env_file = Path(__file__).parent.parent / '.env'
if env_file.exists():
    load_dotenv(env_file)

from sales_agent.auth import AuthService
from sales_agent.clients.openai_client import OpenAIClient
from sales_agent.seed import build_demo_store


@pytest.fixture
def openai_api_key() -> str:
    """Get OpenAI API key from environment."""
    key = os.getenv('OPENAI_API_KEY')
    if not key:
        pytest.skip('OPENAI_API_KEY not set')
    return key


@pytest.fixture
def fixed_now() -> datetime:
    """Reference time for the demo inbox, safely in the past."""
    return datetime(2025, 3, 14, 12, 0, 0)


@pytest.fixture
def demo_store(fixed_now: datetime):
    """Demo inbox for business b1."""
    return build_demo_store('b1', now=fixed_now)


@pytest.fixture
def mock_openai_client() -> MagicMock:
    """OpenAIClient stand-in; set return values per test."""
    client = MagicMock(spec=OpenAIClient)
    client.chat_completion = AsyncMock(return_value='')
    client.chat_completion_structured = AsyncMock()
    client.close = AsyncMock()
    return client


@pytest.fixture
def fast_auth() -> AuthService:
    """Auth stub with no simulated latency."""
    return AuthService(login_latency=0, verify_latency=0)


@pytest.fixture
def api_app(demo_store, mock_openai_client, fast_auth):
    """FastAPI app with every router and app.state populated, no lifespan."""
    from fastapi import FastAPI

    from sales_agent.api.routes.assist import router as assist_router
    from sales_agent.api.routes.health import router as health_router
    from sales_agent.api.routes.inbox import router as inbox_router
    from sales_agent.api.routes.session import router as session_router
    from sales_agent.assist.assistant import SalesAssistant
    from sales_agent.console import SalesConsole
    from sales_agent.seed import demo_business

    app = FastAPI()
    for router in (health_router, session_router, inbox_router, assist_router):
        app.include_router(router)

    app.state.store = demo_store
    app.state.auth = fast_auth
    app.state.openai = mock_openai_client
    app.state.console = SalesConsole(
        store=demo_store,
        assistant=SalesAssistant(mock_openai_client),
        business=demo_business(),
    )
    return app


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Bearer header for the demo owner."""
    from sales_agent.auth import MOCK_CREDENTIALS, encode_token

    return {'Authorization': f'Bearer {encode_token(MOCK_CREDENTIALS[0].user)}'}
