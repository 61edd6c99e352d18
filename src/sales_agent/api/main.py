"""FastAPI application for the SalesAgent inbox service."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from sales_agent.assist.assistant import SalesAssistant
from sales_agent.auth import AuthService
from sales_agent.clients.openai_client import OpenAIClient
from sales_agent.console import SalesConsole
from sales_agent.seed import build_demo_store, demo_business

from .config import get_settings
from .routes.assist import router as assist_router
from .routes.health import router as health_router
from .routes.inbox import router as inbox_router
from .routes.session import router as session_router

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the in-memory inbox and clients at startup, clean up at shutdown."""
    settings = get_settings()

    logger.info("lifespan.startup", business_id=settings.BUSINESS_ID)

    store = build_demo_store(settings.BUSINESS_ID)
    business = demo_business(settings.BUSINESS_ID, settings.BUSINESS_NAME)

    openai = OpenAIClient(
        api_key=settings.OPENAI_API_KEY,
        chat_model=settings.OPENAI_CHAT_MODEL,
    )
    assistant = SalesAssistant(openai_client=openai)

    auth = AuthService(
        login_latency=settings.AUTH_LOGIN_LATENCY_SECONDS,
        verify_latency=settings.AUTH_VERIFY_LATENCY_SECONDS,
        token_secret=settings.AUTH_TOKEN_SECRET,
        token_expires_hours=settings.AUTH_TOKEN_EXPIRES_HOURS,
    )

    # Store on app.state for request handlers
    app.state.store = store
    app.state.openai = openai
    app.state.auth = auth
    app.state.console = SalesConsole(store=store, assistant=assistant, business=business)

    logger.info("lifespan.ready", customers=len(store.customers))
    yield

    # Shutdown
    logger.info("lifespan.shutdown")
    app.state.console.coordinator.cancel_all()
    await openai.close()


app = FastAPI(
    title="sales-agent",
    description="WhatsApp sales inbox with AI reply drafting and lead scoring",
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(session_router)
app.include_router(inbox_router)
app.include_router(assist_router)
