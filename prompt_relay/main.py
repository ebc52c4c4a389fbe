"""Prompt Relay API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RelayError → {"error": ...} JSON responses
    - CORS configured from settings (not hardcoded)
    - One shared httpx.AsyncClient opened on startup, closed on shutdown
    - A missing credential never prevents startup (it fails requests instead)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from prompt_relay import __version__
from prompt_relay.api.error_handlers import register_error_handlers
from prompt_relay.api.routes import health, relay
from prompt_relay.config import get_settings
from prompt_relay.infrastructure.gemini_client import create_http_client
from prompt_relay.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(
        settings.log_level, settings.log_format,
        secrets=[settings.gemini_api_key],
    )
    if not settings.gemini_api_key:
        logger.critical(
            "GEMINI_API_KEY is not set; relay requests will fail with 500",
        )
    async with create_http_client(settings.upstream_timeout_seconds) as client:
        app.state.http_client = client
        logger.info("Prompt Relay API started")
        yield
    logger.info("Prompt Relay API shutting down")


app = FastAPI(
    title="Prompt Relay API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(relay.router)

register_error_handlers(app)
