"""Dappbot API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery — ExMA anti-pattern)
    - Global error handlers map every failure to a {data, err} envelope
    - CORS configured from settings (not hardcoded)
    - Logging configured once on startup via lifespan context manager

Design Decisions:
    - create_app() factory: tests build isolated apps with their own routes
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dappbot.api.error_handlers import register_error_handlers
from dappbot.api.routes import health
from dappbot.config import get_settings
from dappbot.core.domain_types import HttpMethod
from dappbot.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Dappbot API started")
    yield
    logger.info("Dappbot API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Dappbot API", version="1.0.0", lifespan=lifespan)

    # Preflight only; envelopes carry their own CORS headers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_allow_origin],
        allow_methods=[m.value for m in HttpMethod],
        allow_headers=settings.cors_allow_header_list,
    )

    app.include_router(health.router)
    register_error_handlers(app)
    return app


app = create_app()
