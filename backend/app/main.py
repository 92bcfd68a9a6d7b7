"""Indicaciones Relay — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure → 500 {"error": message}, inside CORS
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Missing GEMINI_API_KEY does not block startup: each request reports it,
      and the readiness probe exposes it
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.infrastructure.observability import log_requests, setup_logging
from app.config import get_settings
from app.api.routes import health, indications

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if not settings.gemini_api_key:
        logger.warning(
            "GEMINI_API_KEY is not set; relay requests will fail until it is configured",
            extra={"error_code": "CONFIGURATION_ERROR"},
        )
    logger.info("Indicaciones relay started", extra={"model": settings.gemini_model})
    yield
    logger.info("Indicaciones relay shutting down")


app = FastAPI(
    title="Indicaciones Relay", version="1.0.0", lifespan=lifespan,
)

# Middleware added first runs innermost; error handling stays inside CORS
register_error_handlers(app)
app.middleware("http")(log_requests)

# CORS: origins from settings
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(indications.router)
