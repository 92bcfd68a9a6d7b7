"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 if GEMINI_API_KEY is not configured (readiness)
    - Neither probe calls the upstream API

Design Decisions:
    - Separate liveness/readiness: a missing key fails every relay request, so the
      instance should leave the load balancer but not be restarted
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.config import Settings, get_settings

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "indicaciones-relay",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(settings: Settings = Depends(get_settings)):
    """Readiness probe — the upstream credential must be configured."""
    if not settings.gemini_api_key:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "api_key_not_configured",
            },
        )
    return {
        "status": "ready",
        "checks": {"api_key": "configured", "model": settings.gemini_model},
    }
