"""Health & Readiness Probes: liveness and readiness endpoints.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 if the Gemini credential is not configured
    - Neither probe reveals the credential or calls the upstream API

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
    - Readiness does not ping Gemini: a probe must not spend upstream quota
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from prompt_relay import __version__
from prompt_relay.config import Settings, get_settings

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "prompt-relay",
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check(settings: Settings = Depends(get_settings)):
    """Readiness probe: the relay cannot serve without a credential."""
    if not settings.gemini_api_key:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "credential_missing",
            },
        )
    return {"status": "ready", "checks": {"credential": "configured"}}
