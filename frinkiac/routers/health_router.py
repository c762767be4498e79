"""Health endpoints."""

from datetime import UTC, datetime

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from frinkiac import __version__
from frinkiac.config import Settings, get_settings
from frinkiac.dependencies import get_http_client
from frinkiac.models import DetailedHealthResponse, HealthResponse
from frinkiac.services import frinkiac_service

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint.

    Returns simple status for Docker healthcheck and basic monitoring.
    For upstream checks, use `/health/ready`.
    """
    return HealthResponse(status="ok", version=__version__)


@router.get("/health/ready", response_model=DetailedHealthResponse)
async def readiness_check(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    """Readiness probe - can the application serve traffic?

    Checks:
    - HTTP client initialization
    - Frinkiac API reachability (one random caption request)

    **Returns:**
    - 200: Application is ready to serve requests
    - 503: Frinkiac is unreachable or returned an error
    """
    checks = {"http_client": "ok" if client else "failed"}
    all_healthy = bool(client)

    try:
        await frinkiac_service.get_random(client, settings)
        checks["frinkiac_api"] = "ok"
    except Exception as e:
        checks["frinkiac_api"] = f"failed: {str(e)[:50]}"
        all_healthy = False

    return JSONResponse(
        status_code=200 if all_healthy else 503,
        content=DetailedHealthResponse(
            status="healthy" if all_healthy else "unhealthy",
            version=__version__,
            timestamp=datetime.now(UTC),
            checks=checks,
        ).model_dump(mode="json"),
    )
