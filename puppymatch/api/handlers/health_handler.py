"""
Health Check Handler

Provides health check endpoints for monitoring and load balancers.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from puppymatch.config.settings import settings
from puppymatch.shared.db import ping_db
from puppymatch.shared.schemas.common import HealthResponse


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Basic health check endpoint.

    Returns:
        HealthResponse with service status
    """
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME.lower(),
        version=settings.APP_VERSION,
    )


@router.get("/ready")
async def readiness_check():
    """
    Readiness check for load balancers.

    Runs a trivial query against the database; 503 if it fails.
    """
    if not await ping_db():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable"},
        )
    return {"status": "ready"}


@router.get("/live")
async def liveness_check():
    """
    Liveness check.

    Returns:
        Simple alive status
    """
    return {"status": "alive"}
