"""
Health Check Endpoints
---------------------
Liveness endpoint for the token service.
"""

from datetime import datetime, timezone
from fastapi import APIRouter, Request
from loguru import logger

from tokenguard.models.response_models import Health, HealthStatus


router = APIRouter(prefix="/api/v1/health", tags=["Health"])


@router.get("/", response_model=HealthStatus)
async def health_check(request: Request):
    """
    Basic health check endpoint.
    Returns service status and version information.

    Returns:
        HealthStatus: Service health status
    """
    logger.debug("Health check requested")

    return HealthStatus(
        status=Health.HEALTHY.value,
        timestamp=datetime.now(timezone.utc),
        version=request.app.state.settings.app_version,
    )
