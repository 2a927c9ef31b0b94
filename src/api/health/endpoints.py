"""Health check endpoints."""

import logging

from fastapi import APIRouter

from src.api.health.models import API_VERSION, HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health_check", tags=["health"])


@router.get(
    "",
    response_model=HealthResponse,
    summary="Check service health",
    description="Returns the health status of the API service.",
)
def health_check() -> HealthResponse:
    """Check if the API service is up.

    Does not touch the database or the email provider.

    :returns: Health status response.
    """
    logger.debug("Health check requested")
    return HealthResponse(status="healthy", version=API_VERSION)
