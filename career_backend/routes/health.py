"""
Health check route for the role recommendation backend.

This endpoint is PUBLIC and provides a simple status check for load
balancers, monitoring, and deployment verification. It does not touch
Supabase or Gemini.
"""

from fastapi import APIRouter

from career_backend.schemas.health import HealthResponse
from career_backend.utils.logging import get_logger

logger = get_logger(__name__)

# Create router with no prefix (mounted at root level in main.py)
router = APIRouter(tags=["system"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description="Public health check endpoint. Returns a simple status indicator.",
    status_code=200,
)
async def health_check() -> HealthResponse:
    """
    Public health check endpoint.

    Example response:
        {
            "status": "ok"
        }
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok")
