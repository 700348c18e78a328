"""
FastAPI route for role recommendations.

Endpoints:
- POST /api/recommendations: Cached or freshly generated role recommendations

Status codes:
- 400: userId missing or empty (no store or model access happens)
- 200: every other case, including all downstream failures, which degrade
  to the default recommendation set
"""

import logging
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, status
from fastapi.responses import JSONResponse

from career_backend.schemas.recommendations import (
    ErrorResponse,
    RoleRecommendationsRequest,
    RoleRecommendationsResponse,
)
from career_backend.services.model_invoker import ModelInvoker, get_model_invoker
from career_backend.services.profile_store import ProfileStore, get_profile_store
from career_backend.services.recommendation_service import get_role_recommendations

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(
    prefix="/api/recommendations",
    tags=["recommendations"]
)


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.post(
    "",
    response_model=RoleRecommendationsResponse,
    status_code=200,
    responses={400: {"model": ErrorResponse}},
    summary="Get role recommendations for a user",
    description="""
    Returns career role recommendations based on the user's discovery profile
    (skills, values, interests).

    **Flow:**
    1. Load the user's discovery profile
    2. If recommendations were generated before, return the 3 most recent
    3. Otherwise ask the model for 3 roles (5 second budget), parse the reply
       and store it for next time

    **Failure behavior:**
    Missing profile, model timeouts and unparseable replies all return the
    default recommendation set with status 200. Only a missing userId is an
    error (400).
    """
)
async def get_recommendations_endpoint(
    background_tasks: BackgroundTasks,
    request: Optional[RoleRecommendationsRequest] = None,
    store: ProfileStore = Depends(get_profile_store),
    invoker: ModelInvoker = Depends(get_model_invoker),
):
    """
    Role recommendation endpoint.

    - Parse/Validate: Pydantic RoleRecommendationsRequest + userId presence check
    - Orchestrate: service layer (never raises)
    - Persist: scheduled as a background task after the response
    """
    user_id = ((request.userId if request else None) or "").strip()

    if not user_id:
        logger.warning("POST /api/recommendations called without userId")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Missing userId in request"}
        )

    logger.info(f"POST /api/recommendations called for user_id={user_id}")

    outcome = await get_role_recommendations(
        user_id=user_id,
        store=store,
        invoker=invoker,
        background_tasks=background_tasks,
    )

    return RoleRecommendationsResponse(recommendations=outcome.recommendations)
