"""
Pydantic schemas for the role recommendation endpoint.

These models define the request/response contract for
POST /api/recommendations and the record shape stored in the
`role_recommendations` table.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

# ============================================================================
# RECORD MODELS
# ============================================================================

RECOMMENDATION_FIELDS = (
    "role_title",
    "description",
    "why_it_fits_professionally",
    "why_it_fits_personally",
)


class RoleRecommendation(BaseModel):
    """
    A single suggested career role.

    All four fields are always strings. Model output is loosely structured,
    so missing or null values become "" and other scalars are stringified
    instead of failing validation.
    """
    role_title: str = Field(
        "",
        description="Name of the suggested role",
        examples=["Data Analyst"]
    )
    description: str = Field(
        "",
        description="Short description of what the role involves"
    )
    why_it_fits_professionally: str = Field(
        "",
        description="Why the role matches the user's skills"
    )
    why_it_fits_personally: str = Field(
        "",
        description="Why the role matches the user's values and interests"
    )

    @field_validator(*RECOMMENDATION_FIELDS, mode="before")
    @classmethod
    def _coerce_to_string(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float, bool)):
            return str(value)
        # Lists/objects where a sentence was expected: keep the text, drop the shape
        if isinstance(value, list):
            return ", ".join(str(item) for item in value if item is not None)
        return str(value)


# ============================================================================
# REQUEST / RESPONSE MODELS
# ============================================================================

class RoleRecommendationsRequest(BaseModel):
    """
    Request for role recommendations.

    `userId` is optional at the schema level so a missing value reaches the
    route and is reported as 400, not as a generic validation error.
    """
    userId: Optional[str] = Field(
        None,
        description="Id of the user whose discovery profile drives the recommendations",
        examples=["7b2f1c9e-4a53-4c1e-9a0e-5d3f2f8b6a11"]
    )


class RoleRecommendationsResponse(BaseModel):
    """
    Response for POST /api/recommendations.

    Always contains at least one recommendation. When generation is not
    possible the fixed default set is returned with status 200.
    """
    recommendations: List[RoleRecommendation] = Field(
        ...,
        description="Suggested roles, newest first when served from cache"
    )


class ErrorResponse(BaseModel):
    """Body returned with 400 for malformed requests."""
    error: str = Field(..., examples=["Missing userId in request"])
