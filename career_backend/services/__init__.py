"""
Service layer for the role recommendation backend.

Contains the recommendation pipeline and its collaborators:
- ProfileStore: Supabase reads/writes (profiles, role_recommendations)
- ModelInvoker: one bounded Gemini call
- normalize_model_response: model text -> recommendation objects
- get_default_recommendations: the fixed fallback set
- get_role_recommendations: the orchestrator that ties them together

Services act as the glue between routes (HTTP layer) and the model/database.
"""

from .fallback import get_default_recommendations
from .model_invoker import ModelInvoker, get_model_invoker
from .profile_store import ProfileStore, get_profile_store
from .recommendation_service import RecommendationOutcome, get_role_recommendations
from .response_normalizer import normalize_model_response

__all__ = [
    "get_default_recommendations",
    "ModelInvoker",
    "get_model_invoker",
    "ProfileStore",
    "get_profile_store",
    "RecommendationOutcome",
    "get_role_recommendations",
    "normalize_model_response",
]
