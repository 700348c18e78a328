"""
Role Recommendation Service - pipeline orchestrator.

Flow for one request:

    ProfileLookup ──(error / no discovery data)──────────────► Fallback
         │
    CacheCheck ──(cached rows)──────────────────────────────► Respond (CACHE)
         │ (empty, or cache read failed)
    Generate: prompt → Gemini (bounded) → normalize
         │ (timeout / invocation error / parse failure)──────► Fallback
         │
    Persist (inline, or after the response via BackgroundTasks)
         │
    Respond (GENERATED)

The one guarantee: a non-empty list of recommendations is always returned.
Every failure below the HTTP layer is logged with the user id and the stage
and converted to the default set; nothing is raised to the caller.

Store and model access are injected (ProfileStore, ModelInvoker) so tests
can substitute fakes.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Literal, Optional

from fastapi import BackgroundTasks

from career_backend.agents.recommendation.prompts import build_role_recommendation_prompt
from career_backend.config import settings
from career_backend.schemas.profile import DiscoveryProfile
from career_backend.schemas.recommendations import RoleRecommendation
from career_backend.services.errors import StoreError
from career_backend.services.fallback import get_default_recommendations
from career_backend.services.model_invoker import ModelInvoker
from career_backend.services.profile_store import ProfileStore
from career_backend.services.response_normalizer import normalize_model_response

logger = logging.getLogger(__name__)

RecommendationSource = Literal["CACHE", "GENERATED", "FALLBACK"]


@dataclass
class RecommendationOutcome:
    """
    Result of one pipeline run.

    Attributes:
        recommendations: What the caller receives (never empty)
        source: Where the recommendations came from
        reason: Why the default set was served (FALLBACK only)
    """
    recommendations: List[RoleRecommendation]
    source: RecommendationSource
    reason: Optional[str] = field(default=None)


def _fallback(user_id: str, reason: str) -> RecommendationOutcome:
    logger.warning(f"Serving default recommendations for user_id={user_id}: {reason}")
    return RecommendationOutcome(
        recommendations=get_default_recommendations(),
        source="FALLBACK",
        reason=reason,
    )


async def persist_recommendations(
    store: ProfileStore,
    user_id: str,
    recommendations: List[RoleRecommendation],
) -> int:
    """
    Append generated recommendations to the user's history.

    Each record is written independently; a failed insert is logged and
    the remaining records are still attempted.

    Returns:
        Number of records written
    """
    persisted = 0
    for recommendation in recommendations:
        try:
            await store.persist_recommendation(user_id, recommendation)
            persisted += 1
        except StoreError as e:
            logger.error(f"Error saving recommendation for user_id={user_id}: {e}")

    if persisted < len(recommendations):
        logger.warning(
            f"Persisted {persisted}/{len(recommendations)} recommendations for user_id={user_id}"
        )
    else:
        logger.info(f"Persisted {persisted} recommendations for user_id={user_id}")

    return persisted


async def generate_recommendations(
    profile: DiscoveryProfile,
    invoker: ModelInvoker,
) -> tuple[Optional[List[RoleRecommendation]], Optional[str]]:
    """
    Build the prompt, call the model once and normalize the reply.

    Returns:
        (recommendations, None) on success, (None, reason) on any failure
    """
    prompt = build_role_recommendation_prompt(profile)

    invocation = await invoker.invoke(
        prompt,
        max_tokens=settings.RECOMMENDATION_MAX_TOKENS,
        temperature=settings.RECOMMENDATION_TEMPERATURE,
        timeout_ms=settings.RECOMMENDATION_TIMEOUT_MS,
    )

    if invocation["status"] != "OK" or invocation["text"] is None:
        return None, f"{invocation['status']}: {invocation['reason']}"

    normalized = normalize_model_response(invocation["text"])

    if normalized["status"] != "OK" or not normalized["recommendations"]:
        return None, f"PARSE_FAILURE: {normalized['reason']}"

    recommendations = [
        RoleRecommendation.model_validate(item)
        for item in normalized["recommendations"]
    ]
    return recommendations, None


async def _run_pipeline(
    user_id: str,
    store: ProfileStore,
    invoker: ModelInvoker,
    background_tasks: Optional[BackgroundTasks],
) -> RecommendationOutcome:
    # ProfileLookup
    try:
        profile = await store.fetch_profile(user_id)
    except StoreError as e:
        logger.error(f"Error fetching profile data for user_id={user_id}: {e}")
        return _fallback(user_id, "profile fetch failed")

    if profile is None:
        return _fallback(user_id, "no discovery data")

    # CacheCheck
    try:
        cached = await store.fetch_cached_recommendations(user_id)
    except StoreError as e:
        logger.warning(f"Cache lookup failed for user_id={user_id}, generating instead: {e}")
        cached = []

    if cached:
        logger.info(f"Using {len(cached)} existing recommendations for user_id={user_id}")
        return RecommendationOutcome(recommendations=cached, source="CACHE")

    # Generate
    logger.info(f"Generating role recommendations for user_id={user_id}")
    recommendations, reason = await generate_recommendations(profile, invoker)

    if recommendations is None:
        return _fallback(user_id, reason or "generation failed")

    # Persist
    if background_tasks is not None:
        background_tasks.add_task(persist_recommendations, store, user_id, list(recommendations))
    else:
        await persist_recommendations(store, user_id, recommendations)

    return RecommendationOutcome(recommendations=recommendations, source="GENERATED")


async def get_role_recommendations(
    user_id: str,
    store: ProfileStore,
    invoker: ModelInvoker,
    background_tasks: Optional[BackgroundTasks] = None,
) -> RecommendationOutcome:
    """
    Return role recommendations for a user, generating them if needed.

    Args:
        user_id: Non-empty user id (validated by the route)
        store: Profile store adapter
        invoker: Model invoker
        background_tasks: When given, persistence runs after the response
            is sent; otherwise it runs before returning

    Returns:
        RecommendationOutcome with a non-empty recommendation list
    """
    logger.info(f"get_role_recommendations called for user_id={user_id}")

    try:
        outcome = await _run_pipeline(user_id, store, invoker, background_tasks)
    except Exception as e:
        logger.exception(f"Unexpected error in recommendation pipeline for user_id={user_id}: {e}")
        outcome = _fallback(user_id, "unexpected error")

    logger.info(
        f"Returning {len(outcome.recommendations)} recommendations "
        f"for user_id={user_id} (source={outcome.source})"
    )
    return outcome
