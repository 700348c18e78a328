"""
Role Recommendation - Single-Shot LLM Workflow

Prompt templates and result types for the Gemini-based role recommender.

Architecture:
- Pattern: single-shot LLM call, no tools, no retries
- Model: Gemini 2.5 Flash (configurable via RECOMMENDATION_MODEL)
- Temperature: 0.7, max 800 output tokens, 5 second timeout
- Output: JSON array parsed from free text

The pipeline itself is in:
- career_backend/services/recommendation_service.py
"""

from career_backend.agents.recommendation.prompts import (
    ROLE_RECOMMENDATION_SYSTEM_PROMPT,
    build_role_recommendation_prompt,
)
from career_backend.agents.recommendation.types import (
    InvocationResult,
    NormalizationResult,
    RecommendationPrompt,
)

__all__ = [
    "ROLE_RECOMMENDATION_SYSTEM_PROMPT",
    "build_role_recommendation_prompt",
    "InvocationResult",
    "NormalizationResult",
    "RecommendationPrompt",
]
