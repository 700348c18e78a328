"""
Role Recommendation Prompt Templates

Contains the system prompt and the context builder for role recommendations.

Prompt design:
- The system prompt is fixed and asks for a bare JSON array of 3 objects
- The user turn carries only the selected tags of each facet
- Free-text answers (additional_info) are NOT sent, to keep the payload
  small and the call inside the 5 second budget
"""

from typing import List

from career_backend.agents.recommendation.types import RecommendationPrompt
from career_backend.schemas.profile import DiscoveryProfile

# =============================================================================
# SYSTEM PROMPT
# =============================================================================

ROLE_RECOMMENDATION_SYSTEM_PROMPT = (
    "Generate exactly 3 career roles as a JSON array based on the user's profile. "
    "Each object should have: role_title, description, why_it_fits_professionally, "
    "why_it_fits_personally. Be concise. Format: [{...},{...},{...}]."
)


# =============================================================================
# CONTEXT BUILDER
# =============================================================================

def _join_tags(tags: List[str]) -> str:
    return ", ".join(tags)


def build_role_recommendation_prompt(profile: DiscoveryProfile) -> RecommendationPrompt:
    """
    Project a discovery profile into the instruction/context pair for the model.

    Missing facets render as empty lists ("Skills: "), never as omitted
    lines, so the model always receives all three sections.

    Args:
        profile: The user's discovery profile

    Returns:
        RecommendationPrompt with the fixed instruction and the rendered context
    """
    context = "\n".join([
        f"Skills: {_join_tags(profile.skills.selected)}",
        f"Interests: {_join_tags(profile.interests.selected)}",
        f"Values: {_join_tags(profile.values.selected)}",
    ])

    return RecommendationPrompt(
        instruction=ROLE_RECOMMENDATION_SYSTEM_PROMPT,
        context=context,
    )
