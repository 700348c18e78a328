"""
Role Recommendation Type Definitions

Tagged result contracts passed between the pipeline stages.
All types are JSON-serializable and compatible with Pydantic.
"""

from typing import Any, Dict, List, Literal, NamedTuple, Optional, TypedDict


class RecommendationPrompt(NamedTuple):
    """Instruction/context pair sent to the model."""
    instruction: str  # Fixed system-level directive
    context: str  # Profile tags rendered as plain lines


class InvocationResult(TypedDict):
    """Outcome of a single bounded model call."""
    status: Literal["OK", "TIMEOUT", "INVOCATION_ERROR"]

    # Present when status == "OK"
    text: Optional[str]

    # Present when status != "OK"
    reason: Optional[str]


class NormalizationResult(TypedDict):
    """Outcome of turning a model reply into recommendation records."""
    status: Literal["OK", "PARSE_FAILURE"]

    # Present when status == "OK": parsed JSON objects, not yet coerced
    recommendations: Optional[List[Dict[str, Any]]]

    # Present when status == "PARSE_FAILURE"
    reason: Optional[str]
