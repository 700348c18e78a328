"""
Response Normalizer - free text in, recommendation records out.

The model is asked for a bare JSON array but regularly wraps it in markdown
fences or adds a sentence before/after it. Steps, each skipped when it does
not apply:

1. Trim surrounding whitespace
2. Strip an opening ```/```json fence and the closing fence
3. Strict json.loads; well-formed JSON stops here untouched
4. Otherwise keep only the first [ {...} ] shaped substring (drops
   surrounding prose) and parse that
5. A single object becomes a one-element list
6. Anything else is PARSE_FAILURE

This function is total: it never raises and never calls the model again.
Objects are passed through as parsed; field coercion happens in
RoleRecommendation.
"""

import json
import logging
import re
from typing import Any, Dict, List

from career_backend.agents.recommendation.types import NormalizationResult
from career_backend.schemas.recommendations import RECOMMENDATION_FIELDS
from career_backend.utils.logging import truncate_for_log

logger = logging.getLogger(__name__)

_OPENING_FENCE = re.compile(r"^```[\w+-]*[ \t]*\r?\n?")
_CLOSING_FENCE = re.compile(r"\r?\n?```\s*$")
_ARRAY_OF_OBJECTS = re.compile(r"\[\s*\{[\s\S]*\}\s*\]")


def _parse_failure(reason: str) -> NormalizationResult:
    return {"status": "PARSE_FAILURE", "recommendations": None, "reason": reason}


def strip_code_fence(text: str) -> str:
    """Remove a leading ``` fence (with or without language tag) and its closing fence."""
    if not text.startswith("```"):
        return text
    without_opening = _OPENING_FENCE.sub("", text, count=1)
    return _CLOSING_FENCE.sub("", without_opening, count=1).strip()


def extract_json_array(text: str) -> str:
    """Return the first array-of-objects substring, or the text unchanged if there is none."""
    match = _ARRAY_OF_OBJECTS.search(text)
    if match:
        return match.group(0)
    return text


def _log_missing_fields(items: List[Dict[str, Any]]) -> None:
    for idx, item in enumerate(items):
        missing = [field for field in RECOMMENDATION_FIELDS if field not in item]
        if missing:
            logger.warning(f"Recommendation {idx} missing fields {missing}; they will be empty")


def normalize_model_response(text: str) -> NormalizationResult:
    """
    Turn a model reply into a list of recommendation objects.

    Args:
        text: Raw reply text from the model

    Returns:
        NormalizationResult with status OK and the parsed objects, or
        PARSE_FAILURE with a short reason
    """
    if not isinstance(text, str):
        return _parse_failure("Reply is not text")

    json_string = text.strip()
    json_string = strip_code_fence(json_string)

    try:
        parsed = json.loads(json_string)
    except (json.JSONDecodeError, RecursionError):
        try:
            parsed = json.loads(extract_json_array(json_string))
        except (json.JSONDecodeError, RecursionError) as e:
            logger.error(f"Failed to parse model reply as JSON: {e}")
            logger.debug(f"Raw reply: {truncate_for_log(text)}")
            return _parse_failure(f"Invalid JSON: {e.__class__.__name__}")

    if isinstance(parsed, dict):
        logger.info("Model returned a single object; wrapping it in a list")
        parsed = [parsed]

    if not isinstance(parsed, list):
        logger.error(f"Model reply is neither an array nor an object: {type(parsed).__name__}")
        return _parse_failure("Reply is not an array or object")

    items = [item for item in parsed if isinstance(item, dict)]
    if len(items) < len(parsed):
        logger.warning(f"Dropped {len(parsed) - len(items)} non-object entries from model reply")

    if not items:
        logger.error("Model reply contained no recommendation objects")
        return _parse_failure("Reply contains no objects")

    _log_missing_fields(items)

    return {"status": "OK", "recommendations": items, "reason": None}
