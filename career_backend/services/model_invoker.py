"""
Model Invoker - one bounded Gemini call per request.

Architecture:
- API: Google Gen AI Python SDK (google-genai), async client (client.aio)
- Model: RECOMMENDATION_MODEL (default gemini-2.5-flash)
- Request: instruction as system_instruction, profile context as the user turn
- Timeout: asyncio.wait_for around the call; on expiry the request is
  cancelled and reported as TIMEOUT
- No retries. Every failure is returned as a tagged InvocationResult,
  nothing is raised to the caller
"""

import asyncio
import logging
from typing import Any, Optional

from google import genai
from google.genai import errors, types

from career_backend.agents.recommendation.types import InvocationResult, RecommendationPrompt
from career_backend.config import settings

logger = logging.getLogger(__name__)

# Initialize Gemini client (lazy initialization)
_gemini_client = None


def _get_gemini_client():
    """
    Lazy initialization of Gemini client.
    Uses the Google Gen AI SDK.
    """
    global _gemini_client

    if _gemini_client is not None:
        return _gemini_client

    if not settings.GOOGLE_API_KEY:
        logger.warning(
            "GOOGLE_API_KEY not configured. Role recommendations will fall back to defaults. "
            "Please set GOOGLE_API_KEY in your .env file."
        )
        return None

    try:
        _gemini_client = genai.Client(api_key=settings.GOOGLE_API_KEY)
        logger.info("Gemini client initialized successfully for role recommendations")
        return _gemini_client
    except Exception as e:
        logger.error(f"Failed to initialize Gemini client: {e}")
        return None


def _extract_text(response: Any) -> Optional[str]:
    """
    Get the reply text from a Gemini response.

    Parts are read first; response.text can be None even when parts have text.
    """
    if not response.candidates or not response.candidates[0].content:
        return None

    candidate = response.candidates[0]
    if candidate.content.parts:
        for part in candidate.content.parts:
            if getattr(part, "text", None):
                return part.text

    return response.text or None


def _invocation_error(reason: str) -> InvocationResult:
    return {"status": "INVOCATION_ERROR", "text": None, "reason": reason}


class ModelInvoker:
    """Issues a single bounded, cancellable generate_content call."""

    def __init__(
        self,
        client: Any,
        model: Optional[str] = None,
        thinking_budget: Optional[int] = None,
    ):
        self._client = client
        self._model = model or settings.RECOMMENDATION_MODEL
        self._thinking_budget = (
            settings.RECOMMENDATION_THINKING_BUDGET if thinking_budget is None else thinking_budget
        )

    async def invoke(
        self,
        prompt: RecommendationPrompt,
        max_tokens: int = 800,
        temperature: float = 0.7,
        timeout_ms: int = 5000,
    ) -> InvocationResult:
        """
        Send the prompt to the model and wait at most `timeout_ms`.

        Args:
            prompt: Instruction/context pair from the prompt builder
            max_tokens: Output token cap (bounds latency and truncation risk)
            temperature: Sampling temperature
            timeout_ms: Hard wall-clock budget for the whole call

        Returns:
            InvocationResult with status OK (text set), TIMEOUT or INVOCATION_ERROR
        """
        if self._client is None:
            logger.error("Gemini client not available")
            return _invocation_error("Model client is not configured")

        config = types.GenerateContentConfig(
            system_instruction=prompt.instruction,
            temperature=temperature,
            max_output_tokens=max_tokens,
            # Thinking tokens count against max_output_tokens
            thinking_config=types.ThinkingConfig(thinking_budget=self._thinking_budget),
        )

        logger.info(
            f"Calling Gemini model={self._model} "
            f"(max_tokens={max_tokens}, temperature={temperature}, timeout_ms={timeout_ms})"
        )

        try:
            response = await asyncio.wait_for(
                self._client.aio.models.generate_content(
                    model=self._model,
                    contents=prompt.context,
                    config=config,
                ),
                timeout=timeout_ms / 1000,
            )
        except asyncio.TimeoutError:
            logger.warning(f"Gemini call exceeded {timeout_ms} ms and was cancelled")
            return {"status": "TIMEOUT", "text": None, "reason": f"No reply within {timeout_ms} ms"}
        except errors.APIError as e:
            logger.error(f"Gemini API error: code={e.code} status={e.status}")
            return _invocation_error(f"Model API error {e.code}")
        except Exception as e:
            logger.error(f"Error calling Gemini API: {e}")
            return _invocation_error(f"Model call failed: {type(e).__name__}")

        content = _extract_text(response)
        if not content or not content.strip():
            logger.error("Empty text in Gemini response")
            return _invocation_error("Empty reply from model")

        return {"status": "OK", "text": content, "reason": None}


def get_model_invoker() -> ModelInvoker:
    """FastAPI dependency: invoker bound to the process-wide Gemini client."""
    return ModelInvoker(_get_gemini_client())
