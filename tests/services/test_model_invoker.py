"""
Tests for the ModelInvoker.

These tests use mocked Gemini async clients to verify:
- The request carries the instruction, context and generation parameters
- Slow calls are cancelled and reported as TIMEOUT
- API, transport and empty-reply failures become INVOCATION_ERROR
- Nothing is raised to the caller
"""

import asyncio

import pytest
from google.genai import errors
from unittest.mock import AsyncMock, MagicMock, patch

from career_backend.agents.recommendation.types import RecommendationPrompt
from career_backend.services.model_invoker import ModelInvoker, get_model_invoker


@pytest.fixture
def prompt():
    return RecommendationPrompt(
        instruction="Generate exactly 3 career roles as a JSON array.",
        context="Skills: coding\nInterests: data\nValues: impact",
    )


class TestInvokeSuccess:
    """Tests for successful model calls."""

    @pytest.mark.asyncio
    async def test_returns_reply_text(self, gemini_factory, prompt, model_reply):
        invoker = ModelInvoker(gemini_factory(model_reply), model="gemini-test")

        result = await invoker.invoke(prompt)

        assert result["status"] == "OK"
        assert result["text"] == model_reply
        assert result["reason"] is None

    @pytest.mark.asyncio
    async def test_sends_prompt_and_parameters(self, gemini_factory, prompt, model_reply):
        client = gemini_factory(model_reply)
        invoker = ModelInvoker(client, model="gemini-test")

        await invoker.invoke(prompt, max_tokens=800, temperature=0.7, timeout_ms=5000)

        call_kwargs = client.aio.models.generate_content.call_args.kwargs
        assert call_kwargs["model"] == "gemini-test"
        assert call_kwargs["contents"] == prompt.context
        config = call_kwargs["config"]
        assert config.system_instruction == prompt.instruction
        assert config.max_output_tokens == 800
        assert config.temperature == 0.7

    @pytest.mark.asyncio
    async def test_thinking_disabled_by_default(self, gemini_factory, prompt, model_reply):
        """Thinking is off so the token cap and timeout bound the visible answer."""
        client = gemini_factory(model_reply)
        invoker = ModelInvoker(client, model="gemini-test")

        await invoker.invoke(prompt)

        config = client.aio.models.generate_content.call_args.kwargs["config"]
        assert config.thinking_config.thinking_budget == 0

    @pytest.mark.asyncio
    async def test_thinking_budget_override(self, gemini_factory, prompt, model_reply):
        client = gemini_factory(model_reply)
        invoker = ModelInvoker(client, model="gemini-test", thinking_budget=256)

        await invoker.invoke(prompt)

        config = client.aio.models.generate_content.call_args.kwargs["config"]
        assert config.thinking_config.thinking_budget == 256

    @pytest.mark.asyncio
    async def test_falls_back_to_response_text(self, gemini_factory, prompt):
        """response.text is used when no part carries text."""
        client = gemini_factory("ignored")
        response = client.aio.models.generate_content.return_value
        response.candidates[0].content.parts = []
        response.text = '[{"role_title": "Nurse"}]'

        result = await ModelInvoker(client).invoke(prompt)

        assert result["status"] == "OK"
        assert result["text"] == '[{"role_title": "Nurse"}]'


class TestInvokeTimeout:
    """Tests for the wall-clock timeout."""

    @pytest.mark.asyncio
    async def test_slow_call_times_out_and_is_cancelled(self, prompt):
        cancelled = asyncio.Event()

        async def slow_generate(**kwargs):
            try:
                await asyncio.sleep(5)
            except asyncio.CancelledError:
                cancelled.set()
                raise

        client = MagicMock()
        client.aio.models.generate_content = slow_generate

        result = await ModelInvoker(client).invoke(prompt, timeout_ms=20)

        assert result["status"] == "TIMEOUT"
        assert result["text"] is None
        assert cancelled.is_set()

    @pytest.mark.asyncio
    async def test_fast_call_within_budget(self, prompt, model_reply, gemini_factory):
        result = await ModelInvoker(gemini_factory(model_reply)).invoke(prompt, timeout_ms=1000)

        assert result["status"] == "OK"


class TestInvokeErrors:
    """Tests for failures surfaced as INVOCATION_ERROR."""

    @pytest.mark.asyncio
    async def test_client_not_configured(self, prompt):
        result = await ModelInvoker(None).invoke(prompt)

        assert result["status"] == "INVOCATION_ERROR"
        assert "not configured" in result["reason"]

    @pytest.mark.asyncio
    async def test_api_error(self, gemini_factory, prompt):
        api_error = errors.ServerError(
            503,
            {"error": {"code": 503, "message": "overloaded", "status": "UNAVAILABLE"}},
        )
        client = gemini_factory(side_effect=api_error)

        result = await ModelInvoker(client).invoke(prompt)

        assert result["status"] == "INVOCATION_ERROR"
        assert "503" in result["reason"]

    @pytest.mark.asyncio
    async def test_transport_error(self, gemini_factory, prompt):
        client = gemini_factory(side_effect=ConnectionError("connection reset"))

        result = await ModelInvoker(client).invoke(prompt)

        assert result["status"] == "INVOCATION_ERROR"
        assert "ConnectionError" in result["reason"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", [None, "", "   \n"])
    async def test_empty_reply(self, gemini_factory, prompt, text):
        result = await ModelInvoker(gemini_factory(text)).invoke(prompt)

        assert result["status"] == "INVOCATION_ERROR"
        assert result["reason"] == "Empty reply from model"

    @pytest.mark.asyncio
    async def test_no_candidates(self, gemini_factory, prompt):
        client = gemini_factory("ignored")
        client.aio.models.generate_content.return_value.candidates = []

        result = await ModelInvoker(client).invoke(prompt)

        assert result["status"] == "INVOCATION_ERROR"


class TestGetModelInvoker:
    """Tests for the FastAPI dependency provider."""

    def test_missing_api_key_gives_unconfigured_invoker(self):
        with patch("career_backend.services.model_invoker._gemini_client", None), \
                patch("career_backend.services.model_invoker.settings") as mock_settings:
            mock_settings.GOOGLE_API_KEY = ""
            mock_settings.RECOMMENDATION_MODEL = "gemini-test"

            invoker = get_model_invoker()

        assert invoker._client is None

    def test_reuses_process_client(self):
        existing = MagicMock()
        with patch("career_backend.services.model_invoker._gemini_client", existing):
            assert get_model_invoker()._client is existing
            assert get_model_invoker()._client is existing
