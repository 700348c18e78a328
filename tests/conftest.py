"""
Pytest configuration for the role recommendation backend tests.

Sets up test environment and global fixtures.
"""
import json
import os
import pytest
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")
os.environ.setdefault("GOOGLE_API_KEY", "test-google-api-key")


# =============================================================================
# SAMPLE DATA
# =============================================================================

SAMPLE_MODEL_RECOMMENDATIONS: List[Dict[str, str]] = [
    {
        "role_title": "Data Engineer",
        "description": "Builds the pipelines that move and shape data.",
        "why_it_fits_professionally": "Your coding skills transfer directly.",
        "why_it_fits_personally": "You care about data having real impact.",
    },
    {
        "role_title": "Machine Learning Engineer",
        "description": "Ships models into production systems.",
        "why_it_fits_professionally": "Combines coding with data work.",
        "why_it_fits_personally": "Lets you build things with visible impact.",
    },
    {
        "role_title": "Analytics Engineer",
        "description": "Turns raw data into trusted models for analysts.",
        "why_it_fits_professionally": "Uses SQL and software practices.",
        "why_it_fits_personally": "Matches your interest in data.",
    },
]


def make_cached_rows(user_id: str) -> List[Dict[str, Any]]:
    """Rows as returned by role_recommendations, newest first."""
    return [
        {
            "id": f"rec-{idx}",
            "user_id": user_id,
            "created_at": f"2026-10-0{9 - idx}T12:00:00+00:00",
            **rec,
        }
        for idx, rec in enumerate(SAMPLE_MODEL_RECOMMENDATIONS)
    ]


def make_supabase_client(
    profile_rows: Optional[List[Dict[str, Any]]] = None,
    cached_rows: Optional[List[Dict[str, Any]]] = None,
) -> MagicMock:
    """
    Mock Supabase client for the two query shapes the store issues:
    - profiles:             table().select().eq().execute()
    - role_recommendations: table().select().eq().order().limit().execute()
    """
    mock_client = MagicMock()

    profile_response = MagicMock()
    profile_response.data = profile_rows if profile_rows is not None else []
    cache_response = MagicMock()
    cache_response.data = cached_rows if cached_rows is not None else []

    query = mock_client.table.return_value.select.return_value.eq.return_value
    query.execute.return_value = profile_response
    query.order.return_value.limit.return_value.execute.return_value = cache_response

    return mock_client


def make_gemini_response(text: Optional[str]) -> MagicMock:
    """Mock Gemini GenerateContentResponse carrying one text part."""
    part = MagicMock()
    part.text = text

    mock_response = MagicMock()
    mock_response.candidates = [MagicMock()]
    mock_response.candidates[0].content.parts = [part]
    mock_response.text = text
    return mock_response


def make_gemini_client(text: Optional[str] = None, side_effect: Any = None) -> MagicMock:
    """Mock genai.Client whose async generate_content returns `text`."""
    mock_gemini = MagicMock()
    if side_effect is not None:
        mock_gemini.aio.models.generate_content = AsyncMock(side_effect=side_effect)
    else:
        mock_gemini.aio.models.generate_content = AsyncMock(
            return_value=make_gemini_response(text)
        )
    return mock_gemini


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def discovery_data() -> Dict[str, Any]:
    """Discovery profile with one tag per facet."""
    return {
        "skills": {"selected": ["coding"], "additional_info": "I like Python"},
        "values": {"selected": ["impact"], "additional_info": ""},
        "interests": {"selected": ["data"], "additional_info": "Open data projects"},
    }


@pytest.fixture
def model_reply() -> str:
    """A clean 3-object JSON array as the model should return it."""
    return json.dumps(SAMPLE_MODEL_RECOMMENDATIONS)


@pytest.fixture
def sample_recommendations() -> List[Dict[str, str]]:
    """Copy of the three well-formed recommendation objects."""
    return [dict(rec) for rec in SAMPLE_MODEL_RECOMMENDATIONS]


@pytest.fixture
def cached_rows_for():
    """Factory: role_recommendations rows for a user, newest first."""
    return make_cached_rows


@pytest.fixture
def supabase_factory():
    """Factory: mock Supabase client with given profile and cache rows."""
    return make_supabase_client


@pytest.fixture
def gemini_factory():
    """Factory: mock Gemini client returning a text reply or raising."""
    return make_gemini_client


@pytest.fixture
def supabase_client():
    """
    Mock Supabase client for testing store access.
    Returns a MagicMock that simulates Supabase client behavior.
    """
    return make_supabase_client()
