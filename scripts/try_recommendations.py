#!/usr/bin/env python3
"""
Role Recommendation Try-Out Script

Runs the full recommendation pipeline locally against the real Gemini model,
without Supabase. The discovery profile is built from the command line and
served by an in-memory mocked Supabase client; nothing is persisted.

Usage:
    python scripts/try_recommendations.py
    python scripts/try_recommendations.py --skills coding "public speaking" --interests data
    python scripts/try_recommendations.py --values impact --timeout-ms 10000 --json
"""

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import List
from unittest.mock import MagicMock

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from career_backend.config import settings
from career_backend.services.model_invoker import get_model_invoker
from career_backend.services.profile_store import ProfileStore
from career_backend.services.recommendation_service import (
    RecommendationOutcome,
    get_role_recommendations,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_mock_supabase_client(
    skills: List[str],
    values: List[str],
    interests: List[str],
) -> MagicMock:
    """
    Create a mock Supabase client holding one discovery profile and no
    cached recommendations.
    """
    mock_client = MagicMock()

    profile_response = MagicMock()
    profile_response.data = [{
        "discovery_data": {
            "skills": {"selected": skills},
            "values": {"selected": values},
            "interests": {"selected": interests},
        }
    }]
    cache_response = MagicMock()
    cache_response.data = []

    query = mock_client.table.return_value.select.return_value.eq.return_value
    query.execute.return_value = profile_response
    query.order.return_value.limit.return_value.execute.return_value = cache_response

    return mock_client


def print_result(outcome: RecommendationOutcome) -> None:
    """Pretty print the pipeline outcome."""
    print("\n" + "=" * 60)
    print(f"SOURCE: {outcome.source}")
    if outcome.reason:
        print(f"REASON: {outcome.reason}")
    print("=" * 60)

    for i, rec in enumerate(outcome.recommendations, 1):
        print(f"\n--- Role #{i} ---")
        print(f"  Title:          {rec.role_title}")
        print(f"  Description:    {rec.description}")
        print(f"  Professionally: {rec.why_it_fits_professionally}")
        print(f"  Personally:     {rec.why_it_fits_personally}")
    print()


async def run_once(
    skills: List[str],
    values: List[str],
    interests: List[str],
    as_json: bool = False,
) -> RecommendationOutcome:
    """Run the pipeline once for a synthetic user."""
    if not settings.GOOGLE_API_KEY:
        print("\n⚠️  GOOGLE_API_KEY is not set; the default recommendations will be returned.")
        print("   Get your API key at: https://aistudio.google.com/app/apikey\n")

    print(f"Skills:    {', '.join(skills) or '-'}")
    print(f"Values:    {', '.join(values) or '-'}")
    print(f"Interests: {', '.join(interests) or '-'}")
    print(f"\nCalling {settings.RECOMMENDATION_MODEL} (timeout {settings.RECOMMENDATION_TIMEOUT_MS} ms)...")

    store = ProfileStore(create_mock_supabase_client(skills, values, interests))
    outcome = await get_role_recommendations(
        user_id="local-try-user",
        store=store,
        invoker=get_model_invoker(),
    )

    if as_json:
        print(json.dumps(
            {"recommendations": [rec.model_dump() for rec in outcome.recommendations]},
            indent=2,
            ensure_ascii=False,
        ))
    else:
        print_result(outcome)

    return outcome


def main():
    parser = argparse.ArgumentParser(
        description="Try the role recommendation pipeline locally",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/try_recommendations.py --skills coding --interests data --values impact
  python scripts/try_recommendations.py --skills design writing --json
        """
    )

    parser.add_argument("--skills", nargs="*", default=["coding"], help="Selected skill tags")
    parser.add_argument("--values", nargs="*", default=["impact"], help="Selected value tags")
    parser.add_argument("--interests", nargs="*", default=["data"], help="Selected interest tags")
    parser.add_argument(
        "--timeout-ms",
        type=int,
        help=f"Override the model timeout (default: {settings.RECOMMENDATION_TIMEOUT_MS})"
    )
    parser.add_argument("--json", action="store_true", help="Print the API response body as JSON")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.timeout_ms:
        settings.RECOMMENDATION_TIMEOUT_MS = args.timeout_ms

    asyncio.run(run_once(
        skills=args.skills,
        values=args.values,
        interests=args.interests,
        as_json=args.json,
    ))


if __name__ == "__main__":
    main()
