"""
Profile store adapter.

Owns every durable read and write of the recommendation pipeline:
- profiles.discovery_data (read only, written by the discovery flow)
- role_recommendations (append-only history of generated roles)

Store failures are raised as StoreError. The orchestrator decides whether
a failure means fallback (profile read), cache miss (cache read) or
nothing at all (write).
"""

import json
import logging
from typing import Any, Dict, List, Optional, cast

from career_backend.db.client import get_service_role_client
from career_backend.schemas.profile import DiscoveryProfile
from career_backend.schemas.recommendations import RoleRecommendation
from career_backend.services.errors import StoreError
from supabase import Client

logger = logging.getLogger(__name__)

PROFILES_TABLE = "profiles"
RECOMMENDATIONS_TABLE = "role_recommendations"
CURRENT_RECOMMENDATIONS_LIMIT = 3


class ProfileStore:
    """Narrow Supabase adapter for discovery profiles and cached recommendations."""

    def __init__(self, supabase_client: Optional[Client]):
        self._client = supabase_client

    def _require_client(self, operation: str) -> Client:
        if self._client is None:
            raise StoreError(operation, "Supabase client is not configured")
        return self._client

    async def fetch_profile(self, user_id: str) -> Optional[DiscoveryProfile]:
        """
        Fetch the discovery profile for a user.

        Args:
            user_id: Id of the profile row

        Returns:
            The parsed profile, or None when the user has no profile row or
            no discovery data recorded yet

        Raises:
            StoreError: If the query fails or the data cannot be parsed
        """
        client = self._require_client("fetch_profile")
        logger.debug(f"Fetching discovery data for user {user_id}")

        try:
            result = (
                client.table(PROFILES_TABLE)
                .select("discovery_data")
                .eq("id", user_id)
                .execute()
            )
        except Exception as e:
            raise StoreError("fetch_profile", str(e)) from e

        if not result.data or len(result.data) == 0:
            logger.warning(f"Profile not found for user {user_id}")
            return None

        row = cast(Dict[str, Any], result.data[0])
        discovery_data = row.get("discovery_data")

        # Older rows stored the document as a JSON string
        if isinstance(discovery_data, str):
            try:
                discovery_data = json.loads(discovery_data) if discovery_data.strip() else None
            except json.JSONDecodeError as e:
                raise StoreError("fetch_profile", f"discovery_data is not valid JSON: {e}") from e

        if not discovery_data:
            logger.info(f"No discovery data recorded for user {user_id}")
            return None

        if not isinstance(discovery_data, dict):
            raise StoreError(
                "fetch_profile",
                f"discovery_data has unexpected type {type(discovery_data).__name__}"
            )

        try:
            return DiscoveryProfile.model_validate(discovery_data)
        except ValueError as e:
            raise StoreError("fetch_profile", f"discovery_data could not be parsed: {e}") from e

    async def fetch_cached_recommendations(
        self,
        user_id: str,
        limit: int = CURRENT_RECOMMENDATIONS_LIMIT
    ) -> List[RoleRecommendation]:
        """
        Fetch the most recent recommendations persisted for a user.

        Args:
            user_id: Owner of the recommendations
            limit: How many of the newest rows make up the current set

        Returns:
            Up to `limit` recommendations ordered newest first; empty list if none

        Raises:
            StoreError: If the query fails
        """
        client = self._require_client("fetch_cached_recommendations")

        try:
            result = (
                client.table(RECOMMENDATIONS_TABLE)
                .select("*")
                .eq("user_id", user_id)
                .order("created_at", desc=True)
                .limit(limit)
                .execute()
            )
        except Exception as e:
            raise StoreError("fetch_cached_recommendations", str(e)) from e

        rows = cast(List[Dict[str, Any]], result.data or [])
        return [RoleRecommendation.model_validate(row) for row in rows]

    async def persist_recommendation(
        self,
        user_id: str,
        recommendation: RoleRecommendation
    ) -> None:
        """
        Append one recommendation to the user's history.

        Rows are never updated or deleted by the pipeline; created_at is
        assigned by the database.

        Raises:
            StoreError: If the insert fails
        """
        client = self._require_client("persist_recommendation")

        row = {"user_id": user_id, **recommendation.model_dump()}

        try:
            client.table(RECOMMENDATIONS_TABLE).insert(row).execute()
        except Exception as e:
            raise StoreError("persist_recommendation", str(e)) from e

        logger.debug(
            f"Persisted recommendation for user {user_id}: "
            f"role_title='{recommendation.role_title}'"
        )


def get_profile_store() -> ProfileStore:
    """FastAPI dependency: store adapter bound to the process-wide Supabase client."""
    return ProfileStore(get_service_role_client())
