"""
Supabase client factory for the recommendation pipeline.

The pipeline reads `profiles.discovery_data` and appends to
`role_recommendations` for whatever user id the caller supplies, so it runs
with the service role key. There is no end-user JWT at this boundary.

CRITICAL SECURITY RULES:
1. The service role key bypasses RLS. Only server-side code may hold it
2. NEVER return this client (or anything derived from it) to a caller
3. NEVER log the key
"""

import logging
from typing import Optional

from career_backend.config import settings
from supabase import Client, create_client

logger = logging.getLogger(__name__)

# One configured client per process (lazy initialization)
_service_role_client: Optional[Client] = None


def get_service_role_client() -> Optional[Client]:
    """
    Get the process-wide Supabase client with service_role privileges.

    The client is created on first use and reused afterwards.

    Returns:
        A Supabase client, or None if Supabase is not configured or the
        client could not be created. Callers treat None as a store failure.
    """
    global _service_role_client

    if _service_role_client is not None:
        return _service_role_client

    if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_ROLE_KEY:
        logger.warning(
            "SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY not configured. "
            "Profile and recommendation storage will not work."
        )
        return None

    try:
        _service_role_client = create_client(
            supabase_url=settings.SUPABASE_URL,
            supabase_key=settings.SUPABASE_SERVICE_ROLE_KEY
        )
        logger.info("Supabase service role client initialized")
        return _service_role_client
    except Exception as e:
        logger.error(f"Failed to initialize Supabase client: {e}")
        return None
