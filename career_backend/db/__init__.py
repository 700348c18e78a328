"""
Database access layer for the role recommendation backend.

All database operations go through the Supabase client created here.
Table access (profiles, role_recommendations) lives in
career_backend/services/profile_store.py.

DO NOT define table schemas, migrations, or RLS policies here.
"""

from .client import get_service_role_client

__all__ = ["get_service_role_client"]
