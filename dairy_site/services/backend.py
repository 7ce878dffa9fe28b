"""
Supabase client factories.

The service-role client is shared by the table, storage and admin-auth
calls. Sign-in uses a throwaway anon client so a user session never leaks
into the shared client's headers.
"""

from functools import lru_cache

from supabase import Client, create_client

from dairy_site.config import get_settings


class BackendNotConfigured(Exception):
    """No Supabase key is set, so no client can be built."""


@lru_cache()
def get_supabase_client() -> Client:
    """Get Supabase client with service role key for table and storage operations."""
    settings = get_settings()
    key = settings.supabase_service_role_key or settings.supabase_key
    if not settings.supabase_url or not key:
        raise BackendNotConfigured("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY (or SUPABASE_KEY) must be set")
    return create_client(settings.supabase_url, key)


def get_anon_client() -> Client:
    """Fresh client with the anon key, used for password sign-in."""
    settings = get_settings()
    if not settings.supabase_url or not settings.supabase_key:
        raise BackendNotConfigured("SUPABASE_URL and SUPABASE_KEY must be set")
    return create_client(settings.supabase_url, settings.supabase_key)
