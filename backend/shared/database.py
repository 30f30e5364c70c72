"""
Database client factory for Supabase.

One service-role client serves both the document tables (users,
subscriptions, videos) and the storage bucket holding profile media.
Sessions are managed by this backend, so the client never persists or
refreshes a Supabase Auth session of its own.
"""

from typing import Optional
from supabase import create_client, Client, ClientOptions

from .config import Settings, get_settings

# Module-level client cache
_service_client: Optional[Client] = None


def build_client_options(settings: Settings) -> ClientOptions:
    """Client options derived from settings: schema and request timeouts."""
    return ClientOptions(
        schema=settings.supabase_schema,
        postgrest_client_timeout=settings.supabase_timeout_seconds,
        storage_client_timeout=settings.supabase_timeout_seconds,
        auto_refresh_token=False,
        persist_session=False,
    )


def get_supabase_client() -> Client:
    """
    Get the shared service-role Supabase client.

    Returns:
        Supabase client configured with the service role key

    Raises:
        RuntimeError: If the Supabase URL or key is not configured
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
            options=build_client_options(settings),
        )

    return _service_client


def reset_client_cache() -> None:
    """Drop the cached client so the next call builds a new one."""
    global _service_client
    _service_client = None
