"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

import uuid
from datetime import datetime, timezone
from typing import TypeVar, Generic, Any

from postgrest.exceptions import APIError
from supabase import Client


T = TypeVar("T")

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


def is_valid_id(value: Any) -> bool:
    """Return True if value parses as a UUID (the primary key format)."""
    if not isinstance(value, str):
        return False
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


def is_unique_violation(error: APIError) -> bool:
    """Return True if a PostgREST error was caused by a unique constraint."""
    return getattr(error, "code", None) == UNIQUE_VIOLATION


def utcnow_iso() -> str:
    """Current UTC time as an ISO-8601 string, for timestamp columns."""
    return datetime.now(timezone.utc).isoformat()


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally. Each table is
    used as a document collection: rows are read and written whole, and
    updates touch only the fields passed in.

    Example:
        class UserRepository(BaseRepository[Account]):
            def get_by_id(self, user_id: str) -> Optional[Account]:
                result = self._db.table("users").select("*").eq("id", user_id).execute()
                if not result.data:
                    return None
                return self._map_to_account(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db
