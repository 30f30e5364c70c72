"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for account data:
- users
- videos (read-only, for resolving watch history)
"""

from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.models import UserSummary
from shared.repository import (
    BaseRepository,
    is_unique_violation,
    is_valid_id,
    utcnow_iso,
)
from .exceptions import UserAlreadyExistsError
from .models import Account, WatchHistoryEntry

SUMMARY_COLUMNS = "id, username, full_name, avatar"


class UserRepository(BaseRepository[Account]):
    """
    Repository for account data access.

    Lookups by a malformed ID return None instead of reaching the database.
    Unique-constraint violations on username or email surface as
    UserAlreadyExistsError.

    Note: This repository does NOT perform authorization checks.
    """

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def get_by_id(self, user_id: str) -> Optional[Account]:
        """Get an account by ID, or None if it does not exist."""
        if not is_valid_id(user_id):
            return None
        result = self._db.table("users").select("*").eq("id", user_id).limit(1).execute()
        if not result.data:
            return None
        return self._map_to_account(result.data[0])

    def get_by_username(self, username: str) -> Optional[Account]:
        """Get an account by its (normalized) username."""
        result = self._db.table("users").select("*").eq("username", username).limit(1).execute()
        if not result.data:
            return None
        return self._map_to_account(result.data[0])

    def get_by_email(self, email: str) -> Optional[Account]:
        """Get an account by its (normalized) email."""
        result = self._db.table("users").select("*").eq("email", email).limit(1).execute()
        if not result.data:
            return None
        return self._map_to_account(result.data[0])

    def find_by_username_or_email(
        self,
        username: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Optional[Account]:
        """
        Find the account matching either identifier.

        The username is tried first. Values are expected to be normalized
        (trimmed, lowercase) by the caller.
        """
        if username:
            account = self.get_by_username(username)
            if account is not None:
                return account
        if email:
            return self.get_by_email(email)
        return None

    def get_summaries(self, user_ids: list[str]) -> dict[str, UserSummary]:
        """Get public summaries for a set of accounts, keyed by ID."""
        ids = [user_id for user_id in dict.fromkeys(user_ids) if is_valid_id(user_id)]
        if not ids:
            return {}
        result = self._db.table("users").select(SUMMARY_COLUMNS).in_("id", ids).execute()
        return {str(row["id"]): self._map_to_summary(row) for row in result.data}

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def create(self, data: dict[str, Any]) -> Account:
        """
        Create a new account record.

        Args:
            data: Column values (username, email, full_name, password digest, avatar, ...)

        Returns:
            Created Account with generated ID and timestamps.

        Raises:
            UserAlreadyExistsError: If the username or email is already taken
        """
        try:
            result = self._db.table("users").insert(data).execute()
        except APIError as e:
            if is_unique_violation(e):
                raise UserAlreadyExistsError() from e
            raise
        return self._map_to_account(result.data[0])

    def update_fields(self, user_id: str, data: dict[str, Any]) -> Optional[Account]:
        """
        Replace the given columns on one account.

        Returns:
            The updated Account, or None if no account has this ID.

        Raises:
            UserAlreadyExistsError: If a new email or username is already taken
        """
        if not is_valid_id(user_id):
            return None
        payload = {**data, "updated_at": utcnow_iso()}
        try:
            result = self._db.table("users").update(payload).eq("id", user_id).execute()
        except APIError as e:
            if is_unique_violation(e):
                raise UserAlreadyExistsError() from e
            raise
        if not result.data:
            return None
        return self._map_to_account(result.data[0])

    def set_refresh_token(self, user_id: str, refresh_token: Optional[str]) -> None:
        """
        Overwrite (or clear, with None) the stored refresh token.

        Only the refresh_token column is written.
        """
        self._db.table("users").update({"refresh_token": refresh_token}).eq("id", user_id).execute()

    def swap_refresh_token(self, user_id: str, expected: str, replacement: str) -> bool:
        """
        Replace the stored refresh token only if it still equals ``expected``.

        Returns:
            True if the row was updated, False if the stored value had
            already changed (or the account is gone).
        """
        result = (
            self._db.table("users")
            .update({"refresh_token": replacement})
            .eq("id", user_id)
            .eq("refresh_token", expected)
            .execute()
        )
        return bool(result.data)

    def ping(self) -> None:
        """Run a trivial query; raises if the database cannot be reached."""
        self._db.table("users").select("id").limit(1).execute()

    # -------------------------------------------------------------------------
    # Watch history
    # -------------------------------------------------------------------------

    def get_watch_history(self, account: Account) -> list[WatchHistoryEntry]:
        """
        Resolve an account's watch history into video entries.

        Entries keep the stored order; IDs with no matching video are skipped.
        """
        video_ids = [video_id for video_id in account.watch_history if is_valid_id(video_id)]
        if not video_ids:
            return []

        result = self._db.table("videos").select("*").in_("id", video_ids).execute()
        videos = {str(row["id"]): row for row in result.data}
        owners = self.get_summaries(
            [str(row["owner"]) for row in videos.values() if row.get("owner")]
        )

        entries = []
        for video_id in video_ids:
            row = videos.get(video_id)
            if row is None:
                continue
            entries.append(self._map_to_history_entry(row, owners.get(str(row.get("owner")))))
        return entries

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _map_to_account(self, data: dict[str, Any]) -> Account:
        """Map a users row to an Account."""
        return Account(
            id=str(data["id"]),
            username=data["username"],
            email=data["email"],
            full_name=data["full_name"],
            password=data["password"],
            avatar=data["avatar"],
            cover_image=data.get("cover_image"),
            refresh_token=data.get("refresh_token"),
            watch_history=[str(v) for v in data.get("watch_history") or []],
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    def _map_to_summary(self, data: dict[str, Any]) -> UserSummary:
        """Map a partial users row to a UserSummary."""
        return UserSummary(
            id=str(data["id"]),
            username=data["username"],
            full_name=data["full_name"],
            avatar=data["avatar"],
        )

    def _map_to_history_entry(
        self,
        data: dict[str, Any],
        owner: Optional[UserSummary],
    ) -> WatchHistoryEntry:
        """Map a videos row to a WatchHistoryEntry."""
        return WatchHistoryEntry(
            id=str(data["id"]),
            title=data["title"],
            description=data.get("description") or "",
            thumbnail=data["thumbnail"],
            video_file=data["video_file"],
            duration=data.get("duration") or 0,
            views=data.get("views") or 0,
            owner=owner,
        )
