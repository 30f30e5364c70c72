"""
Tests for shared models.
"""

import pytest
from datetime import datetime, timezone
from pydantic import ValidationError

from shared.models import UserProfile, UserSummary


class TestUserProfile:
    """Tests for the UserProfile model in shared."""

    def _profile(self, **overrides) -> UserProfile:
        data = {
            "id": "0b7d3a43-3f36-4a0b-9d0c-3f9a3c1b7a11",
            "username": "alice",
            "email": "alice@example.com",
            "full_name": "Alice Liddell",
            "avatar": "https://cdn.example.com/a.png",
        }
        data.update(overrides)
        return UserProfile(**data)

    def test_default_values(self):
        """Should default optional fields."""
        profile = self._profile()
        assert profile.cover_image is None
        assert profile.watch_history == []
        assert profile.created_at is None

    def test_serializes_with_camel_case_keys(self):
        """Wire format uses camelCase."""
        now = datetime.now(timezone.utc)
        profile = self._profile(cover_image="https://cdn.example.com/c.png", created_at=now)
        data = profile.model_dump(by_alias=True)

        assert data["fullName"] == "Alice Liddell"
        assert data["coverImage"] == "https://cdn.example.com/c.png"
        assert data["watchHistory"] == []
        assert data["createdAt"] == now

    def test_accepts_camel_case_input(self):
        """Both field names and aliases populate the model."""
        profile = UserProfile(
            id="u1",
            username="alice",
            email="alice@example.com",
            fullName="Alice Liddell",
            avatar="https://cdn.example.com/a.png",
        )
        assert profile.full_name == "Alice Liddell"

    def test_has_no_secret_fields(self):
        """Sanitized profiles never expose the digest or refresh token."""
        fields = UserProfile.model_fields
        assert "password" not in fields
        assert "refresh_token" not in fields

    def test_is_frozen(self):
        """Profiles are immutable once resolved."""
        profile = self._profile()
        with pytest.raises(ValidationError):
            profile.username = "bob"

    def test_requires_avatar(self):
        """Avatar is mandatory."""
        with pytest.raises(ValidationError):
            UserProfile(id="u1", username="alice", email="a@x.com", full_name="Alice")


class TestUserSummary:
    def test_summary_fields(self):
        """Summary exposes only the public listing fields."""
        summary = UserSummary(id="u1", username="bob", full_name="Bob", avatar="https://x/b.png")
        assert summary.model_dump(by_alias=True) == {
            "id": "u1",
            "username": "bob",
            "fullName": "Bob",
            "avatar": "https://x/b.png",
        }
