"""
Users module data models.

Account is the stored record and never leaves the service layer;
UserProfile (shared.models) is its sanitized projection.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field

from shared.models import ApiModel, UserProfile, UserSummary


class Account(BaseModel):
    """
    A user account as stored in the ``users`` table.

    Holds the password digest and the single live refresh token, so it
    must be converted with to_profile() before being returned to callers.
    """

    id: str
    username: str
    email: str
    full_name: str
    password: str = Field(..., repr=False)
    avatar: str
    cover_image: Optional[str] = None
    refresh_token: Optional[str] = Field(None, repr=False)
    watch_history: list[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_profile(self) -> UserProfile:
        """Drop the password digest and refresh token."""
        return UserProfile(
            id=self.id,
            username=self.username,
            email=self.email,
            full_name=self.full_name,
            avatar=self.avatar,
            cover_image=self.cover_image,
            watch_history=list(self.watch_history),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def to_summary(self) -> UserSummary:
        return UserSummary(
            id=self.id,
            username=self.username,
            full_name=self.full_name,
            avatar=self.avatar,
        )


class RegistrationInput(ApiModel):
    """
    Registration form fields.

    Every field is present (possibly empty) so that validation can report
    all missing values at once instead of failing on the first.
    """

    full_name: str = ""
    username: str = ""
    email: str = ""
    password: str = Field("", repr=False)


class FieldViolation(ApiModel):
    """A single failed validation rule for one input field."""

    field: str
    message: str


class ChangePasswordRequest(ApiModel):
    """Request body for changing the current user's password."""

    old_password: str = Field(..., repr=False)
    new_password: str = Field(..., repr=False)


class UpdateAccountRequest(ApiModel):
    """Request body for replacing the profile's full name and email."""

    full_name: Optional[str] = None
    email: Optional[EmailStr] = None


class ChannelProfile(ApiModel):
    """
    A user viewed as a channel.

    Counts and the viewer flag are computed at read time from
    subscription edges, not stored.
    """

    id: str
    username: str
    full_name: str
    email: str
    avatar: str
    cover_image: Optional[str] = None
    subscribers_count: int = 0
    channels_subscribed_to_count: int = 0
    is_subscribed: bool = False


class WatchHistoryEntry(ApiModel):
    """A watched video with its owner's public summary."""

    id: str
    title: str
    description: str = ""
    thumbnail: str
    video_file: str
    duration: float = 0
    views: int = 0
    owner: Optional[UserSummary] = None
