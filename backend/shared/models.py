"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """
    Base for models that cross the HTTP boundary.

    Serializes with camelCase keys (``fullName``, ``coverImage``) and
    accepts either camelCase or snake_case on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class UserProfile(ApiModel):
    """
    Sanitized account: everything except the password digest and the
    stored refresh token.

    Populated by the access guard and made available to route handlers
    via dependency injection. Also the payload returned by registration,
    login and profile updates.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Account ID (UUID)")
    username: str = Field(..., description="Unique, lowercase username")
    email: str = Field(..., description="Unique, lowercase email")
    full_name: str = Field(..., description="Display name")
    avatar: str = Field(..., description="Public URL of the avatar image")
    cover_image: Optional[str] = Field(None, description="Public URL of the cover image")
    watch_history: list[str] = Field(default_factory=list, description="Watched video IDs, oldest first")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserSummary(ApiModel):
    """Minimal public view of an account, used in listings."""

    id: str
    username: str
    full_name: str
    avatar: str
