"""
Users module interface.

The API layer depends on IUserService for registration and profile
operations.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import UserProfile
from modules.media.models import MediaUpload
from .models import (
    ChannelProfile,
    RegistrationInput,
    UpdateAccountRequest,
    WatchHistoryEntry,
)


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for account and profile operations.
    """

    async def register(
        self,
        data: RegistrationInput,
        avatar: Optional[MediaUpload],
        cover_image: Optional[MediaUpload] = None,
    ) -> UserProfile:
        """
        Create a new account.

        Args:
            data: Registration fields
            avatar: Required avatar image
            cover_image: Optional cover image

        Returns:
            The sanitized new account

        Raises:
            RegistrationValidationError: If any field rule is violated
            UserAlreadyExistsError: If username or email is taken
            AvatarRequiredError: If no avatar was sent
            MediaUploadError: If an image could not be stored
        """
        ...

    async def change_password(self, user_id: str, old_password: str, new_password: str) -> None:
        """
        Replace the password after verifying the current one.

        Raises:
            PasswordPolicyError: If the new password breaks the rules
            IncorrectPasswordError: If old_password does not match
            PasswordUnchangedError: If new_password equals the current one
        """
        ...

    async def update_account(self, user_id: str, request: UpdateAccountRequest) -> UserProfile:
        """Replace full name and email."""
        ...

    async def update_avatar(self, user: UserProfile, avatar: Optional[MediaUpload]) -> UserProfile:
        """Replace the avatar image."""
        ...

    async def update_cover_image(self, user: UserProfile, cover_image: Optional[MediaUpload]) -> UserProfile:
        """Replace the cover image."""
        ...

    async def get_channel_profile(self, username: str, viewer_id: Optional[str] = None) -> ChannelProfile:
        """
        Read a channel with its subscription counts.

        Raises:
            ChannelNotFoundError: If no account has this username
        """
        ...

    async def get_watch_history(self, user_id: str) -> list[WatchHistoryEntry]:
        """Resolve the account's watch history to video entries."""
        ...
