"""
Users service implementation.

Registration, password and profile changes, image replacement and the
channel/watch-history reads.
"""

import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from shared.models import UserProfile
from modules.auth.passwords import PasswordHasher
from modules.media.exceptions import MediaDeleteError, MediaUploadError
from modules.media.interfaces import IMediaStorage
from modules.media.models import MediaAsset, MediaUpload
from modules.subscriptions.repository import SubscriptionRepository

from .interfaces import IUserService
from .repository import UserRepository
from .validation import validate_password, validate_registration
from .models import (
    ChannelProfile,
    RegistrationInput,
    UpdateAccountRequest,
    WatchHistoryEntry,
)
from .exceptions import (
    AvatarRequiredError,
    ChannelNotFoundError,
    CoverImageRequiredError,
    IncorrectPasswordError,
    MissingFieldsError,
    PasswordPolicyError,
    PasswordUnchangedError,
    RegistrationValidationError,
    UserAlreadyExistsError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)

AVATAR_FOLDER = "avatars"
COVER_IMAGE_FOLDER = "cover-images"


def _has_content(upload: Optional[MediaUpload]) -> bool:
    return upload is not None and bool(upload.content)


class UserService(IUserService):
    """
    Account service backed by the users table and external media storage.

    Image replacement uploads the new file first and persists its URL
    before deleting the previous file, so a failure never leaves an
    account pointing at a missing image.
    """

    def __init__(
        self,
        users: UserRepository,
        subscriptions: SubscriptionRepository,
        media: IMediaStorage,
        hasher: PasswordHasher,
    ):
        self._users = users
        self._subscriptions = subscriptions
        self._media = media
        self._hasher = hasher

    async def register(
        self,
        data: RegistrationInput,
        avatar: Optional[MediaUpload],
        cover_image: Optional[MediaUpload] = None,
    ) -> UserProfile:
        """Validate, upload images and create the account."""
        violations = validate_registration(data)
        if violations:
            raise RegistrationValidationError(violations)

        username = data.username.strip().lower()
        email = data.email.strip().lower()
        if self._users.find_by_username_or_email(username=username, email=email) is not None:
            raise UserAlreadyExistsError()

        if not _has_content(avatar):
            raise AvatarRequiredError()

        avatar_asset = await self._media.upload(avatar, AVATAR_FOLDER)
        if avatar_asset is None:
            raise MediaUploadError("Failed to upload avatar")
        uploaded = [avatar_asset]

        cover_asset = None
        if _has_content(cover_image):
            cover_asset = await self._media.upload(cover_image, COVER_IMAGE_FOLDER)
            if cover_asset is None:
                await self._discard(uploaded)
                raise MediaUploadError("Failed to upload cover image")
            uploaded.append(cover_asset)

        try:
            digest = await run_in_threadpool(self._hasher.hash, data.password)
            account = self._users.create({
                "username": username,
                "email": email,
                "full_name": data.full_name.strip(),
                "password": digest,
                "avatar": avatar_asset.url,
                "cover_image": cover_asset.url if cover_asset else None,
                "watch_history": [],
            })
        except Exception:
            await self._discard(uploaded)
            raise

        logger.info(f"Registered user {account.id}")
        return account.to_profile()

    async def change_password(self, user_id: str, old_password: str, new_password: str) -> None:
        """Verify the current password and store a digest of the new one."""
        violations = validate_password(new_password, field="newPassword")
        if violations:
            raise PasswordPolicyError(violations)

        account = self._users.get_by_id(user_id)
        if account is None:
            raise UserNotFoundError(user_id)

        if not await run_in_threadpool(self._hasher.verify, old_password, account.password):
            raise IncorrectPasswordError()

        if old_password == new_password:
            raise PasswordUnchangedError()

        digest = await run_in_threadpool(self._hasher.hash, new_password)
        self._users.update_fields(user_id, {"password": digest})
        logger.info(f"Password changed for user {user_id}")

    async def update_account(self, user_id: str, request: UpdateAccountRequest) -> UserProfile:
        """Replace full name and email; both are required."""
        full_name = (request.full_name or "").strip()
        email = (request.email or "").strip().lower()

        missing = [name for name, value in (("fullName", full_name), ("email", email)) if not value]
        if missing:
            raise MissingFieldsError(missing)

        account = self._users.update_fields(user_id, {"full_name": full_name, "email": email})
        if account is None:
            raise UserNotFoundError(user_id)
        return account.to_profile()

    async def update_avatar(self, user: UserProfile, avatar: Optional[MediaUpload]) -> UserProfile:
        if not _has_content(avatar):
            raise AvatarRequiredError()
        return await self._replace_image(user, avatar, "avatar", AVATAR_FOLDER, user.avatar)

    async def update_cover_image(self, user: UserProfile, cover_image: Optional[MediaUpload]) -> UserProfile:
        if not _has_content(cover_image):
            raise CoverImageRequiredError()
        return await self._replace_image(
            user, cover_image, "cover_image", COVER_IMAGE_FOLDER, user.cover_image
        )

    async def get_channel_profile(self, username: str, viewer_id: Optional[str] = None) -> ChannelProfile:
        """Read a channel and aggregate its subscription edges."""
        name = username.strip().lower()
        account = self._users.get_by_username(name) if name else None
        if account is None:
            raise ChannelNotFoundError(username)

        stats = self._subscriptions.get_channel_stats(account.id, viewer_id)
        return ChannelProfile(
            id=account.id,
            username=account.username,
            full_name=account.full_name,
            email=account.email,
            avatar=account.avatar,
            cover_image=account.cover_image,
            subscribers_count=stats.subscriber_count,
            channels_subscribed_to_count=stats.subscribed_to_count,
            is_subscribed=stats.is_subscribed,
        )

    async def get_watch_history(self, user_id: str) -> list[WatchHistoryEntry]:
        account = self._users.get_by_id(user_id)
        if account is None:
            raise UserNotFoundError(user_id)
        return self._users.get_watch_history(account)

    async def _replace_image(
        self,
        user: UserProfile,
        upload: MediaUpload,
        column: str,
        folder: str,
        previous: Optional[str],
    ) -> UserProfile:
        """Upload, persist the new URL, then delete the previous file."""
        asset = await self._media.upload(upload, folder)
        if asset is None:
            raise MediaUploadError(f"Failed to upload {column.replace('_', ' ')}")

        try:
            account = self._users.update_fields(user.id, {column: asset.url})
        except Exception:
            await self._discard([asset])
            raise
        if account is None:
            await self._discard([asset])
            raise UserNotFoundError(user.id)

        if previous and previous != asset.url:
            try:
                await self._media.delete(previous)
            except MediaDeleteError as e:
                # The account already points at the new file; the old one is orphaned
                logger.warning(f"Could not delete previous {column} of user {user.id}: {e.details}")

        return account.to_profile()

    async def _discard(self, assets: list[MediaAsset]) -> None:
        """Best-effort removal of uploads that will not be referenced."""
        for asset in assets:
            try:
                await self._media.delete(asset.id)
            except MediaDeleteError as e:
                logger.warning(f"Could not discard uploaded asset {asset.id}: {e.details}")
