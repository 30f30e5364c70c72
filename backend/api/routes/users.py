"""
User and session endpoints.

Registration, login/logout, refresh-token rotation and profile management.
Session endpoints mirror the issued tokens into secure, http-only cookies.
"""

from typing import Optional
from fastapi import APIRouter, Depends, File, Form, Request, Response, UploadFile

from shared.config import Settings, get_settings
from shared.models import UserProfile
from modules.auth.interfaces import ISessionService
from modules.auth.models import LoginRequest, LoginResult, RefreshRequest, TokenPair
from modules.media.models import MediaUpload
from modules.users.interfaces import IUserService
from modules.users.models import (
    ChangePasswordRequest,
    ChannelProfile,
    RegistrationInput,
    UpdateAccountRequest,
    WatchHistoryEntry,
)

from ..dependencies import get_session_service, get_user_service
from ..middleware.auth import (
    ACCESS_TOKEN_COOKIE,
    REFRESH_TOKEN_COOKIE,
    get_current_user,
    get_optional_user,
)
from ..models.responses import ApiResponse

router = APIRouter()


def _cookie_options(settings: Settings) -> dict:
    return {
        "httponly": True,
        "secure": settings.cookie_secure,
        "samesite": settings.cookie_samesite,
        "path": "/",
    }


def set_session_cookies(
    response: Response,
    access_token: str,
    refresh_token: str,
    settings: Settings,
) -> None:
    """Set both token cookies, each living as long as its token."""
    options = _cookie_options(settings)
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        access_token,
        max_age=settings.access_token_expiry_minutes * 60,
        **options,
    )
    response.set_cookie(
        REFRESH_TOKEN_COOKIE,
        refresh_token,
        max_age=settings.refresh_token_expiry_days * 24 * 60 * 60,
        **options,
    )


def clear_session_cookies(response: Response, settings: Settings) -> None:
    options = _cookie_options(settings)
    response.delete_cookie(ACCESS_TOKEN_COOKIE, **options)
    response.delete_cookie(REFRESH_TOKEN_COOKIE, **options)


async def read_upload(file: Optional[UploadFile]) -> Optional[MediaUpload]:
    """Read a multipart file into memory; empty or absent files give None."""
    if file is None:
        return None
    content = await file.read()
    if not content:
        return None
    return MediaUpload(
        filename=file.filename or "upload",
        content_type=file.content_type or "application/octet-stream",
        content=content,
    )


# -----------------------------------------------------------------------------
# Registration and sessions
# -----------------------------------------------------------------------------


@router.post("/register", response_model=ApiResponse[UserProfile], status_code=201)
async def register(
    full_name: str = Form("", alias="fullName"),
    username: str = Form(""),
    email: str = Form(""),
    password: str = Form(""),
    avatar: Optional[UploadFile] = File(None),
    cover_image: Optional[UploadFile] = File(None, alias="coverImage"),
    service: IUserService = Depends(get_user_service),
) -> ApiResponse[UserProfile]:
    """
    Register a new account.

    Multipart form with fullName, username, email, password, an avatar
    image and an optional coverImage.
    """
    data = RegistrationInput(
        full_name=full_name,
        username=username,
        email=email,
        password=password,
    )
    user = await service.register(
        data,
        avatar=await read_upload(avatar),
        cover_image=await read_upload(cover_image),
    )
    return ApiResponse(status_code=201, data=user, message="User registered successfully")


@router.post("/login", response_model=ApiResponse[LoginResult])
async def login(
    request: LoginRequest,
    response: Response,
    service: ISessionService = Depends(get_session_service),
    settings: Settings = Depends(get_settings),
) -> ApiResponse[LoginResult]:
    """
    Log in with username or email and password.

    Returns the account and both tokens, and sets them as cookies.
    """
    result = await service.login(request)
    set_session_cookies(response, result.access_token, result.refresh_token, settings)
    return ApiResponse(data=result, message="User logged in successfully")


@router.post("/logout", response_model=ApiResponse[dict])
async def logout(
    response: Response,
    user: UserProfile = Depends(get_current_user),
    service: ISessionService = Depends(get_session_service),
    settings: Settings = Depends(get_settings),
) -> ApiResponse[dict]:
    """
    Log out the current user.

    Clears the stored refresh token and both cookies.
    """
    await service.logout(user.id)
    clear_session_cookies(response, settings)
    return ApiResponse(data={}, message="User logged out")


@router.post("/refresh-token", response_model=ApiResponse[TokenPair])
async def refresh_access_token(
    request: Request,
    response: Response,
    body: Optional[RefreshRequest] = None,
    service: ISessionService = Depends(get_session_service),
    settings: Settings = Depends(get_settings),
) -> ApiResponse[TokenPair]:
    """
    Exchange a refresh token for a new token pair.

    The token is read from the refreshToken cookie, falling back to the
    request body.
    """
    incoming = request.cookies.get(REFRESH_TOKEN_COOKIE)
    if not incoming and body is not None:
        incoming = body.refresh_token

    tokens = await service.refresh(incoming)
    set_session_cookies(response, tokens.access_token, tokens.refresh_token, settings)
    return ApiResponse(data=tokens, message="Access token refreshed")


# -----------------------------------------------------------------------------
# Profile
# -----------------------------------------------------------------------------


@router.get("/current-user", response_model=ApiResponse[UserProfile])
async def get_current_user_profile(
    user: UserProfile = Depends(get_current_user),
) -> ApiResponse[UserProfile]:
    """Get the current user's profile."""
    return ApiResponse(data=user, message="Current user fetched successfully")


@router.post("/change-password", response_model=ApiResponse[dict])
async def change_password(
    request: ChangePasswordRequest,
    user: UserProfile = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> ApiResponse[dict]:
    """Change the current user's password."""
    await service.change_password(user.id, request.old_password, request.new_password)
    return ApiResponse(data={}, message="Password changed successfully")


@router.patch("/update-account", response_model=ApiResponse[UserProfile])
async def update_account(
    request: UpdateAccountRequest,
    user: UserProfile = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> ApiResponse[UserProfile]:
    """Replace the current user's full name and email."""
    updated = await service.update_account(user.id, request)
    return ApiResponse(data=updated, message="Account details updated successfully")


@router.patch("/avatar", response_model=ApiResponse[UserProfile])
async def update_avatar(
    avatar: Optional[UploadFile] = File(None),
    user: UserProfile = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> ApiResponse[UserProfile]:
    """Replace the current user's avatar image."""
    updated = await service.update_avatar(user, await read_upload(avatar))
    return ApiResponse(data=updated, message="Avatar updated successfully")


@router.patch("/cover-image", response_model=ApiResponse[UserProfile])
async def update_cover_image(
    cover_image: Optional[UploadFile] = File(None, alias="coverImage"),
    user: UserProfile = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> ApiResponse[UserProfile]:
    """Replace the current user's cover image."""
    updated = await service.update_cover_image(user, await read_upload(cover_image))
    return ApiResponse(data=updated, message="Cover image updated successfully")


@router.get("/c/{username}", response_model=ApiResponse[ChannelProfile])
async def get_channel_profile(
    username: str,
    viewer: Optional[UserProfile] = Depends(get_optional_user),
    service: IUserService = Depends(get_user_service),
) -> ApiResponse[ChannelProfile]:
    """
    Get a channel's public profile with subscription counts.

    Authentication is optional; when present, isSubscribed reports
    whether the viewer follows the channel.
    """
    channel = await service.get_channel_profile(username, viewer.id if viewer else None)
    return ApiResponse(data=channel, message="User channel fetched successfully")


@router.get("/history", response_model=ApiResponse[list[WatchHistoryEntry]])
async def get_watch_history(
    user: UserProfile = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> ApiResponse[list[WatchHistoryEntry]]:
    """Get the current user's watch history, oldest first."""
    history = await service.get_watch_history(user.id)
    return ApiResponse(data=history, message="Watch history fetched successfully")
