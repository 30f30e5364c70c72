"""
Access guard.

Extracts the access token from the ``accessToken`` cookie or the
``Authorization: Bearer`` header (the cookie wins), resolves the account
it names and hands the sanitized account to the route.
"""

from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shared.exceptions import AuthenticationError
from shared.models import UserProfile
from modules.auth.exceptions import InvalidTokenError, MissingTokenError
from modules.auth.interfaces import ISessionService
from ..dependencies import get_session_service

ACCESS_TOKEN_COOKIE = "accessToken"
REFRESH_TOKEN_COOKIE = "refreshToken"

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def extract_access_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
) -> Optional[str]:
    """Return the access token from the cookie, else the bearer header."""
    token = request.cookies.get(ACCESS_TOKEN_COOKIE)
    if token:
        return token
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return None


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    sessions: ISessionService = Depends(get_session_service),
) -> UserProfile:
    """
    Dependency that requires authentication.

    Bad signatures, expired tokens and deleted accounts all produce the
    same 401 so callers cannot probe which accounts exist.

    Usage:
        @router.get("/protected")
        async def protected_route(user: UserProfile = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    token = extract_access_token(request, credentials)
    if not token:
        raise MissingTokenError()

    try:
        return await sessions.authenticate(token)
    except AuthenticationError:
        raise InvalidTokenError()


async def get_optional_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    sessions: ISessionService = Depends(get_session_service),
) -> Optional[UserProfile]:
    """
    Dependency that optionally resolves the user if authenticated.

    Use this for public endpoints whose output depends on the viewer.
    A missing or invalid token yields None instead of an error.
    """
    token = extract_access_token(request, credentials)
    if not token:
        return None

    try:
        return await sessions.authenticate(token)
    except AuthenticationError:
        return None

