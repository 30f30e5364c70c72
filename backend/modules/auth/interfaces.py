"""
Authentication module interface.

Other modules and the API layer should depend on ISessionService,
not the concrete implementation.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import UserProfile
from .models import LoginRequest, LoginResult, TokenPair


@runtime_checkable
class ISessionService(Protocol):
    """
    Interface for session lifecycle operations.

    Covers login, logout, refresh-token rotation and access token
    resolution for the access guard.
    """

    async def login(self, request: LoginRequest) -> LoginResult:
        """
        Authenticate with username or email plus password.

        Issues a new token pair and stores the refresh token on the
        account, replacing any previous one.

        Raises:
            MissingCredentialError: If neither username nor email is given
            AccountNotFoundError: If no account matches
            InvalidCredentialsError: If the password does not match
            TokenIssuanceError: If tokens cannot be signed
        """
        ...

    async def logout(self, user_id: str) -> None:
        """
        Clear the stored refresh token for an authenticated account.

        Never fails because of token state.
        """
        ...

    async def refresh(self, refresh_token: Optional[str]) -> TokenPair:
        """
        Exchange the current refresh token for a new pair.

        The presented token must equal the one stored on the account.
        Once rotated, the old value is rejected even if still well-signed.

        Raises:
            MissingTokenError: If no token (or a placeholder) is presented
            InvalidRefreshTokenError: If verification fails or the account is gone
            RefreshTokenReusedError: If the token is not the stored one
        """
        ...

    async def authenticate(self, access_token: str) -> UserProfile:
        """
        Resolve an access token to the sanitized account it names.

        Raises:
            InvalidTokenError: If the token is invalid, expired, or the
                account no longer exists
        """
        ...
