"""
Session service implementation.

Orchestrates login, logout and refresh-token rotation on top of the
token issuer, the password hasher and the user repository. The single
refresh token stored per account is the only revocation mechanism.
"""

import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from shared.models import UserProfile
from modules.users.repository import UserRepository

from .interfaces import ISessionService
from .models import LoginRequest, LoginResult, TokenPair
from .passwords import PasswordHasher
from .tokens import TokenIssuer
from .exceptions import (
    AccountNotFoundError,
    InvalidCredentialsError,
    InvalidRefreshTokenError,
    InvalidTokenError,
    MissingCredentialError,
    MissingTokenError,
    RefreshTokenReusedError,
)

logger = logging.getLogger(__name__)

# Values clients send when they have no token to send
PLACEHOLDER_TOKENS = frozenset({"undefined", "null", "none"})


def _normalize(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip().lower()
    return value or None


class SessionService(ISessionService):
    """
    Implementation of the session lifecycle.

    Login and rotation each perform a single account write after their
    reads. Rotation writes with a compare-and-swap on the stored token, so
    two concurrent refreshes with the same token cannot both succeed.
    """

    def __init__(
        self,
        users: UserRepository,
        issuer: TokenIssuer,
        hasher: PasswordHasher,
    ):
        self._users = users
        self._issuer = issuer
        self._hasher = hasher

    async def login(self, request: LoginRequest) -> LoginResult:
        """Authenticate and start a new session for the account."""
        username = _normalize(request.username)
        email = _normalize(request.email)
        if not username and not email:
            raise MissingCredentialError()

        account = self._users.find_by_username_or_email(username=username, email=email)
        if account is None:
            raise AccountNotFoundError()

        if not await run_in_threadpool(self._hasher.verify, request.password, account.password):
            raise InvalidCredentialsError()

        tokens = self._issuer.issue_pair(account)
        self._users.set_refresh_token(account.id, tokens.refresh_token)
        logger.info(f"User {account.id} logged in")

        return LoginResult(
            user=account.to_profile(),
            access_token=tokens.access_token,
            refresh_token=tokens.refresh_token,
        )

    async def logout(self, user_id: str) -> None:
        """Clear the stored refresh token."""
        self._users.set_refresh_token(user_id, None)
        logger.info(f"User {user_id} logged out")

    async def refresh(self, refresh_token: Optional[str]) -> TokenPair:
        """Rotate the refresh token, detecting reuse of a rotated one."""
        if not refresh_token or refresh_token.strip().lower() in PLACEHOLDER_TOKENS:
            raise MissingTokenError()

        try:
            claims = self._issuer.decode_refresh_token(refresh_token)
        except InvalidTokenError:
            raise InvalidRefreshTokenError()

        account = self._users.get_by_id(claims.sub)
        if account is None:
            raise InvalidRefreshTokenError()

        if account.refresh_token != refresh_token:
            logger.warning(f"Rejected stale refresh token for user {account.id}")
            raise RefreshTokenReusedError()

        tokens = self._issuer.issue_pair(account)
        if not self._users.swap_refresh_token(account.id, refresh_token, tokens.refresh_token):
            # Another request rotated the token between our read and write
            logger.warning(f"Concurrent refresh token rotation for user {account.id}")
            raise RefreshTokenReusedError()

        logger.info(f"Rotated refresh token for user {account.id}")
        return tokens

    async def authenticate(self, access_token: str) -> UserProfile:
        """Resolve an access token to its account."""
        if not access_token:
            raise MissingTokenError()

        claims = self._issuer.decode_access_token(access_token)
        account = self._users.get_by_id(claims.sub)
        if account is None:
            raise InvalidTokenError()
        return account.to_profile()
