"""
Authentication module.

Handles token issuance, password verification and the session lifecycle
(login, logout, refresh-token rotation).

Public API:
- ISessionService: Interface for session operations
- TokenIssuer / TokenConfig: JWT signing and verification
- PasswordHasher: bcrypt digests
- Auth exceptions: InvalidTokenError, RefreshTokenReusedError, etc.
"""

from .interfaces import ISessionService
from .models import (
    TokenConfig,
    TokenPair,
    LoginRequest,
    LoginResult,
    RefreshRequest,
    AccessTokenClaims,
    RefreshTokenClaims,
)
from .exceptions import (
    MissingCredentialError,
    AccountNotFoundError,
    InvalidCredentialsError,
    MissingTokenError,
    InvalidTokenError,
    ExpiredTokenError,
    InvalidRefreshTokenError,
    RefreshTokenReusedError,
    TokenIssuanceError,
)

__all__ = [
    # Interface
    "ISessionService",
    # Models
    "TokenConfig",
    "TokenPair",
    "LoginRequest",
    "LoginResult",
    "RefreshRequest",
    "AccessTokenClaims",
    "RefreshTokenClaims",
    # Exceptions
    "MissingCredentialError",
    "AccountNotFoundError",
    "InvalidCredentialsError",
    "MissingTokenError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "InvalidRefreshTokenError",
    "RefreshTokenReusedError",
    "TokenIssuanceError",
]
