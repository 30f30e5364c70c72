"""
Authentication module data models.

These models define token claims, the token configuration record and the
request/response shapes of the session endpoints.
"""

from datetime import timedelta
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from shared.config import Settings
from shared.models import ApiModel, UserProfile


class TokenConfig(BaseModel):
    """
    Immutable signing configuration for the token issuer.

    Access and refresh tokens use independent secrets and lifetimes.
    """

    model_config = {"frozen": True}

    access_secret: str = Field(..., repr=False)
    access_ttl: timedelta
    refresh_secret: str = Field(..., repr=False)
    refresh_ttl: timedelta
    algorithm: str = "HS256"

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenConfig":
        return cls(
            access_secret=settings.access_token_secret,
            access_ttl=timedelta(minutes=settings.access_token_expiry_minutes),
            refresh_secret=settings.refresh_token_secret,
            refresh_ttl=timedelta(days=settings.refresh_token_expiry_days),
        )


class AccessTokenClaims(BaseModel):
    """Decoded access token payload."""

    model_config = ConfigDict(populate_by_name=True)

    sub: str = Field(..., description="Subject (account ID)")
    email: str
    username: str
    full_name: str = Field(..., alias="fullName")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")
    jti: str = Field(..., description="Unique token ID")


class RefreshTokenClaims(BaseModel):
    """Decoded refresh token payload. Carries only the account ID."""

    sub: str = Field(..., description="Subject (account ID)")
    exp: int
    iat: int
    jti: str


class TokenPair(ApiModel):
    """A freshly issued access/refresh token pair."""

    access_token: str
    refresh_token: str


class LoginRequest(ApiModel):
    """Login credentials. Either username or email identifies the account."""

    username: Optional[str] = None
    email: Optional[str] = None
    password: str = Field(..., repr=False)


class LoginResult(ApiModel):
    """Sanitized account plus the issued tokens."""

    user: UserProfile
    access_token: str
    refresh_token: str


class RefreshRequest(ApiModel):
    """Optional body for the refresh endpoint when no cookie is sent."""

    refresh_token: Optional[str] = None
