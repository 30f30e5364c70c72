"""
Token issuer.

Mints and verifies the two JWT kinds used by sessions:
access tokens (stateless, carry profile claims) and refresh tokens
(carry only the account ID; validity is additionally gated by the value
stored on the account).
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Union

import jwt

from modules.users.models import Account
from .exceptions import ExpiredTokenError, InvalidTokenError, TokenIssuanceError
from .models import AccessTokenClaims, RefreshTokenClaims, TokenConfig, TokenPair


class TokenIssuer:
    """Signs and verifies access and refresh tokens with PyJWT."""

    def __init__(self, config: TokenConfig):
        self._config = config

    def issue_access_token(self, account: Account) -> str:
        """Sign an access token carrying id, email, username and full name."""
        claims = {
            "sub": account.id,
            "email": account.email,
            "username": account.username,
            "fullName": account.full_name,
        }
        return self._sign(claims, self._config.access_secret, self._config.access_ttl)

    def issue_refresh_token(self, account: Account) -> str:
        """Sign a refresh token carrying only the account ID."""
        return self._sign(
            {"sub": account.id},
            self._config.refresh_secret,
            self._config.refresh_ttl,
        )

    def issue_pair(self, account: Account) -> TokenPair:
        return TokenPair(
            access_token=self.issue_access_token(account),
            refresh_token=self.issue_refresh_token(account),
        )

    def decode_access_token(self, token: str) -> AccessTokenClaims:
        """
        Verify an access token's signature and expiry.

        Raises:
            ExpiredTokenError: If the token has expired
            InvalidTokenError: If the token is malformed or badly signed
        """
        payload = self._verify(token, self._config.access_secret)
        try:
            return AccessTokenClaims(**payload)
        except ValueError:
            raise InvalidTokenError("Access token is missing claims")

    def decode_refresh_token(self, token: str) -> RefreshTokenClaims:
        """
        Verify a refresh token's signature and expiry.

        Raises:
            ExpiredTokenError: If the token has expired
            InvalidTokenError: If the token is malformed or badly signed
        """
        payload = self._verify(token, self._config.refresh_secret)
        try:
            return RefreshTokenClaims(**payload)
        except ValueError:
            raise InvalidTokenError("Refresh token is missing claims")

    def _sign(self, claims: dict[str, Any], secret: str, ttl: timedelta) -> str:
        if not secret:
            raise TokenIssuanceError("Token signing is not configured")

        now = datetime.now(timezone.utc)
        payload = {
            **claims,
            "iat": now,
            "exp": now + ttl,
            # Two tokens minted in the same second must still differ
            "jti": uuid.uuid4().hex,
        }
        try:
            return jwt.encode(payload, secret, algorithm=self._config.algorithm)
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            raise TokenIssuanceError() from e

    def _verify(self, token: Union[str, bytes], secret: str) -> dict[str, Any]:
        if not secret:
            raise InvalidTokenError("Token verification is not configured")

        try:
            return jwt.decode(
                token,
                secret,
                algorithms=[self._config.algorithm],
                options={"require": ["exp", "iat", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {str(e)}")
