import pytest
from datetime import timedelta
import jwt

from modules.auth.exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    TokenIssuanceError,
)
from modules.auth.models import TokenConfig
from modules.auth.tokens import TokenIssuer
from modules.users.models import Account

from helpers import TEST_ACCESS_SECRET, TEST_REFRESH_SECRET, create_test_token


@pytest.fixture
def account() -> Account:
    return Account(
        id="0b7d3a43-3f36-4a0b-9d0c-3f9a3c1b7a11",
        username="alice",
        email="alice@example.com",
        full_name="Alice Liddell",
        password="$2b$04$digest",
        avatar="https://cdn.example.com/a.png",
    )


class TestIssueTokens:
    def test_access_token_claims(self, issuer, account):
        """Access tokens carry id, email, username and full name."""
        token = issuer.issue_access_token(account)
        payload = jwt.decode(token, TEST_ACCESS_SECRET, algorithms=["HS256"])

        assert payload["sub"] == account.id
        assert payload["email"] == "alice@example.com"
        assert payload["username"] == "alice"
        assert payload["fullName"] == "Alice Liddell"
        assert payload["jti"]

    def test_refresh_token_carries_only_id(self, issuer, account):
        """Refresh tokens carry only the account ID plus registered claims."""
        token = issuer.issue_refresh_token(account)
        payload = jwt.decode(token, TEST_REFRESH_SECRET, algorithms=["HS256"])

        assert set(payload.keys()) == {"sub", "iat", "exp", "jti"}
        assert payload["sub"] == account.id

    def test_tokens_use_separate_secrets(self, issuer, account):
        """An access token does not verify with the refresh secret."""
        token = issuer.issue_access_token(account)
        with pytest.raises(jwt.InvalidSignatureError):
            jwt.decode(token, TEST_REFRESH_SECRET, algorithms=["HS256"])

    def test_lifetimes(self, issuer, account, token_config):
        """Expiry matches the configured lifetimes."""
        access = jwt.decode(issuer.issue_access_token(account), TEST_ACCESS_SECRET, algorithms=["HS256"])
        refresh = jwt.decode(issuer.issue_refresh_token(account), TEST_REFRESH_SECRET, algorithms=["HS256"])

        assert access["exp"] - access["iat"] == int(token_config.access_ttl.total_seconds())
        assert refresh["exp"] - refresh["iat"] == int(token_config.refresh_ttl.total_seconds())

    def test_consecutive_tokens_differ(self, issuer, account):
        """Tokens minted within the same second are still distinct."""
        assert issuer.issue_refresh_token(account) != issuer.issue_refresh_token(account)

    def test_issue_pair(self, issuer, account):
        """issue_pair returns one token of each kind."""
        pair = issuer.issue_pair(account)
        assert issuer.decode_access_token(pair.access_token).sub == account.id
        assert issuer.decode_refresh_token(pair.refresh_token).sub == account.id

    def test_missing_secret_fails_issuance(self, account):
        """Signing without a secret is an internal error."""
        issuer = TokenIssuer(TokenConfig(
            access_secret="",
            access_ttl=timedelta(minutes=5),
            refresh_secret="",
            refresh_ttl=timedelta(days=1),
        ))
        with pytest.raises(TokenIssuanceError):
            issuer.issue_access_token(account)


class TestDecodeTokens:
    def test_decode_access_token(self, issuer, account):
        """Should decode a valid access token."""
        claims = issuer.decode_access_token(issuer.issue_access_token(account))
        assert claims.sub == account.id
        assert claims.email == account.email

    def test_expired_access_token(self, issuer):
        """Should raise ExpiredTokenError for expired token."""
        token = create_test_token("user-123", expired=True)
        with pytest.raises(ExpiredTokenError):
            issuer.decode_access_token(token)

    def test_malformed_token(self, issuer):
        """Should raise InvalidTokenError for malformed token."""
        with pytest.raises(InvalidTokenError):
            issuer.decode_access_token("not-a-valid-token")

    def test_wrong_secret(self, issuer):
        """Should raise InvalidTokenError for a token signed elsewhere."""
        token = create_test_token("user-123", secret="some-other-secret")
        with pytest.raises(InvalidTokenError):
            issuer.decode_access_token(token)

    def test_refresh_token_rejected_as_access_token(self, issuer, account):
        """A refresh token is not accepted where an access token is required."""
        with pytest.raises(InvalidTokenError):
            issuer.decode_access_token(issuer.issue_refresh_token(account))

    def test_access_token_missing_profile_claims(self, issuer):
        """An access-signed token without profile claims is invalid."""
        token = create_test_token("user-123", email=None)
        with pytest.raises(InvalidTokenError):
            issuer.decode_access_token(token)

    def test_expired_refresh_token(self, issuer):
        """Expired refresh tokens raise ExpiredTokenError."""
        token = create_test_token("user-123", secret=TEST_REFRESH_SECRET, expired=True)
        with pytest.raises(ExpiredTokenError):
            issuer.decode_refresh_token(token)
