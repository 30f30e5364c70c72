"""
Constants and token helpers shared by the test modules.
"""

from datetime import datetime, timezone, timedelta
import jwt  # PyJWT

# Test secrets (only for testing)
TEST_ACCESS_SECRET = "test-access-secret-for-testing-only"
TEST_REFRESH_SECRET = "test-refresh-secret-for-testing-only"

# Satisfies every password rule
STRONG_PASSWORD = "Abcd1234!"


def create_test_token(
    user_id: str,
    secret: str = TEST_ACCESS_SECRET,
    expired: bool = False,
    **claims,
) -> str:
    """
    Create a signed JWT outside the issuer.

    Args:
        user_id: Subject claim
        secret: Signing secret (access secret by default)
        expired: If True, creates an expired token
        **claims: Extra or overriding claims (email, username, ...)

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": "test@example.com",
        "username": "tester",
        "fullName": "Test User",
        "jti": "test-jti",
        "exp": int(exp.timestamp()),
        "iat": int((now - timedelta(hours=2)).timestamp()),
        **claims,
    }
    return jwt.encode(payload, secret, algorithm="HS256")
