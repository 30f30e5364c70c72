"""
Authentication module exceptions.

These exceptions are raised by the auth module and rendered by the API
error handler into the standard error envelope.
"""

from shared.exceptions import (
    AuthenticationError,
    NotFoundError,
    TubelineError,
    ValidationError,
)


class MissingCredentialError(ValidationError):
    """Raised when login is attempted without a username or email."""

    def __init__(self, message: str = "Username or email is required"):
        super().__init__(
            message,
            code="MISSING_CREDENTIAL",
            errors=[
                {"field": "username", "message": message},
                {"field": "email", "message": message},
            ],
        )


class AccountNotFoundError(NotFoundError):
    """Raised when no account matches the login identifier."""

    def __init__(self, message: str = "User does not exist"):
        super().__init__(message, code="ACCOUNT_NOT_FOUND")


class InvalidCredentialsError(AuthenticationError):
    """Raised when the submitted password does not match."""

    def __init__(self, message: str = "Invalid user credentials"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Unauthorized request"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT is invalid, malformed or refers to no account."""

    def __init__(self, message: str = "Invalid access token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(InvalidTokenError):
    """Raised when a JWT has expired."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message)
        self.code = "TOKEN_EXPIRED"


class InvalidRefreshTokenError(AuthenticationError):
    """Raised when a refresh token fails verification or names no account."""

    def __init__(self, message: str = "Invalid refresh token"):
        super().__init__(message, code="INVALID_REFRESH_TOKEN")


class RefreshTokenReusedError(AuthenticationError):
    """Raised when a well-signed refresh token is no longer the stored one."""

    def __init__(self, message: str = "Refresh token is expired or used"):
        super().__init__(message, code="REFRESH_TOKEN_REUSED")


class TokenIssuanceError(TubelineError):
    """Raised when access or refresh tokens cannot be signed."""

    def __init__(
        self,
        message: str = "Something went wrong while generating refresh and access token",
    ):
        super().__init__(message, code="TOKEN_ISSUANCE_FAILED")
