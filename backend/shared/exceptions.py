"""
Base exception classes for the Tubeline backend.

Each module should define its own exceptions that inherit from these bases.
Every exception carries the HTTP status it maps to, so a single handler in
the API layer can render it into the error envelope.
"""

from typing import Optional, Any


class TubelineError(Exception):
    """
    Base exception for all Tubeline errors.

    All custom exceptions should inherit from this class. Anything raised
    as a bare TubelineError is reported as an internal error.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        errors: Optional[list[Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        self.errors = errors or []

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logs and API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(TubelineError):
    """Input validation failed."""

    status_code = 400


class AuthenticationError(TubelineError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class NotFoundError(TubelineError):
    """Resource not found."""

    status_code = 404


class ConflictError(TubelineError):
    """Resource already exists (uniqueness violation)."""

    status_code = 409


class ExternalServiceError(TubelineError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
