"""
Users module exceptions.
"""

from typing import Any

from shared.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


class RegistrationValidationError(ValidationError):
    """Raised when registration input breaks one or more field rules."""

    def __init__(self, violations: list[Any]):
        super().__init__(
            "Registration input is invalid",
            code="REGISTRATION_INVALID",
            errors=[v.model_dump() for v in violations],
        )
        self.violations = violations


class PasswordPolicyError(ValidationError):
    """Raised when a new password does not satisfy the password rules."""

    def __init__(self, violations: list[Any]):
        super().__init__(
            "New password is invalid",
            code="PASSWORD_POLICY",
            errors=[v.model_dump() for v in violations],
        )
        self.violations = violations


class AvatarRequiredError(ValidationError):
    """Raised when an avatar file is missing."""

    def __init__(self, message: str = "Avatar file is required"):
        super().__init__(message, code="AVATAR_REQUIRED")


class CoverImageRequiredError(ValidationError):
    """Raised when a cover image replacement is requested without a file."""

    def __init__(self, message: str = "Cover image file is required"):
        super().__init__(message, code="COVER_IMAGE_REQUIRED")


class MissingFieldsError(ValidationError):
    """Raised when required profile fields are empty."""

    def __init__(self, fields: list[str]):
        super().__init__(
            "All fields are required",
            code="MISSING_FIELDS",
            details={"fields": fields},
            errors=[{"field": f, "message": f"{f} is required"} for f in fields],
        )


class PasswordUnchangedError(ValidationError):
    """Raised when the new password equals the current one."""

    def __init__(self):
        super().__init__(
            "New password must differ from the current password",
            code="PASSWORD_UNCHANGED",
        )


class IncorrectPasswordError(AuthenticationError):
    """Raised when the current password does not match."""

    def __init__(self):
        super().__init__("Invalid old password", code="INCORRECT_PASSWORD")


class UserAlreadyExistsError(ConflictError):
    """Raised when a username or email is already taken."""

    def __init__(self, message: str = "User with email or username already exists"):
        super().__init__(message, code="USER_EXISTS")


class UserNotFoundError(NotFoundError):
    """Raised when an account does not exist."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class ChannelNotFoundError(NotFoundError):
    """Raised when a channel (account viewed as a channel) does not exist."""

    def __init__(self, channel: str):
        super().__init__(
            "Channel does not exist",
            code="CHANNEL_NOT_FOUND",
            details={"channel": channel},
        )
