"""
Users module.

Registration, profile management, channel reads and watch history.

Public API:
- IUserService: Interface for account operations
- Account: Stored account record (internal)
- Users exceptions: UserAlreadyExistsError, ChannelNotFoundError, etc.
"""

from .interfaces import IUserService
from .models import (
    Account,
    RegistrationInput,
    FieldViolation,
    ChangePasswordRequest,
    UpdateAccountRequest,
    ChannelProfile,
    WatchHistoryEntry,
)
from .exceptions import (
    RegistrationValidationError,
    PasswordPolicyError,
    AvatarRequiredError,
    CoverImageRequiredError,
    MissingFieldsError,
    PasswordUnchangedError,
    IncorrectPasswordError,
    UserAlreadyExistsError,
    UserNotFoundError,
    ChannelNotFoundError,
)

__all__ = [
    # Interface
    "IUserService",
    # Models
    "Account",
    "RegistrationInput",
    "FieldViolation",
    "ChangePasswordRequest",
    "UpdateAccountRequest",
    "ChannelProfile",
    "WatchHistoryEntry",
    # Exceptions
    "RegistrationValidationError",
    "PasswordPolicyError",
    "AvatarRequiredError",
    "CoverImageRequiredError",
    "MissingFieldsError",
    "PasswordUnchangedError",
    "IncorrectPasswordError",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "ChannelNotFoundError",
]
