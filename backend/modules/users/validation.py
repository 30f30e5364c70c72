"""
Registration and password rules.

Pure functions: they take the explicit input schema and return every
violated rule, leaving it to the caller to decide how to fail.
"""

import re

from .models import FieldViolation, RegistrationInput

USERNAME_PATTERN = re.compile(r"[a-zA-Z0-9_]+")
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
SPECIAL_CHARACTER_PATTERN = re.compile(r"[!@#$%^&*()_+{}\[\]:;<>,.?~\\/-]")

FULL_NAME_LENGTH = (3, 50)
USERNAME_LENGTH = (3, 30)
PASSWORD_LENGTH = (8, 100)


def validate_password(password: str, field: str = "password") -> list[FieldViolation]:
    """Check a plaintext password against the strength rules."""
    if not password.strip():
        return [FieldViolation(field=field, message=f"{field} is required and should not be empty.")]

    violations = []
    low, high = PASSWORD_LENGTH
    if not low <= len(password) <= high:
        violations.append(FieldViolation(field=field, message=f"{field} must be between {low} and {high} characters."))
    if not re.search(r"[A-Z]", password):
        violations.append(FieldViolation(field=field, message=f"{field} must contain at least one uppercase letter."))
    if not re.search(r"[a-z]", password):
        violations.append(FieldViolation(field=field, message=f"{field} must contain at least one lowercase letter."))
    if not re.search(r"[0-9]", password):
        violations.append(FieldViolation(field=field, message=f"{field} must contain at least one number."))
    if not SPECIAL_CHARACTER_PATTERN.search(password):
        violations.append(FieldViolation(field=field, message=f"{field} must contain at least one special character."))
    return violations


def validate_registration(data: RegistrationInput) -> list[FieldViolation]:
    """
    Validate registration input.

    Args:
        data: Registration fields as submitted (not yet normalized)

    Returns:
        All violated rules; an empty list means the input is valid.
    """
    violations: list[FieldViolation] = []

    full_name = data.full_name.strip()
    if not full_name:
        violations.append(FieldViolation(field="fullName", message="fullName is required and should not be empty."))
    elif not FULL_NAME_LENGTH[0] <= len(full_name) <= FULL_NAME_LENGTH[1]:
        violations.append(FieldViolation(field="fullName", message="fullName must be between 3 and 50 characters."))

    username = data.username
    if not username.strip():
        violations.append(FieldViolation(field="username", message="username is required and should not be empty."))
    elif not USERNAME_PATTERN.fullmatch(username):
        violations.append(
            FieldViolation(field="username", message="username can only contain letters, numbers, and underscores.")
        )
    elif not USERNAME_LENGTH[0] <= len(username) <= USERNAME_LENGTH[1]:
        violations.append(FieldViolation(field="username", message="username must be between 3 and 30 characters."))

    email = data.email
    if not email.strip():
        violations.append(FieldViolation(field="email", message="email is required and should not be empty."))
    elif not EMAIL_PATTERN.fullmatch(email):
        violations.append(FieldViolation(field="email", message="email must be a valid email address."))

    violations.extend(validate_password(data.password))
    return violations
