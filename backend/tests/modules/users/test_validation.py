import pytest

from modules.users.models import RegistrationInput
from modules.users.validation import validate_password, validate_registration


def _input(**overrides) -> RegistrationInput:
    data = {
        "full_name": "Alice Liddell",
        "username": "alice_01",
        "email": "alice@example.com",
        "password": "Abcd1234!",
    }
    data.update(overrides)
    return RegistrationInput(**data)


def _fields(violations) -> list[str]:
    return [v.field for v in violations]


class TestValidateRegistration:
    def test_valid_input(self):
        """Valid input produces no violations."""
        assert validate_registration(_input()) == []

    def test_all_fields_missing(self):
        """Every missing field is reported at once."""
        violations = validate_registration(RegistrationInput())
        assert _fields(violations) == ["fullName", "username", "email", "password"]
        assert violations[0].message == "fullName is required and should not be empty."

    def test_whitespace_counts_as_missing(self):
        """Whitespace-only values are treated as empty."""
        violations = validate_registration(_input(full_name="   "))
        assert violations[0].message == "fullName is required and should not be empty."

    @pytest.mark.parametrize("full_name", ["Al", "x" * 51])
    def test_full_name_length(self, full_name):
        """fullName must be 3-50 characters."""
        assert _fields(validate_registration(_input(full_name=full_name))) == ["fullName"]

    def test_full_name_length_ignores_padding(self):
        """Surrounding whitespace does not count toward the fullName length."""
        assert _fields(validate_registration(_input(full_name="  ab  "))) == ["fullName"]
        assert validate_registration(_input(full_name="  Alice  ")) == []

    @pytest.mark.parametrize("username", ["alice!", "al ice", "alice-01"])
    def test_username_characters(self, username):
        """username allows letters, digits and underscores only."""
        violations = validate_registration(_input(username=username))
        assert _fields(violations) == ["username"]
        assert "letters, numbers, and underscores" in violations[0].message

    @pytest.mark.parametrize("username", ["ab", "a" * 31])
    def test_username_length(self, username):
        """username must be 3-30 characters."""
        violations = validate_registration(_input(username=username))
        assert violations[0].message == "username must be between 3 and 30 characters."

    @pytest.mark.parametrize("email", ["alice", "alice@example", "al ice@example.com"])
    def test_email_format(self, email):
        """email must look like local@domain.tld."""
        violations = validate_registration(_input(email=email))
        assert _fields(violations) == ["email"]

    def test_reports_multiple_fields(self):
        """Violations across fields are accumulated."""
        violations = validate_registration(_input(username="a!", email="bad"))
        assert _fields(violations) == ["username", "email"]


class TestValidatePassword:
    def test_strong_password(self):
        """A password meeting every rule passes."""
        assert validate_password("Abcd1234!") == []

    def test_empty_password(self):
        """An empty password reports a single required violation."""
        violations = validate_password("")
        assert len(violations) == 1
        assert violations[0].message == "password is required and should not be empty."

    def test_each_rule_reported(self):
        """A weak password reports every broken rule."""
        messages = [v.message for v in validate_password("abc")]
        assert "password must be between 8 and 100 characters." in messages
        assert "password must contain at least one uppercase letter." in messages
        assert "password must contain at least one number." in messages
        assert "password must contain at least one special character." in messages
        assert "password must contain at least one lowercase letter." not in messages

    def test_missing_lowercase(self):
        """Lowercase letters are required."""
        messages = [v.message for v in validate_password("ABCD1234!")]
        assert messages == ["password must contain at least one lowercase letter."]

    def test_too_long(self):
        """Passwords over 100 characters are rejected."""
        assert len(validate_password("Aa1!" * 26)) == 1

    def test_custom_field_name(self):
        """Violations name the field they were checked under."""
        violations = validate_password("weak", field="newPassword")
        assert all(v.field == "newPassword" for v in violations)
        assert violations[0].message.startswith("newPassword ")
