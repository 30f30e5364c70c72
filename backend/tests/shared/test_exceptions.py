"""Tests for shared/exceptions.py."""

from shared.exceptions import (
    TubelineError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    ConflictError,
    ExternalServiceError,
)


class TestTubelineError:
    def test_tubeline_error_message(self):
        """TubelineError should store message."""
        error = TubelineError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_tubeline_error_default_code(self):
        """TubelineError should default code to class name."""
        error = TubelineError("Test error")
        assert error.code == "TubelineError"

    def test_tubeline_error_custom_code(self):
        """TubelineError should accept custom code."""
        error = TubelineError("Test error", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_tubeline_error_defaults(self):
        """TubelineError should default details and errors to empty containers."""
        error = TubelineError("Test error")
        assert error.details == {}
        assert error.errors == []

    def test_tubeline_error_is_internal(self):
        """A bare TubelineError maps to 500."""
        assert TubelineError("boom").status_code == 500

    def test_tubeline_error_to_dict(self):
        """TubelineError should convert to dict."""
        error = TubelineError("Test error", code="TEST_ERROR", details={"key": "value"})
        result = error.to_dict()

        assert result["error"] == "TEST_ERROR"
        assert result["message"] == "Test error"
        assert result["details"]["key"] == "value"


class TestStatusCodes:
    def test_validation_error_is_400(self):
        """ValidationError should map to 400 and carry itemized errors."""
        error = ValidationError("Invalid input", errors=[{"field": "email", "message": "bad"}])
        assert isinstance(error, TubelineError)
        assert error.status_code == 400
        assert error.errors[0]["field"] == "email"

    def test_authentication_error_is_401(self):
        """AuthenticationError should map to 401."""
        assert AuthenticationError("Invalid token").status_code == 401

    def test_not_found_error_is_404(self):
        """NotFoundError should map to 404."""
        assert NotFoundError("Missing").status_code == 404

    def test_conflict_error_is_409(self):
        """ConflictError should map to 409."""
        assert ConflictError("Taken").status_code == 409


class TestExternalServiceError:
    def test_external_service_error_stores_service(self):
        """ExternalServiceError should store service name."""
        error = ExternalServiceError("Connection failed", service="storage")
        assert error.service == "storage"
        assert error.status_code == 500

    def test_external_service_error_preserves_other_details(self):
        """ExternalServiceError should include service alongside other details."""
        error = ExternalServiceError(
            "Connection failed",
            service="storage",
            details={"reference": "avatars/a.png"}
        )
        result = error.to_dict()

        assert result["details"]["service"] == "storage"
        assert result["details"]["reference"] == "avatars/a.png"
