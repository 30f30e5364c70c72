"""
Media module exceptions.
"""

from typing import Optional

from shared.exceptions import ExternalServiceError


class MediaUploadError(ExternalServiceError):
    """Raised when a required upload did not produce an asset."""

    def __init__(self, message: str = "Failed to upload file"):
        super().__init__(message, service="storage", code="MEDIA_UPLOAD_FAILED")


class MediaDeleteError(ExternalServiceError):
    """Raised when a stored asset cannot be deleted."""

    def __init__(self, reference: str, reason: Optional[str] = None):
        super().__init__(
            "Failed to delete file from storage",
            service="storage",
            code="MEDIA_DELETE_FAILED",
            details={"reference": reference, "reason": reason},
        )
