"""API models package."""

from .responses import ApiResponse, ErrorResponse, error_response

__all__ = [
    "ApiResponse",
    "ErrorResponse",
    "error_response",
]
