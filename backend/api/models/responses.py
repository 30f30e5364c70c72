"""
Response envelope models.

Every endpoint answers with one of two shapes:
success ``{statusCode, data, message, success}`` and
error ``{statusCode, message, data: null, success: false, errors: []}``.
"""

from typing import Any, Generic, Optional, TypeVar

from fastapi.responses import JSONResponse
from pydantic import Field, computed_field

from shared.models import ApiModel

T = TypeVar("T")


class ApiResponse(ApiModel, Generic[T]):
    """Standard success envelope."""

    status_code: int = 200
    data: T
    message: str = "Success"

    @computed_field
    @property
    def success(self) -> bool:
        return self.status_code < 400


class ErrorResponse(ApiModel):
    """Standard error envelope."""

    status_code: int
    message: str
    data: None = None
    success: bool = False
    errors: list[Any] = Field(default_factory=list)


def error_response(
    status_code: int,
    message: str,
    errors: Optional[list[Any]] = None,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    """Render an ErrorResponse as a JSON response."""
    body = ErrorResponse(status_code=status_code, message=message, errors=errors or [])
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True),
        headers=headers,
    )
