"""Response envelope shared by all endpoints."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Standard response wrapper.

    Every endpoint answers with ``success`` plus an optional human-readable
    ``message`` and an optional ``data`` payload.
    """

    success: bool = Field(..., description="Whether the request succeeded")
    message: str | None = Field(None, description="Human-readable result message")
    data: T | None = Field(None, description="Response payload")


class FieldError(BaseModel):
    """Detail for a single validation error."""

    field: str = Field(..., description="Field name that failed validation")
    message: str = Field(..., description="Human-readable error message")


class ErrorResponse(BaseModel):
    """Envelope for failed requests."""

    success: bool = False
    message: str = Field(..., description="Client-safe error message")
    data: None = None
    code: str = Field(..., description="Machine-readable error code")
    errors: list[FieldError] | None = Field(None, description="Per-field validation errors")
