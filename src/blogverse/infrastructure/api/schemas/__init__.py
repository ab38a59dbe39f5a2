"""Pydantic schemas for API requests and responses."""

from blogverse.infrastructure.api.schemas.auth_schemas import (
    EmailRequest,
    ResetPasswordRequest,
    SignInRequest,
    SignInResponse,
    SignUpRequest,
    UserResponse,
    VerifyEmailRequest,
)
from blogverse.infrastructure.api.schemas.common import ApiResponse, ErrorResponse, FieldError

__all__ = [
    "ApiResponse",
    "EmailRequest",
    "ErrorResponse",
    "FieldError",
    "ResetPasswordRequest",
    "SignInRequest",
    "SignInResponse",
    "SignUpRequest",
    "UserResponse",
    "VerifyEmailRequest",
]
