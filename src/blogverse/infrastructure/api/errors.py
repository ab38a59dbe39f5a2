"""Translation of service errors into HTTP responses."""

from fastapi import status
from fastapi.responses import JSONResponse

from blogverse.domain.services.auth_result import Err, ErrorKind
from blogverse.infrastructure.api.schemas import ErrorResponse, FieldError

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 422,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.EMAIL_NOT_VERIFIED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.INVALID_TOKEN: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(
    kind: ErrorKind,
    message: str,
    errors: list[FieldError] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build the error envelope for an error kind."""
    body = ErrorResponse(message=message, code=kind.value, errors=errors)
    return JSONResponse(
        status_code=STATUS_BY_KIND[kind],
        content=body.model_dump(mode="json", exclude_none=True) | {"data": None},
        headers=headers,
    )


def err_to_response(err: Err) -> JSONResponse:
    """Build the HTTP response for a failed service result."""
    headers = None
    if err.kind is ErrorKind.UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return error_response(err.kind, err.message, headers=headers)
