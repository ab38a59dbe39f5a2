"""Authentication API routes.

Signup, email verification, sign-in and password recovery. Each endpoint
delegates to ``AuthService`` and maps its result onto the response envelope.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from blogverse.domain.services.auth_result import SIGNUP_CREATED, Err
from blogverse.infrastructure.api.dependencies import AuthServiceDep, CurrentClaims
from blogverse.infrastructure.api.errors import err_to_response
from blogverse.infrastructure.api.schemas import (
    ApiResponse,
    EmailRequest,
    ResetPasswordRequest,
    SignInRequest,
    SignInResponse,
    SignUpRequest,
    UserResponse,
    VerifyEmailRequest,
)

router = APIRouter()


@router.post(
    "/sign-up",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[UserResponse],
    responses={
        409: {"description": "Username or email already exists"},
        422: {"description": "Validation error"},
    },
)
async def sign_up(
    request: SignUpRequest, auth_service: AuthServiceDep
) -> ApiResponse[UserResponse] | JSONResponse:
    """Register a new user and send a verification email.

    The account cannot sign in until the email address is verified.
    """
    result = await auth_service.sign_up(request.username, request.email, request.password)
    if isinstance(result, Err):
        return err_to_response(result)
    return ApiResponse[UserResponse](
        success=True,
        message=SIGNUP_CREATED,
        data=UserResponse.model_validate(result.value),
    )


@router.post(
    "/verify-email",
    response_model=ApiResponse[None],
    responses={400: {"description": "Invalid or expired token"}},
)
async def verify_email(
    request: VerifyEmailRequest, auth_service: AuthServiceDep
) -> ApiResponse[None] | JSONResponse:
    """Verify an email address with the token from the verification email."""
    result = await auth_service.verify_email(request.token)
    if isinstance(result, Err):
        return err_to_response(result)
    return ApiResponse[None](success=True, message=result.value)


@router.post("/resend-verification", response_model=ApiResponse[None])
async def resend_verification(
    request: EmailRequest, auth_service: AuthServiceDep
) -> ApiResponse[None] | JSONResponse:
    """Send a fresh verification email.

    The response is the same whether or not the address is registered.
    """
    result = await auth_service.resend_verification(request.email)
    if isinstance(result, Err):
        return err_to_response(result)
    return ApiResponse[None](success=True, message=result.value)


@router.post(
    "/sign-in",
    response_model=ApiResponse[SignInResponse],
    responses={401: {"description": "Invalid credentials or email not verified"}},
)
async def sign_in(
    request: SignInRequest, auth_service: AuthServiceDep
) -> ApiResponse[SignInResponse] | JSONResponse:
    """Authenticate and return a bearer token."""
    result = await auth_service.sign_in(request.email, request.password)
    if isinstance(result, Err):
        return err_to_response(result)
    return ApiResponse[SignInResponse](
        success=True,
        data=SignInResponse(
            token=result.value.token,
            user=UserResponse.model_validate(result.value.user),
        ),
    )


@router.post("/forgot-password", response_model=ApiResponse[None])
async def forgot_password(
    request: EmailRequest, auth_service: AuthServiceDep
) -> ApiResponse[None] | JSONResponse:
    """Send a password reset email.

    The response is the same whether or not the address is registered.
    """
    result = await auth_service.forgot_password(request.email)
    if isinstance(result, Err):
        return err_to_response(result)
    return ApiResponse[None](success=True, message=result.value)


@router.post(
    "/reset-password",
    response_model=ApiResponse[None],
    responses={400: {"description": "Invalid or expired token"}},
)
async def reset_password(
    request: ResetPasswordRequest, auth_service: AuthServiceDep
) -> ApiResponse[None] | JSONResponse:
    """Set a new password with the token from the reset email."""
    result = await auth_service.reset_password(request.token, request.new_password)
    if isinstance(result, Err):
        return err_to_response(result)
    return ApiResponse[None](success=True, message=result.value)


@router.get(
    "/me",
    response_model=ApiResponse[UserResponse],
    responses={401: {"description": "Missing or invalid bearer token"}},
)
async def me(
    claims: CurrentClaims, auth_service: AuthServiceDep
) -> ApiResponse[UserResponse] | JSONResponse:
    """Return the user the bearer token was issued to."""
    result = await auth_service.get_current_user(claims)
    if isinstance(result, Err):
        return err_to_response(result)
    return ApiResponse[UserResponse](success=True, data=UserResponse.model_validate(result.value))
