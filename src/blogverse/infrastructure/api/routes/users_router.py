"""Public user profile routes."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from blogverse.domain.services.auth_result import Err
from blogverse.infrastructure.api.dependencies import AuthServiceDep
from blogverse.infrastructure.api.errors import err_to_response
from blogverse.infrastructure.api.schemas import ApiResponse, UserResponse

router = APIRouter()


@router.get(
    "/{user_id}",
    response_model=ApiResponse[UserResponse],
    responses={404: {"description": "User not found"}},
)
async def get_user(
    user_id: str, auth_service: AuthServiceDep
) -> ApiResponse[UserResponse] | JSONResponse:
    """Get a user's public profile by ID."""
    result = await auth_service.get_user(user_id)
    if isinstance(result, Err):
        return err_to_response(result)
    return ApiResponse[UserResponse](success=True, data=UserResponse.model_validate(result.value))
