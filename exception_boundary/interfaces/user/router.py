"""
FastAPI router for the user bounded context.

All routes delegate to use cases. No business logic here.
Error mapping is handled by the centralized error boundary.
"""

from fastapi import APIRouter, Depends, Request

from exception_boundary.application.user.dtos import GetUserQuery, RegisterUserCommand
from exception_boundary.application.user.get_user import GetUserUseCase
from exception_boundary.application.user.register_user import RegisterUserUseCase
from exception_boundary.core.config import settings
from exception_boundary.interfaces.dependencies import (
    get_register_user_use_case,
    get_user_use_case,
)
from exception_boundary.interfaces.schemas import ErrorResponse
from exception_boundary.interfaces.user.schemas import RegisterUserRequest, UserResponse
from exception_boundary.shared.security.rate_limiting import limiter

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    status_code=201,
    response_model=UserResponse,
    responses={409: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Register a user",
)
@limiter.limit(settings.rate_limit_heavy)
def register_user(
    request: Request,
    body: RegisterUserRequest,
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
) -> UserResponse:
    """Create an account for an unused email address."""
    result = use_case.execute(RegisterUserCommand(email=body.email))
    return UserResponse(id=result.id, email=result.email, created_at=result.created_at)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a user",
)
def get_user(
    user_id: str,
    use_case: GetUserUseCase = Depends(get_user_use_case),
) -> UserResponse:
    """Return a user by id."""
    result = use_case.execute(GetUserQuery(user_id=user_id))
    return UserResponse(id=result.id, email=result.email, created_at=result.created_at)
