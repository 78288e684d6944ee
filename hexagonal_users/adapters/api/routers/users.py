# hexagonal_users/adapters/api/routers/users.py
from fastapi import APIRouter, Depends

from hexagonal_users.adapters.api.dependencies import get_user_service
from hexagonal_users.adapters.api.schemas import (
    CreateUserRequest,
    ErrorResponse,
    OkResponse,
    UserResponse,
)
from hexagonal_users.core.use_cases.user_service import IUserService

router = APIRouter(prefix="/users", tags=["Users"])

# Domain errors propagate out of these handlers and are rendered by the
# exception handlers in `errors.py`.


@router.post(
    "",
    response_model=OkResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Create or Replace a User",
)
async def create_user(
    request: CreateUserRequest,
    service: IUserService = Depends(get_user_service),
):
    await service.create_user(request.id, request.name)
    return OkResponse()


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Fetch a User",
)
async def get_user(
    user_id: str,
    service: IUserService = Depends(get_user_service),
):
    user = await service.get_user(user_id)
    return UserResponse.from_domain(user)
