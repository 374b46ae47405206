from fastapi import APIRouter, Depends, status

from recipe_api.api.dependencies.services import get_auth_service
from recipe_api.core.api_response import ErrorResponse, MessageResponse, response_message, response_success
from recipe_api.core.logger import logger
from recipe_api.core.security.security import get_current_user
from recipe_api.schemas.users.user_context import UserContext
from recipe_api.schemas.users.user_schemas import CredentialsRequest, LoginResponse, UserCreate, UserRead
from recipe_api.services.auth.auth_service import AuthService

router = APIRouter()


# === Register ===
@router.post(
    "/register",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def register_user(
    user_data: UserCreate,
    service: AuthService = Depends(get_auth_service),
):
    user = await service.register_user(user_data)
    return response_success(data=UserRead.model_validate(user), http_status=status.HTTP_201_CREATED)


# === Login ===
@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def login_user(
    data: CredentialsRequest,
    service: AuthService = Depends(get_auth_service),
):
    user, token = await service.login_user(data)
    return response_success(data=LoginResponse(user=UserRead.model_validate(user), token=token))


# === Token Test ===
@router.get("/token-test", response_model=MessageResponse, responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
async def token_test(current_user: UserContext = Depends(get_current_user)):
    logger.debug(f"token-test 通过: user_id={current_user.id}")
    return response_message("Token is valid")
