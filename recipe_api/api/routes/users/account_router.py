from fastapi import APIRouter, Depends

from recipe_api.api.dependencies.services import get_user_service
from recipe_api.core.api_response import ErrorResponse, MessageResponse, response_message
from recipe_api.core.security.security import get_current_user
from recipe_api.schemas.users.user_context import UserContext
from recipe_api.services.users.user_service import UserService

router = APIRouter()


@router.delete(
    "",
    response_model=MessageResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_account(
    current_user: UserContext = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    """删除当前账号及其名下所有菜谱。已签发的令牌不会被吊销，但之后的写操作都会落空。"""
    await service.delete_account(current_user.id)
    return response_message("Account deleted")
