from typing import List

from fastapi import APIRouter, Depends, status

from recipe_api.api.dependencies.services import get_recipes_service
from recipe_api.core.api_response import ErrorResponse, MessageResponse, response_message, response_success
from recipe_api.core.security.security import get_current_user
from recipe_api.schemas.recipes.recipe_schemas import RecipeCreate, RecipeRead, RecipeUpdate
from recipe_api.schemas.users.user_context import UserContext
from recipe_api.services.recipes.recipe_service import RecipeService

router = APIRouter()

# 读取接口公开，写接口需要登录
_auth_errors = {401: {"model": ErrorResponse}}


@router.post(
    "",
    response_model=RecipeRead,
    status_code=status.HTTP_201_CREATED,
    responses={**_auth_errors, 400: {"model": ErrorResponse}},
)
async def create_recipe(
    recipe_in: RecipeCreate,
    current_user: UserContext = Depends(get_current_user),
    service: RecipeService = Depends(get_recipes_service),
):
    recipe = await service.create_recipe(recipe_in, current_user)
    return response_success(data=RecipeRead.model_validate(recipe), http_status=status.HTTP_201_CREATED)


@router.get("", response_model=List[RecipeRead])
async def list_recipes(
    service: RecipeService = Depends(get_recipes_service),
):
    recipes = await service.list_recipes()
    return response_success(data=[RecipeRead.model_validate(r) for r in recipes])


@router.get(
    "/{recipe_id}",
    response_model=RecipeRead,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_recipe(
    recipe_id: str,
    service: RecipeService = Depends(get_recipes_service),
):
    recipe = await service.get_recipe(recipe_id)
    return response_success(data=RecipeRead.model_validate(recipe))


@router.patch(
    "/{recipe_id}",
    response_model=RecipeRead,
    responses={**_auth_errors, 400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_recipe(
    recipe_id: str,
    recipe_in: RecipeUpdate,
    current_user: UserContext = Depends(get_current_user),
    service: RecipeService = Depends(get_recipes_service),
):
    recipe = await service.update_recipe(recipe_id, recipe_in, current_user)
    return response_success(data=RecipeRead.model_validate(recipe))


@router.delete(
    "/{recipe_id}",
    response_model=MessageResponse,
    responses={**_auth_errors, 404: {"model": ErrorResponse}},
)
async def delete_recipe(
    recipe_id: str,
    current_user: UserContext = Depends(get_current_user),
    service: RecipeService = Depends(get_recipes_service),
):
    await service.delete_recipe(recipe_id, current_user)
    return response_message("Recipe deleted")
