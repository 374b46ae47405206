# recipe_api/services/recipes/recipe_service.py
from typing import List, Optional
from uuid import UUID

from recipe_api.config.config_settings.config_schema import AppConfig
from recipe_api.core.exceptions import (
    InvalidRecipeIdException,
    NoUpdateFieldsException,
    RecipeNotFoundException,
)
from recipe_api.infra.db.repository_factory_auto import RepositoryFactory
from recipe_api.models.recipe import Recipe
from recipe_api.repo.crud.recipes.recipe_repo import RecipeRepository
from recipe_api.schemas.recipes.recipe_schemas import RecipeCreate, RecipeUpdate
from recipe_api.schemas.users.user_context import UserContext
from recipe_api.services._base_service import BaseService


def parse_recipe_id(raw: str) -> Optional[UUID]:
    """id 不是合法 UUID 时返回 None。"""
    try:
        return UUID(raw)
    except (TypeError, ValueError):
        return None


class RecipeService(BaseService):
    """
    菜谱服务层。
    读取对所有登录用户开放；修改和删除只作用于 owner_id 等于当前用户的记录，
    非所有者和记录不存在一律返回同一个 404。
    """

    def __init__(self, factory: RepositoryFactory, settings: AppConfig):
        super().__init__(settings)
        self.factory = factory
        self.recipe_repo: RecipeRepository = factory.get_repo_by_type(RecipeRepository)

    async def create_recipe(self, recipe_in: RecipeCreate, current_user: UserContext) -> Recipe:
        # owner 只取自令牌，请求体里的 owner 字段会被 schema 忽略
        recipe = await self.recipe_repo.create({
            **recipe_in.model_dump(),
            "owner_id": current_user.id,
            "owner_username": current_user.username,
        })
        await self.factory.commit()
        self.logger.info(f"菜谱已创建: recipe_id={recipe.id}, owner_id={current_user.id}")
        return recipe

    async def list_recipes(self) -> List[Recipe]:
        return await self.recipe_repo.list_all()

    async def get_recipe(self, raw_id: str) -> Recipe:
        recipe_id = parse_recipe_id(raw_id)
        if recipe_id is None:
            raise InvalidRecipeIdException()

        recipe = await self.recipe_repo.get_by_id(recipe_id)
        if recipe is None:
            raise RecipeNotFoundException()
        return recipe

    async def update_recipe(self, raw_id: str, recipe_in: RecipeUpdate, current_user: UserContext) -> Recipe:
        recipe_id = parse_recipe_id(raw_id)
        if recipe_id is None:
            raise InvalidRecipeIdException()

        update_data = recipe_in.to_update_dict()
        if not update_data:
            raise NoUpdateFieldsException()

        matched = await self.recipe_repo.update_owned(recipe_id, current_user.id, update_data)
        if matched == 0:
            raise RecipeNotFoundException()
        await self.factory.commit()

        recipe = await self.recipe_repo.get_by_id(recipe_id)
        if recipe is None:
            raise RecipeNotFoundException()
        return recipe

    async def delete_recipe(self, raw_id: str, current_user: UserContext) -> None:
        recipe_id = parse_recipe_id(raw_id)
        if recipe_id is None:
            # 非法 id 不可能匹配任何记录，和“不存在”一样返回 404
            raise RecipeNotFoundException()

        deleted = await self.recipe_repo.delete_owned(recipe_id, current_user.id)
        if deleted == 0:
            raise RecipeNotFoundException()
        await self.factory.commit()
        self.logger.info(f"菜谱已删除: recipe_id={recipe_id}, owner_id={current_user.id}")
