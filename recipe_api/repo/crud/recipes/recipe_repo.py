from typing import Any, Dict, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from recipe_api.models.recipe import Recipe
from recipe_api.repo.crud.common.base_repo import BaseRepository
from recipe_api.schemas.recipes.recipe_schemas import RecipeCreate, RecipeUpdate


class RecipeRepository(BaseRepository[Recipe, RecipeCreate, RecipeUpdate]):
    """
    recipes 集合。
    所有写操作都带上 owner_id 条件，非所有者与记录不存在在这一层就无法区分。
    """

    def __init__(self, db: AsyncSession, context: Optional[dict] = None):
        super().__init__(db, Recipe, context)

    async def update_owned(self, recipe_id: UUID, owner_id: UUID, update_data: Dict[str, Any]) -> int:
        return await self.update_where({"id": recipe_id, "owner_id": owner_id}, update_data)

    async def delete_owned(self, recipe_id: UUID, owner_id: UUID) -> int:
        return await self.delete_where({"id": recipe_id, "owner_id": owner_id})

    async def delete_all_by_owner(self, owner_id: UUID) -> int:
        return await self.delete_where({"owner_id": owner_id})

