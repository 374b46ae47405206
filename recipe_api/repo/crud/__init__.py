# 导入具体的 Repository 以完成名称注册（"user"、"recipe"）
from recipe_api.repo.crud.common.base_repo import BaseRepository
from recipe_api.repo.crud.users.user_repo import UserRepository
from recipe_api.repo.crud.recipes.recipe_repo import RecipeRepository

__all__ = ["BaseRepository", "UserRepository", "RecipeRepository"]
