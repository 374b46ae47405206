# recipe_api/services/users/user_service.py
from uuid import UUID

from recipe_api.config.config_settings.config_schema import AppConfig
from recipe_api.core.exceptions import UserNotFoundException
from recipe_api.infra.db.repository_factory_auto import RepositoryFactory
from recipe_api.repo.crud.recipes.recipe_repo import RecipeRepository
from recipe_api.repo.crud.users.user_repo import UserRepository
from recipe_api.services._base_service import BaseService


class UserService(BaseService):
    """
    账号服务。
    删除账号时先删该用户的全部菜谱再删用户本身，两步在同一个事务里提交。
    """

    def __init__(self, factory: RepositoryFactory, settings: AppConfig):
        super().__init__(settings)
        self.factory = factory
        self.user_repo: UserRepository = factory.get_repo_by_type(UserRepository)
        self.recipe_repo: RecipeRepository = factory.get_repo_by_type(RecipeRepository)

    async def delete_account(self, user_id: UUID) -> None:
        async with self.factory.transaction():
            removed_recipes = await self.recipe_repo.delete_all_by_owner(user_id)
            removed_users = await self.user_repo.delete_by_id(user_id)
            if removed_users == 0:
                # 令牌仍有效但账号已被删除，回滚后返回 404
                raise UserNotFoundException()

        self.logger.info(f"账号已删除: user_id={user_id}, recipes={removed_recipes}")
