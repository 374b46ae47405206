# recipe_api/api/dependencies/services.py
from fastapi import Depends

from recipe_api.api.dependencies.settings import get_app_settings
from recipe_api.config.config_settings.config_schema import AppConfig
from recipe_api.infra.db.get_repo_factory import get_repository_factory, RepositoryFactory
from recipe_api.services.auth.auth_service import AuthService
from recipe_api.services.recipes.recipe_service import RecipeService
from recipe_api.services.users.user_service import UserService


def get_auth_service(
    repo_factory: RepositoryFactory = Depends(get_repository_factory),
    settings: AppConfig = Depends(get_app_settings),
) -> AuthService:
    return AuthService(repo_factory, settings)


def get_user_service(
    repo_factory: RepositoryFactory = Depends(get_repository_factory),
    settings: AppConfig = Depends(get_app_settings),
) -> UserService:
    return UserService(repo_factory, settings)


def get_recipes_service(
    repo_factory: RepositoryFactory = Depends(get_repository_factory),
    settings: AppConfig = Depends(get_app_settings),
) -> RecipeService:
    """Dependency provider for RecipeService."""
    return RecipeService(repo_factory, settings)
