# 导入所有表模型，保证 SQLModel.metadata 在建表前已经注册完整
from recipe_api.models.user import User
from recipe_api.models.recipe import Recipe

__all__ = ["User", "Recipe"]
