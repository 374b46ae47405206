from typing import Optional
from uuid import UUID

from sqlalchemy import func, or_
from sqlalchemy.ext.asyncio import AsyncSession

from recipe_api.models.user import User
from recipe_api.repo.crud.common.base_repo import BaseRepository
from recipe_api.schemas.users.user_schemas import UserCreate


class UserRepository(BaseRepository[User, UserCreate, UserCreate]):
    """users 集合"""

    def __init__(self, db: AsyncSession, context: Optional[dict] = None):
        super().__init__(db, User, context)

    async def get_by_username_or_email(self, username: str, email: str) -> Optional[User]:
        """用户名精确匹配，邮箱不区分大小写；任意一个命中即返回。"""
        stmt = self._base_stmt().where(
            or_(
                self.model.username == username,
                func.lower(self.model.email) == email.lower(),
            )
        )
        return await self._run_and_scalar(stmt, "get_by_username_or_email")

    async def get_by_identity(self, identity: str) -> Optional[User]:
        """登录查找：identity 既可以是用户名也可以是邮箱。"""
        return await self.get_by_username_or_email(identity, identity)

    async def delete_by_id(self, user_id: UUID) -> int:
        return await self.delete_where({"id": user_id})
