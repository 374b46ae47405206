from typing import TypeVar, Generic, Optional, Type, List, Union, Dict, Any
from datetime import datetime, timezone

from pydantic import BaseModel
from sqlalchemy import asc, delete, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from recipe_api.core.logger import get_logger
from recipe_api.infra.db.repo_registrar import RepositoryRegistrar

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

logger = get_logger("base_repo")


class BaseRepository(Generic[ModelType, CreateSchemaType, UpdateSchemaType], RepositoryRegistrar):
    def __init__(self, db: AsyncSession, model: Type[ModelType], context: dict = None):
        self.db = db
        self.model = model
        self.context = context or {}

    # ==========================
    # 数据创建方法 (Create)
    # ==========================

    async def create(self, obj_in: Union[CreateSchemaType, Dict[str, Any]]) -> ModelType:
        """
        创建一个新的对象实例，并将其添加到会话中。不提交事务。
        """
        create_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)
        db_obj = self.model(**create_data)
        self.db.add(db_obj)
        try:
            await self.db.flush()
            await self.db.refresh(db_obj)
        except Exception as e:
            logger.error(f"[create] Failed: {e}")
            raise
        return db_obj

    # ==========================
    # 数据更新方法 (Update)
    # ==========================

    async def update_where(self, filters: Dict[str, Any], update_data: Dict[str, Any]) -> int:
        """
        按条件直接更新数据库记录 (Direct Update模式)，返回匹配的行数。
        filters 的每一项都是相等条件，例如 {"id": ..., "owner_id": ...}。
        """
        if not update_data:
            return 0

        values = dict(update_data)
        # 自动更新 updated_at 字段 (如果存在)
        if hasattr(self.model, "updated_at"):
            values["updated_at"] = datetime.now(timezone.utc)

        stmt = (
            update(self.model)
            .where(*self._conditions(filters))
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        return result.rowcount

    # ==========================
    # 数据删除方法 (Delete)
    # ==========================

    async def delete_where(self, filters: Dict[str, Any]) -> int:
        """
        按条件批量物理删除，返回删除的行数。
        """
        stmt = (
            delete(self.model)
            .where(*self._conditions(filters))
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        return result.rowcount

    # ==========================
    # 查询方法 (Read)
    # ==========================

    def _base_stmt(self):
        return select(self.model)

    def _conditions(self, filters: Dict[str, Any]) -> list:
        conditions = []
        for field, value in filters.items():
            column = getattr(self.model, field, None)
            if column is None:
                raise ValueError(f"{self.model.__name__} 没有字段 {field}")
            conditions.append(column == value)
        return conditions

    async def get_by_id(self, id: Any) -> Optional[ModelType]:
        stmt = self._base_stmt().where(self.model.id == id)
        return await self._run_and_scalar(stmt, "get_by_id")

    async def list_all(self) -> List[ModelType]:
        stmt = self._base_stmt()
        if hasattr(self.model, "created_at"):
            stmt = stmt.order_by(asc(self.model.created_at))
        return await self._run_and_scalars(stmt, "list_all")

    async def _run_and_scalar(self, stmt, method: str):
        try:
            result = await self.db.execute(stmt)
            return result.scalars().first()
        except Exception as e:
            logger.error(f"[{method}] Failed: {e}")
            raise

    async def _run_and_scalars(self, stmt, method: str):
        try:
            result = await self.db.execute(stmt)
            return list(result.scalars().all())
        except Exception as e:
            logger.error(f"[{method}] Failed: {e}")
            raise
