from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from recipe_api.infra.db.session import get_session
from recipe_api.infra.db.repository_factory_auto import RepositoryFactory


# --- 为 FastAPI 依赖注入系统提供的工厂获取器 ---
def get_repository_factory(
        session: AsyncSession = Depends(get_session),
) -> RepositoryFactory:
    """
    专为 FastAPI API 请求设计的依赖注入函数，每个请求一个工厂、一个 Session。
    """
    return RepositoryFactory(db=session)
