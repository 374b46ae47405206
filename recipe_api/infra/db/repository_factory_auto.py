# recipe_api/infra/db/repository_factory_auto.py
from typing import Optional, Any, Type, TypeVar, AsyncGenerator, Dict
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from recipe_api.repo.crud import BaseRepository

# =====================
# 类型定义
# =====================
RepoType = TypeVar("RepoType", bound=BaseRepository)

# =====================
# 自定义异常
# =====================
class RepositoryNotFoundError(Exception):
    pass

# =====================
# Repository Factory
# =====================
class RepositoryFactory:
    """
    RepositoryFactory 负责管理所有 Repository 的实例化和缓存，
    并封装 Session 的事务管理功能。
    同一个请求内的所有 Repository 共用一个 Session。
    """

    def __init__(self, db: AsyncSession, *, context: Optional[dict] = None):
        self._db = db
        self.context = context or {}
        self._registry: Dict[str, BaseRepository] = {}

    # ==========
    # 通过名称获取 Repository
    # ==========
    def get_repo(self, name: str) -> BaseRepository:
        """
        根据注册名称获取 Repository 实例，例如 "user"、"recipe"。
        """
        name = name.lower()
        if name not in self._registry:
            repo_cls = BaseRepository.registry.get(name)
            if not repo_cls or repo_cls is BaseRepository:
                raise RepositoryNotFoundError(f"Repository '{name}' not registered.")
            self._registry[name] = repo_cls(self._db, context=self.context)
        return self._registry[name]

    # ==========
    # 通过类型获取 Repository
    # ==========
    def get_repo_by_type(self, repo_type: Type[RepoType]) -> RepoType:
        """
        根据 Repository 类型获取实例。
        """
        for repo in self._registry.values():
            if isinstance(repo, repo_type):
                return repo

        # 如果未加载，则动态实例化并缓存
        for name, cls in BaseRepository.registry.items():
            if cls is not BaseRepository and issubclass(cls, repo_type):
                instance = cls(self._db, context=self.context)
                self._registry[name] = instance
                return instance

        raise RepositoryNotFoundError(f"Repository of type '{repo_type.__name__}' not found.")

    # ==========
    # 动态属性访问
    # ==========
    def __getattr__(self, item: str) -> Any:
        if item.startswith("_"):
            raise AttributeError(item)
        try:
            return self.get_repo(item)
        except RepositoryNotFoundError:
            raise AttributeError(f"'RepositoryFactory' object has no attribute '{item}'")

    # ==========
    # Session 操作封装
    # ==========
    async def commit(self): await self._db.commit()
    async def rollback(self): await self._db.rollback()

    # ==========
    # 事务上下文管理器
    # ==========
    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[None, None]:
        try:
            yield
            await self.commit()
        except Exception:
            await self.rollback()
            raise
