# recipe_api/infra/db/session.py
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

import recipe_api.models  # noqa: F401  注册所有表模型
from recipe_api.config.config_settings.config_schema import DatabaseConfig
from recipe_api.core.logger import logger


def _is_in_memory_sqlite(url: str) -> bool:
    return url.startswith("sqlite") and (":memory:" in url or url.rstrip("/").endswith(":"))


def build_engine(config: DatabaseConfig) -> AsyncEngine:
    """根据配置初始化数据库引擎。"""
    kwargs = {"echo": config.echo}
    if _is_in_memory_sqlite(config.url):
        # 内存库只存在于单个连接上，所有会话共用同一个连接
        kwargs.update(poolclass=StaticPool, connect_args={"check_same_thread": False})
    elif config.url.startswith("sqlite"):
        kwargs.update(connect_args={"check_same_thread": False})
    else:
        kwargs.update(pool_pre_ping=True)
    engine = create_async_engine(config.url, **kwargs)
    logger.info(f"数据库引擎已创建: {engine.url.render_as_string(hide_password=True)}")
    return engine


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


# 获取 DB session（依赖注入用）
async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    提供一个数据库会话，并采用明确的事务控制。
    会话工厂由 create_app 挂在 app.state 上。
    """
    session: AsyncSession = request.app.state.session_factory()
    try:
        yield session
        # 如果路由函数成功执行（没有抛出异常），则在最后提交所有更改。
        await session.commit()
    except Exception:
        # 如果在处理过程中发生任何异常，则回滚所有更改。
        await session.rollback()
        # 重新抛出异常，以便全局异常处理器可以捕获和处理它。
        raise
    finally:
        # 无论成功还是失败，最终都要关闭会话，释放连接。
        await session.close()


# 初始化数据库（启动时调用）
async def create_db_and_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
