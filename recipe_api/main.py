from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from recipe_api.api.router import api_router
from recipe_api.config.config_settings.config_loader import get_app_config
from recipe_api.config.config_settings.config_schema import AppConfig
from recipe_api.core.global_exception import register_exception_handlers
from recipe_api.core.logger import logger, setup_logging
from recipe_api.core.security.middleware import AuditMiddleware
from recipe_api.infra.db.session import build_engine, build_session_factory, create_db_and_tables


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 应用启动中，正在初始化资源...")

    config: AppConfig = app.state.config
    engine = build_engine(config.database)
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    # 初始化数据库
    await create_db_and_tables(engine)
    if not config.security_settings.secret:
        logger.warning("⚠️ 未配置 JWT_SECRET，登录和所有需要鉴权的接口都会返回 500")
    logger.info("✅ 所有资源初始化完成")

    yield

    # 应用关闭，释放资源
    await engine.dispose()
    logger.info("🛑 应用已关闭，数据库连接池已释放")


def create_app(config: AppConfig | None = None) -> FastAPI:
    """
    构建应用。config 为空时从 config.yaml + 环境变量加载。
    缺少数据库连接串属于致命错误，直接抛出，进程不会开始监听端口。
    """
    config = config or get_app_config()
    setup_logging(config.logging)

    if not config.database.url:
        logger.critical("❌ 未配置 DATABASE_URL，应用无法启动")
        raise RuntimeError("DATABASE_URL is not configured")

    app = FastAPI(title="Recipe API", lifespan=lifespan)
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(AuditMiddleware)

    register_exception_handlers(app)
    app.include_router(api_router, prefix=config.server.api_prefix)
    return app


def run() -> None:
    config = get_app_config()
    uvicorn.run(
        "recipe_api.main:create_app",
        factory=True,
        host=config.server.host,
        port=config.server.port,
        log_level=config.server.log_level,
    )


if __name__ == "__main__":
    run()
