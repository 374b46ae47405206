# recipe_api/core/logger.py
import sys
from pathlib import Path

from loguru import logger

from recipe_api.config.config_settings.config_schema import LoggingConfig

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def setup_logging(config: LoggingConfig) -> None:
    """按配置重建 loguru 的输出目标，可重复调用（测试中会多次创建 app）。"""
    # 清除默认 handler
    logger.remove()

    # 控制台输出
    logger.add(
        sys.stderr,
        level=config.level.upper(),
        colorize=True,
        backtrace=True,
        diagnose=False,
        format=CONSOLE_FORMAT,
    )

    if not config.enable_file:
        return

    log_dir = Path(config.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    # 普通文本日志输出到文件
    logger.add(
        log_dir / "app.log",
        level="DEBUG",
        rotation=config.rotation,
        retention=config.retention,
        encoding="utf-8",
        enqueue=True,
        backtrace=True,
        diagnose=False,
    )

    # JSON 结构化日志输出，只记录警告及以上
    logger.add(
        log_dir / "app.json",
        level="WARNING",
        rotation=config.rotation,
        retention=config.retention,
        serialize=True,
        encoding="utf-8",
        enqueue=True,
    )
    logger.debug(f"Log system initialized, level={config.level}, dir={log_dir}")


def get_logger(name: str = None):
    """仿 logging.getLogger() 实现的 loguru logger 工厂方法"""
    if name:
        return logger.bind(module=name)
    return logger
