import os
import re
import yaml
from string import Template
from pathlib import Path
from functools import lru_cache
from dotenv import load_dotenv

from recipe_api.config.config_settings.config_schema import AppConfig
from recipe_api.core.logger import logger


PACKAGE_DIR = Path(__file__).resolve().parents[2]
BASE_DIR = PACKAGE_DIR.parent
CONFIG_DIR = PACKAGE_DIR / "config"
DEFAULT_ENV = "config"

_PLACEHOLDER = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

# 占位符未被环境变量替换时的标记，字典中对应的键会被丢弃，交给 AppConfig 的默认值
_UNSET = object()


def load_yaml(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"配置文件未找到: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def interpolate_env_vars(obj):
    """
    替换 YAML 中的 ${VAR} 为 os.environ 中的值
    并做类型转换（true/false）
    """
    def convert(value: str):
        v = value.lower()
        if v == "true": return True
        if v == "false": return False
        return value

    if isinstance(obj, dict):
        result = {}
        for k, v in obj.items():
            value = interpolate_env_vars(v)
            if value is _UNSET or value == "":
                continue
            result[k] = value
        return result
    elif isinstance(obj, list):
        return [i for i in (interpolate_env_vars(i) for i in obj) if i is not _UNSET]
    elif isinstance(obj, str):
        # 只检查 YAML 原文里的占位符，替换进来的环境变量值里含 $ 也不受影响
        if any(name not in os.environ for name in _PLACEHOLDER.findall(obj)):
            return _UNSET
        raw = Template(obj).safe_substitute(os.environ)
        return convert(raw)
    else:
        return obj


def get_env() -> str:
    return os.getenv("ENV", DEFAULT_ENV)


def load_app_config(env: str | None = None, config_dir: Path = CONFIG_DIR) -> AppConfig:
    env = env or get_env()
    logger.info(f"🌍 当前环境: {env}")

    # 1. 通用 .env
    base_env_path = BASE_DIR / ".env"
    if base_env_path.exists():
        load_dotenv(dotenv_path=base_env_path)
        logger.info(f"✔️ 已加载通用 .env 文件: {base_env_path}")

    # 2. 特定环境的 .env 覆盖通用设置
    env_specific_path = BASE_DIR / f".env.{env}"
    if env_specific_path.exists():
        load_dotenv(dotenv_path=env_specific_path, override=True)
        logger.info(f"✔️ 已加载特定环境 .env 文件: {env_specific_path}")

    config_path = config_dir / f"{env}.yaml"
    if not config_path.exists():
        # 没有该环境专属的 yaml 时回落到默认配置，差异全部交给环境变量
        config_path = config_dir / f"{DEFAULT_ENV}.yaml"
    logger.info(f"🔧 加载配置文件: {config_path}")

    data = load_yaml(config_path)
    # 环境变量插值会使用刚刚加载完 .env 文件后的最新环境变量
    data = interpolate_env_vars(data)

    config = AppConfig(**data)
    logger.debug(f"🔧 配置加载完成: server={config.server}, database.echo={config.database.echo}")
    return config


@lru_cache()
def get_app_config() -> AppConfig:
    return load_app_config()

