import pytest
from fastapi.testclient import TestClient

from recipe_api.config.config_settings.config_schema import (
    AppConfig,
    DatabaseConfig,
    LoggingConfig,
    SecuritySettings,
)
from recipe_api.main import create_app

TEST_SECRET = "test-secret-with-enough-bytes-for-hs256-signing"


def build_config(secret: str | None = TEST_SECRET) -> AppConfig:
    # 内存 SQLite，每个 app 一个独立的库；bcrypt 用最低成本加快测试
    return AppConfig(
        database=DatabaseConfig(url="sqlite+aiosqlite://"),
        logging=LoggingConfig(level="WARNING"),
        security_settings=SecuritySettings(secret=secret, bcrypt_rounds=4),
    )


@pytest.fixture
def app_config() -> AppConfig:
    return build_config()


@pytest.fixture
def client(app_config):
    with TestClient(create_app(app_config)) as c:
        yield c


# === 测试辅助函数 ===

def register(client, username="alice", email=None, password="s3cret-pass"):
    return client.post(
        "/api/register",
        json={"username": username, "email": email or f"{username}@recipes.io", "password": password},
    )


def login(client, username="alice", password="s3cret-pass"):
    return client.post("/api/login", json={"username": username, "password": password})


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def signup_and_login(client, username="alice", password="s3cret-pass") -> dict:
    register(client, username=username, password=password)
    token = login(client, username=username, password=password).json()["token"]
    return auth_headers(token)


def sample_recipe(**overrides) -> dict:
    recipe = {
        "title": "Pancakes",
        "description": "Fluffy breakfast pancakes",
        "ingredients": ["flour", "milk", "egg"],
        "instructions": "Mix everything and fry.",
    }
    recipe.update(overrides)
    return recipe
