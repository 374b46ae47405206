import pytest
from fastapi.testclient import TestClient

from recipe_api.api.dependencies.services import get_recipes_service
from recipe_api.config.config_settings.config_schema import AppConfig
from recipe_api.main import create_app
from tests.conftest import build_config


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_missing_database_url_is_fatal():
    with pytest.raises(RuntimeError):
        create_app(AppConfig())


def test_unexpected_error_returns_generic_500():
    class BrokenRecipeService:
        async def list_recipes(self):
            raise RuntimeError("connection reset by peer")

    app = create_app(build_config())
    app.dependency_overrides[get_recipes_service] = lambda: BrokenRecipeService()

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/api/recipes")

    assert response.status_code == 500
    assert response.json() == {"code": 50000, "message": "Internal server error"}
    # 不泄露内部错误细节
    assert "connection reset" not in response.text


def test_error_body_shape(client):
    response = client.get("/api/recipes/not-an-id")
    assert set(response.json()) == {"code", "message"}
    assert response.json()["code"] == 40003
