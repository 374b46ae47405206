import uuid

from fastapi.testclient import TestClient

from recipe_api.main import create_app
from tests.conftest import login, sample_recipe, signup_and_login


def test_delete_account_cascades_to_recipes(client):
    alice = signup_and_login(client, username="alice")
    bob = signup_and_login(client, username="bob")
    for title in ("Pancakes", "Omelette"):
        client.post("/api/recipes", json=sample_recipe(title=title), headers=alice)
    bobs = client.post("/api/recipes", json=sample_recipe(title="Stew"), headers=bob).json()

    response = client.delete("/api/account", headers=alice)
    assert response.status_code == 200
    assert response.json() == {"message": "Account deleted"}

    # 只剩 bob 的菜谱
    remaining = client.get("/api/recipes").json()
    assert [r["id"] for r in remaining] == [bobs["id"]]

    # 账号已不存在，登录失败
    assert login(client, username="alice").status_code == 401


def test_delete_account_twice_is_not_found(client):
    headers = signup_and_login(client)
    assert client.delete("/api/account", headers=headers).status_code == 200

    # 令牌仍在有效期内，但账号已经没了
    again = client.delete("/api/account", headers=headers)
    assert again.status_code == 404
    assert again.json()["message"] == "User not found"


def test_stale_token_cannot_modify_recipes(client):
    headers = signup_and_login(client)
    recipe = client.post("/api/recipes", json=sample_recipe(), headers=headers).json()
    client.delete("/api/account", headers=headers)

    # 账号删除后菜谱也被删除，旧令牌的写操作都落空
    assert client.patch(f"/api/recipes/{recipe['id']}", json={"title": "x"}, headers=headers).status_code == 404
    assert client.delete(f"/api/recipes/{uuid.uuid4()}", headers=headers).status_code == 404


def test_delete_account_requires_token(client):
    assert client.delete("/api/account").status_code == 401


def test_register_again_after_deletion(client):
    headers = signup_and_login(client)
    client.delete("/api/account", headers=headers)

    response = client.post(
        "/api/register",
        json={"username": "alice", "email": "alice@recipes.io", "password": "new-pass"},
    )
    assert response.status_code == 201


def test_stale_token_can_create_with_foreign_keys_enforced(app_config):
    app = create_app(app_config)
    with TestClient(app) as client:
        async def enforce_foreign_keys():
            # 内存库只有一个连接（StaticPool），PRAGMA 对后续所有请求生效
            async with app.state.engine.connect() as conn:
                await conn.exec_driver_sql("PRAGMA foreign_keys=ON")
                result = await conn.exec_driver_sql("PRAGMA foreign_keys")
                return result.scalar()

        assert client.portal.call(enforce_foreign_keys) == 1

        headers = signup_and_login(client)
        assert client.delete("/api/account", headers=headers).status_code == 200

        # 令牌未过期，账号已删除：菜谱照常创建，owner 指向已删除的账号
        response = client.post("/api/recipes", json=sample_recipe(), headers=headers)
        assert response.status_code == 201
        assert response.json()["owner_username"] == "alice"
