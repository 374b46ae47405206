import uuid

from tests.conftest import sample_recipe, signup_and_login


def create(client, headers, **overrides):
    return client.post("/api/recipes", json=sample_recipe(**overrides), headers=headers)


# === 创建 ===

def test_create_recipe_sets_owner_from_token(client):
    headers = signup_and_login(client)
    response = create(client, headers)
    assert response.status_code == 201

    body = response.json()
    assert body["title"] == "Pancakes"
    assert body["ingredients"] == ["flour", "milk", "egg"]
    assert body["owner_username"] == "alice"
    assert uuid.UUID(body["id"])
    assert uuid.UUID(body["owner_id"])


def test_create_recipe_ignores_owner_in_body(client):
    headers = signup_and_login(client)
    fake_owner = str(uuid.uuid4())
    body = create(client, headers, owner_id=fake_owner, owner_username="mallory").json()

    assert body["owner_id"] != fake_owner
    assert body["owner_username"] == "alice"


def test_create_recipe_requires_token(client):
    response = client.post("/api/recipes", json=sample_recipe())
    assert response.status_code == 401
    assert response.json()["message"] == "Missing token"


def test_create_recipe_validation(client):
    headers = signup_and_login(client)

    missing_title = sample_recipe()
    del missing_title["title"]
    assert client.post("/api/recipes", json=missing_title, headers=headers).status_code == 400

    assert create(client, headers, ingredients="flour, milk").status_code == 400
    assert create(client, headers, description="").status_code == 400


# === 读取（公开） ===

def test_list_and_get_are_public(client):
    headers = signup_and_login(client)
    first = create(client, headers).json()
    create(client, headers, title="Omelette")

    listing = client.get("/api/recipes")
    assert listing.status_code == 200
    assert [r["title"] for r in listing.json()] == ["Pancakes", "Omelette"]

    single = client.get(f"/api/recipes/{first['id']}")
    assert single.status_code == 200
    assert single.json() == first


def test_list_empty(client):
    response = client.get("/api/recipes")
    assert response.status_code == 200
    assert response.json() == []


def test_get_malformed_and_missing_id(client):
    malformed = client.get("/api/recipes/not-an-id")
    assert malformed.status_code == 400
    assert malformed.json()["message"] == "Invalid recipe id"

    missing = client.get(f"/api/recipes/{uuid.uuid4()}")
    assert missing.status_code == 404
    assert missing.json()["message"] == "Recipe not found"


# === 更新 ===

def test_owner_can_patch_subset_of_fields(client):
    headers = signup_and_login(client)
    recipe = create(client, headers).json()

    response = client.patch(
        f"/api/recipes/{recipe['id']}",
        json={"title": "Crepes", "ingredients": ["flour", "milk"]},
        headers=headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Crepes"
    assert body["ingredients"] == ["flour", "milk"]
    assert body["description"] == recipe["description"]
    assert body["owner_id"] == recipe["owner_id"]


def test_patch_cannot_change_owner(client):
    headers = signup_and_login(client)
    recipe = create(client, headers).json()

    # 只有不可修改的字段，相当于没有可更新字段
    response = client.patch(
        f"/api/recipes/{recipe['id']}",
        json={"owner_id": str(uuid.uuid4())},
        headers=headers,
    )
    assert response.status_code == 400
    assert response.json()["message"] == "No valid fields to update"


def test_patch_validation(client):
    headers = signup_and_login(client)
    recipe = create(client, headers).json()
    url = f"/api/recipes/{recipe['id']}"

    assert client.patch(url, json={}, headers=headers).status_code == 400
    assert client.patch(url, json={"ingredients": "flour"}, headers=headers).status_code == 400
    assert client.patch(url, json={"title": None}, headers=headers).status_code == 400

    malformed = client.patch("/api/recipes/xyz", json={"title": "New"}, headers=headers)
    assert malformed.status_code == 400
    assert malformed.json()["message"] == "Invalid recipe id"


def test_non_owner_patch_looks_like_missing(client):
    alice = signup_and_login(client, username="alice")
    bob = signup_and_login(client, username="bob")
    recipe = create(client, alice).json()

    not_owner = client.patch(f"/api/recipes/{recipe['id']}", json={"title": "Hijacked"}, headers=bob)
    missing = client.patch(f"/api/recipes/{uuid.uuid4()}", json={"title": "Hijacked"}, headers=bob)

    assert not_owner.status_code == missing.status_code == 404
    assert not_owner.json() == missing.json()
    assert client.get(f"/api/recipes/{recipe['id']}").json()["title"] == "Pancakes"


def test_patch_requires_token(client):
    headers = signup_and_login(client)
    recipe = create(client, headers).json()
    assert client.patch(f"/api/recipes/{recipe['id']}", json={"title": "x"}).status_code == 401


# === 删除 ===

def test_owner_can_delete(client):
    headers = signup_and_login(client)
    recipe = create(client, headers).json()

    response = client.delete(f"/api/recipes/{recipe['id']}", headers=headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Recipe deleted"}
    assert client.get(f"/api/recipes/{recipe['id']}").status_code == 404

    again = client.delete(f"/api/recipes/{recipe['id']}", headers=headers)
    assert again.status_code == 404


def test_non_owner_delete_looks_like_missing(client):
    alice = signup_and_login(client, username="alice")
    bob = signup_and_login(client, username="bob")
    recipe = create(client, alice).json()

    not_owner = client.delete(f"/api/recipes/{recipe['id']}", headers=bob)
    missing = client.delete(f"/api/recipes/{uuid.uuid4()}", headers=bob)

    assert not_owner.status_code == missing.status_code == 404
    assert not_owner.json() == missing.json()
    assert client.get(f"/api/recipes/{recipe['id']}").status_code == 200


def test_delete_malformed_id_is_not_found(client):
    headers = signup_and_login(client)
    response = client.delete("/api/recipes/not-an-id", headers=headers)
    assert response.status_code == 404


def test_delete_requires_token(client):
    response = client.delete(f"/api/recipes/{uuid.uuid4()}")
    assert response.status_code == 401


# === 端到端 ===

def test_recipe_lifecycle_end_to_end(client):
    headers = signup_and_login(client)
    assert client.get("/api/token-test", headers=headers).status_code == 200

    recipe = create(client, headers).json()
    updated = client.patch(
        f"/api/recipes/{recipe['id']}", json={"instructions": "Whisk, rest, fry."}, headers=headers
    ).json()
    assert updated["instructions"] == "Whisk, rest, fry."

    assert client.get(f"/api/recipes/{recipe['id']}").json()["instructions"] == "Whisk, rest, fry."
    assert client.delete(f"/api/recipes/{recipe['id']}", headers=headers).status_code == 200
    assert client.get("/api/recipes").json() == []
