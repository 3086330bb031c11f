from fastapi.testclient import TestClient
import pytest

from rpg_platform.rpg_platform.rpg_service.main import app
from rpg_platform.rpg_platform.rpg_service.db import Base, engine

client = TestClient(app)


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


def auth_header_for(username: str, password: str = "Secret123!"):
    client.post("/auth/register", json={"username": username, "password": password})
    token = client.post("/auth/login", json={"username": username, "password": password}).json()["data"]
    return {"Authorization": f"Bearer {token}"}


def test_characters_require_auth():
    assert client.get("/characters").status_code == 401
    assert client.post("/characters", json={"name": "Sam"}).status_code == 401


def test_character_crud():
    h = auth_header_for("owner")

    created = client.post("/characters", headers=h, json={"name": "Sam", "rpg_class": "Cleric"})
    assert created.status_code == 200
    data = created.json()["data"]
    assert len(data) == 1
    assert data[0]["name"] == "Sam"
    assert data[0]["rpg_class"] == "Cleric"
    assert data[0]["hit_points"] == 100
    character_id = data[0]["id"]

    single = client.get(f"/characters/{character_id}", headers=h)
    assert single.status_code == 200
    assert single.json()["data"]["name"] == "Sam"

    updated = client.put(
        "/characters",
        headers=h,
        json={"id": character_id, "name": "Samwise", "strength": 14, "rpg_class": "Knight"},
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["name"] == "Samwise"
    assert updated.json()["data"]["strength"] == 14

    listed = client.get("/characters", headers=h)
    assert [c["name"] for c in listed.json()["data"]] == ["Samwise"]

    deleted = client.delete(f"/characters/{character_id}", headers=h)
    assert deleted.status_code == 200
    assert deleted.json()["data"] == []


def test_missing_character_returns_404():
    h = auth_header_for("owner")

    single = client.get("/characters/42", headers=h)
    assert single.status_code == 404
    assert single.json()["message"] == "Character with Id '42' not Found"

    update = client.put("/characters", headers=h, json={"id": 42, "name": "Ghost"})
    assert update.status_code == 404
    assert "42" in update.json()["message"]

    delete = client.delete("/characters/42", headers=h)
    assert delete.status_code == 404
    assert delete.json()["success"] is False


def test_invalid_rpg_class_rejected():
    h = auth_header_for("owner")
    resp = client.post("/characters", headers=h, json={"name": "Sam", "rpg_class": "Bard"})
    assert resp.status_code == 422


def test_characters_are_scoped_per_user():
    alice = auth_header_for("alice")
    bob = auth_header_for("bob")

    alice_id = client.post("/characters", headers=alice, json={"name": "Aragorn"}).json()["data"][0]["id"]
    client.post("/characters", headers=bob, json={"name": "Boromir"})

    assert [c["name"] for c in client.get("/characters", headers=alice).json()["data"]] == ["Aragorn"]
    assert [c["name"] for c in client.get("/characters", headers=bob).json()["data"]] == ["Boromir"]
    assert client.get(f"/characters/{alice_id}", headers=bob).status_code == 404
    assert client.delete(f"/characters/{alice_id}", headers=bob).status_code == 404
    assert client.get(f"/characters/{alice_id}", headers=alice).status_code == 200
