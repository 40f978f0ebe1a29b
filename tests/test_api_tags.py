# tests/test_api_tags.py

from fastapi.testclient import TestClient

from todo_list_api.app.api.deps import get_tag_service
from todo_list_api.app.main import create_app


def _create(client, name):
    response = client.post("/api/tags", json={"name": name})
    assert response.status_code == 201, response.text
    return response.json()


def test_create_tag_returns_201_with_location(client):
    response = client.post("/api/tags", json={"name": "Urgent"})

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Urgent"
    assert response.headers["location"].endswith(f"/api/tags/{body['id']}")


def test_create_duplicate_tag_returns_400(client):
    _create(client, "Urgent")

    response = client.post("/api/tags", json={"name": "Urgent"})

    assert response.status_code == 400
    assert "already in use" in response.json()["detail"]
    assert len(client.get("/api/tags").json()) == 1


def test_get_tag_by_id(client):
    tag = _create(client, "Home")

    response = client.get(f"/api/tags/{tag['id']}")

    assert response.status_code == 200
    assert response.json() == {"id": tag["id"], "name": "Home"}


def test_get_missing_tag_returns_404(client):
    response = client.get("/api/tags/99")

    assert response.status_code == 404
    assert response.json()["detail"] == "Tag with ID 99 not found."


def test_list_tags_in_creation_order(client):
    for name in ("a", "b", "c"):
        _create(client, name)

    assert [t["name"] for t in client.get("/api/tags").json()] == ["a", "b", "c"]


def test_rename_tag_returns_204(client):
    tag = _create(client, "Old")

    response = client.put(f"/api/tags/{tag['id']}", json={"name": "New"})

    assert response.status_code == 204
    assert client.get(f"/api/tags/{tag['id']}").json()["name"] == "New"


def test_rename_onto_taken_name_returns_400(client):
    first = _create(client, "a")
    _create(client, "b")

    response = client.put(f"/api/tags/{first['id']}", json={"name": "b"})

    assert response.status_code == 400
    assert client.get(f"/api/tags/{first['id']}").json()["name"] == "a"


def test_rename_missing_tag_returns_404(client):
    response = client.put("/api/tags/5", json={"name": "x"})

    assert response.status_code == 404


def test_delete_tag(client):
    tag = _create(client, "Temp")

    assert client.delete(f"/api/tags/{tag['id']}").status_code == 204
    assert client.get(f"/api/tags/{tag['id']}").status_code == 404


def test_delete_missing_tag_returns_404(client):
    response = client.delete("/api/tags/99")

    assert response.status_code == 404
    assert response.json()["detail"] == "Tag with ID 99 not found."


def test_invalid_payload_returns_400(client):
    assert client.post("/api/tags", json={"name": ""}).status_code == 400
    assert client.post("/api/tags", json={}).status_code == 400
    assert client.get("/api/tags/not-a-number").status_code == 400


class _BrokenTagService:
    async def get_all_tags(self):
        raise RuntimeError("database is on fire")


def test_unexpected_error_returns_generic_500(settings):
    app = create_app(settings)
    app.dependency_overrides[get_tag_service] = lambda: _BrokenTagService()

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/api/tags")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
