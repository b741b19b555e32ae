"""
HTTP API tests using FastAPI's TestClient.

Each test gets a fresh in-memory storage through the ``client`` fixture.
"""

from fastapi.testclient import TestClient

from devgroups_api.app.core.db import StorageContext
from devgroups_api.app.main import create_app

API = "/api/v1"


def _create_ana(client):
    r = client.post(f"{API}/developers/", json={"name": "Ana", "location": "NY", "ideas": ["ai"]})
    assert r.status_code == 201
    return r.json()


def test_full_scenario(client):
    ana = _create_ana(client)
    assert ana == {"id": 0, "name": "Ana", "location": "NY", "ideas": ["ai"], "groups": []}

    r = client.post(f"{API}/groups/", json={"name": "AI Devs", "idea": "ai"})
    assert r.status_code == 201
    assert r.json() == {"id": 0, "name": "AI Devs", "idea": "ai", "members": []}

    r = client.post(f"{API}/groups/0/members", json={"developer_id": 0})
    assert r.status_code == 204

    assert client.get(f"{API}/developers/0").json()["groups"] == [0]
    assert client.get(f"{API}/groups/0").json()["members"] == [0]

    r = client.post(f"{API}/messages/", json={"sender_id": 0, "group_id": 0, "content": "hi"})
    assert r.status_code == 201
    assert r.json() == {"id": 0, "sender_id": 0, "group_id": 0, "content": "hi"}

    r = client.get(f"{API}/messages/0")
    assert r.status_code == 200
    assert r.json()["content"] == "hi"


def test_idea_mismatch_returns_conflict(client):
    _create_ana(client)
    client.post(f"{API}/groups/", json={"name": "Web Devs", "idea": "web"})

    r = client.post(f"{API}/groups/0/members", json={"developer_id": 0})
    assert r.status_code == 409
    body = r.json()
    assert body["code"] == "IDEA_MISMATCH"
    assert body["detail"] == "Developer 0 cannot join group 0 because their ideas do not match"

    assert client.get(f"{API}/developers/0").json()["groups"] == []
    assert client.get(f"{API}/groups/0").json()["members"] == []


def test_missing_developer_is_404(client):
    r = client.get(f"{API}/developers/999")
    assert r.status_code == 404
    assert r.json() == {"detail": "Developer with id=999 not found", "code": "NOT_FOUND"}


def test_missing_group_and_message_are_404(client):
    assert client.get(f"{API}/groups/1").status_code == 404
    assert client.get(f"{API}/messages/1").status_code == 404


def test_non_member_cannot_send(client):
    _create_ana(client)
    client.post(f"{API}/groups/", json={"name": "AI Devs", "idea": "ai"})

    r = client.post(f"{API}/messages/", json={"sender_id": 0, "group_id": 0, "content": "hi"})
    assert r.status_code == 403
    assert r.json()["code"] == "NOT_MEMBER"
    assert client.get(f"{API}/messages/").json() == []


def test_listings(client):
    _create_ana(client)
    client.post(f"{API}/developers/", json={"name": "Bo", "location": "LA", "ideas": []})
    client.post(f"{API}/groups/", json={"name": "AI Devs", "idea": "ai"})

    developers = client.get(f"{API}/developers/").json()
    assert [d["id"] for d in developers] == [0, 1]
    assert [d["name"] for d in developers] == ["Ana", "Bo"]
    assert [g["name"] for g in client.get(f"{API}/groups/").json()] == ["AI Devs"]


def test_negative_id_rejected(client):
    assert client.get(f"{API}/developers/-1").status_code == 422
    r = client.post(f"{API}/messages/", json={"sender_id": -1, "group_id": 0, "content": "x"})
    assert r.status_code == 422


def test_info_reports_counts(client):
    _create_ana(client)
    r = client.get(f"{API}/info/")
    assert r.status_code == 200
    body = r.json()
    assert body["counts"] == {"developers": 1, "groups": 0, "messages": 0}
    assert body["version"]


def test_ids_beyond_storable_range_are_rejected(client):
    _create_ana(client)
    client.post(f"{API}/groups/", json={"name": "AI Devs", "idea": "ai"})
    huge = 2**64 - 1

    for path in ("developers", "groups", "messages"):
        r = client.get(f"{API}/{path}/{huge}")
        assert r.status_code == 422

    assert client.post(f"{API}/groups/0/members", json={"developer_id": huge}).status_code == 422
    r = client.post(f"{API}/messages/", json={"sender_id": 0, "group_id": huge, "content": "x"})
    assert r.status_code == 422


def test_app_with_directly_built_storage():
    storage = StorageContext()
    try:
        with TestClient(create_app(storage=storage)) as fresh:
            r = fresh.get(f"{API}/developers/")
            assert r.status_code == 200
            assert r.json() == []
    finally:
        storage.close()
