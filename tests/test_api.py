"""Tests for the HTTP endpoints."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from realty_api.app import create_app  # noqa: E402
from realty_api.core import config as core_config  # noqa: E402
from realty_api.db import session as db_session  # noqa: E402
from realty_api.domain.errors import StoreError  # noqa: E402
from realty_api.services.seed_data import SEED_CLIENTS, SEED_PROJECTS  # noqa: E402
from realty_api.services.seeding import fallback_store  # noqa: E402

VALID = {
    "projects": {"name": "Loft", "description": "Open plan staging", "image": "https://img.test/loft.jpg"},
    "clients": {"name": "Ana", "designation": "Investor", "description": "Great", "image": "https://img.test/a.jpg"},
    "contacts": {"fullName": "Ana Lima", "email": "ana@example.com", "phone": "555-0100", "city": "Pune"},
    "subscribers": {"email": "news@example.com"},
}


@pytest.fixture()
def store():
    return fallback_store()


@pytest.fixture()
def client(store):
    with TestClient(create_app(record_store=store)) as c:
        yield c


class FailingStore:
    mode = "full"

    def _fail(self, *args, **kwargs):
        raise StoreError("connection reset")

    list = count = create = delete_by_id = upsert_by_unique_key = _fail


class TestHealth:

    def test_degraded_store_reports_degraded(self, client):
        data = client.get("/api/health").json()
        assert data["ok"] is True
        assert data["mode"] == "degraded"
        assert data["database"] == "disconnected"
        assert data["timestamp"].endswith("Z")

    def test_fallback_lists_are_served(self, client):
        projects = client.get("/api/projects")
        assert projects.status_code == 200
        assert len(projects.json()) == 2
        assert len(client.get("/api/clients").json()) == 1
        assert client.get("/api/contacts").json() == []
        assert client.get("/api/subscribers").json() == []


class TestCreate:

    @pytest.mark.parametrize("collection", ["projects", "clients", "contacts", "subscribers"])
    def test_create_then_list(self, client, collection):
        resp = client.post(f"/api/{collection}", json=VALID[collection])
        assert resp.status_code == 201
        created = resp.json()
        assert created["_id"]
        assert created["createdAt"]

        first = client.get(f"/api/{collection}").json()[0]
        assert first["_id"] == created["_id"]
        for key, value in VALID[collection].items():
            assert first[key] == value

    @pytest.mark.parametrize("collection", ["projects", "clients", "contacts", "subscribers"])
    def test_each_missing_field_is_rejected(self, client, collection):
        before = len(client.get(f"/api/{collection}").json())
        for field in VALID[collection]:
            body = {k: v for k, v in VALID[collection].items() if k != field}
            resp = client.post(f"/api/{collection}", json=body)
            assert resp.status_code == 400
            assert resp.json() == {"message": "Missing fields"}
            blank = {**VALID[collection], field: ""}
            assert client.post(f"/api/{collection}", json=blank).status_code == 400
        assert len(client.get(f"/api/{collection}").json()) == before

    def test_empty_or_non_object_body_is_rejected(self, client):
        assert client.post("/api/projects").status_code == 400
        assert client.post("/api/projects", json=["name"]).status_code == 400
        assert client.post("/api/projects", content=b"{not json", headers={"Content-Type": "application/json"}).status_code == 400

    def test_non_string_values_are_rejected(self, client):
        subscribers = client.post("/api/subscribers", json={"email": False})
        assert subscribers.status_code == 400
        assert subscribers.json() == {"message": "Missing fields"}
        projects = client.post("/api/projects", json={"name": {"a": 1}, "description": True, "image": 0})
        assert projects.status_code == 400
        assert client.get("/api/subscribers").json() == []
        assert len(client.get("/api/projects").json()) == 2

    def test_overlong_subscriber_email_is_rejected(self, client):
        resp = client.post("/api/subscribers", json={"email": "a" * 250 + "@x.com"})
        assert resp.status_code == 400
        assert client.get("/api/subscribers").json() == []

    def test_form_encoded_contact(self, client):
        resp = client.post("/api/contacts", data=VALID["contacts"])
        assert resp.status_code == 201
        assert resp.json()["fullName"] == "Ana Lima"


class TestSubscribers:

    def test_resubscribe_returns_existing_record(self, client):
        first = client.post("/api/subscribers", json={"email": "a@example.com"})
        again = client.post("/api/subscribers", json={"email": "a@example.com"})
        assert first.status_code == 201
        assert again.status_code == 200
        assert again.json()["_id"] == first.json()["_id"]
        assert len(client.get("/api/subscribers").json()) == 1


class TestDeleteProject:

    def test_delete_existing(self, client):
        created = client.post("/api/projects", json=VALID["projects"]).json()
        resp = client.delete(f"/api/projects/{created['_id']}")
        assert resp.status_code == 200
        assert resp.json() == {"message": "Project deleted", "id": created["_id"]}
        ids = [p["_id"] for p in client.get("/api/projects").json()]
        assert ids == ["fallback-1", "fallback-2"]

    def test_delete_unknown_leaves_list_unchanged(self, client):
        before = client.get("/api/projects").json()
        resp = client.delete("/api/projects/does-not-exist")
        assert resp.status_code == 404
        assert resp.json() == {"message": "Project not found"}
        assert client.get("/api/projects").json() == before

    def test_delete_without_id(self, client):
        assert client.delete("/api/projects/").status_code == 400
        assert client.delete("/api/projects/%20").status_code == 400


class TestStoreFailures:

    @pytest.fixture()
    def failing(self):
        with TestClient(create_app(record_store=FailingStore())) as c:
            yield c

    @pytest.mark.parametrize(
        "method,path,message",
        [
            ("get", "/api/projects", "Failed to fetch projects"),
            ("post", "/api/projects", "Failed to create project"),
            ("delete", "/api/projects/abc", "Failed to delete project"),
            ("get", "/api/clients", "Failed to fetch clients"),
            ("post", "/api/clients", "Failed to create client"),
            ("get", "/api/contacts", "Failed to fetch contacts"),
            ("post", "/api/contacts", "Failed to create contact"),
            ("get", "/api/subscribers", "Failed to fetch subscribers"),
            ("post", "/api/subscribers", "Failed to create subscriber"),
        ],
    )
    def test_store_error_becomes_500(self, failing, method, path, message):
        collection = path.split("/")[2]
        kwargs = {"json": VALID[collection]} if method == "post" else {}
        resp = getattr(failing, method)(path, **kwargs)
        assert resp.status_code == 500
        assert resp.json() == {"message": message}

    def test_health_never_fails(self, failing):
        assert failing.get("/api/health").json()["mode"] == "full"


class TestPersistentMode:

    @pytest.fixture()
    def sql_client(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'site.db'}")
        core_config.get_settings.cache_clear()
        db_session.get_engine.cache_clear()
        db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]
        with TestClient(create_app()) as c:
            yield c
        db_session.get_engine().dispose()
        core_config.get_settings.cache_clear()
        db_session.get_engine.cache_clear()
        db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]

    def test_full_mode_serves_seeded_records(self, sql_client):
        assert sql_client.get("/api/health").json()["mode"] == "full"
        assert len(sql_client.get("/api/projects").json()) == 5
        assert len(sql_client.get("/api/clients").json()) == 5

    def test_seeded_records_list_in_seed_order(self, sql_client):
        projects = [(p["name"], p["description"]) for p in sql_client.get("/api/projects").json()]
        clients = [c["name"] for c in sql_client.get("/api/clients").json()]
        assert projects == [(p["name"], p["description"]) for p in SEED_PROJECTS]
        assert clients == [c["name"] for c in SEED_CLIENTS]

    def test_long_text_values_are_stored(self, sql_client):
        body = {**VALID["contacts"], "fullName": "N" * 400, "city": "C" * 300, "phone": "5" * 100}
        resp = sql_client.post("/api/contacts", json=body)
        assert resp.status_code == 201
        assert sql_client.get("/api/contacts").json()[0]["fullName"] == "N" * 400

    def test_full_mode_crud(self, sql_client):
        created = sql_client.post("/api/projects", json=VALID["projects"])
        assert created.status_code == 201
        project_id = created.json()["_id"]
        assert sql_client.get("/api/projects").json()[0]["_id"] == project_id
        assert sql_client.delete(f"/api/projects/{project_id}").json()["id"] == project_id
        assert len(sql_client.get("/api/projects").json()) == 5

        first = sql_client.post("/api/subscribers", json={"email": "a@example.com"})
        again = sql_client.post("/api/subscribers", json={"email": "a@example.com"})
        assert (first.status_code, again.status_code) == (201, 200)
        assert again.json()["_id"] == first.json()["_id"]


def test_unreachable_database_starts_degraded(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'nope' / 'site.db'}")
    monkeypatch.delenv("REQUIRE_DATABASE", raising=False)
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]
    try:
        with TestClient(create_app()) as c:
            assert c.get("/api/health").json()["mode"] == "degraded"
            assert len(c.get("/api/projects").json()) == 2
            assert len(c.get("/api/clients").json()) == 1
    finally:
        core_config.get_settings.cache_clear()
        db_session.get_engine.cache_clear()
        db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


def test_cors_allows_dev_frontend(client):
    resp = client.options(
        "/api/projects",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "POST"},
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "http://localhost:5173"
