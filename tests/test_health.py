from fastapi.testclient import TestClient

import routers.health
from main import app


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200 and r.json() == {"ok": True}


def test_health_db(engine, monkeypatch):
    monkeypatch.setattr(routers.health, "engine", engine)
    r = TestClient(app).get("/health/db")
    assert r.status_code == 200 and r.json() == {"ok": True}


def test_health_migrations_basic(engine, monkeypatch):
    monkeypatch.setattr(routers.health, "engine", engine)
    r = TestClient(app).get("/health/migrations")
    assert r.status_code == 200
    b = r.json()
    assert b["code_heads"] == ["hint1_0002"]
    # create_all does not stamp a revision
    assert b["db_version"] is None
    assert b["ok"] is False


def test_health_schema(legacy):
    client, _ = legacy
    r = client.get("/health/schema")
    assert r.status_code == 200
    assert r.json() == {"ok": True, "capabilities": {"supportsHint1": False, "forced": False}}
