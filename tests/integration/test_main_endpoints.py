from fastapi.testclient import TestClient
from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError

import pytest

from squads_service.api.main import app as main_app
from squads_service.db import models
from squads_service.db.database import engine, init_db
from squads_service.db.repositories import multisigs as repo_multisigs

pytestmark = pytest.mark.integration


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_unknown_route_is_json_404(client):
    r = client.get("/treasuries")
    assert r.status_code == 404
    assert r.json() == {"error": "Not Found"}


def test_trailing_slash_is_not_redirected(client):
    r = client.get("/multisigs/", follow_redirects=False)
    assert r.status_code == 404


def test_wrong_method_is_405(client):
    r = client.patch("/multisigs/1", json={})
    assert r.status_code == 405
    assert r.json() == {"error": "Method Not Allowed"}


def test_storage_failure_surfaces_driver_message(client, monkeypatch):
    def _boom(db, params):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(repo_multisigs, "get_multisigs", _boom)
    r = client.get("/multisigs")
    assert r.status_code == 500
    assert r.json() == {"error": "database is locked"}


def test_unhandled_exception_becomes_500(monkeypatch):
    def _explode(db, multisig_id):
        raise RuntimeError("kaboom")

    monkeypatch.setattr(repo_multisigs, "get_multisig", _explode)
    client = TestClient(main_app, raise_server_exceptions=False)
    r = client.get("/multisigs/1")
    assert r.status_code == 500
    assert r.json() == {"error": "internal server error"}
    # The service keeps answering afterwards
    assert client.get("/health").status_code == 200


def test_lifespan_keeps_existing_schema(multisig_factory):
    created = multisig_factory()
    with TestClient(main_app) as client:
        r = client.get(f"/multisigs/{created['id']}")
        assert r.status_code == 200


def test_init_db_creates_missing_tables():
    models.Base.metadata.drop_all(bind=engine)
    created = init_db()
    assert sorted(created) == ["members", "multisigs", "vaults"]
    assert set(inspect(engine).get_table_names()) >= {"members", "multisigs", "vaults"}
    assert init_db() == []


def test_openapi_documents_error_body(client):
    schema = client.get("/openapi.json").json()
    assert "ErrorResponse" in schema["components"]["schemas"]
    get_one = schema["paths"]["/multisigs/{multisig_id}"]["get"]["responses"]
    assert get_one["404"]["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")
