"""
Shared test fixtures.

Under pytest `squads_service.db.database` binds to an in-memory SQLite
database on a StaticPool, so the fixture session and the sessions opened by
request handlers see the same tables. The schema is created fresh for every
test, which also resets autoincrement counters.
"""
import pytest
from fastapi.testclient import TestClient

from squads_service.api.main import app
from squads_service.db import models
from squads_service.db.database import SessionLocal, engine


@pytest.fixture(autouse=True)
def db_session():
    """Create all tables, yield a session, then tear down."""
    models.Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        models.Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def multisig_factory(client):
    def _create(multisig_address: str = "addr1", name: str = "Treasury", description: str = ""):
        r = client.post(
            "/multisigs",
            json={"multisig_address": multisig_address, "name": name, "description": description},
        )
        assert r.status_code == 201, r.text
        return r.json()
    return _create


@pytest.fixture
def vault_factory(client):
    def _create(vault_address: str, multisig_address: str = "addr1"):
        r = client.post("/vaults", json={"vault_address": vault_address, "multisig_address": multisig_address})
        assert r.status_code == 201, r.text
        return r.json()
    return _create


@pytest.fixture
def member_factory(client):
    def _create(member_address: str, name: str = "", multisig_address: str = "addr1"):
        r = client.post(
            "/members",
            json={"member_address": member_address, "name": name, "multisig_address": multisig_address},
        )
        assert r.status_code == 201, r.text
        return r.json()
    return _create
