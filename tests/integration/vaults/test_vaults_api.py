import pytest

pytestmark = pytest.mark.integration


def test_vault_crud_cycle(client):
    r = client.post("/vaults", json={"vault_address": "vaddr1", "multisig_address": "addr1"})
    assert r.status_code == 201, r.text
    vault = r.json()
    assert vault["id"] == 1
    assert set(vault) == {"id", "vault_address", "multisig_address", "created_at", "updated_at"}

    assert client.get(f"/vaults/{vault['id']}").json() == vault

    r = client.put(f"/vaults/{vault['id']}", json={"multisig_address": "addr2"})
    assert r.status_code == 200
    assert r.json()["multisig_address"] == "addr2"
    assert r.json()["vault_address"] == "vaddr1"

    r = client.delete(f"/vaults/{vault['id']}")
    assert r.json() == {"status": "deleted"}
    assert client.get(f"/vaults/{vault['id']}").status_code == 404


def test_vault_may_reference_unknown_multisig(client):
    r = client.post("/vaults", json={"vault_address": "v", "multisig_address": "does-not-exist"})
    assert r.status_code == 201


def test_vault_search_is_ignored(client, vault_factory):
    vault_factory("v1")
    vault_factory("v2")
    r = client.get("/vaults", params={"q": "zzz"})
    assert r.status_code == 200
    assert len(r.json()) == 2


def test_vault_list_sort_by_address(client, vault_factory):
    for addr in ["v3", "v1", "v2"]:
        vault_factory(addr)
    r = client.get("/vaults", params={"sort": "vault_address"})
    assert [v["vault_address"] for v in r.json()] == ["v1", "v2", "v3"]


def test_vault_page_size_is_floored_to_one(client, vault_factory):
    for addr in ["v1", "v2", "v3"]:
        vault_factory(addr)
    r = client.get("/vaults", params={"page": 0, "page_size": 0})
    assert r.status_code == 200
    assert [v["vault_address"] for v in r.json()] == ["v1"]


def test_vault_malformed_page_falls_back_to_defaults(client, vault_factory):
    vault_factory("v1")
    r = client.get("/vaults", params={"page": "x", "page_size": "y"})
    assert r.status_code == 200
    assert len(r.json()) == 1


def test_vault_missing_and_bad_body(client):
    assert client.get("/vaults/3").json() == {"error": "not found"}
    assert client.put("/vaults/3", json={}).status_code == 404
    r = client.post("/vaults", json={"vault_address": {"nested": 1}})
    assert r.status_code == 400


def test_vault_update_on_missing_row_ignores_bad_body(client):
    r = client.put("/vaults/77", json={"vault_address": 5})
    assert r.status_code == 404
    assert r.json() == {"error": "not found"}


def test_vault_huge_id_is_not_found(client):
    assert client.get("/vaults/99999999999999999999").status_code == 404
    assert client.delete("/vaults/99999999999999999999").status_code == 404


def test_vault_create_with_null_address(client):
    r = client.post("/vaults", json={"vault_address": "v1", "multisig_address": None})
    assert r.status_code == 201
    assert r.json()["multisig_address"] == ""
