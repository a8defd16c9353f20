import pytest

pytestmark = pytest.mark.integration


def test_member_crud_cycle(client):
    r = client.post("/members", json={"member_address": "m1", "name": "Alice", "multisig_address": "addr1"})
    assert r.status_code == 201, r.text
    member = r.json()
    assert client.get(f"/members/{member['id']}").json() == member

    r = client.put(f"/members/{member['id']}", json={"name": "Alice B"})
    assert r.status_code == 200
    assert r.json()["name"] == "Alice B"
    assert r.json()["member_address"] == "m1"

    assert client.delete(f"/members/{member['id']}").json() == {"status": "deleted"}
    r = client.get(f"/members/{member['id']}")
    assert r.status_code == 404
    assert r.json() == {"error": "not found"}


def test_members_first_page_of_two(client, member_factory):
    for i in range(5):
        member_factory(f"m{i}", name=f"member {i}")
    r = client.get("/members", params={"page": 1, "page_size": 2})
    assert r.status_code == 200
    assert len(r.json()) == 2


def test_members_second_page_follows_first(client, member_factory):
    for i in range(5):
        member_factory(f"m{i}", name=f"member {i}")
    first = client.get("/members", params={"page": 1, "page_size": 2}).json()
    second = client.get("/members", params={"page": 2, "page_size": 2}).json()
    third = client.get("/members", params={"page": 3, "page_size": 2}).json()
    assert [m["member_address"] for m in first] == ["m0", "m1"]
    assert [m["member_address"] for m in second] == ["m2", "m3"]
    assert [m["member_address"] for m in third] == ["m4"]


def test_members_search_by_name(client, member_factory):
    member_factory("m1", name="Alice")
    member_factory("m2", name="Bob")
    member_factory("m3", name="Malice")
    r = client.get("/members", params={"q": "lice"})
    names = [m["name"] for m in r.json()]
    assert sorted(names) == ["Alice", "Malice"]


def test_members_bad_sort_direction_is_500(client, member_factory):
    member_factory("m1")
    r = client.get("/members", params={"sort": "name:upwards"})
    assert r.status_code == 500
    assert "upwards" in r.json()["error"]


def test_member_update_on_missing_row_ignores_bad_body(client):
    r = client.put("/members/77", content="nope", headers={"content-type": "application/json"})
    assert r.status_code == 404
    assert r.json() == {"error": "not found"}


def test_member_update_bad_field_type_is_400(client, member_factory):
    member = member_factory("m1", name="Alice")
    r = client.put(f"/members/{member['id']}", json={"name": 12})
    assert r.status_code == 400
    assert r.json()["error"].startswith("name:")


def test_member_huge_page_size_falls_back(client, member_factory):
    for i in range(12):
        member_factory(f"m{i}")
    r = client.get("/members", params={"page_size": "99999999999999999999"})
    assert r.status_code == 200
    assert len(r.json()) == 10
