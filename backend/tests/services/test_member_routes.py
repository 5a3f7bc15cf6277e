"""Member Routes — HTTP surface tests for the member operations.

Tests cover:
    - 201 + id on add, 403 for non-admin callers (missing header included)
    - 404 RESOURCE_NOT_FOUND / EMPTY_COLLECTION envelopes
    - 403 wins over 400 on update
    - /check is routed before /{member_id}
"""

from tests.services.board_fixtures import as_caller


async def test_add_member_returns_created_id(client, admin_headers):
    res = await client.post(
        "/api/v1/members", json={"identity": "P1"}, headers=admin_headers,
    )
    assert res.status_code == 201
    assert res.json() == {"id": 1}


async def test_add_member_as_non_admin_is_forbidden(client):
    res = await client.post(
        "/api/v1/members", json={"identity": "P2"}, headers=as_caller("P1"),
    )
    assert res.status_code == 403
    assert res.json()["error"]["code"] == "NOT_AUTHORIZED"


async def test_add_member_without_caller_header_is_forbidden(client):
    res = await client.post("/api/v1/members", json={"identity": "P2"})
    assert res.status_code == 403


async def test_get_member(client, admin_headers):
    await client.post("/api/v1/members", json={"identity": "P1"}, headers=admin_headers)
    res = await client.get("/api/v1/members/1")
    assert res.status_code == 200
    assert res.json() == {"id": 1, "identity": "P1"}


async def test_get_missing_member_is_404(client):
    res = await client.get("/api/v1/members/3")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_get_member_with_non_integer_id_is_400(client):
    res = await client.get("/api/v1/members/abc")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
    assert res.json()["error"]["field"] == "path.member_id"


async def test_list_members_empty_is_404(client):
    res = await client.get("/api/v1/members")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "EMPTY_COLLECTION"
    assert res.json()["error"]["message"] == "No members yet"


async def test_list_members(client, admin_headers):
    for identity in ("P1", "P2"):
        await client.post("/api/v1/members", json={"identity": identity}, headers=admin_headers)
    res = await client.get("/api/v1/members")
    assert res.json() == [{"id": 1, "identity": "P1"}, {"id": 2, "identity": "P2"}]


async def test_update_member(client, admin_headers):
    await client.post("/api/v1/members", json={"identity": "P1"}, headers=admin_headers)
    res = await client.put(
        "/api/v1/members/1", json={"new_identity": "P1b"}, headers=admin_headers,
    )
    assert res.json() == {"id": 1}
    assert (await client.get("/api/v1/members/1")).json()["identity"] == "P1b"


async def test_update_member_with_empty_identity_is_400(client, admin_headers):
    res = await client.put(
        "/api/v1/members/1", json={"new_identity": ""}, headers=admin_headers,
    )
    assert res.status_code == 400
    assert res.json()["error"]["field"] == "new_identity"


async def test_update_member_forbidden_beats_invalid(client):
    res = await client.put(
        "/api/v1/members/1", json={"new_identity": ""}, headers=as_caller("P1"),
    )
    assert res.status_code == 403


async def test_delete_member(client, admin_headers):
    await client.post("/api/v1/members", json={"identity": "P1"}, headers=admin_headers)
    res = await client.delete("/api/v1/members/1", headers=admin_headers)
    assert res.json() == {"message": "Member has been deleted"}
    assert (await client.get("/api/v1/members/1")).status_code == 404


async def test_delete_member_as_non_admin_keeps_member(client, admin_headers):
    await client.post("/api/v1/members", json={"identity": "P1"}, headers=admin_headers)
    res = await client.delete("/api/v1/members/1", headers=as_caller("P1"))
    assert res.status_code == 403
    assert (await client.get("/api/v1/members/1")).status_code == 200


async def test_is_member_check(client, admin_headers):
    await client.post("/api/v1/members", json={"identity": "P1"}, headers=admin_headers)
    res = await client.get("/api/v1/members/check", params={"identity": "P1"})
    assert res.json() == {"identity": "P1", "is_member": True}
    res = await client.get("/api/v1/members/check", params={"identity": "P9"})
    assert res.json()["is_member"] is False


async def test_get_member_with_huge_id_is_404(client):
    res = await client.get("/api/v1/members/99999999999999999999")
    assert res.status_code == 404
