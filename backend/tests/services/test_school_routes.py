"""School Routes — HTTP contract for /addSchool and /listSchools.

Invariants:
    - 201 + schoolId on insert, 200 + count + schools on listing
    - 400 envelope for validation failures, 500 envelope for storage failures
    - Every response body carries a success flag
"""

from schoolfinder.api.routes.schools import get_school_repository
from schoolfinder.main import app


LINCOLN = {
    "name": "Lincoln High",
    "address": "1 Main St",
    "latitude": 40.7128,
    "longitude": -74.0060,
}


async def test_add_school_returns_201_with_school_id(client):
    res = await client.post("/addSchool", json=LINCOLN)
    assert res.status_code == 201
    body = res.json()
    assert body["success"] is True
    assert body["message"] == "School added successfully"
    assert isinstance(body["schoolId"], int)
    assert body["schoolId"] > 0


async def test_added_school_listed_at_zero_distance(client):
    created = await client.post("/addSchool", json=LINCOLN)
    res = await client.get(
        "/listSchools", params={"lat": "40.7128", "lon": "-74.0060"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["count"] == 1
    school = body["schools"][0]
    assert school["id"] == created.json()["schoolId"]
    assert school["name"] == "Lincoln High"
    assert school["address"] == "1 Main St"
    assert school["distance"] < 1e-6


async def test_list_schools_nearest_first(client):
    for name, lat in (("Far", 10.0), ("Near", 0.5), ("Mid", 3.0)):
        await client.post(
            "/addSchool",
            json={"name": name, "address": "x", "latitude": lat, "longitude": 0},
        )
    res = await client.get("/listSchools", params={"lat": 0, "lon": 0})
    body = res.json()
    assert [s["name"] for s in body["schools"]] == ["Near", "Mid", "Far"]
    assert body["count"] == 3


async def test_list_schools_empty_store(client):
    res = await client.get("/listSchools", params={"lat": 1, "lon": 1})
    assert res.status_code == 200
    assert res.json() == {"success": True, "count": 0, "schools": []}


async def test_add_school_string_coordinates_accepted(client):
    res = await client.post(
        "/addSchool", json={**LINCOLN, "latitude": "0", "longitude": "0"},
    )
    assert res.status_code == 201


async def test_add_school_missing_field_returns_400(client):
    payload = {k: v for k, v in LINCOLN.items() if k != "address"}
    res = await client.post("/addSchool", json=payload)
    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["error"]["details"] == {"field": "address", "reason": "missing"}

    listing = await client.get("/listSchools", params={"lat": 0, "lon": 0})
    assert listing.json()["count"] == 0


async def test_add_school_non_numeric_latitude_returns_400(client):
    res = await client.post("/addSchool", json={**LINCOLN, "latitude": "abc"})
    assert res.status_code == 400
    assert res.json()["error"]["details"]["reason"] == "not_numeric"


async def test_add_school_out_of_range_returns_400(client):
    res = await client.post("/addSchool", json={**LINCOLN, "latitude": 91})
    assert res.status_code == 400
    assert res.json()["error"]["details"] == {
        "field": "latitude", "reason": "out_of_range",
    }


async def test_add_school_malformed_json_returns_400(client):
    res = await client.post(
        "/addSchool", content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["error"]["details"] == {"field": "body", "reason": "invalid_body"}


async def test_add_school_non_object_body_returns_400(client):
    res = await client.post("/addSchool", json=[1, 2])
    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["error"]["details"] == {"field": "body", "reason": "invalid_body"}
    assert body["error"]["path"] == "/addSchool"


async def test_add_school_empty_body_returns_400(client):
    res = await client.post("/addSchool")
    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["error"]["details"] == {"field": "body", "reason": "missing"}


async def test_list_schools_missing_param_returns_400(client):
    res = await client.get("/listSchools", params={"lat": 1})
    assert res.status_code == 400
    assert res.json()["error"]["details"] == {"field": "lon", "reason": "missing"}


async def test_list_schools_non_numeric_param_returns_400(client):
    res = await client.get("/listSchools", params={"lat": "abc", "lon": 1})
    assert res.status_code == 400
    assert res.json()["error"]["details"]["reason"] == "not_numeric"


async def test_storage_failure_on_insert_returns_500(client, failing_repository):
    app.dependency_overrides[get_school_repository] = lambda: failing_repository
    res = await client.post("/addSchool", json=LINCOLN)
    assert res.status_code == 500
    body = res.json()
    assert body["success"] is False
    assert body["error"]["code"] == "STORAGE_ERROR"


async def test_storage_failure_on_listing_returns_500(client, failing_repository):
    app.dependency_overrides[get_school_repository] = lambda: failing_repository
    res = await client.get("/listSchools", params={"lat": 0, "lon": 0})
    assert res.status_code == 500
    assert res.json()["error"]["details"] == {"operation": "fetch_all"}
