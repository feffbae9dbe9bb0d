"""
Integration tests for catalog endpoints
"""


def test_list_locations(client):
    r = client.get("/api/locations")

    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert len(body["data"]) == 7


def test_list_locations_by_type(client):
    origins = client.get("/api/locations", params={"type": "origin"}).json()["data"]
    destinations = client.get("/api/locations", params={"type": "destination"}).json()["data"]

    assert [loc["name"] for loc in origins] == ["Hà Nội", "Hồ Chí Minh", "Đà Nẵng"]
    assert {loc["type"] for loc in destinations} == {"destination"}
    assert len(destinations) == 4


def test_invalid_location_type_is_400(client):
    assert client.get("/api/locations", params={"type": "stopover"}).status_code == 400


def test_get_location(client):
    r = client.get("/api/locations/4")

    assert r.status_code == 200
    assert r.json()["data"]["name"] == "Phú Quốc"


def test_transportation_types(client):
    data = client.get("/api/transportation-types").json()["data"]

    assert [t["icon"] for t in data] == ["bxs-plane", "bxs-train", "bxs-bus", "bxs-car"]


def test_transportation_options_require_both_ids(client):
    r = client.get("/api/transportation-options", params={"originId": 2})

    assert r.status_code == 400
    body = r.json()
    assert body["message"] == "Origin and destination IDs are required"
    assert body["error_code"] == "MISSING_PARAMETER"


def test_transportation_options_for_route(client):
    r = client.get("/api/transportation-options", params={"originId": 2, "destinationId": 4})

    assert r.status_code == 200
    options = r.json()["data"]
    assert [o["provider"] for o in options] == ["Vietnam Airlines", "Vietjet Air", "Bamboo Airways"]
    assert options[0]["is_recommended"] is True
    assert options[0]["price"] == 2800000


def test_transportation_options_empty_route_is_404(client):
    r = client.get("/api/transportation-options", params={"originId": 3, "destinationId": 5})

    assert r.status_code == 404


def test_accommodation_types(client):
    data = client.get("/api/accommodation-types").json()["data"]

    assert len(data) == 7
    assert data[2]["name"] == "Phú Quốc"


def test_accommodations(client):
    assert client.get("/api/accommodations").status_code == 400
    assert client.get("/api/accommodations", params={"locationId": 5}).status_code == 404

    r = client.get("/api/accommodations", params={"locationId": 4})
    assert r.status_code == 200
    names = [a["name"] for a in r.json()["data"]]
    assert names[0] == "Vinpearl Resort & Spa"
    assert len(names) == 4


def test_attractions(client):
    r = client.get("/api/attractions")
    assert r.status_code == 400
    assert r.json()["message"] == "Location ID is required"

    empty = client.get("/api/attractions", params={"locationId": 5})
    assert empty.status_code == 200
    assert empty.json()["data"] == []

    data = client.get("/api/attractions", params={"locationId": 4}).json()["data"]
    assert [a["price"] for a in data] == [650000, 50000, 500000]


def test_health(client):
    r = client.get("/health")

    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "healthy"
    assert body["catalog"]["locations"] == 7
    assert body["trips"] == 1


def test_health_without_seed(empty_app):
    from fastapi.testclient import TestClient

    with TestClient(empty_app) as test_client:
        body = test_client.get("/health").json()

    assert body["status"] == "degraded"
    assert body["trips"] == 0


def test_root(client):
    r = client.get("/")

    assert r.status_code == 200
    assert r.json()["status"] == "running"


def test_health_reports_app_settings():
    from fastapi.testclient import TestClient

    from trip_planner.config.settings import Environment, Settings
    from trip_planner.main import create_app

    app = create_app(
        Settings(_env_file=None, app_version="2.3.4", environment=Environment.STAGING),
        seed=True,
    )
    with TestClient(app) as test_client:
        root = test_client.get("/").json()
        health = test_client.get("/health").json()

    assert root["version"] == "2.3.4"
    assert health["version"] == "2.3.4"
    assert health["environment"] == "staging"
