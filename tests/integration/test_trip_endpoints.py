"""
Integration tests for trip endpoints
"""
import pytest


@pytest.fixture
def trip_body():
    return {
        "user_id": 1,
        "origin_id": 2,
        "destination_id": 4,
        "start_date": "2025-05-10",
        "end_date": "2025-05-13",
        "adults": 2,
        "children": 1,
    }


@pytest.fixture
def created_trip(client, trip_body):
    r = client.post("/api/trips", json=trip_body)
    assert r.status_code == 201
    return r.json()["data"]


def test_create_flat_trip(created_trip):
    assert created_trip["id"] == 2
    assert created_trip["status"] == "draft"
    assert created_trip["total_price"] == 0


def test_create_trip_with_stays(client, trip_body):
    body = {
        "trip": {**trip_body, "status": "planning"},
        "accommodations": [
            {"location": 4, "checkIn": "2025-05-10", "checkOut": "2025-05-13"},
        ],
    }

    r = client.post("/api/trips", json=body)

    assert r.status_code == 201
    trip = r.json()["data"]
    assert trip["status"] == "planning"
    rows = client.get(f"/api/trips/{trip['id']}/accommodations").json()["data"]
    assert len(rows) == 1
    assert rows[0]["location_id"] == 4
    assert rows[0]["accommodation_id"] is None


def test_create_trip_rejects_bad_dates(client, trip_body):
    trip_body["end_date"] = "2025-05-01"

    assert client.post("/api/trips", json=trip_body).status_code == 400


def test_create_trip_rejects_stay_outside_trip(client, trip_body):
    body = {
        "trip": trip_body,
        "accommodations": [{"location": 4, "checkIn": "2025-05-12", "checkOut": "2025-05-15"}],
    }

    r = client.post("/api/trips", json=body)

    assert r.status_code == 400
    assert r.json()["message"] == "Stay must fall within the trip dates"


def test_create_trip_unknown_location_is_404(client, trip_body):
    trip_body["destination_id"] = 99

    assert client.post("/api/trips", json=trip_body).status_code == 404


def test_list_trips_filters(client, created_trip):
    all_trips = client.get("/api/trips").json()["data"]
    window = client.get(
        "/api/trips", params={"startDate": "2025-05-01", "endDate": "2025-05-31"}
    ).json()["data"]

    assert len(all_trips) == 2
    assert [t["id"] for t in window] == [created_trip["id"]]


def test_list_trips_empty_is_404(client):
    r = client.get("/api/trips", params={"userId": 42})

    assert r.status_code == 404


def test_get_trip(client):
    assert client.get("/api/trips/1").json()["data"]["name"] == "Chuyến đi Phú Quốc"

    r = client.get("/api/trips/999")
    assert r.status_code == 404
    assert r.json()["message"] == "Trip not found"


def test_patch_trip(client, created_trip):
    r = client.patch(
        f"/api/trips/{created_trip['id']}",
        json={"status": "confirmed", "total_price": 12500000},
    )

    assert r.status_code == 200
    trip = r.json()["data"]
    assert trip["status"] == "confirmed"
    assert trip["total_price"] == 12500000
    assert trip["adults"] == 2

    assert client.patch("/api/trips/999", json={"status": "cancelled"}).status_code == 404
    assert client.patch(
        f"/api/trips/{created_trip['id']}", json={"status": "lost"}
    ).status_code == 400


def test_accommodation_rows(client, created_trip):
    trip_id = created_trip["id"]
    row = {
        "accommodation_id": 1,
        "location_id": 4,
        "check_in_date": "2025-05-10",
        "check_out_date": "2025-05-12",
    }

    r = client.post(f"/api/trips/{trip_id}/accommodations", json=row)
    assert r.status_code == 201
    row_id = r.json()["data"]["id"]

    assert client.post("/api/trips/999/accommodations", json=row).status_code == 404
    assert client.post(
        f"/api/trips/{trip_id}/accommodations", json={**row, "accommodation_id": 99}
    ).status_code == 404

    assert client.delete(f"/api/trips/1/accommodations/{row_id}").status_code == 404
    r = client.delete(f"/api/trips/{trip_id}/accommodations/{row_id}")
    assert r.status_code == 204
    assert r.content == b""
    assert client.delete(f"/api/trips/{trip_id}/accommodations/{row_id}").status_code == 404


def test_transportation_rows(client, created_trip):
    trip_id = created_trip["id"]

    r = client.post(f"/api/trips/{trip_id}/transportations", json={"transportation_option_id": 1})
    assert r.status_code == 201
    row_id = r.json()["data"]["id"]

    r = client.patch(
        f"/api/trips/{trip_id}/transportations/{row_id}", json={"transportation_option_id": 2}
    )
    assert r.status_code == 200
    assert r.json()["data"]["transportation_option_id"] == 2

    rows = client.get(f"/api/trips/{trip_id}/transportations").json()["data"]
    assert [row["transportation_option_id"] for row in rows] == [2]

    assert client.post(
        f"/api/trips/{trip_id}/transportations", json={"transportation_option_id": 99}
    ).status_code == 404
    assert client.get("/api/trips/999/transportations").status_code == 404


def test_attraction_rows(client, created_trip):
    trip_id = created_trip["id"]

    r = client.post(
        f"/api/trips/{trip_id}/attractions",
        json={"attraction_id": 1, "day": 2, "time_slot": "afternoon"},
    )
    assert r.status_code == 201
    row = r.json()["data"]
    assert row["time_slot"] == "afternoon"

    assert client.post(
        f"/api/trips/{trip_id}/attractions", json={"attraction_id": 1, "day": 0}
    ).status_code == 400
    assert client.post(
        f"/api/trips/{trip_id}/attractions", json={"attraction_id": 1, "day": 9}
    ).status_code == 400

    assert client.delete(f"/api/trips/{trip_id}/attractions/{row['id']}").status_code == 204
    assert client.get(f"/api/trips/{trip_id}/attractions").json()["data"] == []


def test_trip_summary(client, created_trip):
    trip_id = created_trip["id"]
    client.post(f"/api/trips/{trip_id}/transportations", json={"transportation_option_id": 2})
    client.post(f"/api/trips/{trip_id}/accommodations", json={
        "accommodation_id": 4,
        "location_id": 4,
        "check_in_date": "2025-05-10",
        "check_out_date": "2025-05-13",
    })

    r = client.get(f"/api/trips/{trip_id}/summary")

    assert r.status_code == 200
    summary = r.json()["data"]
    assert summary["price_breakdown"]["transportation"] == 1990000
    assert summary["price_breakdown"]["accommodation"] == 3 * 1500000
    assert summary["price_breakdown"]["base_price"] == 1990000 + 4500000
    assert len(summary["transportations"]) == 1
    assert client.get("/api/trips/999/summary").status_code == 404
