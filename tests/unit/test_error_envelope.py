"""
Error envelope shape for domain, validation and routing errors
"""
from trip_planner.core.error_handlers import ErrorHandler
from trip_planner.core.exceptions import ErrorCode


def _assert_envelope(body):
    assert set(body) >= {"error_code", "message", "details", "request_id", "timestamp"}


def test_not_found_envelope(client):
    r = client.get("/api/locations/999")

    assert r.status_code == 404
    body = r.json()
    _assert_envelope(body)
    assert body["error_code"] == ErrorCode.LOCATION_NOT_FOUND.value
    assert body["message"] == "Location not found"
    assert body["request_id"] == r.headers["X-Request-ID"]


def test_request_validation_is_400(client):
    r = client.get("/api/locations/abc")

    assert r.status_code == 400
    body = r.json()
    _assert_envelope(body)
    assert body["error_code"] == ErrorCode.VALIDATION_ERROR.value
    assert body["message"].startswith("Validation error")
    assert body["details"]["validation_errors"]


def test_body_validation_is_400(client):
    r = client.post("/api/trips", json={"origin_id": 2})

    assert r.status_code == 400
    fields = {e["field"] for e in r.json()["details"]["validation_errors"]}
    assert "destination_id" in fields


def test_unknown_route_is_404(client):
    r = client.get("/api/unknown")

    assert r.status_code == 404
    assert r.json()["error_code"] == ErrorCode.NOT_FOUND.value


def test_incoming_request_id_is_echoed(client):
    r = client.get("/api/locations/999", headers={"X-Request-ID": "req-123"})

    assert r.headers["X-Request-ID"] == "req-123"
    assert r.json()["request_id"] == "req-123"


def test_error_statistics_count_per_code():
    handler = ErrorHandler()

    handler._track_error("TRIP_NOT_FOUND")
    handler._track_error("TRIP_NOT_FOUND")
    handler._track_error("VALIDATION_ERROR")

    stats = handler.get_error_statistics()
    assert stats["error_counts"] == {"TRIP_NOT_FOUND": 2, "VALIDATION_ERROR": 1}
    assert stats["total_errors"] == 3


def test_trip_body_validation_keeps_request_id(client):
    r = client.post(
        "/api/trips",
        json={"trip": {"origin_id": 2, "destination_id": 4}, "accommodations": []},
        headers={"X-Request-ID": "req-456"},
    )

    assert r.status_code == 400
    body = r.json()
    assert body["error_code"] == ErrorCode.VALIDATION_ERROR.value
    assert body["request_id"] == "req-456"
    fields = {e["field"] for e in body["details"]["validation_errors"]}
    assert "trip.start_date" in fields


def test_malformed_stored_record_is_server_error(app):
    from fastapi.testclient import TestClient

    app.state.trip_store.get_trip(1).adults = "many"

    with TestClient(app, raise_server_exceptions=False) as test_client:
        r = test_client.get("/api/trips/1")

    assert r.status_code == 500
    assert r.json()["error_code"] == ErrorCode.INTERNAL_SERVER_ERROR.value
