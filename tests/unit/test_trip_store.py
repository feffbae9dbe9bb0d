"""
Unit tests for the in-memory trip store
"""
from datetime import date

import pytest

from trip_planner.models.trip import TimeSlot, TripStatus
from trip_planner.schemas.trip import (
    TripAccommodationCreate,
    TripAttractionCreate,
    TripCreate,
    TripTransportationCreate,
)


@pytest.fixture
def trip_data():
    return TripCreate(
        user_id=1,
        origin_id=2,
        destination_id=4,
        start_date=date(2025, 4, 1),
        end_date=date(2025, 4, 5),
        adults=2,
    )


def test_create_trip_assigns_id_and_defaults(trips, trip_data):
    trip = trips.create_trip(trip_data)

    assert trip.id == 1
    assert trip.status == TripStatus.DRAFT
    assert trip.children == 0
    assert trip.created_at is not None
    assert trip.day_count == 5
    assert trips.get_trip(1) == trip


def test_list_trips_by_user(trips, trip_data):
    trips.create_trip(trip_data)
    trips.create_trip(trip_data.model_copy(update={"user_id": 2}))

    assert len(trips.list_trips()) == 2
    assert [t.user_id for t in trips.list_trips(user_id=2)] == [2]


def test_update_trip_merges_fields(trips, trip_data):
    trip = trips.create_trip(trip_data)

    updated = trips.update_trip(trip.id, status=TripStatus.CONFIRMED, total_price=5000000)

    assert updated.status == TripStatus.CONFIRMED
    assert updated.total_price == 5000000
    assert updated.origin_id == trip.origin_id
    assert trips.get_trip(trip.id).status == TripStatus.CONFIRMED


def test_update_missing_trip_returns_none(trips):
    assert trips.update_trip(99, status=TripStatus.CONFIRMED) is None


def test_accommodation_rows_are_scoped_and_deletable(trips, trip_data):
    first = trips.create_trip(trip_data)
    second = trips.create_trip(trip_data)
    stay = TripAccommodationCreate(
        location_id=4, check_in_date=date(2025, 4, 1), check_out_date=date(2025, 4, 3)
    )

    row = trips.add_trip_accommodation(first.id, stay)
    trips.add_trip_accommodation(second.id, stay)

    assert [r.id for r in trips.list_trip_accommodations(first.id)] == [row.id]
    assert trips.remove_trip_accommodation(row.id) is True
    assert trips.remove_trip_accommodation(row.id) is False
    assert trips.list_trip_accommodations(first.id) == []


def test_child_ids_are_never_reused(trips, trip_data):
    trip = trips.create_trip(trip_data)
    row = trips.add_trip_attraction(trip.id, TripAttractionCreate(attraction_id=1, day=1))
    trips.remove_trip_attraction(row.id)

    again = trips.add_trip_attraction(trip.id, TripAttractionCreate(attraction_id=1, day=1))

    assert again.id == row.id + 1


def test_transportation_rows_can_be_updated(trips, trip_data):
    trip = trips.create_trip(trip_data)
    row = trips.add_trip_transportation(trip.id, TripTransportationCreate(transportation_option_id=1))

    updated = trips.update_trip_transportation(row.id, transportation_option_id=2)

    assert updated.transportation_option_id == 2
    assert trips.get_trip_transportation(row.id).transportation_option_id == 2
    assert trips.update_trip_transportation(99, transportation_option_id=2) is None


def test_attraction_time_slot_is_optional(trips, trip_data):
    trip = trips.create_trip(trip_data)

    plain = trips.add_trip_attraction(trip.id, TripAttractionCreate(attraction_id=1, day=2))
    evening = trips.add_trip_attraction(
        trip.id, TripAttractionCreate(attraction_id=2, day=2, time_slot="evening")
    )

    assert plain.time_slot is None
    assert evening.time_slot == TimeSlot.EVENING
