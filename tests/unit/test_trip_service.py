"""
Unit tests for trip service lifecycle, reference checks and summary
"""
from datetime import date

import pytest

from trip_planner.core.exceptions import (
    CatalogEntryNotFoundError,
    LocationNotFoundError,
    TripChildNotFoundError,
    TripNotFoundError,
    ValidationFailedError,
)
from trip_planner.models.trip import TripStatus
from trip_planner.schemas.trip import (
    TripAccommodationCreate,
    TripAttractionCreate,
    TripCreate,
    TripTransportationCreate,
    TripTransportationUpdate,
    TripUpdate,
)


def _trip(**overrides):
    data = dict(
        user_id=1,
        origin_id=2,
        destination_id=4,
        start_date=date(2025, 5, 10),
        end_date=date(2025, 5, 13),
        adults=2,
        children=1,
    )
    data.update(overrides)
    return TripCreate(**data)


def _stay(check_in, check_out, location_id=4, accommodation_id=None):
    return TripAccommodationCreate(
        location_id=location_id,
        accommodation_id=accommodation_id,
        check_in_date=check_in,
        check_out_date=check_out,
    )


def test_create_trip_with_stays(service):
    trip = service.create_trip(
        _trip(status=TripStatus.PLANNING),
        [_stay(date(2025, 5, 10), date(2025, 5, 13))],
    )

    rows = service.list_accommodations(trip.id)

    assert trip.status == TripStatus.PLANNING
    assert len(rows) == 1
    assert rows[0].accommodation_id is None
    assert rows[0].check_out_date == date(2025, 5, 13)


def test_create_trip_rejects_unknown_location(service):
    with pytest.raises(LocationNotFoundError):
        service.create_trip(_trip(destination_id=99))


def test_create_trip_with_invalid_stay_stores_nothing(service):
    before = service.trips.trip_count()

    with pytest.raises(ValidationFailedError):
        service.create_trip(_trip(), [_stay(date(2025, 5, 9), date(2025, 5, 12))])

    assert service.trips.trip_count() == before


def test_filter_trips_by_window_and_route(service):
    service.create_trip(_trip())
    service.create_trip(_trip(origin_id=1, start_date=date(2025, 6, 1), end_date=date(2025, 6, 3)))

    in_may = service.filter_trips(start_date=date(2025, 5, 1), end_date=date(2025, 5, 31))
    from_hanoi = service.filter_trips(origin_id=1, destination_id=4)
    half_window = service.filter_trips(start_date=date(2025, 5, 1))

    assert [t.start_date for t in in_may] == [date(2025, 5, 10)]
    assert [t.origin_id for t in from_hanoi] == [1]
    assert len(half_window) == len(service.filter_trips())


def test_filter_trips_by_user(service):
    service.create_trip(_trip(user_id=7))

    assert [t.user_id for t in service.filter_trips(user_id=7)] == [7]
    assert service.filter_trips(user_id=8) == []


def test_get_missing_trip_raises(service):
    with pytest.raises(TripNotFoundError):
        service.get_trip(999)


def test_update_trip_validates_merged_dates(service):
    trip = service.create_trip(_trip())

    with pytest.raises(ValidationFailedError):
        service.update_trip(trip.id, TripUpdate(end_date=date(2025, 5, 1)))

    updated = service.update_trip(
        trip.id, TripUpdate(status=TripStatus.CONFIRMED, total_price=9000000)
    )
    assert updated.status == TripStatus.CONFIRMED
    assert updated.total_price == 9000000
    assert updated.end_date == date(2025, 5, 13)


def test_update_trip_rejects_unknown_location(service):
    trip = service.create_trip(_trip())

    with pytest.raises(LocationNotFoundError):
        service.update_trip(trip.id, TripUpdate(origin_id=99))


def test_add_accommodation_checks_catalog(service):
    trip = service.create_trip(_trip())

    with pytest.raises(CatalogEntryNotFoundError):
        service.add_accommodation(
            trip.id, _stay(date(2025, 5, 10), date(2025, 5, 12), accommodation_id=99)
        )

    # Accommodation 1 is in Phú Quốc, not Đà Lạt
    with pytest.raises(ValidationFailedError):
        service.add_accommodation(
            trip.id, _stay(date(2025, 5, 10), date(2025, 5, 12), location_id=5, accommodation_id=1)
        )


def test_remove_accommodation_under_wrong_trip(service):
    first = service.create_trip(_trip())
    second = service.create_trip(_trip())
    row = service.add_accommodation(first.id, _stay(date(2025, 5, 10), date(2025, 5, 12)))

    with pytest.raises(TripChildNotFoundError):
        service.remove_accommodation(second.id, row.id)

    service.remove_accommodation(first.id, row.id)
    assert service.list_accommodations(first.id) == []


def test_transportation_must_serve_trip_route(service):
    trip = service.create_trip(_trip())

    # Option 4 flies from Hà Nội
    with pytest.raises(ValidationFailedError):
        service.add_transportation(trip.id, TripTransportationCreate(transportation_option_id=4))

    row = service.add_transportation(trip.id, TripTransportationCreate(transportation_option_id=1))
    updated = service.update_transportation(
        trip.id, row.id, TripTransportationUpdate(transportation_option_id=2)
    )
    assert updated.transportation_option_id == 2


def test_attraction_day_must_fall_in_trip(service):
    trip = service.create_trip(_trip())

    with pytest.raises(ValidationFailedError):
        service.add_attraction(trip.id, TripAttractionCreate(attraction_id=1, day=5))
    with pytest.raises(CatalogEntryNotFoundError):
        service.add_attraction(trip.id, TripAttractionCreate(attraction_id=99, day=1))

    row = service.add_attraction(trip.id, TripAttractionCreate(attraction_id=1, day=4))
    assert row.day == 4


def test_trip_summary_prices_selections(service):
    trip = service.create_trip(_trip())
    service.add_accommodation(
        trip.id, _stay(date(2025, 5, 10), date(2025, 5, 13), accommodation_id=1)
    )
    service.add_transportation(trip.id, TripTransportationCreate(transportation_option_id=1))
    service.add_attraction(trip.id, TripAttractionCreate(attraction_id=2, day=1))

    summary = service.get_trip_summary(trip.id)

    # 2 800 000 flight + 3 nights at 2 000 000
    assert summary.price_breakdown.transportation == 2800000
    assert summary.price_breakdown.accommodation == 6000000
    assert summary.price_breakdown.base_price == 8800000
    assert summary.price_breakdown.nights == 3
    assert summary.attraction_count == 1
    assert summary.trip.id == trip.id


def test_summary_of_seeded_trip_without_selections(service):
    summary = service.get_trip_summary(1)

    assert summary.trip.status == TripStatus.PLANNING
    assert len(summary.accommodations) == 1
    assert summary.price_breakdown.base_price == 0
    assert summary.price_breakdown.nights == 4
