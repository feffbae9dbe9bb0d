"""
Unit tests for the in-memory catalog store
"""
from trip_planner.models.catalog import LocationType
from trip_planner.schemas.catalog import (
    AccommodationCreate,
    AttractionCreate,
    LocationCreate,
    TransportationOptionCreate,
    TransportationTypeCreate,
)
from trip_planner.schemas.user import UserCreate


def _option(origin_id, destination_id, provider="Vietjet Air", price=1000000):
    return TransportationOptionCreate(
        type_id=1,
        provider=provider,
        origin_id=origin_id,
        destination_id=destination_id,
        departure_time="08:00",
        arrival_time="09:15",
        duration="1h 15m",
        price=price,
    )


def test_ids_are_per_kind_and_start_at_one(catalog):
    """Each entity kind counts independently"""
    hanoi = catalog.create_location(LocationCreate(name="Hà Nội", type=LocationType.ORIGIN))
    plane = catalog.create_transportation_type(
        TransportationTypeCreate(name="Máy bay", icon="bxs-plane")
    )
    saigon = catalog.create_location(LocationCreate(name="Hồ Chí Minh", type=LocationType.ORIGIN))

    assert hanoi.id == 1
    assert plane.id == 1
    assert saigon.id == 2


def test_list_locations_filters_by_type(catalog):
    catalog.create_location(LocationCreate(name="Hà Nội", type=LocationType.ORIGIN))
    catalog.create_location(LocationCreate(name="Phú Quốc", type=LocationType.DESTINATION))
    catalog.create_location(LocationCreate(name="Đà Nẵng", type=LocationType.ORIGIN))

    origins = catalog.list_locations(LocationType.ORIGIN)
    destinations = catalog.list_locations(LocationType.DESTINATION)

    assert [loc.name for loc in origins] == ["Hà Nội", "Đà Nẵng"]
    assert [loc.name for loc in destinations] == ["Phú Quốc"]
    assert len(catalog.list_locations()) == 3


def test_get_location_missing_returns_none(catalog):
    assert catalog.get_location(42) is None


def test_transportation_options_match_both_ends(catalog):
    catalog.create_transportation_option(_option(1, 4, provider="A"))
    catalog.create_transportation_option(_option(2, 4, provider="B"))
    catalog.create_transportation_option(_option(1, 5, provider="C"))

    options = catalog.list_transportation_options(1, 4)

    assert [o.provider for o in options] == ["A"]
    assert catalog.list_transportation_options(4, 1) == []


def test_accommodations_and_attractions_by_location(catalog):
    catalog.create_accommodation(AccommodationCreate(
        name="Vinpearl Resort & Spa",
        location_id=4,
        address="Bãi Dài, Phú Quốc",
        type_id=3,
        price_per_night=2000000,
    ))
    catalog.create_attraction(AttractionCreate(
        name="Vinpearl Safari", location_id=4, description="Safari", duration="3h", price=650000,
    ))

    assert [a.name for a in catalog.list_accommodations(4)] == ["Vinpearl Resort & Spa"]
    assert catalog.list_accommodations(5) == []
    assert [a.name for a in catalog.list_attractions(4)] == ["Vinpearl Safari"]
    assert catalog.get_attraction(1).price == 650000


def test_users_lookup_by_username(catalog):
    user = catalog.create_user(UserCreate(username="traveler", password="secret"))

    assert catalog.get_user(user.id) == user
    assert catalog.get_user_by_username("traveler") == user
    assert catalog.get_user_by_username("nobody") is None


def test_seeded_catalog_counts(seeded):
    catalog, trips = seeded

    counts = catalog.counts()

    assert counts["transportation_types"] == 4
    assert counts["locations"] == 7
    assert counts["transportation_options"] == 5
    assert counts["accommodation_types"] == 7
    assert counts["accommodations"] == 4
    assert counts["attractions"] == 3
    assert counts["users"] == 1
    assert trips.trip_count() == 1


def test_seeded_recommendations(seeded):
    catalog, _ = seeded

    options = catalog.list_transportation_options(2, 4)
    recommended = [o.provider for o in options if o.is_recommended]
    resorts = catalog.list_accommodations(4)

    assert len(options) == 3
    assert recommended == ["Vietnam Airlines"]
    assert [r.name for r in resorts if r.is_recommended] == ["Vinpearl Resort & Spa"]
    assert options[0].return_flight_number == "VN456"
