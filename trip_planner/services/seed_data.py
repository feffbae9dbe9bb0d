"""Sample catalog and trip data loaded at startup."""
import logging
from datetime import date

from trip_planner.models.catalog import LocationType
from trip_planner.models.trip import TripStatus
from trip_planner.schemas.catalog import (
    AccommodationCreate,
    AccommodationTypeCreate,
    AttractionCreate,
    LocationCreate,
    TransportationOptionCreate,
    TransportationTypeCreate,
)
from trip_planner.schemas.trip import TripAccommodationCreate, TripCreate
from trip_planner.schemas.user import UserCreate
from trip_planner.services.catalog_store import CatalogStore
from trip_planner.services.trip_store import TripStore

logger = logging.getLogger(__name__)

_UNSPLASH = "https://images.unsplash.com/{photo}?auto=format&fit=crop&w=800&h=400"

TRANSPORTATION_TYPES = [
    ("Máy bay", "bxs-plane"),
    ("Tàu hỏa", "bxs-train"),
    ("Xe khách", "bxs-bus"),
    ("Xe riêng", "bxs-car"),
]

LOCATIONS = [
    ("Hà Nội", LocationType.ORIGIN, "Thủ đô của Việt Nam"),
    ("Hồ Chí Minh", LocationType.ORIGIN, "Thành phố lớn nhất Việt Nam"),
    ("Đà Nẵng", LocationType.ORIGIN, "Thành phố biển miền Trung"),
    ("Phú Quốc", LocationType.DESTINATION, "Đảo ngọc của Việt Nam"),
    ("Đà Lạt", LocationType.DESTINATION, "Thành phố mộng mơ"),
    ("Nha Trang", LocationType.DESTINATION, "Thành phố biển nổi tiếng"),
    ("Hạ Long", LocationType.DESTINATION, "Vịnh Hạ Long kỳ quan thiên nhiên"),
]

ACCOMMODATION_TYPES = [
    "Hà Nội", "Hồ Chí Minh", "Phú Quốc", "Đà Nẵng", "Đà Lạt", "Nha Trang", "Hạ Long",
]


def seed_catalog(catalog: CatalogStore, trips: TripStore) -> None:
    """
    Load the sample dataset into empty stores

    Args:
        catalog: Catalog store to populate
        trips: Trip store that receives the sample trip
    """
    types = {
        icon: catalog.create_transportation_type(TransportationTypeCreate(name=name, icon=icon))
        for name, icon in TRANSPORTATION_TYPES
    }
    plane = types["bxs-plane"]

    locations = {
        name: catalog.create_location(
            LocationCreate(name=name, type=kind, description=description, image_url="")
        )
        for name, kind, description in LOCATIONS
    }
    ha_noi = locations["Hà Nội"]
    ho_chi_minh = locations["Hồ Chí Minh"]
    phu_quoc = locations["Phú Quốc"]

    # Round-trip fares; return leg details shown at the lodging step
    flights = [
        dict(
            provider="Vietnam Airlines", origin_id=ho_chi_minh.id,
            departure_time="08:00", arrival_time="09:15", duration="1h 15m",
            departure_flight_number="VN123", departure_baggage="20kg",
            return_flight_number="VN456", return_time="17:30",
            return_arrival_time="18:45", return_baggage="20kg",
            price=2800000, is_recommended=True, price_difference=0,
            features=["Bay thẳng", "Hành lý 20kg"],
        ),
        dict(
            provider="Vietjet Air", origin_id=ho_chi_minh.id,
            departure_time="10:30", arrival_time="11:45", duration="1h 15m",
            departure_flight_number="VJ789", departure_baggage="7kg",
            return_flight_number="VJ790", return_time="19:00",
            return_arrival_time="20:15", return_baggage="7kg",
            price=1990000, price_difference=-810000,
            features=["Bay thẳng"],
        ),
        dict(
            provider="Bamboo Airways", origin_id=ho_chi_minh.id,
            departure_time="14:00", arrival_time="15:15", duration="1h 15m",
            departure_flight_number="QH123", departure_baggage="30kg (Thương gia)",
            return_flight_number="QH124", return_time="21:00",
            return_arrival_time="22:15", return_baggage="30kg (Thương gia)",
            price=3500000, price_difference=700000,
            features=["Bay thẳng", "Hạng thương gia"],
        ),
        dict(
            provider="Vietjet Air", origin_id=ha_noi.id,
            departure_time="12:30", arrival_time="14:40", duration="2h 10m",
            price=2000000, price_difference=-500000,
            features=["Bay thẳng", "Hành lý 7kg"],
        ),
        dict(
            provider="Bamboo Airways", origin_id=ha_noi.id,
            departure_time="15:45", arrival_time="18:05", duration="2h 20m",
            price=3700000, price_difference=1200000,
            features=["Bay thẳng", "Hạng thương gia", "Hành lý 30kg"],
        ),
    ]
    for flight in flights:
        catalog.create_transportation_option(
            TransportationOptionCreate(type_id=plane.id, destination_id=phu_quoc.id, **flight)
        )

    accommodation_types = {
        name: catalog.create_accommodation_type(AccommodationTypeCreate(name=name))
        for name in ACCOMMODATION_TYPES
    }
    resort_type = accommodation_types["Phú Quốc"]

    resorts = [
        dict(
            name="Vinpearl Resort & Spa", address="Bãi Dài, Phú Quốc",
            rating=5.0, price_per_night=2000000, is_recommended=True, price_difference=0,
            image_url=_UNSPLASH.format(photo="photo-1571003123894-1f0594d2b5d9"),
            features=["Bãi biển", "Hồ bơi", "Spa", "Phòng gia đình"],
        ),
        dict(
            name="Novotel Phú Quốc Resort", address="Dương Đông, Phú Quốc",
            rating=4.7, price_per_night=1625000, price_difference=-375000,
            image_url=_UNSPLASH.format(photo="photo-1520250497591-112f2f40a3f4"),
            features=["Bãi biển", "Hồ bơi", "Quầy bar"],
        ),
        dict(
            name="Fusion Resort Phu Quoc", address="Vung Bau, Phú Quốc",
            rating=4.8, price_per_night=4500000, price_difference=2500000,
            image_url=_UNSPLASH.format(photo="photo-1582719478250-c89cae4dc85b"),
            features=["Bãi biển riêng", "Spa cao cấp", "Hồ bơi vô cực", "Nhà hàng 5 sao"],
        ),
        dict(
            name="Nam Nghi Resort", address="Mong Tay, Phú Quốc",
            rating=4.5, price_per_night=1500000, price_difference=-500000,
            image_url=_UNSPLASH.format(photo="photo-1520250497591-112f2f40a3f4"),
            features=["Bãi biển", "Hồ bơi", "Nhà hàng", "Bar"],
        ),
    ]
    for resort in resorts:
        catalog.create_accommodation(
            AccommodationCreate(location_id=phu_quoc.id, type_id=resort_type.id, **resort)
        )

    attractions = [
        ("Vinpearl Safari", "Vườn thú bán hoang dã đầu tiên tại Việt Nam", 650000, "3h", True),
        ("Bãi Sao", "Một trong những bãi biển đẹp nhất Phú Quốc", 50000, "4h", True),
        ("Cáp treo Hòn Thơm", "Cáp treo vượt biển dài nhất thế giới", 500000, "2h", False),
    ]
    for name, description, price, duration, recommended in attractions:
        catalog.create_attraction(AttractionCreate(
            name=name,
            location_id=phu_quoc.id,
            description=description,
            price=price,
            duration=duration,
            image_url="",
            is_recommended=recommended,
        ))

    user = catalog.create_user(UserCreate(username="traveler", password="traveler"))

    sample_trip = trips.create_trip(TripCreate(
        user_id=user.id,
        name="Chuyến đi Phú Quốc",
        origin_id=ho_chi_minh.id,
        destination_id=phu_quoc.id,
        transportation_type_id=plane.id,
        start_date=date(2025, 4, 1),
        end_date=date(2025, 4, 5),
        adults=2,
        total_price=0,
        status=TripStatus.PLANNING,
    ))
    trips.add_trip_accommodation(sample_trip.id, TripAccommodationCreate(
        location_id=phu_quoc.id,
        check_in_date=date(2025, 4, 1),
        check_out_date=date(2025, 4, 5),
    ))

    logger.info("Catalog seeded", extra={"counts": catalog.counts(), "trips": trips.trip_count()})
