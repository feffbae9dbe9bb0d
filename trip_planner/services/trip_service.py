"""
Trip Service - Trip lifecycle, reference checks and summary aggregation
"""
import logging
from datetime import date
from typing import List, Optional

from trip_planner.core.exceptions import (
    CatalogEntryNotFoundError,
    LocationNotFoundError,
    TripChildNotFoundError,
    TripNotFoundError,
    ValidationFailedError,
)
from trip_planner.models.trip import (
    Trip,
    TripAccommodation,
    TripAttraction,
    TripTransportation,
)
from trip_planner.schemas.trip import (
    TripAccommodationCreate,
    TripAccommodationRead,
    TripAttractionCreate,
    TripAttractionRead,
    TripCreate,
    TripPriceBreakdown,
    TripRead,
    TripSummaryResponse,
    TripTransportationCreate,
    TripTransportationRead,
    TripTransportationUpdate,
    TripUpdate,
)
from trip_planner.services.catalog_store import CatalogStore
from trip_planner.services.trip_store import TripStore
from trip_planner.wizard.pricing import nights_between, stay_cost

logger = logging.getLogger(__name__)


class TripService:
    """Validates references against the catalog and dispatches to the trip store"""

    def __init__(self, catalog: CatalogStore, trips: TripStore):
        self.catalog = catalog
        self.trips = trips

    def _require_location(self, location_id: int) -> None:
        if self.catalog.get_location(location_id) is None:
            raise LocationNotFoundError(location_id)

    def _check_stay(self, trip: Trip, data: TripAccommodationCreate) -> None:
        self._require_location(data.location_id)

        if data.accommodation_id is not None:
            accommodation = self.catalog.get_accommodation(data.accommodation_id)
            if accommodation is None:
                raise CatalogEntryNotFoundError("accommodation", data.accommodation_id)
            if accommodation.location_id != data.location_id:
                raise ValidationFailedError(
                    "Accommodation is not at the requested location",
                    details={
                        "accommodation_id": accommodation.id,
                        "location_id": data.location_id,
                    },
                )

        if data.check_in_date < trip.start_date or data.check_out_date > trip.end_date:
            raise ValidationFailedError(
                "Stay must fall within the trip dates",
                details={
                    "check_in_date": data.check_in_date.isoformat(),
                    "check_out_date": data.check_out_date.isoformat(),
                    "start_date": trip.start_date.isoformat(),
                    "end_date": trip.end_date.isoformat(),
                },
            )

    def _check_transportation_option(self, trip: Trip, option_id: int) -> None:
        option = self.catalog.get_transportation_option(option_id)
        if option is None:
            raise CatalogEntryNotFoundError("transportation_option", option_id)
        if (option.origin_id, option.destination_id) != (trip.origin_id, trip.destination_id):
            raise ValidationFailedError(
                "Transportation option does not serve this route",
                details={"transportation_option_id": option_id, "trip_id": trip.id},
            )

    # Trips

    def filter_trips(
        self,
        user_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        origin_id: Optional[int] = None,
        destination_id: Optional[int] = None,
    ) -> List[Trip]:
        """
        List trips with optional filters

        Args:
            user_id: Owner filter
            start_date, end_date: When both are given, keep trips lying
                entirely inside the window
            origin_id, destination_id: When both are given, keep trips on
                that route

        Returns:
            Matching trips in creation order
        """
        trips = self.trips.list_trips(user_id)

        if start_date and end_date:
            trips = [
                trip for trip in trips
                if trip.start_date >= start_date and trip.end_date <= end_date
            ]

        if origin_id is not None and destination_id is not None:
            trips = [
                trip for trip in trips
                if trip.origin_id == origin_id and trip.destination_id == destination_id
            ]

        return trips

    def get_trip(self, trip_id: int) -> Trip:
        trip = self.trips.get_trip(trip_id)
        if trip is None:
            raise TripNotFoundError(trip_id)
        return trip

    def create_trip(
        self,
        trip_data: TripCreate,
        stays: Optional[List[TripAccommodationCreate]] = None,
    ) -> Trip:
        """
        Create a trip and, optionally, the stays planned for it

        All references are checked before anything is stored, so a rejected
        request leaves no partial trip behind.
        """
        self._require_location(trip_data.origin_id)
        self._require_location(trip_data.destination_id)

        stays = stays or []
        draft = Trip(id=0, **trip_data.model_dump())
        for stay in stays:
            self._check_stay(draft, stay)

        trip = self.trips.create_trip(trip_data)
        for stay in stays:
            self.trips.add_trip_accommodation(trip.id, stay)

        return trip

    def update_trip(self, trip_id: int, trip_data: TripUpdate) -> Trip:
        trip = self.get_trip(trip_id)

        changes = trip_data.model_dump(exclude_unset=True, exclude_none=True)
        for key in ("origin_id", "destination_id"):
            if key in changes:
                self._require_location(changes[key])

        start_date = changes.get("start_date", trip.start_date)
        end_date = changes.get("end_date", trip.end_date)
        if end_date < start_date:
            raise ValidationFailedError(
                "end_date must not be before start_date",
                details={"start_date": start_date.isoformat(), "end_date": end_date.isoformat()},
            )

        updated = self.trips.update_trip(trip_id, **changes)
        logger.info(
            f"Trip {trip_id} updated",
            extra={"trip_id": trip_id, "fields": sorted(changes)},
        )
        return updated

    # Accommodations

    def list_accommodations(self, trip_id: int) -> List[TripAccommodation]:
        self.get_trip(trip_id)
        return self.trips.list_trip_accommodations(trip_id)

    def add_accommodation(self, trip_id: int, data: TripAccommodationCreate) -> TripAccommodation:
        trip = self.get_trip(trip_id)
        self._check_stay(trip, data)
        return self.trips.add_trip_accommodation(trip_id, data)

    def remove_accommodation(self, trip_id: int, row_id: int) -> None:
        self.get_trip(trip_id)
        row = self.trips.get_trip_accommodation(row_id)
        if row is None or row.trip_id != trip_id:
            raise TripChildNotFoundError("accommodation", row_id, trip_id)
        self.trips.remove_trip_accommodation(row_id)

    # Transportation

    def list_transportations(self, trip_id: int) -> List[TripTransportation]:
        self.get_trip(trip_id)
        return self.trips.list_trip_transportations(trip_id)

    def add_transportation(self, trip_id: int, data: TripTransportationCreate) -> TripTransportation:
        trip = self.get_trip(trip_id)
        self._check_transportation_option(trip, data.transportation_option_id)
        return self.trips.add_trip_transportation(trip_id, data)

    def update_transportation(
        self, trip_id: int, row_id: int, data: TripTransportationUpdate
    ) -> TripTransportation:
        trip = self.get_trip(trip_id)
        row = self.trips.get_trip_transportation(row_id)
        if row is None or row.trip_id != trip_id:
            raise TripChildNotFoundError("transportation", row_id, trip_id)

        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if "transportation_option_id" in changes:
            self._check_transportation_option(trip, changes["transportation_option_id"])
        return self.trips.update_trip_transportation(row_id, **changes)

    # Attractions

    def list_attractions(self, trip_id: int) -> List[TripAttraction]:
        self.get_trip(trip_id)
        return self.trips.list_trip_attractions(trip_id)

    def add_attraction(self, trip_id: int, data: TripAttractionCreate) -> TripAttraction:
        trip = self.get_trip(trip_id)
        if self.catalog.get_attraction(data.attraction_id) is None:
            raise CatalogEntryNotFoundError("attraction", data.attraction_id)
        if data.day > trip.day_count:
            raise ValidationFailedError(
                f"Day {data.day} is outside the {trip.day_count}-day trip",
                details={"day": data.day, "day_count": trip.day_count},
            )
        return self.trips.add_trip_attraction(trip_id, data)

    def remove_attraction(self, trip_id: int, row_id: int) -> None:
        self.get_trip(trip_id)
        row = self.trips.get_trip_attraction(row_id)
        if row is None or row.trip_id != trip_id:
            raise TripChildNotFoundError("attraction", row_id, trip_id)
        self.trips.remove_trip_attraction(row_id)

    # Summary

    def get_trip_summary(self, trip_id: int) -> TripSummaryResponse:
        """
        Get trip with its selections and derived prices

        Transportation and lodging are priced from the catalog; attraction
        prices depend on party details only the wizard holds, so attractions
        are reported by count.
        """
        trip = self.get_trip(trip_id)
        accommodations = self.trips.list_trip_accommodations(trip_id)
        transportations = self.trips.list_trip_transportations(trip_id)
        attractions = self.trips.list_trip_attractions(trip_id)

        transportation_price = 0.0
        for row in transportations:
            option = self.catalog.get_transportation_option(row.transportation_option_id)
            if option is not None:
                transportation_price += float(option.price)

        accommodation_price = 0.0
        nights = 0
        for row in accommodations:
            nights += nights_between(row.check_in_date, row.check_out_date)
            if row.accommodation_id is None:
                continue
            accommodation = self.catalog.get_accommodation(row.accommodation_id)
            if accommodation is not None:
                accommodation_price += stay_cost(
                    accommodation.price_per_night, row.check_in_date, row.check_out_date
                )

        return TripSummaryResponse(
            trip=TripRead.model_validate(trip),
            accommodations=[TripAccommodationRead.model_validate(a) for a in accommodations],
            transportations=[TripTransportationRead.model_validate(t) for t in transportations],
            attractions=[TripAttractionRead.model_validate(a) for a in attractions],
            attraction_count=len(attractions),
            price_breakdown=TripPriceBreakdown(
                transportation=transportation_price,
                accommodation=accommodation_price,
                base_price=transportation_price + accommodation_price,
                nights=nights,
            ),
        )
