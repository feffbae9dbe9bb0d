"""
Trip Store - In-memory trips and their selected accommodations,
transportation and attractions
"""
import dataclasses
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from trip_planner.models.trip import (
    Trip,
    TripAccommodation,
    TripAttraction,
    TripTransportation,
)
from trip_planner.schemas.trip import (
    TripAccommodationCreate,
    TripAttractionCreate,
    TripCreate,
    TripTransportationCreate,
)

logger = logging.getLogger(__name__)


class TripStore:
    """
    Volatile storage for trip aggregates.

    Only trips and trip transportations are ever modified in place. Trip
    accommodation and attraction rows can be hard deleted; trips cannot.
    """

    def __init__(self):
        self._trips: Dict[int, Trip] = {}
        self._accommodations: Dict[int, TripAccommodation] = {}
        self._transportations: Dict[int, TripTransportation] = {}
        self._attractions: Dict[int, TripAttraction] = {}
        self._next_ids: Dict[str, int] = {}

    def _allocate_id(self, kind: str) -> int:
        next_id = self._next_ids.get(kind, 1)
        self._next_ids[kind] = next_id + 1
        return next_id

    def trip_count(self) -> int:
        return len(self._trips)

    # Trips

    def list_trips(self, user_id: Optional[int] = None) -> List[Trip]:
        """
        List trips in creation order

        Args:
            user_id: Only trips owned by this user when given

        Returns:
            List of trips
        """
        trips = list(self._trips.values())
        if user_id is None:
            return trips
        return [trip for trip in trips if trip.user_id == user_id]

    def get_trip(self, trip_id: int) -> Optional[Trip]:
        return self._trips.get(trip_id)

    def create_trip(self, data: TripCreate) -> Trip:
        trip = Trip(
            id=self._allocate_id("trip"),
            created_at=datetime.utcnow(),
            **data.model_dump(),
        )
        self._trips[trip.id] = trip
        logger.info(
            f"Created trip {trip.id}",
            extra={"trip_id": trip.id, "status": trip.status.value},
        )
        return trip

    def update_trip(self, trip_id: int, **changes: Any) -> Optional[Trip]:
        """
        Merge changes into a trip

        Args:
            trip_id: Trip ID
            **changes: Field values to overwrite

        Returns:
            Updated trip or None if it does not exist
        """
        trip = self._trips.get(trip_id)
        if trip is None:
            return None

        updated = dataclasses.replace(trip, **changes)
        self._trips[trip_id] = updated
        logger.debug(f"Updated trip {trip_id}: {sorted(changes)}")
        return updated

    # Trip accommodations

    def list_trip_accommodations(self, trip_id: int) -> List[TripAccommodation]:
        return [row for row in self._accommodations.values() if row.trip_id == trip_id]

    def get_trip_accommodation(self, row_id: int) -> Optional[TripAccommodation]:
        return self._accommodations.get(row_id)

    def add_trip_accommodation(self, trip_id: int, data: TripAccommodationCreate) -> TripAccommodation:
        row = TripAccommodation(
            id=self._allocate_id("trip_accommodation"),
            trip_id=trip_id,
            **data.model_dump(),
        )
        self._accommodations[row.id] = row
        logger.debug(f"Added accommodation row {row.id} to trip {trip_id}")
        return row

    def remove_trip_accommodation(self, row_id: int) -> bool:
        removed = self._accommodations.pop(row_id, None) is not None
        if removed:
            logger.debug(f"Removed accommodation row {row_id}")
        return removed

    # Trip transportations

    def list_trip_transportations(self, trip_id: int) -> List[TripTransportation]:
        return [row for row in self._transportations.values() if row.trip_id == trip_id]

    def get_trip_transportation(self, row_id: int) -> Optional[TripTransportation]:
        return self._transportations.get(row_id)

    def add_trip_transportation(
        self, trip_id: int, data: TripTransportationCreate
    ) -> TripTransportation:
        row = TripTransportation(
            id=self._allocate_id("trip_transportation"),
            trip_id=trip_id,
            **data.model_dump(),
        )
        self._transportations[row.id] = row
        logger.debug(f"Added transportation row {row.id} to trip {trip_id}")
        return row

    def update_trip_transportation(self, row_id: int, **changes: Any) -> Optional[TripTransportation]:
        row = self._transportations.get(row_id)
        if row is None:
            return None

        updated = dataclasses.replace(row, **changes)
        self._transportations[row_id] = updated
        return updated

    # Trip attractions

    def list_trip_attractions(self, trip_id: int) -> List[TripAttraction]:
        return [row for row in self._attractions.values() if row.trip_id == trip_id]

    def get_trip_attraction(self, row_id: int) -> Optional[TripAttraction]:
        return self._attractions.get(row_id)

    def add_trip_attraction(self, trip_id: int, data: TripAttractionCreate) -> TripAttraction:
        row = TripAttraction(
            id=self._allocate_id("trip_attraction"),
            trip_id=trip_id,
            **data.model_dump(),
        )
        self._attractions[row.id] = row
        logger.debug(f"Added attraction row {row.id} to trip {trip_id}")
        return row

    def remove_trip_attraction(self, row_id: int) -> bool:
        removed = self._attractions.pop(row_id, None) is not None
        if removed:
            logger.debug(f"Removed attraction row {row_id}")
        return removed
