"""
In-memory record types for the catalog and trip stores.
"""

from .catalog import (
    LocationType,
    User,
    Location,
    TransportationType,
    TransportationOption,
    AccommodationType,
    Accommodation,
    Attraction,
)
from .trip import (
    TripStatus,
    TimeSlot,
    Trip,
    TripAccommodation,
    TripTransportation,
    TripAttraction,
)

__all__ = [
    "LocationType",
    "User",
    "Location",
    "TransportationType",
    "TransportationOption",
    "AccommodationType",
    "Accommodation",
    "Attraction",
    "TripStatus",
    "TimeSlot",
    "Trip",
    "TripAccommodation",
    "TripTransportation",
    "TripAttraction",
]
