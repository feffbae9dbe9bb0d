"""
Pydantic request/response schemas.
"""

from .base import Envelope
from .catalog import (
    LocationCreate,
    LocationRead,
    TransportationTypeCreate,
    TransportationTypeRead,
    TransportationOptionCreate,
    TransportationOptionRead,
    AccommodationTypeCreate,
    AccommodationTypeRead,
    AccommodationCreate,
    AccommodationRead,
    AttractionCreate,
    AttractionRead,
)
from .trip import (
    TripCreate,
    TripUpdate,
    TripRead,
    TripAccommodationCreate,
    TripAccommodationRead,
    TripTransportationCreate,
    TripTransportationUpdate,
    TripTransportationRead,
    TripAttractionCreate,
    TripAttractionRead,
    TripBookingRequest,
    TripPriceBreakdown,
    TripSummaryResponse,
)
from .booking import ContactInfo, PaymentDetails, PaymentMethod
from .user import UserCreate

__all__ = [
    "Envelope",
    "LocationCreate",
    "LocationRead",
    "TransportationTypeCreate",
    "TransportationTypeRead",
    "TransportationOptionCreate",
    "TransportationOptionRead",
    "AccommodationTypeCreate",
    "AccommodationTypeRead",
    "AccommodationCreate",
    "AccommodationRead",
    "AttractionCreate",
    "AttractionRead",
    "TripCreate",
    "TripUpdate",
    "TripRead",
    "TripAccommodationCreate",
    "TripAccommodationRead",
    "TripTransportationCreate",
    "TripTransportationUpdate",
    "TripTransportationRead",
    "TripAttractionCreate",
    "TripAttractionRead",
    "TripBookingRequest",
    "TripPriceBreakdown",
    "TripSummaryResponse",
    "ContactInfo",
    "PaymentDetails",
    "PaymentMethod",
    "UserCreate",
]
