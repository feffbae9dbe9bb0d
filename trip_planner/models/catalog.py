"""
Reference catalog records held by the in-memory catalog store.

Records are created once (seeding or admin tooling) and never mutated.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from enum import Enum


class LocationType(str, Enum):
    """Role a location plays in the wizard"""
    ORIGIN = "origin"
    DESTINATION = "destination"


@dataclass
class User:
    id: int
    username: str
    password: str


@dataclass
class Location:
    id: int
    name: str
    type: LocationType
    description: Optional[str] = None
    image_url: Optional[str] = None


@dataclass
class TransportationType:
    id: int
    name: str
    icon: str


@dataclass
class TransportationOption:
    """
    A bookable round trip between two locations.

    Outbound timing lives in departure_time/arrival_time; flight options may
    also carry the return leg and baggage allowance.
    """
    id: int
    type_id: int
    provider: str
    origin_id: int
    destination_id: int
    departure_time: str
    arrival_time: str
    duration: str
    price: float
    is_recommended: bool = False
    price_difference: float = 0
    features: List[str] = field(default_factory=list)
    departure_flight_number: Optional[str] = None
    departure_baggage: Optional[str] = None
    return_flight_number: Optional[str] = None
    return_time: Optional[str] = None
    return_arrival_time: Optional[str] = None
    return_baggage: Optional[str] = None


@dataclass
class AccommodationType:
    id: int
    name: str


@dataclass
class Accommodation:
    id: int
    name: str
    location_id: int
    address: str
    type_id: int
    price_per_night: float
    rating: Optional[float] = None
    is_recommended: bool = False
    price_difference: float = 0
    image_url: Optional[str] = None
    features: List[str] = field(default_factory=list)


@dataclass
class Attraction:
    id: int
    name: str
    location_id: int
    description: str
    duration: str
    price: Optional[float] = None
    image_url: Optional[str] = None
    is_recommended: bool = False
