"""
Catalog schemas for API responses and seeding
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from trip_planner.models.catalog import LocationType


class LocationCreate(BaseModel):
    name: str = Field(..., min_length=1)
    type: LocationType
    description: Optional[str] = None
    image_url: Optional[str] = None


class LocationRead(LocationCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int


class TransportationTypeCreate(BaseModel):
    name: str = Field(..., min_length=1)
    icon: str


class TransportationTypeRead(TransportationTypeCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int


class TransportationOptionCreate(BaseModel):
    """Schema for a transportation option; return leg fields apply to flights"""
    type_id: int
    provider: str
    origin_id: int
    destination_id: int
    departure_time: str
    arrival_time: str
    duration: str
    price: float = Field(..., ge=0)
    is_recommended: bool = False
    price_difference: float = 0
    features: List[str] = Field(default_factory=list)
    departure_flight_number: Optional[str] = None
    departure_baggage: Optional[str] = None
    return_flight_number: Optional[str] = None
    return_time: Optional[str] = None
    return_arrival_time: Optional[str] = None
    return_baggage: Optional[str] = None


class TransportationOptionRead(TransportationOptionCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int


class AccommodationTypeCreate(BaseModel):
    name: str = Field(..., min_length=1)


class AccommodationTypeRead(AccommodationTypeCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int


class AccommodationCreate(BaseModel):
    name: str
    location_id: int
    address: str
    type_id: int
    price_per_night: float = Field(..., ge=0)
    rating: Optional[float] = Field(None, ge=0, le=5)
    is_recommended: bool = False
    price_difference: float = 0
    image_url: Optional[str] = None
    features: List[str] = Field(default_factory=list)


class AccommodationRead(AccommodationCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int


class AttractionCreate(BaseModel):
    name: str
    location_id: int
    description: str
    duration: str
    price: Optional[float] = Field(None, ge=0)
    image_url: Optional[str] = None
    is_recommended: bool = False


class AttractionRead(AttractionCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
