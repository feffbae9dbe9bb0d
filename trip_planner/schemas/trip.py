"""
Trip schemas for API requests/responses
"""
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from datetime import date, datetime
from typing import List, Optional

from trip_planner.models.trip import TripStatus, TimeSlot


class TripCreate(BaseModel):
    """Schema for creating a new trip"""
    user_id: Optional[int] = None
    name: Optional[str] = Field(None, max_length=255)
    origin_id: int
    destination_id: int
    transportation_type_id: Optional[int] = None
    start_date: date
    end_date: date
    adults: int = Field(..., ge=1, le=50)
    children: int = Field(0, ge=0, le=50)
    total_price: Optional[float] = Field(0, ge=0)
    status: TripStatus = TripStatus.DRAFT

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class TripUpdate(BaseModel):
    """Schema for updating a trip; only provided fields are applied"""
    user_id: Optional[int] = None
    name: Optional[str] = Field(None, max_length=255)
    origin_id: Optional[int] = None
    destination_id: Optional[int] = None
    transportation_type_id: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    adults: Optional[int] = Field(None, ge=1, le=50)
    children: Optional[int] = Field(None, ge=0, le=50)
    total_price: Optional[float] = Field(None, ge=0)
    status: Optional[TripStatus] = None

    @model_validator(mode="after")
    def check_dates(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class TripRead(BaseModel):
    """Schema for trip read response"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: Optional[int]
    name: Optional[str]
    origin_id: int
    destination_id: int
    transportation_type_id: Optional[int]
    start_date: date
    end_date: date
    adults: int
    children: int
    total_price: Optional[float]
    status: TripStatus
    created_at: datetime


class TripAccommodationCreate(BaseModel):
    """
    A stay within the trip.

    Accepts both the snake_case field names and the short camelCase names the
    wizard sends when bundling stays with a new trip.
    """
    accommodation_id: Optional[int] = None
    location_id: int = Field(..., validation_alias=AliasChoices("location_id", "location"))
    check_in_date: date = Field(
        ..., validation_alias=AliasChoices("check_in_date", "checkIn", "check_in")
    )
    check_out_date: date = Field(
        ..., validation_alias=AliasChoices("check_out_date", "checkOut", "check_out")
    )

    @model_validator(mode="after")
    def check_dates(self):
        if self.check_out_date <= self.check_in_date:
            raise ValueError("check_out_date must be after check_in_date")
        return self


class TripAccommodationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    trip_id: int
    accommodation_id: Optional[int]
    location_id: int
    check_in_date: date
    check_out_date: date


class TripTransportationCreate(BaseModel):
    transportation_option_id: int


class TripTransportationUpdate(BaseModel):
    transportation_option_id: Optional[int] = None


class TripTransportationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    trip_id: int
    transportation_option_id: int


class TripAttractionCreate(BaseModel):
    attraction_id: int
    day: int = Field(..., ge=1)
    time_slot: Optional[TimeSlot] = None


class TripAttractionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    trip_id: int
    attraction_id: int
    day: int
    time_slot: Optional[TimeSlot]


class TripBookingRequest(BaseModel):
    """Trip plus the stays planned for it, created together"""
    trip: TripCreate
    accommodations: List[TripAccommodationCreate] = Field(default_factory=list)


class TripPriceBreakdown(BaseModel):
    """Server-side prices derived from the selected catalog entries"""
    transportation: float = 0
    accommodation: float = 0
    base_price: float = 0
    nights: int = 0


class TripSummaryResponse(BaseModel):
    """Schema for trip summary with its selections and derived prices"""
    trip: TripRead
    accommodations: List[TripAccommodationRead] = []
    transportations: List[TripTransportationRead] = []
    attractions: List[TripAttractionRead] = []
    attraction_count: int = 0
    price_breakdown: TripPriceBreakdown
