"""
Trip API endpoints - Trip lifecycle, selections and summary retrieval
"""
from datetime import date
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Body, Depends, Query, Response, status
from pydantic import ValidationError

from trip_planner.core.error_handlers import format_validation_errors, summarize_validation_errors
from trip_planner.core.exceptions import NotFoundError, ValidationFailedError
from trip_planner.core.dependencies import get_trip_service
from trip_planner.schemas.base import Envelope
from trip_planner.schemas.trip import (
    TripAccommodationCreate,
    TripAccommodationRead,
    TripAttractionCreate,
    TripAttractionRead,
    TripBookingRequest,
    TripCreate,
    TripRead,
    TripSummaryResponse,
    TripTransportationCreate,
    TripTransportationRead,
    TripTransportationUpdate,
    TripUpdate,
)
from trip_planner.services.trip_service import TripService

router = APIRouter(prefix="/api/trips", tags=["trips"])


@router.get("", response_model=Envelope[List[TripRead]])
async def list_trips(
    user_id: Optional[int] = Query(None, alias="userId"),
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    origin_id: Optional[int] = Query(None, alias="originId"),
    destination_id: Optional[int] = Query(None, alias="destinationId"),
    service: TripService = Depends(get_trip_service),
):
    """
    List trips with optional filters

    - **userId**: Owner filter
    - **startDate**, **endDate**: Keep trips inside this window (both required to apply)
    - **originId**, **destinationId**: Keep trips on this route (both required to apply)
    """
    trips = service.filter_trips(
        user_id=user_id,
        start_date=start_date,
        end_date=end_date,
        origin_id=origin_id,
        destination_id=destination_id,
    )
    if not trips:
        raise NotFoundError("No trips match the given filters")

    return Envelope(status="ok", data=[TripRead.model_validate(t) for t in trips])


@router.post("", response_model=Envelope[TripRead], status_code=status.HTTP_201_CREATED)
async def create_trip(
    payload: Dict[str, Any] = Body(...),
    service: TripService = Depends(get_trip_service),
):
    """
    Create a new trip

    Accepts either a flat trip body or `{"trip": {...}, "accommodations": [...]}`
    where each accommodation is a stay `{location, checkIn, checkOut}`.
    """
    try:
        if "trip" in payload:
            booking = TripBookingRequest.model_validate(payload)
            trip_data, stays = booking.trip, booking.accommodations
        else:
            trip_data, stays = TripCreate.model_validate(payload), None
    except ValidationError as e:
        validation_errors = format_validation_errors(e.errors())
        raise ValidationFailedError(
            summarize_validation_errors(validation_errors),
            details={"validation_errors": validation_errors},
        ) from e

    trip = service.create_trip(trip_data, stays)

    return Envelope(status="ok", data=TripRead.model_validate(trip))


@router.get("/{trip_id}", response_model=Envelope[TripRead])
async def get_trip(
    trip_id: int,
    service: TripService = Depends(get_trip_service),
):
    trip = service.get_trip(trip_id)
    return Envelope(status="ok", data=TripRead.model_validate(trip))


@router.patch("/{trip_id}", response_model=Envelope[TripRead])
async def update_trip(
    trip_id: int,
    trip_data: TripUpdate,
    service: TripService = Depends(get_trip_service),
):
    """
    Update a trip

    All fields optional - only provided fields will be updated
    """
    trip = service.update_trip(trip_id, trip_data)
    return Envelope(status="ok", data=TripRead.model_validate(trip))


@router.get("/{trip_id}/summary", response_model=Envelope[TripSummaryResponse])
async def get_trip_summary(
    trip_id: int,
    service: TripService = Depends(get_trip_service),
):
    """
    Get trip summary with its selections

    Returns trip details plus:
    - Selected accommodations, transportation and attractions
    - Transportation and lodging prices from the catalog
    """
    summary = service.get_trip_summary(trip_id)
    return Envelope(status="ok", data=summary)


# Accommodations

@router.post(
    "/{trip_id}/accommodations",
    response_model=Envelope[TripAccommodationRead],
    status_code=status.HTTP_201_CREATED,
)
async def add_trip_accommodation(
    trip_id: int,
    data: TripAccommodationCreate,
    service: TripService = Depends(get_trip_service),
):
    row = service.add_accommodation(trip_id, data)
    return Envelope(status="ok", data=TripAccommodationRead.model_validate(row))


@router.get("/{trip_id}/accommodations", response_model=Envelope[List[TripAccommodationRead]])
async def list_trip_accommodations(
    trip_id: int,
    service: TripService = Depends(get_trip_service),
):
    rows = service.list_accommodations(trip_id)
    return Envelope(status="ok", data=[TripAccommodationRead.model_validate(r) for r in rows])


@router.delete(
    "/{trip_id}/accommodations/{row_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def remove_trip_accommodation(
    trip_id: int,
    row_id: int,
    service: TripService = Depends(get_trip_service),
):
    service.remove_accommodation(trip_id, row_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Transportation

@router.post(
    "/{trip_id}/transportations",
    response_model=Envelope[TripTransportationRead],
    status_code=status.HTTP_201_CREATED,
)
async def add_trip_transportation(
    trip_id: int,
    data: TripTransportationCreate,
    service: TripService = Depends(get_trip_service),
):
    row = service.add_transportation(trip_id, data)
    return Envelope(status="ok", data=TripTransportationRead.model_validate(row))


@router.get("/{trip_id}/transportations", response_model=Envelope[List[TripTransportationRead]])
async def list_trip_transportations(
    trip_id: int,
    service: TripService = Depends(get_trip_service),
):
    rows = service.list_transportations(trip_id)
    return Envelope(status="ok", data=[TripTransportationRead.model_validate(r) for r in rows])


@router.patch(
    "/{trip_id}/transportations/{row_id}",
    response_model=Envelope[TripTransportationRead],
)
async def update_trip_transportation(
    trip_id: int,
    row_id: int,
    data: TripTransportationUpdate,
    service: TripService = Depends(get_trip_service),
):
    """Swap the selected transportation option"""
    row = service.update_transportation(trip_id, row_id, data)
    return Envelope(status="ok", data=TripTransportationRead.model_validate(row))


# Attractions

@router.post(
    "/{trip_id}/attractions",
    response_model=Envelope[TripAttractionRead],
    status_code=status.HTTP_201_CREATED,
)
async def add_trip_attraction(
    trip_id: int,
    data: TripAttractionCreate,
    service: TripService = Depends(get_trip_service),
):
    row = service.add_attraction(trip_id, data)
    return Envelope(status="ok", data=TripAttractionRead.model_validate(row))


@router.get("/{trip_id}/attractions", response_model=Envelope[List[TripAttractionRead]])
async def list_trip_attractions(
    trip_id: int,
    service: TripService = Depends(get_trip_service),
):
    rows = service.list_attractions(trip_id)
    return Envelope(status="ok", data=[TripAttractionRead.model_validate(r) for r in rows])


@router.delete(
    "/{trip_id}/attractions/{row_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def remove_trip_attraction(
    trip_id: int,
    row_id: int,
    service: TripService = Depends(get_trip_service),
):
    service.remove_attraction(trip_id, row_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
