"""
Catalog API endpoints - Locations, transportation, accommodations, attractions
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from trip_planner.core.dependencies import get_catalog_store
from trip_planner.core.exceptions import (
    LocationNotFoundError,
    MissingParameterError,
    NotFoundError,
)
from trip_planner.models.catalog import LocationType
from trip_planner.schemas.base import Envelope
from trip_planner.schemas.catalog import (
    AccommodationRead,
    AccommodationTypeRead,
    AttractionRead,
    LocationRead,
    TransportationOptionRead,
    TransportationTypeRead,
)
from trip_planner.services.catalog_store import CatalogStore

router = APIRouter(prefix="/api", tags=["catalog"])


@router.get("/locations", response_model=Envelope[List[LocationRead]])
async def list_locations(
    type: Optional[LocationType] = Query(None),
    catalog: CatalogStore = Depends(get_catalog_store),
):
    """
    List locations

    - **type**: Optional role filter (origin, destination)
    """
    locations = catalog.list_locations(type)
    return Envelope(status="ok", data=[LocationRead.model_validate(loc) for loc in locations])


@router.get("/locations/{location_id}", response_model=Envelope[LocationRead])
async def get_location(
    location_id: int,
    catalog: CatalogStore = Depends(get_catalog_store),
):
    location = catalog.get_location(location_id)
    if not location:
        raise LocationNotFoundError(location_id)

    return Envelope(status="ok", data=LocationRead.model_validate(location))


@router.get("/transportation-types", response_model=Envelope[List[TransportationTypeRead]])
async def list_transportation_types(catalog: CatalogStore = Depends(get_catalog_store)):
    types = catalog.list_transportation_types()
    return Envelope(status="ok", data=[TransportationTypeRead.model_validate(t) for t in types])


@router.get("/transportation-options", response_model=Envelope[List[TransportationOptionRead]])
async def list_transportation_options(
    origin_id: Optional[int] = Query(None, alias="originId"),
    destination_id: Optional[int] = Query(None, alias="destinationId"),
    catalog: CatalogStore = Depends(get_catalog_store),
):
    """
    List transportation options for a route

    - **originId**: Origin location ID (required)
    - **destinationId**: Destination location ID (required)
    """
    if origin_id is None or destination_id is None:
        raise MissingParameterError(
            "Origin and destination IDs are required",
            parameters=["originId", "destinationId"],
        )

    options = catalog.list_transportation_options(origin_id, destination_id)
    if not options:
        raise NotFoundError(
            "No transportation options found for this route",
            details={"origin_id": origin_id, "destination_id": destination_id},
        )

    return Envelope(
        status="ok",
        data=[TransportationOptionRead.model_validate(option) for option in options],
    )


@router.get("/accommodation-types", response_model=Envelope[List[AccommodationTypeRead]])
async def list_accommodation_types(catalog: CatalogStore = Depends(get_catalog_store)):
    types = catalog.list_accommodation_types()
    return Envelope(status="ok", data=[AccommodationTypeRead.model_validate(t) for t in types])


@router.get("/accommodations", response_model=Envelope[List[AccommodationRead]])
async def list_accommodations(
    location_id: Optional[int] = Query(None, alias="locationId"),
    catalog: CatalogStore = Depends(get_catalog_store),
):
    """
    List accommodations at a location

    - **locationId**: Location ID (required)
    """
    if location_id is None:
        raise MissingParameterError("Location ID is required", parameters=["locationId"])

    accommodations = catalog.list_accommodations(location_id)
    if not accommodations:
        raise NotFoundError(
            "No accommodations found for this location",
            details={"location_id": location_id},
        )

    return Envelope(
        status="ok",
        data=[AccommodationRead.model_validate(a) for a in accommodations],
    )


@router.get("/attractions", response_model=Envelope[List[AttractionRead]])
async def list_attractions(
    location_id: Optional[int] = Query(None, alias="locationId"),
    catalog: CatalogStore = Depends(get_catalog_store),
):
    """
    List attractions at a location; an empty list is a valid answer

    - **locationId**: Location ID (required)
    """
    if location_id is None:
        raise MissingParameterError("Location ID is required", parameters=["locationId"])

    attractions = catalog.list_attractions(location_id)
    return Envelope(status="ok", data=[AttractionRead.model_validate(a) for a in attractions])
