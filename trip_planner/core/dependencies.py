"""
Dependency providers for FastAPI endpoints.
Stores live on application state and are created once per app instance.
"""

from fastapi import Depends, HTTPException, Request
import logging

from trip_planner.services.catalog_store import CatalogStore
from trip_planner.services.trip_service import TripService
from trip_planner.services.trip_store import TripStore

logger = logging.getLogger(__name__)


def get_catalog_store(request: Request) -> CatalogStore:
    """
    Get the catalog store from application state.

    Raises:
        HTTPException: If the store was never attached to the app
    """
    catalog = getattr(request.app.state, "catalog_store", None)
    if catalog is None:
        logger.error("Catalog store not initialized")
        raise HTTPException(status_code=500, detail="Catalog store not available")
    return catalog


def get_trip_store(request: Request) -> TripStore:
    trips = getattr(request.app.state, "trip_store", None)
    if trips is None:
        logger.error("Trip store not initialized")
        raise HTTPException(status_code=500, detail="Trip store not available")
    return trips


def get_trip_service(
    catalog: CatalogStore = Depends(get_catalog_store),
    trips: TripStore = Depends(get_trip_store),
) -> TripService:
    return TripService(catalog, trips)


def get_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")
