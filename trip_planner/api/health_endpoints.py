"""
Health check and service status endpoints.

- GET /: Basic liveness message
- GET /health: Store counts and error statistics
"""

from fastapi import APIRouter, Depends, Request
import logging

from trip_planner.core.dependencies import get_catalog_store, get_request_id, get_trip_store
from trip_planner.core.error_handlers import error_handler
from trip_planner.models.api_models import HealthResponse
from trip_planner.services.catalog_store import CatalogStore
from trip_planner.services.trip_store import TripStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/")
async def root(request: Request):
    """Root endpoint for basic health check."""
    settings = request.app.state.settings
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "status": "running",
    }


@router.get("/health", response_model=HealthResponse)
async def health_check(
    request: Request,
    catalog: CatalogStore = Depends(get_catalog_store),
    trips: TripStore = Depends(get_trip_store),
    request_id: str = Depends(get_request_id),
) -> HealthResponse:
    """
    Health check with store status.

    The service is healthy once the stores are attached; an empty catalog
    (seeding disabled) is reported as degraded.
    """
    settings = request.app.state.settings
    counts = catalog.counts()
    overall_status = "healthy" if counts["locations"] else "degraded"

    logger.debug(
        "Health check requested",
        extra={"request_id": request_id, "status": overall_status},
    )

    return HealthResponse(
        status=overall_status,
        version=settings.app_version,
        environment=settings.environment.value,
        catalog=counts,
        trips=trips.trip_count(),
        error_statistics=error_handler.get_error_statistics(),
    )
