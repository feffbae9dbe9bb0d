"""
FastAPI application setup.
"""

from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from trip_planner.config.settings import Settings, get_settings
from trip_planner.core.error_handlers import setup_error_handlers
from trip_planner.core.logging import configure_logging
from trip_planner.middleware import RequestContextMiddleware
from trip_planner.services.catalog_store import CatalogStore
from trip_planner.services.seed_data import seed_catalog
from trip_planner.services.trip_store import TripStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management.
    Stores are volatile, so nothing is flushed on shutdown.
    """
    settings = app.state.settings
    logger.info(
        f"Starting {settings.app_name} v{settings.app_version}",
        extra={"environment": settings.environment.value},
    )
    yield
    logger.info(
        "Shutting down application",
        extra={"trips": app.state.trip_store.trip_count()},
    )


def create_app(settings: Optional[Settings] = None, seed: Optional[bool] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Settings to use; defaults to the global settings
        seed: Load sample data into the catalog; defaults to settings.seed_catalog

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level.value, settings.log_format, settings.log_file)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.catalog_store = CatalogStore()
    app.state.trip_store = TripStore()

    if settings.seed_catalog if seed is None else seed:
        seed_catalog(app.state.catalog_store, app.state.trip_store)

    app.add_middleware(CORSMiddleware, **settings.get_cors_config())
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    from trip_planner.api.catalog_endpoints import router as catalog_router
    from trip_planner.api.health_endpoints import router as health_router
    from trip_planner.api.trips_endpoints import router as trips_router
    app.include_router(health_router)
    app.include_router(catalog_router)
    app.include_router(trips_router)

    return app


# Create application instance
app = create_app()
