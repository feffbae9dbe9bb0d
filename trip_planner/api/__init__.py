# API endpoints and routers

from .catalog_endpoints import router as catalog_router
from .health_endpoints import router as health_router
from .trips_endpoints import router as trips_router

__all__ = [
    "catalog_router",
    "health_router",
    "trips_router",
]
