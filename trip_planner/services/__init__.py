# Stores and business logic services

from .catalog_store import CatalogStore
from .trip_store import TripStore
from .trip_service import TripService
from .seed_data import seed_catalog

__all__ = [
    "CatalogStore",
    "TripStore",
    "TripService",
    "seed_catalog",
]
