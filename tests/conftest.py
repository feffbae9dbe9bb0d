"""
Shared fixtures: fresh stores, a seeded app and HTTP clients against it
"""
import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from trip_planner.config.settings import Settings
from trip_planner.main import create_app
from trip_planner.services.catalog_store import CatalogStore
from trip_planner.services.seed_data import seed_catalog
from trip_planner.services.trip_service import TripService
from trip_planner.services.trip_store import TripStore

# Seeded ids used across tests: locations 1 Hà Nội, 2 Hồ Chí Minh, 4 Phú Quốc,
# 5 Đà Lạt; options 1-3 run 2 -> 4; accommodations 1-4 and attractions 1-3 are
# at 4; trip 1 is a planning trip 2 -> 4 from 2025-04-01 to 2025-04-05.


@pytest.fixture
def catalog():
    return CatalogStore()


@pytest.fixture
def trips():
    return TripStore()


@pytest.fixture
def seeded(catalog, trips):
    seed_catalog(catalog, trips)
    return catalog, trips


@pytest.fixture
def service(seeded):
    catalog, trips = seeded
    return TripService(catalog, trips)


@pytest.fixture
def app():
    return create_app(Settings(seed_catalog=True), seed=True)


@pytest.fixture
def empty_app():
    return create_app(Settings(seed_catalog=False), seed=False)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def async_client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client
