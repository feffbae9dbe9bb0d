"""
Catalog Store - In-memory reference data for the booking wizard
"""
import logging
from typing import Dict, List, Optional

from trip_planner.models.catalog import (
    Accommodation,
    AccommodationType,
    Attraction,
    Location,
    LocationType,
    TransportationOption,
    TransportationType,
    User,
)
from trip_planner.schemas.catalog import (
    AccommodationCreate,
    AccommodationTypeCreate,
    AttractionCreate,
    LocationCreate,
    TransportationOptionCreate,
    TransportationTypeCreate,
)
from trip_planner.schemas.user import UserCreate

logger = logging.getLogger(__name__)


class CatalogStore:
    """
    Holds locations, transportation, accommodations, attractions and users.

    Every entity kind has its own id counter starting at 1. Records are kept
    in insertion order and never mutated once created.
    """

    def __init__(self):
        self._users: Dict[int, User] = {}
        self._locations: Dict[int, Location] = {}
        self._transportation_types: Dict[int, TransportationType] = {}
        self._transportation_options: Dict[int, TransportationOption] = {}
        self._accommodation_types: Dict[int, AccommodationType] = {}
        self._accommodations: Dict[int, Accommodation] = {}
        self._attractions: Dict[int, Attraction] = {}
        self._next_ids: Dict[str, int] = {}

    def _allocate_id(self, kind: str) -> int:
        next_id = self._next_ids.get(kind, 1)
        self._next_ids[kind] = next_id + 1
        return next_id

    def counts(self) -> Dict[str, int]:
        """Number of records per entity kind"""
        return {
            "locations": len(self._locations),
            "transportation_types": len(self._transportation_types),
            "transportation_options": len(self._transportation_options),
            "accommodation_types": len(self._accommodation_types),
            "accommodations": len(self._accommodations),
            "attractions": len(self._attractions),
            "users": len(self._users),
        }

    # Users

    def get_user(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return next(
            (user for user in self._users.values() if user.username == username),
            None,
        )

    def create_user(self, data: UserCreate) -> User:
        user = User(id=self._allocate_id("user"), **data.model_dump())
        self._users[user.id] = user
        logger.debug(f"Created user {user.id}")
        return user

    # Locations

    def list_locations(self, type: Optional[LocationType] = None) -> List[Location]:
        """
        List locations, optionally only those with the given role

        Args:
            type: 'origin' or 'destination'; None returns all

        Returns:
            Locations in creation order
        """
        locations = list(self._locations.values())
        if type is None:
            return locations
        return [loc for loc in locations if loc.type == type]

    def get_location(self, location_id: int) -> Optional[Location]:
        return self._locations.get(location_id)

    def create_location(self, data: LocationCreate) -> Location:
        location = Location(id=self._allocate_id("location"), **data.model_dump())
        self._locations[location.id] = location
        logger.debug(f"Created location {location.id} ({location.name})")
        return location

    # Transportation

    def list_transportation_types(self) -> List[TransportationType]:
        return list(self._transportation_types.values())

    def get_transportation_type(self, type_id: int) -> Optional[TransportationType]:
        return self._transportation_types.get(type_id)

    def create_transportation_type(self, data: TransportationTypeCreate) -> TransportationType:
        transportation_type = TransportationType(
            id=self._allocate_id("transportation_type"), **data.model_dump()
        )
        self._transportation_types[transportation_type.id] = transportation_type
        return transportation_type

    def list_transportation_options(
        self, origin_id: int, destination_id: int
    ) -> List[TransportationOption]:
        """Options running from origin_id to destination_id"""
        return [
            option
            for option in self._transportation_options.values()
            if option.origin_id == origin_id and option.destination_id == destination_id
        ]

    def get_transportation_option(self, option_id: int) -> Optional[TransportationOption]:
        return self._transportation_options.get(option_id)

    def create_transportation_option(self, data: TransportationOptionCreate) -> TransportationOption:
        option = TransportationOption(
            id=self._allocate_id("transportation_option"), **data.model_dump()
        )
        self._transportation_options[option.id] = option
        logger.debug(
            f"Created transportation option {option.id}: {option.provider} "
            f"{option.origin_id}->{option.destination_id}"
        )
        return option

    # Accommodations

    def list_accommodation_types(self) -> List[AccommodationType]:
        return list(self._accommodation_types.values())

    def create_accommodation_type(self, data: AccommodationTypeCreate) -> AccommodationType:
        accommodation_type = AccommodationType(
            id=self._allocate_id("accommodation_type"), **data.model_dump()
        )
        self._accommodation_types[accommodation_type.id] = accommodation_type
        return accommodation_type

    def list_accommodations(self, location_id: int) -> List[Accommodation]:
        return [
            accommodation
            for accommodation in self._accommodations.values()
            if accommodation.location_id == location_id
        ]

    def get_accommodation(self, accommodation_id: int) -> Optional[Accommodation]:
        return self._accommodations.get(accommodation_id)

    def create_accommodation(self, data: AccommodationCreate) -> Accommodation:
        accommodation = Accommodation(
            id=self._allocate_id("accommodation"), **data.model_dump()
        )
        self._accommodations[accommodation.id] = accommodation
        logger.debug(f"Created accommodation {accommodation.id} ({accommodation.name})")
        return accommodation

    # Attractions

    def list_attractions(self, location_id: int) -> List[Attraction]:
        return [
            attraction
            for attraction in self._attractions.values()
            if attraction.location_id == location_id
        ]

    def get_attraction(self, attraction_id: int) -> Optional[Attraction]:
        return self._attractions.get(attraction_id)

    def create_attraction(self, data: AttractionCreate) -> Attraction:
        attraction = Attraction(id=self._allocate_id("attraction"), **data.model_dump())
        self._attractions[attraction.id] = attraction
        logger.debug(f"Created attraction {attraction.id} ({attraction.name})")
        return attraction
