"""
Trip aggregate records for the in-memory trip store
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional
import enum


class TripStatus(str, enum.Enum):
    """Trip lifecycle status"""
    DRAFT = "draft"
    PLANNING = "planning"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TimeSlot(str, enum.Enum):
    """Part of the day an attraction visit is scheduled in"""
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"


@dataclass
class Trip:
    """
    A user's booking aggregate.
    Status and total price change as the wizard progresses; everything else is
    fixed at creation unless explicitly patched.
    """
    id: int
    origin_id: int
    destination_id: int
    start_date: date
    end_date: date
    adults: int
    children: int = 0
    user_id: Optional[int] = None
    name: Optional[str] = None
    transportation_type_id: Optional[int] = None
    total_price: Optional[float] = 0
    status: TripStatus = TripStatus.DRAFT
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def day_count(self) -> int:
        """Number of calendar days covered, both ends inclusive"""
        return (self.end_date - self.start_date).days + 1


@dataclass
class TripAccommodation:
    """A stay at one location; accommodation_id is None until a property is chosen"""
    id: int
    trip_id: int
    location_id: int
    check_in_date: date
    check_out_date: date
    accommodation_id: Optional[int] = None


@dataclass
class TripTransportation:
    id: int
    trip_id: int
    transportation_option_id: int


@dataclass
class TripAttraction:
    id: int
    trip_id: int
    attraction_id: int
    day: int
    time_slot: Optional[TimeSlot] = None
