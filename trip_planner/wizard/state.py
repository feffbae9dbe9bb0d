"""
Booking wizard state.

TripWizard accumulates the five steps of the booking flow in a TripDraft and
derives running totals from the selections. It does no I/O; TripPlannerClient
loads catalog entries into it and submits the finished draft.

Steps:
1. Itinerary: route, transport type, dates, party and stays
2. Transportation and lodging
3. Attractions per trip day
4. Confirmation: contact details and additional services
5. Payment
"""
import dataclasses
import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Dict, List, Mapping, Optional, Sequence

from pydantic import BaseModel, ValidationError

from trip_planner.config.settings import PricingSettings
from trip_planner.core.exceptions import WizardStateError, WizardValidationError
from trip_planner.models.trip import TimeSlot, TripStatus
from trip_planner.schemas.booking import ContactInfo, PaymentDetails
from trip_planner.schemas.catalog import (
    AccommodationRead,
    AttractionRead,
    TransportationOptionRead,
)
from trip_planner.wizard.pricing import (
    AdditionalServices,
    HeightBand,
    PriceBreakdown,
    additional_services_cost,
    attraction_ticket_price,
    lodging_cost,
    nights_between,
    trip_day_count,
)

logger = logging.getLogger(__name__)

STEP_ITINERARY = 1
STEP_LODGING = 2
STEP_ATTRACTIONS = 3
STEP_CONFIRMATION = 4
STEP_PAYMENT = 5

FIRST_STEP = STEP_ITINERARY
LAST_STEP = STEP_PAYMENT


@dataclass
class Stay:
    """Lodging interval; dates default to the trip dates when left empty"""
    location_id: Optional[int]
    check_in: Optional[date] = None
    check_out: Optional[date] = None
    accommodation: Optional[AccommodationRead] = None

    @property
    def nights(self) -> int:
        if self.check_in is None or self.check_out is None:
            return 0
        return nights_between(self.check_in, self.check_out)


@dataclass
class TripDay:
    number: int
    date: date
    location_id: int


@dataclass
class AttractionSelection:
    """One attraction visit on one trip day, with the party that attends"""
    attraction: AttractionRead
    day: int
    usage_date: date
    adults: int
    children_heights: List[HeightBand] = field(default_factory=list)
    time_slot: TimeSlot = TimeSlot.MORNING

    @property
    def children(self) -> int:
        return len(self.children_heights)


@dataclass
class ServiceChoices:
    insurance: bool = False
    sim: bool = False
    guide: bool = False


@dataclass
class TripDraft:
    """Everything collected so far; trip_id is set once step 1 is stored"""
    origin_id: Optional[int] = None
    destination_id: Optional[int] = None
    transportation_type_id: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    adults: int = 1
    children: int = 0
    stays: List[Stay] = field(default_factory=list)
    user_id: Optional[int] = None
    name: Optional[str] = None
    itinerary_confirmed: bool = False
    trip_id: Optional[int] = None

    transportation: Optional[TransportationOptionRead] = None
    attractions: List[AttractionSelection] = field(default_factory=list)

    contact: Optional[ContactInfo] = None
    services: ServiceChoices = field(default_factory=ServiceChoices)
    payment: Optional[PaymentDetails] = None

    @property
    def day_count(self) -> int:
        if self.start_date is None or self.end_date is None:
            return 0
        return trip_day_count(self.start_date, self.end_date)


def _first_error_field(exc: ValidationError) -> Optional[str]:
    errors = exc.errors()
    if not errors or not errors[0].get("loc"):
        return None
    return ".".join(str(part) for part in errors[0]["loc"])


class TripWizard:
    """
    Step-by-step trip booking state.

    Going back is always allowed. Moving forward requires every earlier step
    to be complete; selections made on later steps survive going back and are
    pruned only when an itinerary change invalidates them.
    """

    def __init__(self, rates: Optional[PricingSettings] = None):
        self.rates = rates
        self.reset()

    def reset(self) -> None:
        """Discard every selection and return to step 1"""
        self.draft = TripDraft()
        self.current_step = FIRST_STEP

    # Navigation

    def is_step_complete(self, step: int) -> bool:
        draft = self.draft
        if step == STEP_ITINERARY:
            return draft.itinerary_confirmed
        if step == STEP_LODGING:
            return (
                self.is_step_complete(STEP_ITINERARY)
                and draft.transportation is not None
                and all(stay.accommodation is not None for stay in draft.stays)
            )
        if step == STEP_ATTRACTIONS:
            # attractions are optional
            return self.is_step_complete(STEP_LODGING)
        if step == STEP_CONFIRMATION:
            return self.is_step_complete(STEP_ATTRACTIONS) and draft.contact is not None
        if step == STEP_PAYMENT:
            return self.is_step_complete(STEP_CONFIRMATION) and draft.payment is not None
        raise WizardStateError(f"Unknown step {step}", self.current_step)

    def next_step(self) -> int:
        if self.current_step >= LAST_STEP:
            raise WizardStateError("Already at the last step", self.current_step)
        if not self.is_step_complete(self.current_step):
            raise WizardStateError(
                f"Step {self.current_step} is incomplete", self.current_step
            )
        self.current_step += 1
        return self.current_step

    def previous_step(self) -> int:
        self.current_step = max(FIRST_STEP, self.current_step - 1)
        return self.current_step

    def go_to_step(self, step: int) -> int:
        if step < FIRST_STEP or step > LAST_STEP:
            raise WizardStateError(f"Unknown step {step}", self.current_step)
        if step > self.current_step:
            incomplete = [s for s in range(FIRST_STEP, step) if not self.is_step_complete(s)]
            if incomplete:
                raise WizardStateError(
                    f"Step {incomplete[0]} is incomplete", self.current_step
                )
        self.current_step = step
        return self.current_step

    def _require_itinerary(self, step: int) -> TripDraft:
        if not self.draft.itinerary_confirmed:
            raise WizardStateError("Itinerary has not been set", step)
        return self.draft

    # Step 1: itinerary

    def set_itinerary(
        self,
        origin_id: Optional[int],
        destination_id: Optional[int],
        transportation_type_id: Optional[int],
        start_date: Optional[date],
        end_date: Optional[date],
        adults: int = 1,
        children: int = 0,
        stays: Optional[Sequence[Stay]] = None,
        user_id: Optional[int] = None,
        name: Optional[str] = None,
    ) -> TripDraft:
        """
        Validate and record the itinerary

        Stays without dates take the trip dates. When stays are omitted the
        whole trip is spent at the destination.

        Raises:
            WizardValidationError: On the first invalid field
        """
        step = STEP_ITINERARY
        if origin_id is None:
            raise WizardValidationError("Origin is required", step, "origin_id")
        if destination_id is None:
            raise WizardValidationError("Destination is required", step, "destination_id")
        if transportation_type_id is None:
            raise WizardValidationError(
                "Transportation type is required", step, "transportation_type_id"
            )
        if start_date is None or end_date is None:
            raise WizardValidationError("Start and end dates are required", step, "start_date")
        if end_date <= start_date:
            raise WizardValidationError("End date must be after start date", step, "end_date")
        if adults < 1:
            raise WizardValidationError("At least one adult is required", step, "adults")
        if children < 0:
            raise WizardValidationError("Children cannot be negative", step, "children")

        if not stays:
            stays = [Stay(location_id=destination_id)]

        resolved = []
        for index, stay in enumerate(stays):
            prefix = f"stays.{index}"
            if stay.location_id is None:
                raise WizardValidationError(
                    "Every stay needs a location", step, f"{prefix}.location_id"
                )
            check_in = stay.check_in or start_date
            check_out = stay.check_out or end_date
            if check_out <= check_in:
                raise WizardValidationError(
                    "Check-out must be after check-in", step, f"{prefix}.check_out"
                )
            if check_in < start_date:
                raise WizardValidationError(
                    "Check-in cannot be before the trip starts", step, f"{prefix}.check_in"
                )
            if check_out > end_date:
                raise WizardValidationError(
                    "Check-out cannot be after the trip ends", step, f"{prefix}.check_out"
                )

            accommodation = stay.accommodation
            if accommodation is not None and accommodation.location_id != stay.location_id:
                accommodation = None
            resolved.append(dataclasses.replace(
                stay, check_in=check_in, check_out=check_out, accommodation=accommodation
            ))

        draft = self.draft
        draft.origin_id = origin_id
        draft.destination_id = destination_id
        draft.transportation_type_id = transportation_type_id
        draft.start_date = start_date
        draft.end_date = end_date
        draft.adults = adults
        draft.children = children
        draft.stays = resolved
        draft.user_id = user_id if user_id is not None else draft.user_id
        draft.name = name if name is not None else draft.name
        draft.itinerary_confirmed = True
        self._prune_selections()

        logger.debug(
            "Itinerary set",
            extra={"origin_id": origin_id, "destination_id": destination_id, "days": draft.day_count},
        )
        return draft

    def _prune_selections(self) -> None:
        draft = self.draft
        option = draft.transportation
        if option is not None and (option.origin_id, option.destination_id) != (
            draft.origin_id, draft.destination_id
        ):
            draft.transportation = None

        days = {day.number: day.date for day in self.trip_days()}
        kept = []
        for selection in draft.attractions:
            if selection.day in days:
                selection.usage_date = days[selection.day]
                kept.append(selection)
        draft.attractions = kept

    # Step 2: transportation and lodging

    def select_transportation(self, option: TransportationOptionRead) -> None:
        draft = self._require_itinerary(STEP_LODGING)
        if (option.origin_id, option.destination_id) != (draft.origin_id, draft.destination_id):
            raise WizardValidationError(
                "Transportation option does not serve this route", STEP_LODGING, "transportation"
            )
        draft.transportation = option

    def select_accommodation(self, stay_index: int, accommodation: AccommodationRead) -> None:
        draft = self._require_itinerary(STEP_LODGING)
        if not 0 <= stay_index < len(draft.stays):
            raise WizardValidationError(
                f"No stay at index {stay_index}", STEP_LODGING, "stays"
            )
        stay = draft.stays[stay_index]
        if accommodation.location_id != stay.location_id:
            raise WizardValidationError(
                "Accommodation is not at the stay's location",
                STEP_LODGING,
                f"stays.{stay_index}.accommodation",
            )
        stay.accommodation = accommodation

    def apply_recommended(
        self,
        options: Sequence[TransportationOptionRead],
        accommodations: Mapping[int, Sequence[AccommodationRead]],
    ) -> None:
        """
        Preselect recommended entries where nothing is chosen yet

        Args:
            options: Transportation options for the trip's route
            accommodations: Accommodations keyed by location id
        """
        draft = self._require_itinerary(STEP_LODGING)
        if draft.transportation is None:
            recommended = next((o for o in options if o.is_recommended), None)
            if recommended is not None:
                self.select_transportation(recommended)

        for index, stay in enumerate(draft.stays):
            if stay.accommodation is not None:
                continue
            candidates = accommodations.get(stay.location_id, ())
            recommended = next((a for a in candidates if a.is_recommended), None)
            if recommended is not None:
                self.select_accommodation(index, recommended)

    @property
    def transportation_price(self) -> float:
        option = self.draft.transportation
        return float(option.price) if option is not None else 0.0

    @property
    def accommodation_price(self) -> float:
        return lodging_cost(
            (stay.accommodation.price_per_night, stay.check_in, stay.check_out)
            for stay in self.draft.stays
            if stay.accommodation is not None
        )

    @property
    def base_price(self) -> float:
        return self.transportation_price + self.accommodation_price

    # Step 3: attractions

    def trip_days(self) -> List[TripDay]:
        """
        Trip days with the location the traveller is at

        A day belongs to the first stay covering it, check-out day included;
        days outside every stay are placed at the destination.
        """
        draft = self.draft
        if not draft.day_count:
            return []

        days = []
        for offset in range(draft.day_count):
            current = draft.start_date + timedelta(days=offset)
            location_id = next(
                (
                    stay.location_id
                    for stay in draft.stays
                    if stay.check_in <= current <= stay.check_out
                ),
                draft.destination_id,
            )
            days.append(TripDay(number=offset + 1, date=current, location_id=location_id))
        return days

    def _find_attraction(self, attraction_id: int, day: int) -> Optional[AttractionSelection]:
        return next(
            (
                s for s in self.draft.attractions
                if s.attraction.id == attraction_id and s.day == day
            ),
            None,
        )

    def add_attraction(
        self,
        attraction: AttractionRead,
        day: int,
        adults: Optional[int] = None,
        children_heights: Optional[Sequence[HeightBand]] = None,
        time_slot: TimeSlot = TimeSlot.MORNING,
    ) -> AttractionSelection:
        """
        Select an attraction on a trip day

        Party defaults to the trip's adults, with every child in the
        youngest height band.
        """
        draft = self._require_itinerary(STEP_ATTRACTIONS)
        days = {d.number: d for d in self.trip_days()}
        if day not in days:
            raise WizardValidationError(
                f"Day {day} is outside the {draft.day_count}-day trip", STEP_ATTRACTIONS, "day"
            )
        if self._find_attraction(attraction.id, day) is not None:
            raise WizardValidationError(
                f"{attraction.name} is already selected on day {day}",
                STEP_ATTRACTIONS,
                "attractions",
            )

        adults = draft.adults if adults is None else adults
        if adults < 1:
            raise WizardValidationError("At least one adult is required", STEP_ATTRACTIONS, "adults")
        if children_heights is None:
            children_heights = [HeightBand.UNDER_1M] * draft.children

        selection = AttractionSelection(
            attraction=attraction,
            day=day,
            usage_date=days[day].date,
            adults=adults,
            children_heights=[HeightBand(h) for h in children_heights],
            time_slot=TimeSlot(time_slot),
        )
        draft.attractions.append(selection)
        return selection

    def remove_attraction(self, attraction_id: int, day: int) -> bool:
        selection = self._find_attraction(attraction_id, day)
        if selection is None:
            return False
        self.draft.attractions.remove(selection)
        return True

    def toggle_attraction(self, attraction: AttractionRead, day: int) -> bool:
        """Select or deselect; returns True when the attraction is now selected"""
        if self.remove_attraction(attraction.id, day):
            return False
        self.add_attraction(attraction, day)
        return True

    def update_attraction_party(
        self,
        attraction_id: int,
        day: int,
        adults: Optional[int] = None,
        children_heights: Optional[Sequence[HeightBand]] = None,
    ) -> AttractionSelection:
        selection = self._find_attraction(attraction_id, day)
        if selection is None:
            raise WizardValidationError(
                f"Attraction {attraction_id} is not selected on day {day}",
                STEP_ATTRACTIONS,
                "attractions",
            )
        if adults is not None:
            if adults < 1:
                raise WizardValidationError(
                    "At least one adult is required", STEP_ATTRACTIONS, "adults"
                )
            selection.adults = adults
        if children_heights is not None:
            selection.children_heights = [HeightBand(h) for h in children_heights]
        return selection

    def attraction_price(self, selection: AttractionSelection) -> float:
        return attraction_ticket_price(
            selection.attraction.price,
            selection.adults,
            selection.children_heights,
            self.rates,
        )

    @property
    def attractions_price(self) -> float:
        return sum(self.attraction_price(s) for s in self.draft.attractions)

    # Step 4: confirmation

    def _validate_form(self, model: type, data: Any, step: int) -> BaseModel:
        if isinstance(data, model):
            return data
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise WizardValidationError(
                exc.errors()[0]["msg"], step, _first_error_field(exc)
            ) from exc

    def set_contact(self, contact: Any) -> ContactInfo:
        """Record contact details given as ContactInfo or a mapping"""
        self.draft.contact = self._validate_form(ContactInfo, contact, STEP_CONFIRMATION)
        return self.draft.contact

    def set_services(self, insurance: bool = False, sim: bool = False, guide: bool = False) -> None:
        self.draft.services = ServiceChoices(insurance=insurance, sim=sim, guide=guide)

    @property
    def services_cost(self) -> AdditionalServices:
        draft = self.draft
        return additional_services_cost(
            adults=draft.adults,
            children=draft.children,
            trip_days=draft.day_count,
            insurance=draft.services.insurance,
            sim=draft.services.sim,
            guide=draft.services.guide,
            rates=self.rates,
        )

    # Step 5: payment

    def set_payment(self, payment: Any) -> PaymentDetails:
        self.draft.payment = self._validate_form(PaymentDetails, payment, STEP_PAYMENT)
        return self.draft.payment

    # Totals

    def price_breakdown(self) -> PriceBreakdown:
        return PriceBreakdown(
            transportation=self.transportation_price,
            accommodation=self.accommodation_price,
            attractions=self.attractions_price,
            services=self.services_cost.total,
        )

    @property
    def total_price(self) -> float:
        return self.price_breakdown().total

    # Request payloads

    def trip_payload(self, status: TripStatus) -> Dict[str, Any]:
        """Trip body for POST /api/trips"""
        draft = self._require_itinerary(self.current_step)
        payload = {
            "origin_id": draft.origin_id,
            "destination_id": draft.destination_id,
            "transportation_type_id": draft.transportation_type_id,
            "start_date": draft.start_date.isoformat(),
            "end_date": draft.end_date.isoformat(),
            "adults": draft.adults,
            "children": draft.children,
            "status": TripStatus(status).value,
        }
        if draft.user_id is not None:
            payload["user_id"] = draft.user_id
        if draft.name:
            payload["name"] = draft.name
        return payload

    def itinerary_payload(self) -> Dict[str, Any]:
        """Planning trip bundled with its stays"""
        return {
            "trip": self.trip_payload(TripStatus.PLANNING),
            "accommodations": [
                {
                    "location": stay.location_id,
                    "checkIn": stay.check_in.isoformat(),
                    "checkOut": stay.check_out.isoformat(),
                }
                for stay in self.draft.stays
            ],
        }

    def accommodation_rows(self) -> List[Dict[str, Any]]:
        return [
            {
                "accommodation_id": stay.accommodation.id,
                "location_id": stay.location_id,
                "check_in_date": stay.check_in.isoformat(),
                "check_out_date": stay.check_out.isoformat(),
            }
            for stay in self.draft.stays
            if stay.accommodation is not None
        ]

    def attraction_rows(self) -> List[Dict[str, Any]]:
        return [
            {
                "attraction_id": s.attraction.id,
                "day": s.day,
                "time_slot": (s.time_slot or TimeSlot.MORNING).value,
            }
            for s in self.draft.attractions
        ]
