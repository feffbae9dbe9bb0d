"""
HTTP client that drives the booking wizard against the trip planner API.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from trip_planner.config.settings import get_settings
from trip_planner.core.exceptions import TripSubmissionError, WizardStateError
from trip_planner.models.catalog import LocationType
from trip_planner.models.trip import TripStatus
from trip_planner.schemas.catalog import (
    AccommodationRead,
    AttractionRead,
    LocationRead,
    TransportationOptionRead,
    TransportationTypeRead,
)
from trip_planner.schemas.trip import (
    TripAccommodationRead,
    TripAttractionRead,
    TripRead,
    TripTransportationRead,
)
from trip_planner.wizard.state import STEP_LODGING, STEP_PAYMENT, TripWizard

logger = logging.getLogger(__name__)


class TripPlannerClient:
    """
    Async API client for the wizard.

    Pass an existing httpx.AsyncClient to share a connection pool or to talk
    to an in-process app; otherwise one is created from settings and closed by
    aclose().
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        settings = get_settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            timeout=timeout or settings.client_timeout_seconds,
        )

    async def __aenter__(self) -> "TripPlannerClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        """
        Send a request and unwrap the response envelope

        Returns:
            The envelope's data, or None for 204 responses

        Raises:
            TripSubmissionError: On any 4xx/5xx response or transport failure
        """
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise TripSubmissionError(
                f"Could not reach the trip planner API: {e}",
                status_code=503,
                details={"method": method, "path": path},
            ) from e

        if response.status_code == 204:
            return None

        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = {}
            logger.warning(
                f"{method} {path} returned {response.status_code}",
                extra={"error_code": body.get("error_code"), "path": path},
            )
            raise TripSubmissionError(
                body.get("message") or f"Request failed with status {response.status_code}",
                status_code=response.status_code,
                details={
                    "method": method,
                    "path": path,
                    "error_code": body.get("error_code"),
                },
            )

        return response.json().get("data")

    async def _list_or_empty(self, path: str, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        # Some listings answer 404 instead of an empty list
        try:
            return await self._request("GET", path, params=params)
        except TripSubmissionError as e:
            if e.status_code == 404:
                return []
            raise

    # Catalog

    async def list_locations(self, type: Optional[LocationType] = None) -> List[LocationRead]:
        params = {"type": LocationType(type).value} if type else {}
        data = await self._request("GET", "/api/locations", params=params)
        return [LocationRead.model_validate(item) for item in data]

    async def list_transportation_types(self) -> List[TransportationTypeRead]:
        data = await self._request("GET", "/api/transportation-types")
        return [TransportationTypeRead.model_validate(item) for item in data]

    async def list_transportation_options(
        self, origin_id: int, destination_id: int
    ) -> List[TransportationOptionRead]:
        data = await self._list_or_empty(
            "/api/transportation-options",
            {"originId": origin_id, "destinationId": destination_id},
        )
        return [TransportationOptionRead.model_validate(item) for item in data]

    async def list_accommodations(self, location_id: int) -> List[AccommodationRead]:
        data = await self._list_or_empty("/api/accommodations", {"locationId": location_id})
        return [AccommodationRead.model_validate(item) for item in data]

    async def list_attractions(self, location_id: int) -> List[AttractionRead]:
        data = await self._request("GET", "/api/attractions", params={"locationId": location_id})
        return [AttractionRead.model_validate(item) for item in data]

    # Trips

    async def get_trip(self, trip_id: int) -> TripRead:
        data = await self._request("GET", f"/api/trips/{trip_id}")
        return TripRead.model_validate(data)

    async def create_trip(self, payload: Dict[str, Any]) -> TripRead:
        data = await self._request("POST", "/api/trips", json=payload)
        return TripRead.model_validate(data)

    async def update_trip(self, trip_id: int, changes: Dict[str, Any]) -> TripRead:
        data = await self._request("PATCH", f"/api/trips/{trip_id}", json=changes)
        return TripRead.model_validate(data)

    async def list_trip_accommodations(self, trip_id: int) -> List[TripAccommodationRead]:
        data = await self._request("GET", f"/api/trips/{trip_id}/accommodations")
        return [TripAccommodationRead.model_validate(item) for item in data]

    async def add_trip_accommodation(self, trip_id: int, row: Dict[str, Any]) -> TripAccommodationRead:
        data = await self._request("POST", f"/api/trips/{trip_id}/accommodations", json=row)
        return TripAccommodationRead.model_validate(data)

    async def remove_trip_accommodation(self, trip_id: int, row_id: int) -> None:
        await self._request("DELETE", f"/api/trips/{trip_id}/accommodations/{row_id}")

    async def list_trip_transportations(self, trip_id: int) -> List[TripTransportationRead]:
        data = await self._request("GET", f"/api/trips/{trip_id}/transportations")
        return [TripTransportationRead.model_validate(item) for item in data]

    async def add_trip_transportation(self, trip_id: int, option_id: int) -> TripTransportationRead:
        data = await self._request(
            "POST",
            f"/api/trips/{trip_id}/transportations",
            json={"transportation_option_id": option_id},
        )
        return TripTransportationRead.model_validate(data)

    async def update_trip_transportation(
        self, trip_id: int, row_id: int, option_id: int
    ) -> TripTransportationRead:
        data = await self._request(
            "PATCH",
            f"/api/trips/{trip_id}/transportations/{row_id}",
            json={"transportation_option_id": option_id},
        )
        return TripTransportationRead.model_validate(data)

    async def list_trip_attractions(self, trip_id: int) -> List[TripAttractionRead]:
        data = await self._request("GET", f"/api/trips/{trip_id}/attractions")
        return [TripAttractionRead.model_validate(item) for item in data]

    async def add_trip_attraction(self, trip_id: int, row: Dict[str, Any]) -> TripAttractionRead:
        data = await self._request("POST", f"/api/trips/{trip_id}/attractions", json=row)
        return TripAttractionRead.model_validate(data)

    async def remove_trip_attraction(self, trip_id: int, row_id: int) -> None:
        await self._request("DELETE", f"/api/trips/{trip_id}/attractions/{row_id}")

    # Wizard flow

    async def submit_itinerary(self, wizard: TripWizard) -> TripRead:
        """
        Store step 1 as a planning trip with its stays

        A trip already created for this draft is updated instead.
        """
        draft = wizard.draft
        if draft.trip_id is not None:
            payload = wizard.trip_payload(TripStatus.PLANNING)
            trip = await self.update_trip(draft.trip_id, payload)
            logger.info(f"Updated planning trip {trip.id}", extra={"trip_id": trip.id})
            return trip

        trip = await self.create_trip(wizard.itinerary_payload())
        draft.trip_id = trip.id
        logger.info(f"Created planning trip {trip.id}", extra={"trip_id": trip.id})
        return trip

    async def load_lodging_choices(
        self, wizard: TripWizard
    ) -> Tuple[List[TransportationOptionRead], Dict[int, List[AccommodationRead]]]:
        """
        Fetch step 2 choices and preselect the recommended ones

        Returns:
            Transportation options for the route and accommodations per stay location
        """
        draft = wizard.draft
        if not draft.itinerary_confirmed:
            raise WizardStateError("Itinerary has not been set", STEP_LODGING)

        options = await self.list_transportation_options(draft.origin_id, draft.destination_id)
        accommodations: Dict[int, List[AccommodationRead]] = {}
        for stay in draft.stays:
            if stay.location_id not in accommodations:
                accommodations[stay.location_id] = await self.list_accommodations(stay.location_id)

        wizard.apply_recommended(options, accommodations)
        return options, accommodations

    async def _replace_selections(self, trip_id: int, wizard: TripWizard) -> None:
        """
        Make the trip's rows match the wizard's selections

        Existing stay and attraction rows are removed before the selected ones
        are posted, and an existing transportation row is switched to the
        selected option, so repeating a submission leaves one copy of each.
        """
        for row in await self.list_trip_accommodations(trip_id):
            await self.remove_trip_accommodation(trip_id, row.id)
        for row in wizard.accommodation_rows():
            await self.add_trip_accommodation(trip_id, row)

        option_id = wizard.draft.transportation.id
        existing = await self.list_trip_transportations(trip_id)
        if not existing:
            await self.add_trip_transportation(trip_id, option_id)
        elif existing[0].transportation_option_id != option_id:
            await self.update_trip_transportation(trip_id, existing[0].id, option_id)

        for row in await self.list_trip_attractions(trip_id):
            await self.remove_trip_attraction(trip_id, row.id)
        for row in wizard.attraction_rows():
            await self.add_trip_attraction(trip_id, row)

    async def submit(self, wizard: TripWizard) -> TripRead:
        """
        Submit a completed wizard

        Confirms the step 1 trip, or creates a confirmed trip if step 1 was
        never stored, then replaces its rows with the selected accommodations,
        transportation and attractions. Submitting again, for instance after
        a failed request, updates the same trip without duplicating rows.

        Raises:
            WizardStateError: If any step is incomplete
            TripSubmissionError: If the API rejects a request
        """
        if not wizard.is_step_complete(STEP_PAYMENT):
            raise WizardStateError("Wizard is not complete", wizard.current_step)

        draft = wizard.draft
        total_price = wizard.total_price

        payload = wizard.trip_payload(TripStatus.CONFIRMED)
        payload["total_price"] = total_price

        if draft.trip_id is not None:
            trip = await self.update_trip(draft.trip_id, payload)
        else:
            trip = await self.create_trip(payload)
            draft.trip_id = trip.id

        await self._replace_selections(trip.id, wizard)

        logger.info(
            f"Submitted trip {trip.id}",
            extra={
                "trip_id": trip.id,
                "total_price": total_price,
                "attractions": len(draft.attractions),
            },
        )
        return trip
