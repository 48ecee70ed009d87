"""Repository for flights."""

from __future__ import annotations

import logging

from skyfleet.contracts.errors import FlightAlreadyCompleted
from skyfleet.contracts.flight import Flight
from skyfleet.persistence.repositories.airline_repo import AirlineRepository
from skyfleet.persistence.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class FlightRepository(BaseRepository[Flight]):
    def __init__(self):
        super().__init__(Flight, "flights")

    def _before_update(self, stored: Flight, entity: Flight) -> None:
        # Completed flights are immutable history
        if stored.completed is not None:
            logger.warning("Refusing write to completed flight %s", stored.id)
            raise FlightAlreadyCompleted(stored.id, "update")

    async def list_for_aircraft(self, registry: str) -> list[Flight]:
        return await self._where("aircraft_registry", "==", registry)

    async def list_for_operator(self, kind: str, operator_id: str) -> list[Flight]:
        """Flights operated by a user or an airline, any state."""
        flights = await self._where("operator.id", "==", operator_id)
        return [f for f in flights if f.operator.kind == kind]

    async def list_for_pilot(self, user_id: str) -> list[Flight]:
        """Flights the user flies: their own, or airline flights assigned to them."""
        own = await self.list_for_operator("user", user_id)
        assigned = await self._where("assigned_airline_pilot_id", "==", user_id)
        seen = {f.id for f in own}
        return own + [f for f in assigned if f.id not in seen]

    async def list_started(self) -> list[Flight]:
        """Flights that have left planning and are not completed yet."""
        flights = await self._where("completed", "==", None)
        return [f for f in flights if f.started is not None]

    async def load_operator_airline(self, flight: Flight) -> Flight:
        """Populate ``operator_airline`` (needed for the full flight number)."""
        if flight.operator.kind == "airline":
            flight.operator_airline = await AirlineRepository().get(flight.operator.id)
        return flight
