"""Repository for aircraft."""

from __future__ import annotations

from skyfleet.contracts.aircraft import Aircraft
from skyfleet.persistence.repositories.airline_repo import AirlineRepository, UserRepository
from skyfleet.persistence.repositories.base import BaseRepository
from skyfleet.persistence.repositories.flight_repo import FlightRepository


class AircraftRepository(BaseRepository[Aircraft]):
    def __init__(self):
        super().__init__(Aircraft, "aircraft", key_field="registry")

    async def list_at_airport(self, icao: str) -> list[Aircraft]:
        """Aircraft parked at (or departed from) an airport."""
        return await self._where("airport_icao", "==", icao)

    async def list_for_sale(self) -> list[Aircraft]:
        return [a for a in await self.list_all() if a.purchase_price is not None]

    async def load_flights(self, aircraft: Aircraft) -> Aircraft:
        """Populate ``aircraft.flights`` (all flights, any state)."""
        aircraft.flights = await FlightRepository().list_for_aircraft(aircraft.registry)
        return aircraft

    async def load_owner(self, aircraft: Aircraft) -> Aircraft:
        """Populate ``owner_account`` or ``owner_airline`` per the owner kind."""
        if aircraft.owner is None:
            return aircraft
        if aircraft.owner.kind == "airline":
            aircraft.owner_airline = await AirlineRepository().require(aircraft.owner.id)
        else:
            aircraft.owner_account = await UserRepository().require(aircraft.owner.id)
        return aircraft
