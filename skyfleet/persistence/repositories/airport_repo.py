"""Repository for airports (reference data keyed by ICAO)."""

from __future__ import annotations

from skyfleet.contracts.airport import Airport
from skyfleet.persistence.repositories.base import BaseRepository


class AirportRepository(BaseRepository[Airport]):
    def __init__(self):
        super().__init__(Airport, "airports", key_field="icao")

    async def list_selling_fuel(self, field: str) -> list[Airport]:
        """Airports where ``field`` ("has_avgas" / "has_jet_fuel") is true."""
        return await self._where(field, "==", True)
