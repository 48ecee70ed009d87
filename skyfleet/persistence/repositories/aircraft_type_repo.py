"""Repositories for aircraft types and manufacturers."""

from __future__ import annotations

from skyfleet.contracts.aircraft_type import AircraftManufacturer, AircraftType
from skyfleet.persistence.repositories.airline_repo import UserRepository
from skyfleet.persistence.repositories.base import BaseRepository
from skyfleet.services.type_catalog import AircraftTypeCatalog


class AircraftTypeRepository(BaseRepository[AircraftType]):
    def __init__(self):
        super().__init__(AircraftType, "aircraft_types")

    async def list_enabled(self) -> list[AircraftType]:
        return await self._where("enabled", "==", True)

    async def load_catalog(self) -> AircraftTypeCatalog:
        """Every type, as an arena for variant/version navigation."""
        return AircraftTypeCatalog(await self.list_all())

    async def load_uploader(self, aircraft_type: AircraftType) -> AircraftType:
        if aircraft_type.uploader_id is not None:
            aircraft_type.uploader = await UserRepository().get(aircraft_type.uploader_id)
        return aircraft_type


class ManufacturerRepository(BaseRepository[AircraftManufacturer]):
    def __init__(self):
        super().__init__(AircraftManufacturer, "manufacturers")
