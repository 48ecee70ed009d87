"""Repositories for airlines and user accounts."""

from __future__ import annotations

from skyfleet.contracts.airline import Airline, UserAccount
from skyfleet.persistence.repositories.base import BaseRepository


class AirlineRepository(BaseRepository[Airline]):
    def __init__(self):
        super().__init__(Airline, "airlines", key_field="icao")


class UserRepository(BaseRepository[UserAccount]):
    def __init__(self):
        super().__init__(UserAccount, "users")

    async def list_airline_members(self, airline_icao: str) -> list[UserAccount]:
        return await self._where("airline_icao", "==", airline_icao)
