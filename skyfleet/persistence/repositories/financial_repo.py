"""Repository for financial records."""

from __future__ import annotations

from skyfleet.contracts.financial import FinancialRecord
from skyfleet.persistence.repositories.base import BaseRepository


class FinancialRecordRepository(BaseRepository[FinancialRecord]):
    def __init__(self):
        super().__init__(FinancialRecord, "financial_records")

    async def list_for_user(self, user_id: str) -> list[FinancialRecord]:
        return await self._where("user_id", "==", user_id)

    async def list_for_airline(self, airline_icao: str) -> list[FinancialRecord]:
        return await self._where("airline_id", "==", airline_icao)
