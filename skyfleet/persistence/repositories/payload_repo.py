"""Repositories for payloads and jobs."""

from __future__ import annotations

from skyfleet.contracts.payload import Job, Payload
from skyfleet.persistence.repositories.base import BaseRepository


class PayloadRepository(BaseRepository[Payload]):
    def __init__(self):
        super().__init__(Payload, "payloads")

    async def list_aboard(self, registry: str) -> list[Payload]:
        """Payloads physically loaded on an aircraft."""
        return await self._where("aircraft_registry", "==", registry)

    async def list_at_airport(self, icao: str) -> list[Payload]:
        return await self._where("airport_icao", "==", icao)

    async def list_for_job(self, job_id: str) -> list[Payload]:
        return await self._where("job_id", "==", job_id)


class JobRepository(BaseRepository[Job]):
    def __init__(self):
        super().__init__(Job, "jobs")

    async def list_by_origin(self, icao: str) -> list[Job]:
        return await self._where("origin_icao", "==", icao)

    async def load_payloads(self, job: Job) -> Job:
        job.payloads = await PayloadRepository().list_for_job(job.id)
        return job
