"""Job endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from skyfleet.api.deps import get_clock, get_job_repo
from skyfleet.contracts.payload import Job
from skyfleet.persistence.repositories.payload_repo import JobRepository
from skyfleet.services.clock import Clock
from skyfleet.services.jobs import is_expired, total_weight

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("")
async def list_jobs(
    origin: str,
    include_expired: bool = False,
    repo: JobRepository = Depends(get_job_repo),
    clock: Clock = Depends(get_clock),
) -> list[dict]:
    items = await repo.list_by_origin(origin.upper())
    if not include_expired:
        items = [j for j in items if not is_expired(j, clock)]
    return [j.to_firestore() for j in items]


@router.post("", status_code=201)
async def create_job(
    job: Job,
    repo: JobRepository = Depends(get_job_repo),
) -> dict:
    await repo.create(job)
    return job.to_firestore()


@router.get("/{job_id}")
async def get_job(
    job_id: str,
    repo: JobRepository = Depends(get_job_repo),
    clock: Clock = Depends(get_clock),
) -> dict:
    item = await repo.get(job_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Job not found")
    await repo.load_payloads(item)
    data = item.to_firestore()
    data["expired"] = is_expired(item, clock)
    data["total_weight"] = total_weight(item)
    return data
