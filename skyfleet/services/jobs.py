"""Job helpers."""

from __future__ import annotations

from skyfleet.contracts.errors import RelationNotLoaded
from skyfleet.contracts.payload import Job
from skyfleet.services.clock import Clock


def is_expired(job: Job, clock: Clock) -> bool:
    return job.expires_at <= clock.now()


def total_weight(job: Job) -> float:
    """Combined weight (lbs) of the job's payloads."""
    if job.payloads is None:
        raise RelationNotLoaded("Job", job.id, "payloads")
    return sum(p.weight for p in job.payloads)
