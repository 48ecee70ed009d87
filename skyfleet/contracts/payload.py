"""Payloads and the jobs they belong to.

Stored at: ``/payloads/{payload_id}`` and ``/jobs/{job_id}``
"""

import uuid
from typing import Any

from pydantic import Field, model_validator

from skyfleet.contracts.common import UtcDateTime, VersionedModel, utc_now
from skyfleet.contracts.enums import AircraftTypeCategory, JobType
from skyfleet.contracts.errors import InvariantViolation
from skyfleet.contracts.operator import Operator, lift_operator_ids


def _new_id() -> str:
    return uuid.uuid4().hex


class Payload(VersionedModel):
    """Cargo sitting either at an airport or aboard an aircraft, never both."""

    id: str = Field(default_factory=_new_id)
    job_id: str
    description: str = Field(..., min_length=1)
    weight: float = Field(..., gt=0, description="lbs")
    destination_icao: str = Field(..., pattern=r"^[A-Z0-9]{3,5}$")
    airport_icao: str | None = None
    aircraft_registry: str | None = None

    @model_validator(mode="after")
    def _single_location(self) -> "Payload":
        if (self.airport_icao is None) == (self.aircraft_registry is None):
            raise InvariantViolation(
                f"Payload {self.id} must be at exactly one of an airport or an aircraft",
                {
                    "payload_id": self.id,
                    "airport_icao": self.airport_icao,
                    "aircraft_registry": self.aircraft_registry,
                },
            )
        return self


class Job(VersionedModel):
    id: str = Field(default_factory=_new_id)
    type: JobType = JobType.CARGO_L
    category: AircraftTypeCategory = AircraftTypeCategory.SEP
    operator: Operator
    assigned_airline_dispatcher_id: str | None = None
    origin_icao: str = Field(..., pattern=r"^[A-Z0-9]{3,5}$")
    expires_at: UtcDateTime
    value: int = Field(..., ge=0, description="SkyBucks")
    user_identifier: str | None = None
    created: UtcDateTime = Field(default_factory=utc_now)

    # Loaded relation, never persisted
    payloads: list[Payload] | None = Field(default=None, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _legacy_operator_ids(cls, data: Any) -> Any:
        return lift_operator_ids(
            data, "operator", "operator_id", "operator_airline_id",
            entity="job", required=True,
        )
