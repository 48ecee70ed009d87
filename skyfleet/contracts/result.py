"""Generic service result wrapper and the flight-start outcome."""

from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from skyfleet.contracts.enums import StartFlightStatus

T = TypeVar("T")


class ServiceError(BaseModel):
    """Structured error from a service call."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = None


class ServiceResult(BaseModel, Generic[T]):
    """Generic wrapper for service responses.

    On success: ``data`` is populated.
    On failure: ``error`` is populated with structured error info.
    """

    success: bool
    data: T | None = None
    error: ServiceError | None = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))

    @classmethod
    def ok(cls, data: T) -> "ServiceResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, code: str, message: str, **details: Any) -> "ServiceResult[T]":
        return cls(
            success=False,
            error=ServiceError(code=code, message=message, details=details or None),
        )


class StartFlightResult(BaseModel):
    """Outcome of a flight-start attempt.

    A blocked start is an expected outcome, not an error: the caller can
    retry with ``status`` in its override list if the check is overridable.
    """

    status: StartFlightStatus
    message: str
    overridable: bool = False

    @property
    def started(self) -> bool:
        return self.status == StartFlightStatus.STARTED
