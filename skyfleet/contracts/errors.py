"""Domain exceptions.

Invariant violations (``RelationNotLoaded``, ``MultipleActiveFlights``,
operator exclusivity, type-graph cycles) are programmer or data errors and
must be surfaced. Expected business outcomes such as failed flight-start
checks are returned as ``StartFlightResult`` instead.
"""

from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base exception for domain rule violations."""

    code = "DOMAIN_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class InvariantViolation(DomainError):
    """Stored or submitted data breaks a model invariant."""

    code = "INVARIANT_VIOLATION"


class RelationNotLoaded(InvariantViolation):
    """A derivation needed a relation that was not fetched beforehand."""

    code = "RELATION_NOT_LOADED"

    def __init__(self, entity: str, key: str, relation: str):
        super().__init__(
            f"{entity} {key}: relation '{relation}' is not loaded",
            {"entity": entity, "key": key, "relation": relation},
        )


class MultipleActiveFlights(InvariantViolation):
    code = "MULTIPLE_ACTIVE_FLIGHTS"

    def __init__(self, registry: str, flight_ids: list[str]):
        super().__init__(
            f"Aircraft {registry} has {len(flight_ids)} active flights",
            {"registry": registry, "flight_ids": flight_ids},
        )


class NoOperatorAssigned(InvariantViolation):
    code = "NO_OPERATOR_ASSIGNED"

    def __init__(self, entity: str = "flight"):
        super().__init__(
            f"A {entity} needs either a user or an airline operator",
            {"entity": entity},
        )


class DualOperatorAssigned(InvariantViolation):
    code = "DUAL_OPERATOR_ASSIGNED"

    def __init__(self, entity: str, user_id: str, airline_id: str):
        super().__init__(
            f"A {entity} can't be operated by user {user_id} and airline {airline_id} at once",
            {"entity": entity, "user_id": user_id, "airline_id": airline_id},
        )


class TypeGraphCycleError(InvariantViolation):
    code = "TYPE_GRAPH_CYCLE"

    def __init__(self, link: str, type_ids: list[str]):
        super().__init__(
            f"Setting {link} would create a cycle: {' -> '.join(type_ids)}",
            {"link": link, "type_ids": type_ids},
        )


class FlightStateError(DomainError):
    """Raised when a flight state transition is invalid."""

    code = "FLIGHT_STATE_ERROR"

    def __init__(self, flight_id: str | None, current_state: str, action: str, message: str | None = None):
        super().__init__(
            message or f"Can't {action} a flight that is {current_state}",
            {"flight_id": flight_id, "current_state": current_state, "action": action},
        )


class FlightAlreadyCompleted(FlightStateError):
    code = "FLIGHT_ALREADY_COMPLETED"

    def __init__(self, flight_id: str | None, action: str = "modify"):
        super().__init__(
            flight_id,
            "completed",
            action,
            f"Flight {flight_id} is already completed and can't be changed ({action})",
        )


class FlightPlanIncomplete(DomainError):
    """The flight plan lacks data needed to start it."""

    code = "FLIGHT_PLAN_INCOMPLETE"

    def __init__(self, flight_id: str | None, missing: str):
        super().__init__(
            f"Flight plan {flight_id} has no {missing}",
            {"flight_id": flight_id, "missing": missing},
        )


class OtherFlightInProgress(FlightStateError):
    """The pilot is already flying another flight (started, not paused)."""

    code = "OTHER_FLIGHT_IN_PROGRESS"

    def __init__(self, flight_id: str | None, current_state: str, action: str, other_flight_id: str):
        super().__init__(
            flight_id,
            current_state,
            action,
            f"Flight {other_flight_id} is already in progress; "
            f"complete or pause it before you {action} flight {flight_id}",
        )
        self.details["other_flight_id"] = other_flight_id
