"""Flight start: precondition checks and the planning -> active transition.

Failing checks are expected business outcomes and come back as a
``StartFlightResult``; the flight is left untouched. The caller may retry
with the blocking status in ``overrides`` when it is overridable.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import timedelta

from skyfleet.config import FlightRulesConfig, config
from skyfleet.contracts.aircraft import Aircraft
from skyfleet.contracts.aircraft_type import AircraftType
from skyfleet.contracts.airport import Airport
from skyfleet.contracts.enums import FlightState, FuelType, StartFlightStatus
from skyfleet.contracts.errors import FlightPlanIncomplete, FlightStateError, InvariantViolation
from skyfleet.contracts.flight import Flight
from skyfleet.contracts.payload import Payload
from skyfleet.contracts.result import StartFlightResult
from skyfleet.services.aircraft_status import STATUS_IDLE, derive_status
from skyfleet.services.clock import Clock
from skyfleet.services.flight_lifecycle import ensure_not_completed, flight_state, mark_started
from skyfleet.services.fuel import fuel_loading_minutes, resolve_fuel_type

logger = logging.getLogger(__name__)

OVERRIDABLE = frozenset({
    StartFlightStatus.AIRCRAFT_NOT_AT_ORIGIN,
    StartFlightStatus.ORIGIN_DOESNT_SELL_AVGAS,
    StartFlightStatus.ORIGIN_DOESNT_SELL_JET_FUEL,
    StartFlightStatus.NON_FLIGHT_PLAN_PAYLOADS_FOUND,
})


class StartContext:
    """Everything the checks look at, loaded by the caller."""

    def __init__(
        self,
        flight: Flight,
        aircraft: Aircraft,
        aircraft_type: AircraftType,
        origin: Airport,
        payloads_aboard: list[Payload],
        clock: Clock,
    ):
        self.flight = flight
        self.aircraft = aircraft
        self.aircraft_type = aircraft_type
        self.origin = origin
        self.payloads_aboard = payloads_aboard
        self.clock = clock
        self.fuel_type = resolve_fuel_type(aircraft_type)


# A check returns a failure message, or None when it passes.
Check = Callable[[StartContext], "str | None"]


def _aircraft_at_origin(ctx: StartContext) -> str | None:
    if ctx.aircraft.airport_icao != ctx.flight.origin_icao:
        return (
            f"The aircraft is at {ctx.aircraft.airport_icao}, "
            f"not at the departure airport {ctx.flight.origin_icao}"
        )
    return None


def _origin_sells_avgas(ctx: StartContext) -> str | None:
    if ctx.fuel_type == FuelType.AVGAS and not ctx.origin.has_avgas:
        return f"{ctx.origin.icao} doesn't sell AvGas"
    return None


def _origin_sells_jet_fuel(ctx: StartContext) -> str | None:
    if ctx.fuel_type == FuelType.JET_FUEL and not ctx.origin.has_jet_fuel:
        return f"{ctx.origin.icao} doesn't sell jet fuel"
    return None


def _only_planned_payloads(ctx: StartContext) -> str | None:
    planned = set(ctx.flight.payload_ids)
    extra = [p.id for p in ctx.payloads_aboard if p.id not in planned]
    if extra:
        return f"{len(extra)} payload(s) aboard are not part of the flight plan"
    return None


def _aircraft_idle(ctx: StartContext) -> str | None:
    status = derive_status(ctx.aircraft, ctx.clock)
    if status != STATUS_IDLE:
        return f"The aircraft must be idle, it is: {status}"
    return None


CHECKS: list[tuple[StartFlightStatus, Check]] = [
    (StartFlightStatus.AIRCRAFT_NOT_AT_ORIGIN, _aircraft_at_origin),
    (StartFlightStatus.ORIGIN_DOESNT_SELL_AVGAS, _origin_sells_avgas),
    (StartFlightStatus.ORIGIN_DOESNT_SELL_JET_FUEL, _origin_sells_jet_fuel),
    (StartFlightStatus.NON_FLIGHT_PLAN_PAYLOADS_FOUND, _only_planned_payloads),
    (StartFlightStatus.AIRCRAFT_NOT_IDLE, _aircraft_idle),
]


def _validate_plan(flight: Flight, aircraft: Aircraft) -> None:
    if not flight.aircraft_registry:
        raise FlightPlanIncomplete(flight.id, "assigned aircraft")
    if flight.aircraft_registry != aircraft.registry:
        raise InvariantViolation(
            f"Flight {flight.id} is planned for {flight.aircraft_registry}, not {aircraft.registry}",
            {"flight_id": flight.id, "registry": aircraft.registry},
        )
    if flight.fuel_gallons is None:
        raise FlightPlanIncomplete(flight.id, "fuel value")


def check_start(ctx: StartContext, overrides: Iterable[StartFlightStatus | str] = ()) -> StartFlightResult:
    """Run the start checks in order; the first blocking one wins."""
    allowed = {StartFlightStatus(o) for o in overrides} & OVERRIDABLE
    for status, check in CHECKS:
        message = check(ctx)
        if message is None:
            continue
        if status in allowed:
            logger.info("Flight %s: %s overridden (%s)", ctx.flight.id, status.value, message)
            continue
        return StartFlightResult(status=status, message=message, overridable=status in OVERRIDABLE)
    return StartFlightResult(
        status=StartFlightStatus.STARTED,
        message=f"Flight {ctx.flight.full_flight_number} started successfully",
    )


def start_flight(
    ctx: StartContext,
    overrides: Iterable[StartFlightStatus | str] = (),
    rules: FlightRulesConfig = config.flight_rules,
) -> StartFlightResult:
    """Validate and, if every check passes or is overridden, start the flight.

    Raises ``FlightAlreadyCompleted`` / ``FlightStateError`` if the flight is
    not in planning and ``FlightPlanIncomplete`` for unusable plans.
    """
    flight = ctx.flight
    ensure_not_completed(flight, "start")
    state = flight_state(flight)
    if state != FlightState.PLANNING:
        raise FlightStateError(flight.id, state.value, "start")
    _validate_plan(flight, ctx.aircraft)

    result = check_start(ctx, overrides)
    if not result.started:
        logger.info(
            "Flight %s not started (%s): %s", flight.id, result.status.value, result.message
        )
        return result

    mark_started(flight, ctx.clock)
    now = flight.started
    minutes = fuel_loading_minutes(ctx.fuel_type, ctx.aircraft.fuel, flight.fuel_gallons, rules)
    flight.fuel_loading_complete = now + timedelta(minutes=minutes)
    flight.payload_loading_complete = now
    if not flight.alternate_icao:
        flight.alternate_icao = flight.origin_icao
    return result
