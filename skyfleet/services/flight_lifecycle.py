"""Flight lifecycle state machine.

::

    planning --start--> active <--pause/resume--> paused
                          |                          |
                          +--------complete----------+--> completed (terminal)
    active/paused --abort--> planning

The state is derived from the flight's timestamps. Transitions mutate the
flight in place; persisting it (with its version token) is the caller's
job. Nothing leaves ``completed``: every transition on a completed flight
raises ``FlightAlreadyCompleted``.
"""

from __future__ import annotations

import logging
from datetime import timedelta

from skyfleet.config import FlightRulesConfig, config
from skyfleet.contracts.aircraft import Aircraft
from skyfleet.contracts.enums import FlightPhase, FlightState
from skyfleet.contracts.errors import FlightAlreadyCompleted, FlightStateError, OtherFlightInProgress
from skyfleet.contracts.flight import FinalReport, Flight, PositionReport
from skyfleet.services.clock import Clock

logger = logging.getLogger(__name__)


def flight_state(flight: Flight) -> FlightState:
    if flight.completed is not None:
        return FlightState.COMPLETED
    if flight.started is None:
        return FlightState.PLANNING
    if flight.paused is not None:
        return FlightState.PAUSED
    return FlightState.ACTIVE


def ensure_not_completed(flight: Flight, action: str) -> None:
    if flight.completed is not None:
        logger.warning("Refusing to %s completed flight %s", action, flight.id)
        raise FlightAlreadyCompleted(flight.id, action)


def _require(flight: Flight, action: str, *allowed: FlightState) -> FlightState:
    ensure_not_completed(flight, action)
    state = flight_state(flight)
    if state not in allowed:
        raise FlightStateError(flight.id, state.value, action)
    return state


def pilot_id(flight: Flight) -> str | None:
    """User flying the flight: the user operator, else the assigned airline pilot."""
    if flight.operator.kind == "user":
        return flight.operator.id
    return flight.assigned_airline_pilot_id


def ensure_pilot_free(flight: Flight, pilot_flights: list[Flight], action: str) -> None:
    """Raise ``OtherFlightInProgress`` if another of the pilot's flights is active."""
    state = flight_state(flight)
    if state not in (FlightState.PLANNING, FlightState.PAUSED):
        # Only start and resume make a flight active; other states fail the transition
        return
    for other in pilot_flights:
        if other.id != flight.id and flight_state(other) == FlightState.ACTIVE:
            raise OtherFlightInProgress(flight.id, state.value, action, other.id)


def mark_started(flight: Flight, clock: Clock) -> None:
    """Planning -> active. Precondition checks live in ``flight_start``."""
    _require(flight, "start", FlightState.PLANNING)
    flight.started = clock.now()
    flight.paused = None
    logger.info("Flight %s started", flight.id)


def pause(flight: Flight, clock: Clock) -> None:
    _require(flight, "pause", FlightState.ACTIVE)
    flight.paused = clock.now()
    logger.info("Flight %s paused", flight.id)


def resume(flight: Flight) -> None:
    _require(flight, "resume", FlightState.PAUSED)
    flight.paused = None
    logger.info("Flight %s resumed", flight.id)


def _apply_position(flight: Flight, report: PositionReport, clock: Clock) -> None:
    flight.flight_phase = FlightPhase(report.flight_phase).value
    flight.latitude = report.latitude
    flight.longitude = report.longitude
    flight.altitude = report.altitude
    flight.radio_height = report.radio_height
    flight.airspeed_true = report.airspeed_true
    flight.ground_speed = report.ground_speed
    flight.heading = report.heading
    flight.bank_angle = report.bank_angle
    flight.pitch_angle = report.pitch_angle
    flight.vertical_speed_seconds = report.vertical_speed_seconds
    flight.on_ground = report.on_ground
    flight.time_warp_time_saved_seconds = report.time_warp_time_saved_seconds
    flight.fuel_tanks = report.fuel_tanks.model_copy()
    flight.last_position_report = clock.now()


def _require_reporting(
    flight: Flight, action: str, clock: Clock, rules: FlightRulesConfig
) -> None:
    """Active flights report freely; paused ones only during the grace period."""
    state = _require(flight, action, FlightState.ACTIVE, FlightState.PAUSED)
    if state == FlightState.PAUSED:
        grace = timedelta(seconds=rules.position_report_pause_grace_seconds)
        if clock.now() - flight.paused > grace:
            raise FlightStateError(
                flight.id,
                state.value,
                action,
                f"Flight {flight.id} has been paused for more than {grace.total_seconds():.0f}s",
            )


def record_position(
    flight: Flight,
    report: PositionReport,
    clock: Clock,
    rules: FlightRulesConfig = config.flight_rules,
) -> None:
    """Store a position report on an active flight.

    A paused flight still accepts reports for a short grace period after
    pausing, so the client can flush its last state.
    """
    _require_reporting(flight, "report a position for", clock, rules)
    _apply_position(flight, report, clock)


def store_auto_save(
    flight: Flight,
    auto_save: str,
    clock: Clock,
    rules: FlightRulesConfig = config.flight_rules,
) -> None:
    """Keep the simulator client's latest auto-save on the flight.

    Same window as position reports: started, not completed, and not
    paused for longer than the grace period.
    """
    _require_reporting(flight, "auto-save", clock, rules)
    flight.auto_save_log = auto_save
    flight.last_auto_save = clock.now()


def complete(flight: Flight, aircraft: Aircraft, report: FinalReport, clock: Clock) -> str:
    """Active/paused -> completed; moves the aircraft to where it landed.

    Clears ``paused``, so a completed flight never carries a pause stamp.
    Returns the ICAO code of the airport the flight is recorded as landed at.
    """
    _require(flight, "complete", FlightState.ACTIVE, FlightState.PAUSED)
    now = clock.now()

    _apply_position(flight, report.final_position, clock)
    flight.flight_log = report.flight_log
    flight.auto_save_log = None
    flight.paused = None
    flight.completed = now

    if flight.time_warp_time_saved_seconds > 0:
        aircraft.warping_until = now + timedelta(seconds=flight.time_warp_time_saved_seconds)

    if flight.flight_phase == FlightPhase.CRASHED:
        # Crashed aircraft are returned to the origin
        flight.landed_at_icao = flight.origin_icao
    else:
        # TODO: land at the nearest airport to the final position once
        # airport proximity search exists; the destination is assumed.
        flight.landed_at_icao = flight.destination_icao
    aircraft.airport_icao = flight.landed_at_icao
    aircraft.fuel = report.final_position.fuel_tanks.total

    logger.info(
        "Flight %s completed, aircraft %s landed at %s",
        flight.id, aircraft.registry, flight.landed_at_icao,
    )
    return flight.landed_at_icao


def abort(flight: Flight) -> None:
    """Active/paused -> planning; the flight can be started again later."""
    _require(flight, "abort", FlightState.ACTIVE, FlightState.PAUSED)
    flight.started = None
    flight.paused = None
    flight.payload_loading_complete = None
    flight.fuel_loading_complete = None
    flight.auto_save_log = None
    flight.last_auto_save = None
    flight.flight_phase = FlightPhase.BRIEFING.value
    flight.latitude = None
    flight.longitude = None
    flight.last_position_report = None
    flight.on_ground = True
    flight.altitude = None
    flight.ground_speed = None
    flight.heading = None
    logger.info("Flight %s aborted, back to planning", flight.id)
