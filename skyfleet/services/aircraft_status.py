"""Read-only views derived from an aircraft and its loaded relations.

All functions here are pure: they never mutate the aircraft and only
depend on their arguments (and the injected clock).
"""

from __future__ import annotations

import logging
from datetime import timedelta

from skyfleet.contracts.aircraft import Aircraft
from skyfleet.contracts.aircraft_type import AircraftType
from skyfleet.contracts.enums import FlightPhase
from skyfleet.contracts.errors import MultipleActiveFlights, RelationNotLoaded
from skyfleet.contracts.flight import Flight
from skyfleet.services.clock import Clock

logger = logging.getLogger(__name__)

STATUS_IDLE = "Idle"
SYSTEM_OWNER = "[System]"


def is_active(flight: Flight) -> bool:
    """Started and not completed (paused flights count as active)."""
    return flight.started is not None and flight.completed is None


def find_active_flight(aircraft: Aircraft) -> Flight | None:
    """Return the single active flight of the aircraft, if any.

    Raises ``RelationNotLoaded`` if ``aircraft.flights`` was not fetched and
    ``MultipleActiveFlights`` if more than one flight is active.
    """
    if aircraft.flights is None:
        raise RelationNotLoaded("Aircraft", aircraft.registry, "flights")
    active = [f for f in aircraft.flights if is_active(f)]
    if len(active) > 1:
        logger.error(
            "Aircraft %s has %d active flights: %s",
            aircraft.registry, len(active), [f.id for f in active],
        )
        raise MultipleActiveFlights(aircraft.registry, [f.id for f in active])
    return active[0] if active else None


def format_countdown(remaining: timedelta) -> str:
    """HH:MM:SS, truncated to whole seconds. Hours are not wrapped at 24."""
    total = int(remaining.total_seconds())
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def derive_status(aircraft: Aircraft, clock: Clock) -> str:
    """Human-readable operational status of the aircraft.

    - ``"Paused (OSK123)"`` if its active flight is paused
    - ``"Climb (OSK123)"`` (current phase) if its active flight is flying
    - ``"Warping T-00:01:30"`` if warping until a future time
    - ``"Idle"`` otherwise
    """
    flight = find_active_flight(aircraft)
    if flight is not None:
        if flight.paused is not None:
            return f"Paused ({flight.full_flight_number})"
        return f"{FlightPhase(flight.flight_phase).value} ({flight.full_flight_number})"

    if aircraft.warping_until is not None:
        remaining = aircraft.warping_until - clock.now()
        if remaining > timedelta(0):
            return f"Warping T-{format_countdown(remaining)}"

    return STATUS_IDLE


def owner_name(aircraft: Aircraft) -> str:
    """Display name of the aircraft's owner, "[System]" if unowned."""
    if aircraft.owner is None:
        return SYSTEM_OWNER
    if aircraft.owner.kind == "airline":
        if aircraft.owner_airline is None:
            raise RelationNotLoaded("Aircraft", aircraft.registry, "owner_airline")
        return aircraft.owner_airline.name
    if aircraft.owner_account is None:
        raise RelationNotLoaded("Aircraft", aircraft.registry, "owner_account")
    return aircraft.owner_account.username


def uploader_name(aircraft_type: AircraftType) -> str:
    if aircraft_type.uploader_id is None:
        return SYSTEM_OWNER
    if aircraft_type.uploader is None:
        raise RelationNotLoaded("AircraftType", aircraft_type.id, "uploader")
    return aircraft_type.uploader.username
