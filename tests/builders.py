"""Entity builders and a fixed clock shared by the test suites."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from skyfleet.contracts.aircraft import Aircraft
from skyfleet.contracts.aircraft_type import AircraftType
from skyfleet.contracts.airport import Airport
from skyfleet.contracts.enums import EngineType
from skyfleet.contracts.flight import Flight

NOW = datetime(2026, 3, 15, 12, 0, tzinfo=timezone.utc)


class FixedClock:
    """Clock test double; ``advance`` moves it forward."""

    def __init__(self, now: datetime = NOW):
        self._now = now

    def now(self) -> datetime:
        return self._now

    def advance(self, **kwargs) -> None:
        self._now += timedelta(**kwargs)


def make_type(type_id: str = "c172", engine: EngineType = EngineType.PISTON, **kwargs) -> AircraftType:
    return AircraftType(id=type_id, name=kwargs.pop("name", type_id.upper()), engine_type=engine, **kwargs)


def make_airport(icao: str = "KLAX", avgas: bool = True, jet: bool = True) -> Airport:
    return Airport(
        icao=icao,
        name=f"{icao} International",
        latitude=33.94,
        longitude=-118.41,
        has_avgas=avgas,
        has_jet_fuel=jet,
    )


def make_aircraft(registry: str = "N123AB", airport: str = "KLAX", **kwargs) -> Aircraft:
    return Aircraft(registry=registry, type_id=kwargs.pop("type_id", "c172"), airport_icao=airport, **kwargs)


def make_flight(
    flight_id: str = "f1",
    registry: str | None = "N123AB",
    origin: str = "KLAX",
    destination: str = "KSFO",
    **kwargs,
) -> Flight:
    kwargs.setdefault("operator", {"kind": "airline", "id": "OSK"})
    kwargs.setdefault("flight_number", 123)
    kwargs.setdefault("fuel_gallons", 40.0)
    return Flight(
        id=flight_id,
        aircraft_registry=registry,
        origin_icao=origin,
        destination_icao=destination,
        created=NOW - timedelta(hours=1),
        **kwargs,
    )
