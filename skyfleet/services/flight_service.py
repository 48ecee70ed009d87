"""Flight operations: load what a transition needs, apply it, persist it.

Each operation reads the entities it touches, runs the pure lifecycle
functions, and writes back with the version tokens read at the start, so
two racing requests (e.g. pause + complete) can't both win: the loser
gets ``ConcurrencyConflictError``.

Start and complete write the flight and its aircraft in one batch. The
aircraft's version bump on start is what makes two starts for the same
aircraft conflict.
"""

from __future__ import annotations

from collections.abc import Iterable

from skyfleet.contracts.aircraft import Aircraft
from skyfleet.contracts.enums import StartFlightStatus
from skyfleet.contracts.errors import FlightPlanIncomplete
from skyfleet.contracts.flight import FinalReport, Flight, PositionReport
from skyfleet.contracts.result import StartFlightResult
from skyfleet.persistence.repositories.aircraft_repo import AircraftRepository
from skyfleet.persistence.repositories.aircraft_type_repo import AircraftTypeRepository
from skyfleet.persistence.repositories.airport_repo import AirportRepository
from skyfleet.persistence.repositories.base import update_together
from skyfleet.persistence.repositories.flight_repo import FlightRepository
from skyfleet.persistence.repositories.payload_repo import PayloadRepository
from skyfleet.services import flight_lifecycle
from skyfleet.services.aircraft_status import derive_status
from skyfleet.services.clock import Clock, SystemClock
from skyfleet.services.flight_start import StartContext, start_flight


class FlightService:
    def __init__(
        self,
        flights: FlightRepository | None = None,
        aircraft: AircraftRepository | None = None,
        aircraft_types: AircraftTypeRepository | None = None,
        airports: AirportRepository | None = None,
        payloads: PayloadRepository | None = None,
        clock: Clock | None = None,
    ):
        self._flights = flights or FlightRepository()
        self._aircraft = aircraft or AircraftRepository()
        self._aircraft_types = aircraft_types or AircraftTypeRepository()
        self._airports = airports or AirportRepository()
        self._payloads = payloads or PayloadRepository()
        self._clock = clock or SystemClock()

    async def _load(self, flight_id: str) -> Flight:
        flight = await self._flights.require(flight_id)
        return await self._flights.load_operator_airline(flight)

    async def _load_flights(self, aircraft: Aircraft) -> Aircraft:
        await self._aircraft.load_flights(aircraft)
        for loaded in aircraft.flights:
            await self._flights.load_operator_airline(loaded)
        return aircraft

    async def _ensure_pilot_free(self, flight: Flight, action: str) -> None:
        pilot = flight_lifecycle.pilot_id(flight)
        if pilot is None:
            return
        pilot_flights = await self._flights.list_for_pilot(pilot)
        flight_lifecycle.ensure_pilot_free(flight, pilot_flights, action)

    async def start(
        self, flight_id: str, overrides: Iterable[StartFlightStatus | str] = ()
    ) -> StartFlightResult:
        flight = await self._load(flight_id)
        flight_lifecycle.ensure_not_completed(flight, "start")
        if not flight.aircraft_registry:
            raise FlightPlanIncomplete(flight.id, "assigned aircraft")
        await self._ensure_pilot_free(flight, "start")
        aircraft = await self._load_flights(await self._aircraft.require(flight.aircraft_registry))
        ctx = StartContext(
            flight=flight,
            aircraft=aircraft,
            aircraft_type=await self._aircraft_types.require(aircraft.type_id),
            origin=await self._airports.require(flight.origin_icao),
            payloads_aboard=await self._payloads.list_aboard(aircraft.registry),
            clock=self._clock,
        )
        result = start_flight(ctx, overrides)
        if result.started:
            await update_together((self._flights, flight), (self._aircraft, aircraft))
        return result

    async def pause(self, flight_id: str) -> Flight:
        flight = await self._load(flight_id)
        flight_lifecycle.pause(flight, self._clock)
        await self._flights.update(flight)
        return flight

    async def resume(self, flight_id: str) -> Flight:
        flight = await self._load(flight_id)
        await self._ensure_pilot_free(flight, "resume")
        flight_lifecycle.resume(flight)
        await self._flights.update(flight)
        return flight

    async def report_position(self, flight_id: str, report: PositionReport) -> Flight:
        flight = await self._load(flight_id)
        flight_lifecycle.record_position(flight, report, self._clock)
        await self._flights.update(flight)
        return flight

    async def upload_auto_save(self, flight_id: str, auto_save: str) -> Flight:
        flight = await self._load(flight_id)
        flight_lifecycle.store_auto_save(flight, auto_save, self._clock)
        await self._flights.update(flight)
        return flight

    async def download_auto_save(self, flight_id: str) -> str | None:
        flight = await self._flights.require(flight_id)
        return flight.auto_save_log

    async def complete(self, flight_id: str, report: FinalReport) -> Flight:
        flight = await self._load(flight_id)
        flight_lifecycle.ensure_not_completed(flight, "complete")
        if not flight.aircraft_registry:
            raise FlightPlanIncomplete(flight.id, "assigned aircraft")
        aircraft = await self._aircraft.require(flight.aircraft_registry)
        flight_lifecycle.complete(flight, aircraft, report, self._clock)
        await update_together((self._flights, flight), (self._aircraft, aircraft))
        return flight

    async def abort(self, flight_id: str) -> Flight:
        flight = await self._load(flight_id)
        flight_lifecycle.abort(flight)
        await self._flights.update(flight)
        return flight

    async def status_of(self, aircraft: Aircraft) -> str:
        """Load the aircraft's flights onto it and derive its status."""
        return derive_status(await self._load_flights(aircraft), self._clock)

    async def aircraft_status(self, registry: str) -> str:
        return await self.status_of(await self._aircraft.require(registry))
