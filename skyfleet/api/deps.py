"""FastAPI dependency injection wiring."""

from __future__ import annotations

from fastapi import Depends

from skyfleet.persistence.repositories.aircraft_repo import AircraftRepository
from skyfleet.persistence.repositories.aircraft_type_repo import AircraftTypeRepository
from skyfleet.persistence.repositories.airport_repo import AirportRepository
from skyfleet.persistence.repositories.financial_repo import FinancialRecordRepository
from skyfleet.persistence.repositories.flight_repo import FlightRepository
from skyfleet.persistence.repositories.notification_repo import NotificationRepository
from skyfleet.persistence.repositories.payload_repo import JobRepository, PayloadRepository
from skyfleet.services.clock import Clock, SystemClock
from skyfleet.services.flight_service import FlightService

# ------------------------------------------------------------------
# Clock (overridden in tests)
# ------------------------------------------------------------------

_system_clock = SystemClock()


def get_clock() -> Clock:
    return _system_clock


# ------------------------------------------------------------------
# Repositories (stateless, a new instance per request)
# ------------------------------------------------------------------


def get_aircraft_repo() -> AircraftRepository:
    return AircraftRepository()


def get_aircraft_type_repo() -> AircraftTypeRepository:
    return AircraftTypeRepository()


def get_airport_repo() -> AirportRepository:
    return AirportRepository()


def get_flight_repo() -> FlightRepository:
    return FlightRepository()


def get_payload_repo() -> PayloadRepository:
    return PayloadRepository()


def get_job_repo() -> JobRepository:
    return JobRepository()


def get_notification_repo() -> NotificationRepository:
    return NotificationRepository()


def get_financial_repo() -> FinancialRecordRepository:
    return FinancialRecordRepository()


# ------------------------------------------------------------------
# Services
# ------------------------------------------------------------------


def get_flight_service(
    flights: FlightRepository = Depends(get_flight_repo),
    aircraft: AircraftRepository = Depends(get_aircraft_repo),
    aircraft_types: AircraftTypeRepository = Depends(get_aircraft_type_repo),
    airports: AirportRepository = Depends(get_airport_repo),
    payloads: PayloadRepository = Depends(get_payload_repo),
    clock: Clock = Depends(get_clock),
) -> FlightService:
    return FlightService(flights, aircraft, aircraft_types, airports, payloads, clock)
