"""SkyFleet data contracts: Pydantic v2 models for the flight sim world.

Data authority
--------------

**Firestore** (source of truth, one top-level collection per entity):
- ``Airport``: ``/airports/{icao}``
- ``Airline``: ``/airlines/{icao}``
- ``UserAccount``: ``/users/{id}``
- ``AircraftManufacturer``: ``/manufacturers/{id}``
- ``AircraftType``: ``/aircraft_types/{id}``
- ``Aircraft``: ``/aircraft/{registry}``
- ``Flight``: ``/flights/{id}``
- ``Job`` / ``Payload``: ``/jobs/{id}``, ``/payloads/{id}``
- ``Notification``: ``/notifications/{id}``
- ``FinancialRecord``: ``/financial_records/{id}``

Calculated (never persisted)
----------------------------
- Aircraft status and owner name (``services.aircraft_status``)
- Fuel type and density of a type (``services.fuel``)
- Flight state, derived from the lifecycle timestamps (``services.flight_lifecycle``)
- Full flight number (``Flight.full_flight_number``)
- Per-category account totals (``services.financials``)
"""

from skyfleet.contracts.enums import (
    AircraftTypeCategory,
    EngineType,
    FinancialCategory,
    FlightPhase,
    FlightState,
    FuelType,
    JobType,
    NotificationStyle,
    NotificationTarget,
    StartFlightStatus,
)
from skyfleet.contracts.common import FirestoreModel, UtcDateTime, VersionedModel
from skyfleet.contracts.result import ServiceError, ServiceResult, StartFlightResult
from skyfleet.contracts.operator import AirlineOperator, Operator, UserOperator
from skyfleet.contracts.airport import Approach, Airport, Runway, RunwayEnd
from skyfleet.contracts.airline import Airline, UserAccount
from skyfleet.contracts.aircraft_type import AircraftManufacturer, AircraftType
from skyfleet.contracts.flight import FinalReport, Flight, FuelTanks, PositionReport
from skyfleet.contracts.aircraft import Aircraft
from skyfleet.contracts.payload import Job, Payload
from skyfleet.contracts.notification import Notification
from skyfleet.contracts.financial import CategoryTotals, FinancialRecord

__all__ = [
    # Enums
    "AircraftTypeCategory",
    "EngineType",
    "FinancialCategory",
    "FlightPhase",
    "FlightState",
    "FuelType",
    "JobType",
    "NotificationStyle",
    "NotificationTarget",
    "StartFlightStatus",
    # Common
    "FirestoreModel",
    "UtcDateTime",
    "VersionedModel",
    # Result
    "ServiceError",
    "ServiceResult",
    "StartFlightResult",
    # Domain models
    "AirlineOperator",
    "Operator",
    "UserOperator",
    "Approach",
    "Airport",
    "Runway",
    "RunwayEnd",
    "Airline",
    "UserAccount",
    "AircraftManufacturer",
    "AircraftType",
    "FinalReport",
    "Flight",
    "FuelTanks",
    "PositionReport",
    "Aircraft",
    "Job",
    "Payload",
    "Notification",
    "CategoryTotals",
    "FinancialRecord",
]
