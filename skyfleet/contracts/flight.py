"""Flight: one planned or flown trip of an aircraft.

Stored at: ``/flights/{flight_id}``

Lifecycle is carried by timestamps only:

- ``created`` always set
- ``started`` set once the flight leaves planning
- ``paused`` set while an active flight is paused
- ``completed`` terminal; a completed flight is immutable history

``skyfleet.services.flight_lifecycle`` derives the state and performs the
transitions.
"""

import uuid
from typing import Any

from pydantic import Field, model_validator

from skyfleet.contracts.airline import Airline
from skyfleet.contracts.common import FirestoreModel, UtcDateTime, VersionedModel, utc_now
from skyfleet.contracts.enums import FlightPhase
from skyfleet.contracts.operator import Operator, lift_operator_ids


def new_flight_id() -> str:
    return uuid.uuid4().hex


class FuelTanks(FirestoreModel):
    """Fuel tank quantities in gallons, as reported by the simulator."""

    center: float = Field(default=0.0, ge=0)
    center2: float = Field(default=0.0, ge=0)
    center3: float = Field(default=0.0, ge=0)
    left_main: float = Field(default=0.0, ge=0)
    left_aux: float = Field(default=0.0, ge=0)
    left_tip: float = Field(default=0.0, ge=0)
    right_main: float = Field(default=0.0, ge=0)
    right_aux: float = Field(default=0.0, ge=0)
    right_tip: float = Field(default=0.0, ge=0)
    external1: float = Field(default=0.0, ge=0)
    external2: float = Field(default=0.0, ge=0)

    @property
    def total(self) -> float:
        return (
            self.center + self.center2 + self.center3
            + self.left_main + self.left_aux + self.left_tip
            + self.right_main + self.right_aux + self.right_tip
            + self.external1 + self.external2
        )


class PositionReport(FirestoreModel):
    """Periodic position/state report from the simulator client."""

    flight_phase: FlightPhase
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    altitude: float = Field(default=0.0, description="feet AMSL")
    radio_height: float | None = Field(default=None, description="feet AGL")
    airspeed_true: float | None = Field(default=None, ge=0, description="kt")
    ground_speed: float | None = Field(default=None, ge=0, description="kt")
    heading: float | None = Field(default=None, ge=0, le=360)
    bank_angle: float = 0.0
    pitch_angle: float = 0.0
    vertical_speed_seconds: float = Field(default=0.0, description="feet per second")
    on_ground: bool = False
    time_warp_time_saved_seconds: int = Field(default=0, ge=0)
    fuel_tanks: FuelTanks = Field(default_factory=FuelTanks)


class FinalReport(FirestoreModel):
    final_position: PositionReport
    flight_log: str | None = None


class Flight(VersionedModel):
    """A flight plan and, once started, its live tracking state."""

    id: str = Field(default_factory=new_flight_id)
    flight_number: int = Field(..., ge=1, le=9999)
    operator: Operator
    assigned_airline_pilot_id: str | None = None
    dispatcher_id: str | None = None
    dispatcher_remarks: str | None = None

    aircraft_registry: str | None = None
    origin_icao: str = Field(..., pattern=r"^[A-Z0-9]{3,5}$")
    destination_icao: str = Field(..., pattern=r"^[A-Z0-9]{3,5}$")
    alternate_icao: str | None = Field(default=None, pattern=r"^[A-Z0-9]{3,5}$")
    landed_at_icao: str | None = None
    route: str | None = None
    alternate_route: str | None = None

    planned_departure_time: UtcDateTime | None = None
    utc_offset: float = Field(default=0.0, ge=-12.0, le=14.0)
    fuel_gallons: float | None = Field(default=None, ge=0)
    payload_ids: list[str] = Field(
        default_factory=list, description="Payloads planned for this flight"
    )

    # Lifecycle
    created: UtcDateTime = Field(default_factory=utc_now)
    started: UtcDateTime | None = None
    paused: UtcDateTime | None = None
    completed: UtcDateTime | None = None
    fuel_loading_complete: UtcDateTime | None = None
    payload_loading_complete: UtcDateTime | None = None

    # Tracking (last position report)
    flight_phase: FlightPhase = FlightPhase.BRIEFING
    latitude: float | None = None
    longitude: float | None = None
    altitude: float | None = None
    radio_height: float | None = None
    airspeed_true: float | None = None
    ground_speed: float | None = None
    heading: float | None = None
    bank_angle: float = 0.0
    pitch_angle: float = 0.0
    vertical_speed_seconds: float = 0.0
    on_ground: bool = True
    fuel_tanks: FuelTanks | None = None
    time_warp_time_saved_seconds: int = Field(default=0, ge=0)
    last_position_report: UtcDateTime | None = None
    auto_save_log: str | None = None
    last_auto_save: UtcDateTime | None = None
    flight_log: str | None = None

    # Loaded relation, never persisted
    operator_airline: Airline | None = Field(default=None, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _legacy_operator_ids(cls, data: Any) -> Any:
        return lift_operator_ids(
            data, "operator", "operator_id", "operator_airline_id",
            entity="flight", required=True,
        )

    @property
    def full_flight_number(self) -> str:
        """Operator prefix + flight number, e.g. 'OS123'.

        Airline flights use the airline IATA code when the airline is
        loaded and has one, otherwise the airline ICAO id.
        """
        if self.operator.kind == "airline":
            if self.operator_airline is not None and self.operator_airline.iata:
                return f"{self.operator_airline.iata}{self.flight_number}"
            return f"{self.operator.id}{self.flight_number}"
        return f"{self.flight_number}"
