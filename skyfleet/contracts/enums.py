"""Enumerations shared across all SkyFleet contracts.

Values of ``FlightPhase`` and ``StartFlightStatus`` are the names the
simulator client and agent exchange on the wire, so they keep their
PascalCase spelling.
"""

from enum import Enum


class EngineType(str, Enum):
    PISTON = "piston"
    JET = "jet"
    NONE = "none"
    HELO_BELL_TURBINE = "helo_bell_turbine"
    UNSUPPORTED = "unsupported"
    TURBOPROP = "turboprop"


class FuelType(str, Enum):
    AVGAS = "avgas"
    JET_FUEL = "jet_fuel"
    NONE = "none"
    NOT_USED = "not_used"  # Only meaningful as AircraftType.override_fuel_type


class AircraftTypeCategory(str, Enum):
    SEP = "SEP"
    MEP = "MEP"
    SET = "SET"
    MET = "MET"
    JET = "Jet"
    REGIONAL = "Regional"
    NB_AIRLINER = "NBAirliner"
    WB_AIRLINER = "WBAirliner"
    HELICOPTER = "Helicopter"


class FlightPhase(str, Enum):
    """Phase of flight as reported by the simulator client."""
    BRIEFING = "Briefing"
    UNKNOWN = "Unknown"
    UNTRACKED = "UnTracked"
    PRE_FLIGHT = "PreFlight"
    PUSH_BACK = "PushBack"
    TAXI_OUT = "TaxiOut"
    TAKEOFF = "Takeoff"
    DEPARTURE = "Departure"
    CLIMB = "Climb"
    CRUISE = "Cruise"
    DESCENT = "Descent"
    APPROACH = "Approach"
    LANDING = "Landing"
    GO_AROUND = "GoAround"
    TAXI_IN = "TaxiIn"
    POST_FLIGHT = "PostFlight"
    CRASHED = "Crashed"


class FlightState(str, Enum):
    """Lifecycle state of a flight, derived from its timestamps."""
    PLANNING = "planning"
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"


class StartFlightStatus(str, Enum):
    STARTED = "Started"
    AIRCRAFT_NOT_AT_ORIGIN = "AircraftNotAtOrigin"
    ORIGIN_DOESNT_SELL_AVGAS = "OriginDoesntSellAvGas"
    ORIGIN_DOESNT_SELL_JET_FUEL = "OriginDoesntSellJetFuel"
    NON_FLIGHT_PLAN_PAYLOADS_FOUND = "NonFlightPlanPayloadsFound"
    AIRCRAFT_NOT_IDLE = "AircraftNotIdle"


class JobType(str, Enum):
    CARGO_L = "cargo_l"
    CARGO_S = "cargo_s"


class NotificationStyle(str, Enum):
    TOAST_INFO = "toast_info"
    MESSAGE_BOX_INFO = "message_box_info"
    TOAST_WARNING = "toast_warning"
    MESSAGE_BOX_WARNING = "message_box_warning"
    TOAST_ERROR = "toast_error"
    MESSAGE_BOX_ERROR = "message_box_error"


class NotificationTarget(str, Enum):
    """Which channel(s) a notification must be delivered to."""
    CLIENT = "client"
    AGENT = "agent"
    CLIENT_AND_AGENT = "client_and_agent"
    EMAIL = "email"
    ALL = "all"


class FinancialCategory(str, Enum):
    NONE = "none"
    AIRCRAFT = "aircraft"
    FUEL = "fuel"
    MAINTENANCE = "maintenance"
    AIRPORT_FEES = "airport_fees"
    SALARIES = "salaries"
    LOAN = "loan"
    INTEREST = "interest"
    SHARES = "shares"
    DIVIDEND = "dividend"
    FBO = "fbo"
    CARGO = "cargo"
    PASSENGERS = "passengers"
    SPECIALTY_JOBS = "specialty_jobs"
    FINES = "fines"
