"""Configuration for SkyFleet.

Loads settings from environment variables (and a ``.env`` file in the
working directory) with sensible defaults.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass(frozen=True)
class ApiConfig:
    cors_origins: tuple[str, ...] = _split_csv(
        os.getenv("CORS_ORIGINS", "http://localhost:5173")
    )


@dataclass(frozen=True)
class LoggingConfig:
    level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class FlightRulesConfig:
    """Game rules applied by the flight lifecycle."""
    # Position reports still accepted this long after a pause
    position_report_pause_grace_seconds: int = int(
        os.getenv("POSITION_REPORT_PAUSE_GRACE_SECONDS", "60")
    )
    avgas_gallons_per_minute: float = float(os.getenv("AVGAS_GALLONS_PER_MINUTE", "8"))
    jetfuel_gallons_per_minute: float = float(os.getenv("JETFUEL_GALLONS_PER_MINUTE", "500"))
    fuel_loading_base_minutes: float = float(os.getenv("FUEL_LOADING_BASE_MINUTES", "3"))


@dataclass(frozen=True)
class Config:
    api: ApiConfig = field(default_factory=ApiConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    flight_rules: FlightRulesConfig = field(default_factory=FlightRulesConfig)


config = Config()
