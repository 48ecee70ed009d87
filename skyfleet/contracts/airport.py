"""Airport reference data with its runways and approaches.

Stored at: ``/airports/{icao}``

Runways and approaches are static per-airport geography and are embedded
in the airport document rather than kept in their own collections.
"""

from pydantic import Field

from skyfleet.contracts.common import FirestoreModel


class RunwayEnd(FirestoreModel):
    name: str = Field(..., min_length=1, max_length=10, description="e.g. '09L'")
    heading: float = Field(..., ge=0, lt=360)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    has_closed_markings: bool = False
    ils_frequency: int | None = Field(default=None, description="kHz")
    left_vasi_type: str | None = None
    right_vasi_type: str | None = None
    offset_threshold: int = Field(default=0, ge=0, description="feet")


class Runway(FirestoreModel):
    length: int = Field(..., gt=0, description="feet")
    width: int = Field(..., gt=0, description="feet")
    surface: str | None = None
    altitude: int = 0
    center_light: str | None = None
    edge_light: str | None = None
    ends: list[RunwayEnd] = Field(default_factory=list)


class Approach(FirestoreModel):
    type: str = Field(..., min_length=1, description="e.g. 'ILS', 'RNAV'")
    runway_name: str | None = None
    suffix: str | None = None


class Airport(FirestoreModel):
    """An airport: location, services and fuel availability."""

    icao: str = Field(..., pattern=r"^[A-Z0-9]{3,5}$", description="e.g. KLAX")
    name: str = Field(..., min_length=1)
    city: str | None = None
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    altitude: int = Field(default=0, description="Field elevation in feet")

    has_avgas: bool = False
    has_jet_fuel: bool = False
    avgas_price: float = Field(default=0.0, ge=0, description="SkyBucks per gallon")
    jet_fuel_price: float = Field(default=0.0, ge=0, description="SkyBucks per gallon")

    is_closed: bool = False
    is_military: bool = False
    size: int | None = Field(default=None, ge=-1, le=6)
    gates: int = Field(default=0, ge=0)
    ga_ramps: int = Field(default=0, ge=0)
    supports_super: bool = False

    atis_frequency: int | None = Field(default=None, description="kHz")
    tower_frequency: int | None = Field(default=None, description="kHz")
    unicom_frequency: int | None = Field(default=None, description="kHz")

    longest_runway_length: int = Field(default=0, ge=0, description="feet")
    longest_runway_surface: str | None = None
    runways: list[Runway] = Field(default_factory=list)
    approaches: list[Approach] = Field(default_factory=list)

    msfs: bool = False
    xp11: bool = False
