"""Aircraft types, their manufacturers, and the variant/version graph.

Stored at: ``/aircraft_types/{type_id}`` and ``/manufacturers/{id}``

``is_variant_of`` and ``next_version`` are plain type IDs. The graph they
form is only navigated through ``AircraftTypeCatalog``, which also
refuses links that would close a cycle.
"""

import uuid

from pydantic import Field

from skyfleet.contracts.airline import UserAccount
from skyfleet.contracts.common import FirestoreModel, VersionedModel
from skyfleet.contracts.enums import AircraftTypeCategory, EngineType, FuelType

# Sentinel for "no explicit fuel density": any negative value.
FUEL_WEIGHT_NOT_SET = -1.0


def new_type_id() -> str:
    return uuid.uuid4().hex


class AircraftManufacturer(FirestoreModel):
    id: str = Field(..., min_length=1, max_length=5, description="e.g. 'BOE'")
    name: str = Field(..., min_length=1)
    delivery_airports: list[str] = Field(
        default_factory=list, description="ICAO codes where new aircraft are delivered"
    )


class AircraftType(VersionedModel):
    """An aircraft type as flown in the simulator.

    **Derived views** (see ``skyfleet.services.fuel`` and
    ``skyfleet.services.type_catalog``):
    - fuel type and fuel weight per gallon
    - has variants / upgrade path
    - uploader name
    """

    id: str = Field(default_factory=new_type_id)
    name: str = Field(..., min_length=1)
    atc_type: str | None = None
    atc_model: str | None = None
    icao_type: str | None = Field(default=None, max_length=4, description="e.g. 'C172'")
    category: AircraftTypeCategory = AircraftTypeCategory.SEP
    manufacturer_id: str | None = None
    simulator: str = Field(default="msfs")

    engine_type: EngineType
    engine_count: int = Field(default=1, ge=0)
    override_fuel_type: FuelType = FuelType.NOT_USED
    fuel_weight_per_gallon_override: float = Field(
        default=FUEL_WEIGHT_NOT_SET,
        description="lbs/gal; negative means derive from the fuel type",
    )
    fuel_total_capacity: float = Field(default=0.0, ge=0, description="gallons")

    empty_weight: float = Field(default=0.0, ge=0, description="lbs")
    max_gross_weight: float = Field(default=0.0, ge=0, description="lbs")
    min_runway_length: int = Field(default=0, ge=0, description="feet")
    min_price: int = Field(default=0, ge=0)
    max_price: int = Field(default=0, ge=0)

    is_gear_retractable: bool = False
    flaps_available: bool = True
    needs_co_pilot: bool = False
    needs_flight_engineer: bool = False
    is_vanilla: bool = False
    enabled: bool = False
    detailed_checks_disabled: bool = False

    is_variant_of: str | None = Field(default=None, description="Parent type ID")
    next_version: str | None = Field(default=None, description="Newer type ID")

    uploader_id: str | None = None
    comments: str | None = None

    # Loaded relation, never persisted
    uploader: UserAccount | None = Field(default=None, exclude=True)
