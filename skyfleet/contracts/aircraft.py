"""Aircraft: an individual airframe in the game world.

Stored at: ``/aircraft/{registry}``
"""

from typing import Any

from pydantic import Field, model_validator

from skyfleet.contracts.airline import Airline, UserAccount
from skyfleet.contracts.common import UtcDateTime, VersionedModel
from skyfleet.contracts.flight import Flight
from skyfleet.contracts.operator import Operator, lift_operator_ids


class Aircraft(VersionedModel):
    """An aircraft, its location, fuel and ownership.

    ``owner`` is ``None`` for system-owned aircraft (displayed as
    "[System]"). ``airport_icao`` is the departure airport while the
    aircraft is in flight.

    **Derived views** (see ``skyfleet.services.aircraft_status``):
    - status: "Idle", "<phase> (<flight>)", "Paused (<flight>)", "Warping T-..."
    - owner name
    """

    registry: str = Field(..., pattern=r"^[A-Z0-9-]{5,10}$", description="e.g. 'N123AB'")
    name: str | None = Field(default=None, max_length=30)
    type_id: str = Field(..., description="Reference to AircraftType document ID")
    airport_icao: str = Field(..., pattern=r"^[A-Z0-9]{3,5}$")
    owner: Operator | None = None
    fuel: float = Field(default=0.0, ge=0, description="gallons")
    warping_until: UtcDateTime | None = None
    purchase_price: int | None = Field(default=None, ge=0, description="None if not for sale")
    rent_price: int | None = Field(default=None, ge=0, description="per flight hour, None if not for rent")

    # Loaded relations, never persisted
    flights: list[Flight] | None = Field(default=None, exclude=True)
    owner_account: UserAccount | None = Field(default=None, exclude=True)
    owner_airline: Airline | None = Field(default=None, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _legacy_owner_ids(cls, data: Any) -> Any:
        return lift_operator_ids(
            data, "owner", "owner_id", "owner_airline_id",
            entity="aircraft", required=False,
        )
