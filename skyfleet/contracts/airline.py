"""Airlines and the user accounts that own aircraft or operate flights.

Stored at: ``/airlines/{icao}`` and ``/users/{user_id}``

Account credentials and sign-in live with the identity provider; a
``UserAccount`` only keeps what the game world displays.
"""

from pydantic import Field

from skyfleet.contracts.common import UtcDateTime, VersionedModel, utc_now


class UserAccount(VersionedModel):
    id: str = Field(..., min_length=1, description="Identity provider user ID")
    username: str = Field(..., min_length=1, max_length=64)
    airline_icao: str | None = Field(default=None, description="Airline the user flies for")
    registered_on: UtcDateTime = Field(default_factory=utc_now)


class Airline(VersionedModel):
    icao: str = Field(..., pattern=r"^[A-Z0-9]{3}$", description="e.g. 'OSK'")
    iata: str | None = Field(default=None, pattern=r"^[A-Z0-9]{2}$")
    name: str = Field(..., min_length=1)
    country: str | None = None
    founder_id: str | None = None
    founding_date: UtcDateTime = Field(default_factory=utc_now)
    account_balance: int = Field(default=0, description="SkyBucks")
