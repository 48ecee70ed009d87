"""Base classes and shared types for SkyFleet contracts.

Unit conventions (all contracts and API responses):
- **Fuel quantities**: US gallons
- **Fuel density**: pounds per US gallon
- **Payload weights**: pounds (lbs)
- **Money**: SkyBucks, integer amounts
- **Altitudes**: feet AMSL
- **Runway lengths**: feet
- **Datetimes**: always UTC, ISO 8601 in serialized form. Naive input is
  read as UTC.
- **Coordinates**: WGS84 decimal degrees

Relations to other entities are never loaded implicitly. Fields holding a
loaded relation are declared with ``exclude=True`` so they never reach
Firestore, and ``None`` on such a field means "not loaded".
"""

from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDateTime = Annotated[datetime, AfterValidator(_as_utc)]


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


class FirestoreModel(BaseModel):
    """Base model with Firestore-friendly serialization.

    - Enums serialize as string values (Firestore stores strings).
    - ``to_firestore()`` produces a JSON-safe dict (datetimes as ISO 8601).
    - ``from_firestore()`` hydrates from a Firestore document dict.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_firestore(self, exclude_none: bool = True) -> dict[str, Any]:
        """Dump to Firestore-compatible dict.

        Updates pass ``exclude_none=False`` so that cleared fields
        (e.g. ``Flight.paused``) are written back as null.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=exclude_none)

    @classmethod
    def from_firestore(cls, data: dict[str, Any]) -> "FirestoreModel":
        """Create model instance from Firestore document dict."""
        return cls.model_validate(data)


class VersionedModel(FirestoreModel):
    """A mutable entity guarded by an optimistic concurrency token.

    ``version`` is compared and bumped by ``BaseRepository.update``.
    """

    version: int = Field(default=0, ge=0)
