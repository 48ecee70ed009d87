"""Arena of aircraft types indexed by ID.

The variant tree (``is_variant_of``) and the upgrade chain
(``next_version``) are stored as ID links on each type. All navigation
goes through the catalog, which refuses any link that would close a
cycle.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from skyfleet.contracts.aircraft_type import AircraftType
from skyfleet.contracts.errors import InvariantViolation, TypeGraphCycleError

logger = logging.getLogger(__name__)


class UnknownAircraftType(InvariantViolation):
    code = "UNKNOWN_AIRCRAFT_TYPE"

    def __init__(self, type_id: str):
        super().__init__(f"Aircraft type {type_id} is not in the catalog", {"type_id": type_id})


class AircraftTypeCatalog:
    def __init__(self, types: Iterable[AircraftType] = ()):
        self._types: dict[str, AircraftType] = {}
        self._variants: dict[str, list[str]] = {}
        for aircraft_type in types:
            self._types[aircraft_type.id] = aircraft_type
        for aircraft_type in self._types.values():
            if aircraft_type.is_variant_of:
                self._variants.setdefault(aircraft_type.is_variant_of, []).append(aircraft_type.id)

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, type_id: str) -> bool:
        return type_id in self._types

    def get(self, type_id: str) -> AircraftType:
        try:
            return self._types[type_id]
        except KeyError:
            raise UnknownAircraftType(type_id) from None

    def add(self, aircraft_type: AircraftType) -> None:
        """Register a new type, validating both of its links."""
        if aircraft_type.id in self._types:
            raise InvariantViolation(
                f"Aircraft type {aircraft_type.id} already exists", {"type_id": aircraft_type.id}
            )
        parent, successor = aircraft_type.is_variant_of, aircraft_type.next_version
        aircraft_type.is_variant_of = aircraft_type.next_version = None
        self._types[aircraft_type.id] = aircraft_type
        try:
            self.set_variant_of(aircraft_type.id, parent)
            self.set_next_version(aircraft_type.id, successor)
        except InvariantViolation:
            del self._types[aircraft_type.id]
            self._unlink_variant(aircraft_type.id, parent)
            aircraft_type.is_variant_of, aircraft_type.next_version = parent, successor
            raise

    # ------------------------------------------------------------------
    # Variant tree
    # ------------------------------------------------------------------

    def variants_of(self, type_id: str) -> list[AircraftType]:
        self.get(type_id)
        return [self._types[v] for v in self._variants.get(type_id, [])]

    def has_variants(self, type_id: str) -> bool:
        self.get(type_id)
        return bool(self._variants.get(type_id))

    def variant_root(self, type_id: str) -> AircraftType:
        """The base type the given type is (transitively) a variant of."""
        return self.get(self._walk(type_id, "is_variant_of")[-1])

    def set_variant_of(self, type_id: str, parent_id: str | None) -> None:
        aircraft_type = self.get(type_id)
        if parent_id is not None:
            self.get(parent_id)
            chain = self._walk(parent_id, "is_variant_of")
            if type_id in chain:
                raise TypeGraphCycleError(
                    "is_variant_of", [type_id] + chain[: chain.index(type_id) + 1]
                )
        self._unlink_variant(type_id, aircraft_type.is_variant_of)
        aircraft_type.is_variant_of = parent_id
        if parent_id is not None:
            self._variants.setdefault(parent_id, []).append(type_id)

    def _unlink_variant(self, type_id: str, parent_id: str | None) -> None:
        siblings = self._variants.get(parent_id or "")
        if siblings and type_id in siblings:
            siblings.remove(type_id)

    # ------------------------------------------------------------------
    # Upgrade chain
    # ------------------------------------------------------------------

    def upgrade_path(self, type_id: str) -> list[AircraftType]:
        """The type followed by every newer version, oldest first."""
        return [self.get(t) for t in self._walk(type_id, "next_version")]

    def latest_version(self, type_id: str) -> AircraftType:
        return self.upgrade_path(type_id)[-1]

    def set_next_version(self, type_id: str, next_id: str | None) -> None:
        aircraft_type = self.get(type_id)
        if next_id is not None:
            self.get(next_id)
            chain = self._walk(next_id, "next_version")
            if type_id in chain:
                raise TypeGraphCycleError(
                    "next_version", [type_id] + chain[: chain.index(type_id) + 1]
                )
        aircraft_type.next_version = next_id

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _walk(self, type_id: str, link: str) -> list[str]:
        """Follow ``link`` from ``type_id``; stored cycles are reported."""
        chain = [type_id]
        current = self.get(type_id)
        while (next_id := getattr(current, link)) is not None:
            if next_id in chain:
                logger.error("Stored %s cycle: %s", link, chain + [next_id])
                raise TypeGraphCycleError(link, chain + [next_id])
            if next_id not in self._types:
                logger.warning("Type %s links %s to missing type %s", current.id, link, next_id)
                break
            chain.append(next_id)
            current = self._types[next_id]
        return chain
