"""Aircraft type endpoints: catalog entries, fuel, variants and upgrades."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from skyfleet.api.deps import get_aircraft_type_repo
from skyfleet.contracts.aircraft_type import AircraftType
from skyfleet.persistence.repositories.aircraft_type_repo import AircraftTypeRepository
from skyfleet.services.aircraft_status import uploader_name
from skyfleet.services.fuel import resolve_fuel_type, resolve_fuel_weight_per_gallon
from skyfleet.services.type_catalog import AircraftTypeCatalog

router = APIRouter(prefix="/aircraft-types", tags=["aircraft-types"])


class TypeLinks(BaseModel):
    is_variant_of: str | None = None
    next_version: str | None = None


async def _catalog_with(repo: AircraftTypeRepository, type_id: str) -> AircraftTypeCatalog:
    catalog = await repo.load_catalog()
    if type_id not in catalog:
        raise HTTPException(status_code=404, detail="Aircraft type not found")
    return catalog


@router.get("")
async def list_aircraft_types(
    enabled: bool = False,
    repo: AircraftTypeRepository = Depends(get_aircraft_type_repo),
) -> list[dict]:
    items = await repo.list_enabled() if enabled else await repo.list_all()
    return [t.to_firestore() for t in items]


@router.post("", status_code=201)
async def create_aircraft_type(
    aircraft_type: AircraftType,
    repo: AircraftTypeRepository = Depends(get_aircraft_type_repo),
) -> dict:
    """Create a type; its variant/version links must point at known types
    and must not close a cycle."""
    catalog = await repo.load_catalog()
    catalog.add(aircraft_type)
    await repo.create(aircraft_type)
    return aircraft_type.to_firestore()


@router.get("/{type_id}")
async def get_aircraft_type(
    type_id: str,
    repo: AircraftTypeRepository = Depends(get_aircraft_type_repo),
) -> dict:
    item = await repo.load_uploader(await repo.require(type_id))
    data = item.to_firestore()
    data["uploader_name"] = uploader_name(item)
    return data


@router.get("/{type_id}/fuel")
async def get_fuel(
    type_id: str,
    repo: AircraftTypeRepository = Depends(get_aircraft_type_repo),
) -> dict:
    item = await repo.require(type_id)
    return {
        "fuel_type": resolve_fuel_type(item).value,
        "fuel_weight_per_gallon": resolve_fuel_weight_per_gallon(item),
    }


@router.get("/{type_id}/variants")
async def list_variants(
    type_id: str,
    repo: AircraftTypeRepository = Depends(get_aircraft_type_repo),
) -> dict:
    catalog = await _catalog_with(repo, type_id)
    return {
        "root": catalog.variant_root(type_id).id,
        "variants": [t.id for t in catalog.variants_of(type_id)],
    }


@router.get("/{type_id}/upgrade-path")
async def get_upgrade_path(
    type_id: str,
    repo: AircraftTypeRepository = Depends(get_aircraft_type_repo),
) -> list[str]:
    catalog = await _catalog_with(repo, type_id)
    return [t.id for t in catalog.upgrade_path(type_id)]


@router.put("/{type_id}/links")
async def update_links(
    type_id: str,
    links: TypeLinks,
    repo: AircraftTypeRepository = Depends(get_aircraft_type_repo),
) -> dict:
    catalog = await _catalog_with(repo, type_id)
    catalog.set_variant_of(type_id, links.is_variant_of)
    catalog.set_next_version(type_id, links.next_version)
    item = catalog.get(type_id)
    await repo.update(item)
    return item.to_firestore()
