"""Airport endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from skyfleet.api.deps import get_airport_repo
from skyfleet.contracts.airport import Airport
from skyfleet.persistence.repositories.airport_repo import AirportRepository

router = APIRouter(prefix="/airports", tags=["airports"])

_FUEL_FIELDS = {"avgas": "has_avgas", "jetfuel": "has_jet_fuel"}


@router.get("")
async def list_airports(
    sells: str | None = None,
    repo: AirportRepository = Depends(get_airport_repo),
) -> list[dict]:
    if sells is None:
        items = await repo.list_all()
    elif sells in _FUEL_FIELDS:
        items = await repo.list_selling_fuel(_FUEL_FIELDS[sells])
    else:
        raise HTTPException(status_code=400, detail="sells must be 'avgas' or 'jetfuel'")
    return [a.to_firestore() for a in items]


@router.post("", status_code=201)
async def create_airport(
    airport: Airport,
    repo: AirportRepository = Depends(get_airport_repo),
) -> dict:
    await repo.create(airport)
    return airport.to_firestore()


@router.get("/{icao}")
async def get_airport(
    icao: str,
    repo: AirportRepository = Depends(get_airport_repo),
) -> dict:
    item = await repo.get(icao.upper())
    if item is None:
        raise HTTPException(status_code=404, detail="Airport not found")
    return item.to_firestore()
