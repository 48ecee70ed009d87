"""Aircraft CRUD endpoints, plus the derived status view."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from skyfleet.api.deps import get_aircraft_repo, get_flight_service
from skyfleet.contracts.aircraft import Aircraft
from skyfleet.persistence.repositories.aircraft_repo import AircraftRepository
from skyfleet.services.aircraft_status import owner_name
from skyfleet.services.flight_service import FlightService

router = APIRouter(prefix="/aircraft", tags=["aircraft"])


@router.get("")
async def list_aircraft(
    airport: str | None = None,
    for_sale: bool = False,
    repo: AircraftRepository = Depends(get_aircraft_repo),
) -> list[dict]:
    if airport is not None:
        items = await repo.list_at_airport(airport.upper())
    elif for_sale:
        items = await repo.list_for_sale()
    else:
        items = await repo.list_all()
    return [a.to_firestore() for a in items]


@router.post("", status_code=201)
async def create_aircraft(
    aircraft: Aircraft,
    repo: AircraftRepository = Depends(get_aircraft_repo),
) -> dict:
    await repo.create(aircraft)
    return aircraft.to_firestore()


@router.get("/{registry}")
async def get_aircraft(
    registry: str,
    repo: AircraftRepository = Depends(get_aircraft_repo),
    service: FlightService = Depends(get_flight_service),
) -> dict:
    """Aircraft document with its current ``status`` and ``owner_name``."""
    item = await repo.get(registry)
    if item is None:
        raise HTTPException(status_code=404, detail="Aircraft not found")
    await repo.load_owner(item)
    status = await service.status_of(item)
    data = item.to_firestore()
    data["status"] = status
    data["owner_name"] = owner_name(item)
    return data


@router.put("/{registry}")
async def update_aircraft(
    registry: str,
    aircraft: Aircraft,
    repo: AircraftRepository = Depends(get_aircraft_repo),
) -> dict:
    if aircraft.registry != registry:
        raise HTTPException(status_code=400, detail="Registry in body doesn't match the URL")
    await repo.update(aircraft)
    return aircraft.to_firestore()


@router.delete("/{registry}", status_code=204, response_class=Response)
async def delete_aircraft(
    registry: str,
    repo: AircraftRepository = Depends(get_aircraft_repo),
) -> Response:
    await repo.delete(registry)
    return Response(status_code=204)
