"""Flight plan CRUD and lifecycle endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel, Field

from skyfleet.api.deps import get_flight_repo, get_flight_service
from skyfleet.contracts.enums import FlightState, StartFlightStatus
from skyfleet.contracts.errors import FlightStateError
from skyfleet.contracts.flight import FinalReport, Flight, PositionReport
from skyfleet.contracts.result import ServiceResult, StartFlightResult
from skyfleet.persistence.repositories.flight_repo import FlightRepository
from skyfleet.services.flight_lifecycle import flight_state
from skyfleet.services.flight_service import FlightService

router = APIRouter(prefix="/flights", tags=["flights"])


class StartFlightRequest(BaseModel):
    overrides: list[StartFlightStatus] = Field(
        default_factory=list, description="Overridable checks the pilot accepted"
    )


class AutoSave(BaseModel):
    auto_save: str = Field(..., description="Simulator client auto-save blob")


def _flight_view(flight: Flight) -> dict:
    data = flight.to_firestore()
    data["state"] = flight_state(flight).value
    data["full_flight_number"] = flight.full_flight_number
    return data


def _ensure_planning(flight: Flight, action: str) -> None:
    state = flight_state(flight)
    if state != FlightState.PLANNING:
        raise FlightStateError(flight.id, state.value, action)


@router.get("")
async def list_flights(
    aircraft: str | None = None,
    operator_kind: str | None = None,
    operator_id: str | None = None,
    started: bool = False,
    repo: FlightRepository = Depends(get_flight_repo),
) -> list[dict]:
    if aircraft is not None:
        items = await repo.list_for_aircraft(aircraft)
    elif operator_kind is not None and operator_id is not None:
        items = await repo.list_for_operator(operator_kind, operator_id)
    elif started:
        items = await repo.list_started()
    else:
        items = await repo.list_all()
    return [_flight_view(f) for f in items]


@router.post("", status_code=201)
async def create_flight(
    flight: Flight,
    repo: FlightRepository = Depends(get_flight_repo),
) -> dict:
    _ensure_planning(flight, "create")
    await repo.create(flight)
    return _flight_view(flight)


@router.get("/{flight_id}")
async def get_flight(
    flight_id: str,
    repo: FlightRepository = Depends(get_flight_repo),
) -> dict:
    item = await repo.get(flight_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Flight not found")
    await repo.load_operator_airline(item)
    return _flight_view(item)


@router.put("/{flight_id}")
async def update_flight(
    flight_id: str,
    flight: Flight,
    repo: FlightRepository = Depends(get_flight_repo),
) -> dict:
    """Edit a flight plan. Only flights still in planning can be edited."""
    if flight.id != flight_id:
        raise HTTPException(status_code=400, detail="Flight id in body doesn't match the URL")
    stored = await repo.require(flight_id)
    _ensure_planning(stored, "edit")
    _ensure_planning(flight, "edit")
    await repo.update(flight)
    return _flight_view(flight)


@router.delete("/{flight_id}", status_code=204, response_class=Response)
async def delete_flight(
    flight_id: str,
    repo: FlightRepository = Depends(get_flight_repo),
) -> Response:
    stored = await repo.require(flight_id)
    _ensure_planning(stored, "delete")
    await repo.delete(flight_id)
    return Response(status_code=204)


# ------------------------------------------------------------------
# Lifecycle
# ------------------------------------------------------------------


@router.post("/{flight_id}/start")
async def start_flight(
    flight_id: str,
    request: StartFlightRequest | None = None,
    service: FlightService = Depends(get_flight_service),
) -> ServiceResult[StartFlightResult]:
    """Run the start checks and start the flight if they all pass.

    A failed check is a normal response (``success: false``) naming the
    blocking status; retry with it in ``overrides`` if it's overridable.
    """
    overrides = request.overrides if request is not None else []
    result = await service.start(flight_id, overrides)
    if result.started:
        return ServiceResult.ok(result)
    return ServiceResult.fail(
        StartFlightStatus(result.status).value,
        result.message,
        overridable=result.overridable,
    )


@router.post("/{flight_id}/pause")
async def pause_flight(
    flight_id: str,
    service: FlightService = Depends(get_flight_service),
) -> dict:
    return _flight_view(await service.pause(flight_id))


@router.post("/{flight_id}/resume")
async def resume_flight(
    flight_id: str,
    service: FlightService = Depends(get_flight_service),
) -> dict:
    return _flight_view(await service.resume(flight_id))


@router.post("/{flight_id}/position")
async def report_position(
    flight_id: str,
    report: PositionReport,
    service: FlightService = Depends(get_flight_service),
) -> dict:
    return _flight_view(await service.report_position(flight_id, report))


@router.post("/{flight_id}/auto-save")
async def upload_auto_save(
    flight_id: str,
    body: AutoSave,
    service: FlightService = Depends(get_flight_service),
) -> dict:
    flight = await service.upload_auto_save(flight_id, body.auto_save)
    return {"flight_id": flight.id, "last_auto_save": flight.last_auto_save}


@router.get("/{flight_id}/auto-save")
async def download_auto_save(
    flight_id: str,
    service: FlightService = Depends(get_flight_service),
) -> dict:
    return {"flight_id": flight_id, "auto_save": await service.download_auto_save(flight_id)}


@router.post("/{flight_id}/complete")
async def complete_flight(
    flight_id: str,
    report: FinalReport,
    service: FlightService = Depends(get_flight_service),
) -> dict:
    return _flight_view(await service.complete(flight_id, report))


@router.post("/{flight_id}/abort")
async def abort_flight(
    flight_id: str,
    service: FlightService = Depends(get_flight_service),
) -> dict:
    return _flight_view(await service.abort(flight_id))
