"""Tests for flight API endpoints."""

from __future__ import annotations

import pytest

_PLAN = {
    "id": "f1",
    "flight_number": 123,
    "operator": {"kind": "airline", "id": "OSK"},
    "aircraft_registry": "N123AB",
    "origin_icao": "KLAX",
    "destination_icao": "KSFO",
    "fuel_gallons": 40.0,
}

_FINAL = {
    "final_position": {
        "flight_phase": "TaxiIn",
        "latitude": 37.6,
        "longitude": -122.4,
        "on_ground": True,
        "fuel_tanks": {"left_main": 10.0, "right_main": 10.0},
    },
    "flight_log": "uneventful",
}


@pytest.fixture
async def world(client):
    """Two airports (KSFO sells no jet fuel), a piston type and an aircraft at KLAX."""
    for icao, jet in (("KLAX", True), ("KSFO", False)):
        resp = await client.post("/api/airports", json={
            "icao": icao, "name": icao, "latitude": 35.0, "longitude": -120.0,
            "has_avgas": True, "has_jet_fuel": jet,
        })
        assert resp.status_code == 201
    await client.post("/api/aircraft-types", json={"id": "c172", "name": "C172", "engine_type": "piston"})
    await client.post("/api/aircraft", json={
        "registry": "N123AB", "type_id": "c172", "airport_icao": "KLAX", "fuel": 20.0,
    })
    resp = await client.post("/api/flights", json=_PLAN)
    assert resp.status_code == 201
    return client


class TestFlightPlanAPI:
    async def test_list_empty(self, client):
        resp = await client.get("/api/flights")
        assert resp.status_code == 200
        assert resp.json() == []

    async def test_create_and_get(self, world):
        resp = await world.get("/api/flights/f1")
        assert resp.status_code == 200
        data = resp.json()
        assert data["state"] == "planning"
        assert data["full_flight_number"] == "OSK123"

    async def test_legacy_operator_ids(self, client):
        body = {k: v for k, v in _PLAN.items() if k != "operator"}
        resp = await client.post("/api/flights", json={**body, "operator_id": "u1"})
        assert resp.status_code == 201
        assert resp.json()["operator"] == {"kind": "user", "id": "u1"}
        assert resp.json()["full_flight_number"] == "123"

    async def test_no_operator(self, client):
        body = {k: v for k, v in _PLAN.items() if k != "operator"}
        resp = await client.post(
            "/api/flights", json={**body, "operator_id": None, "operator_airline_id": None}
        )
        assert resp.status_code == 422
        assert resp.json()["error"] == "NO_OPERATOR_ASSIGNED"

    async def test_operator_missing(self, client):
        body = {k: v for k, v in _PLAN.items() if k != "operator"}
        resp = await client.post("/api/flights", json=body)
        assert resp.status_code == 422
        assert resp.json()["error"] == "NO_OPERATOR_ASSIGNED"

    async def test_edit_plan(self, world):
        resp = await world.put("/api/flights/f1", json={**_PLAN, "route": "DCT"})
        assert resp.status_code == 200
        assert resp.json()["version"] == 1

    async def test_filter_by_aircraft(self, world):
        resp = await world.get("/api/flights", params={"aircraft": "N123AB"})
        assert [f["id"] for f in resp.json()] == ["f1"]

    async def test_get_not_found(self, client):
        resp = await client.get("/api/flights/nonexistent")
        assert resp.status_code == 404


class TestFlightLifecycleAPI:
    async def test_start_pause_resume_complete(self, world, clock):
        resp = await world.post("/api/flights/f1/start")
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["data"]["status"] == "Started"

        resp = await world.get("/api/aircraft/N123AB")
        assert resp.json()["status"] == "Briefing (OSK123)"

        clock.advance(minutes=30)
        resp = await world.post("/api/flights/f1/pause")
        assert resp.json()["state"] == "paused"
        resp = await world.get("/api/aircraft/N123AB")
        assert resp.json()["status"] == "Paused (OSK123)"

        resp = await world.post("/api/flights/f1/resume")
        assert resp.json()["state"] == "active"

        resp = await world.post("/api/flights/f1/complete", json=_FINAL)
        assert resp.status_code == 200
        assert resp.json()["state"] == "completed"
        assert resp.json()["landed_at_icao"] == "KSFO"

        resp = await world.get("/api/aircraft/N123AB")
        data = resp.json()
        assert data["status"] == "Idle"
        assert data["airport_icao"] == "KSFO"
        assert data["fuel"] == 20.0

    async def test_blocked_start_then_override(self, world):
        await world.put("/api/aircraft/N123AB", json={
            "registry": "N123AB", "type_id": "c172", "airport_icao": "KJFK", "fuel": 20.0,
        })
        resp = await world.post("/api/flights/f1/start", json={"overrides": []})
        body = resp.json()
        assert body["success"] is False
        assert body["error"]["code"] == "AircraftNotAtOrigin"
        assert body["error"]["details"] == {"overridable": True}

        resp = await world.post("/api/flights/f1/start", json={"overrides": ["AircraftNotAtOrigin"]})
        assert resp.json()["success"] is True

    async def test_position_report(self, world):
        await world.post("/api/flights/f1/start")
        resp = await world.post("/api/flights/f1/position", json={
            "flight_phase": "Climb", "latitude": 34.0, "longitude": -118.5, "altitude": 3500,
        })
        assert resp.status_code == 200
        resp = await world.get("/api/aircraft/N123AB")
        assert resp.json()["status"] == "Climb (OSK123)"

    async def test_pause_planned_flight(self, world):
        resp = await world.post("/api/flights/f1/pause")
        assert resp.status_code == 409
        assert resp.json()["error"] == "FLIGHT_STATE_ERROR"

    async def test_completed_flight_is_frozen(self, world):
        await world.post("/api/flights/f1/start")
        await world.post("/api/flights/f1/complete", json=_FINAL)

        resp = await world.post("/api/flights/f1/abort")
        assert resp.status_code == 409
        assert resp.json()["error"] == "FLIGHT_ALREADY_COMPLETED"

        resp = await world.delete("/api/flights/f1")
        assert resp.status_code == 409

    async def test_abort_back_to_planning(self, world):
        await world.post("/api/flights/f1/start")
        resp = await world.post("/api/flights/f1/abort")
        assert resp.json()["state"] == "planning"

    async def test_cannot_edit_started_flight(self, world):
        await world.post("/api/flights/f1/start")
        resp = await world.put("/api/flights/f1", json=_PLAN)
        assert resp.status_code == 409

    async def test_start_unknown_flight(self, client):
        resp = await client.post("/api/flights/nope/start")
        assert resp.status_code == 404

    async def test_auto_save_round_trip(self, world, clock):
        await world.post("/api/flights/f1/start")
        resp = await world.post("/api/flights/f1/auto-save", json={"auto_save": "state-blob"})
        assert resp.status_code == 200
        assert resp.json()["last_auto_save"] is not None

        resp = await world.get("/api/flights/f1/auto-save")
        assert resp.json() == {"flight_id": "f1", "auto_save": "state-blob"}

    async def test_auto_save_needs_started_flight(self, world):
        resp = await world.post("/api/flights/f1/auto-save", json={"auto_save": "state-blob"})
        assert resp.status_code == 409
        assert resp.json()["error"] == "FLIGHT_STATE_ERROR"
