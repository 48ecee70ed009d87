"""Tests for aircraft and aircraft type API endpoints."""

from __future__ import annotations

from datetime import timedelta
from unittest.mock import patch

from tests.builders import NOW
from tests.persistence.fake_firestore import FakeDocumentRef

_AIRCRAFT = {"registry": "N123AB", "type_id": "c172", "airport_icao": "KLAX", "fuel": 20.0}


class TestAircraftAPI:
    async def test_list_empty(self, client):
        resp = await client.get("/api/aircraft")
        assert resp.status_code == 200
        assert resp.json() == []

    async def test_create_and_get(self, client):
        resp = await client.post("/api/aircraft", json=_AIRCRAFT)
        assert resp.status_code == 201
        assert resp.json()["registry"] == "N123AB"

        resp = await client.get("/api/aircraft/N123AB")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "Idle"
        assert data["owner_name"] == "[System]"
        assert data["version"] == 0

    async def test_get_reads_aircraft_once(self, client):
        await client.post("/api/aircraft", json=_AIRCRAFT)
        reads = []
        original = FakeDocumentRef.get

        async def counting_get(self):
            reads.append(self._path)
            return await original(self)

        with patch.object(FakeDocumentRef, "get", counting_get):
            resp = await client.get("/api/aircraft/N123AB")
        assert resp.json()["status"] == "Idle"
        assert reads.count("aircraft/N123AB") == 1

    async def test_create_duplicate(self, client):
        await client.post("/api/aircraft", json=_AIRCRAFT)
        resp = await client.post("/api/aircraft", json=_AIRCRAFT)
        assert resp.status_code == 409
        assert resp.json()["error"] == "ALREADY_EXISTS"

    async def test_dual_owner_rejected(self, client):
        resp = await client.post(
            "/api/aircraft",
            json={**_AIRCRAFT, "owner_id": "u1", "owner_airline_id": "OSK"},
        )
        assert resp.status_code == 422
        assert resp.json()["error"] == "DUAL_OPERATOR_ASSIGNED"

    async def test_warping_status(self, client):
        warp = (NOW + timedelta(seconds=90)).isoformat()
        await client.post("/api/aircraft", json={**_AIRCRAFT, "warping_until": warp})
        resp = await client.get("/api/aircraft/N123AB")
        assert resp.json()["status"] == "Warping T-00:01:30"

    async def test_update_with_stale_version(self, client):
        await client.post("/api/aircraft", json=_AIRCRAFT)
        resp = await client.put("/api/aircraft/N123AB", json={**_AIRCRAFT, "name": "Skyhawk"})
        assert resp.status_code == 200
        assert resp.json()["version"] == 1

        resp = await client.put("/api/aircraft/N123AB", json={**_AIRCRAFT, "name": "Stale"})
        assert resp.status_code == 409
        assert resp.json()["error"] == "CONCURRENCY_CONFLICT"

    async def test_get_not_found(self, client):
        resp = await client.get("/api/aircraft/N000XX")
        assert resp.status_code == 404

    async def test_delete(self, client):
        await client.post("/api/aircraft", json=_AIRCRAFT)
        resp = await client.delete("/api/aircraft/N123AB")
        assert resp.status_code == 204
        resp = await client.get("/api/aircraft/N123AB")
        assert resp.status_code == 404


class TestAircraftTypeAPI:
    async def _create(self, client, type_id, **fields):
        body = {"id": type_id, "name": type_id.upper(), "engine_type": "jet", **fields}
        resp = await client.post("/api/aircraft-types", json=body)
        assert resp.status_code == 201
        return resp.json()

    async def test_fuel(self, client):
        await self._create(client, "a320")
        resp = await client.get("/api/aircraft-types/a320/fuel")
        assert resp.json() == {"fuel_type": "jet_fuel", "fuel_weight_per_gallon": 6.7}

    async def test_get_includes_uploader_name(self, client):
        await self._create(client, "a320")
        resp = await client.get("/api/aircraft-types/a320")
        assert resp.json()["uploader_name"] == "[System]"

    async def test_upgrade_path(self, client):
        await self._create(client, "b737max")
        await self._create(client, "b737-800", next_version="b737max")
        resp = await client.get("/api/aircraft-types/b737-800/upgrade-path")
        assert resp.json() == ["b737-800", "b737max"]

    async def test_link_to_unknown_type(self, client):
        resp = await client.post(
            "/api/aircraft-types",
            json={"id": "x1", "name": "X", "engine_type": "jet", "is_variant_of": "nope"},
        )
        assert resp.status_code == 422
        assert resp.json()["error"] == "UNKNOWN_AIRCRAFT_TYPE"

    async def test_cycle_rejected(self, client):
        await self._create(client, "b737max")
        await self._create(client, "b737-800", next_version="b737max")
        resp = await client.put(
            "/api/aircraft-types/b737max/links", json={"next_version": "b737-800"}
        )
        assert resp.status_code == 422
        assert resp.json()["error"] == "TYPE_GRAPH_CYCLE"

    async def test_set_variant(self, client):
        await self._create(client, "a320")
        await self._create(client, "a320neo")
        resp = await client.put("/api/aircraft-types/a320neo/links", json={"is_variant_of": "a320"})
        assert resp.status_code == 200
        assert resp.json()["version"] == 1

        resp = await client.get("/api/aircraft-types/a320/variants")
        assert resp.json() == {"root": "a320", "variants": ["a320neo"]}

    async def test_unknown_type_404(self, client):
        resp = await client.get("/api/aircraft-types/nope/upgrade-path")
        assert resp.status_code == 404
