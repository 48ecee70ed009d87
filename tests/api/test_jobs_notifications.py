"""Tests for job, notification, airport and financial endpoints."""

from __future__ import annotations

from datetime import timedelta

from tests.builders import NOW


class TestJobAPI:
    async def test_expired_flag(self, client, clock):
        resp = await client.post("/api/jobs", json={
            "id": "j1",
            "operator": {"kind": "user", "id": "u1"},
            "origin_icao": "KLAX",
            "expires_at": (NOW + timedelta(hours=1)).isoformat(),
            "value": 700,
        })
        assert resp.status_code == 201

        resp = await client.get("/api/jobs/j1")
        assert resp.json()["expired"] is False
        assert resp.json()["total_weight"] == 0

        clock.advance(hours=2)
        resp = await client.get("/api/jobs/j1")
        assert resp.json()["expired"] is True
        resp = await client.get("/api/jobs", params={"origin": "klax"})
        assert resp.json() == []
        resp = await client.get("/api/jobs", params={"origin": "KLAX", "include_expired": True})
        assert [j["id"] for j in resp.json()] == ["j1"]


class TestNotificationAPI:
    async def test_pending_and_pickup(self, client):
        await client.post("/api/notifications", json={
            "id": "n1", "recipient_id": "u1", "message": "Hello", "target": "client_and_agent",
        })

        resp = await client.get("/api/notifications/pending", params={"recipient_id": "u1"})
        assert [n["id"] for n in resp.json()] == ["n1"]

        resp = await client.post("/api/notifications/n1/pickup", params={"channel": "client"})
        assert resp.json()["client_pickup"] is True
        assert resp.json()["marked_for_deletion"] is False

        resp = await client.get("/api/notifications/pending", params={"recipient_id": "u1"})
        assert resp.json() == []
        resp = await client.get(
            "/api/notifications/pending", params={"recipient_id": "u1", "channel": "agent"}
        )
        assert [n["id"] for n in resp.json()] == ["n1"]

    async def test_unknown_channel(self, client):
        resp = await client.post("/api/notifications/n1/pickup", params={"channel": "pager"})
        assert resp.status_code == 422


class TestAirportAPI:
    async def test_fuel_filter(self, client):
        for icao, jet in (("KLAX", True), ("L12", False)):
            await client.post("/api/airports", json={
                "icao": icao, "name": icao, "latitude": 34.0, "longitude": -118.0,
                "has_avgas": True, "has_jet_fuel": jet,
            })
        resp = await client.get("/api/airports", params={"sells": "jetfuel"})
        assert [a["icao"] for a in resp.json()] == ["KLAX"]
        resp = await client.get("/api/airports", params={"sells": "diesel"})
        assert resp.status_code == 400

    async def test_get_lowercase(self, client):
        await client.post("/api/airports", json={
            "icao": "KSFO", "name": "San Francisco", "latitude": 37.6, "longitude": -122.4,
        })
        resp = await client.get("/api/airports/ksfo")
        assert resp.json()["name"] == "San Francisco"


class TestFinancialAPI:
    async def test_user_statement(self, client, fake_client):
        fake_client.write("financial_records/r1", {
            "description": "Cargo run", "category": "cargo", "income": 900,
            "expense": 0, "user_id": "u1", "timestamp": NOW.isoformat(),
        })
        fake_client.write("financial_records/r2", {
            "description": "Fuel", "category": "fuel", "income": 0,
            "expense": 250, "user_id": "u1", "timestamp": NOW.isoformat(),
        })
        resp = await client.get("/api/financials/users/u1")
        assert resp.status_code == 200
        body = resp.json()
        assert body["balance"] == 650
        assert {c["category"]: c["net"] for c in body["categories"]} == {"cargo": 900, "fuel": -250}
