"""Tests for the health endpoint."""

from __future__ import annotations


async def test_health(client):
    resp = await client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
