"""Health check endpoint tests."""

import pytest


@pytest.mark.asyncio
async def test_health_check(client):
    response = await client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "timestamp" in data
    assert data["uptime"] >= 0


@pytest.mark.asyncio
async def test_trace_id_propagated(client):
    response = await client.get("/api/health", headers={"X-Trace-Id": "trc_from_caller"})
    assert response.headers["X-Trace-Id"] == "trc_from_caller"


@pytest.mark.asyncio
async def test_trace_id_generated(client):
    response = await client.get("/api/health")
    assert response.headers["X-Trace-Id"].startswith("trc_")
