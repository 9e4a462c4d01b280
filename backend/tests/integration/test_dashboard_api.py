"""API tests for the dashboard summary endpoint."""

import pytest
from httpx import ASGITransport, AsyncClient


def _client(app) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_dashboard_summary(app):
    async with _client(app) as client:
        response = await client.get("/api/v1/dashboard")

    assert response.status_code == 200
    data = response.json()
    assert data["period"] == "month"
    assert data["total_projects"] == 3
    assert data["total_clients"] == 3
    assert data["in_progress_count"] == 2
    assert data["completed_count"] == 1
    assert data["status_breakdown"] == [
        {"status": "Em andamento", "count": 2},
        {"status": "Finalizado", "count": 1},
    ]
    assert [c["company"] for c in data["company_breakdown"]] == ["Caza 43", "SOHO", "ELIAS"]
    assert [p["id"] for p in data["recent_projects"]] == ["2", "3", "1"]


@pytest.mark.asyncio
async def test_dashboard_reflects_store_changes(app):
    async with _client(app) as client:
        await client.put("/api/v1/projects/1", json={"status": "Cancelado"})
        response = await client.get("/api/v1/dashboard", params={"period": "year"})

    data = response.json()
    assert data["period"] == "year"
    assert data["in_progress_count"] == 1
    assert {"status": "Cancelado", "count": 1} in data["status_breakdown"]
    assert data["recent_projects"][0]["id"] == "1"


@pytest.mark.asyncio
async def test_dashboard_rejects_unknown_period(app):
    async with _client(app) as client:
        response = await client.get("/api/v1/dashboard", params={"period": "decade"})

    assert response.status_code == 422
