"""API tests for the project endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

NEW_PROJECT = {
    "name": "Home Office Planejado",
    "client_id": "3",
    "company": "SOHO",
    "seller_id": "2",
    "environments": ["Escritório", "Quarto", "Escritório"],
    "measurement_date": "2024-04-02T10:00:00",
    "appliances": "   ",
    "extras": [
        {"name": "Gaveteiro", "quantity": 2},
        {"name": "  ", "quantity": 5},
    ],
    "measurements": [{"name": "Parede principal", "value": "2,80 m"}],
}


def _client(app) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_list_projects_returns_summaries(app):
    async with _client(app) as client:
        response = await client.get("/api/v1/projects")

    assert response.status_code == 200
    data = response.json()
    assert [p["id"] for p in data] == ["1", "2", "3"]
    first = data[0]
    assert first["client_name"] == "Maria Silva"
    assert first["seller_name"] == "Carlos Mendes"
    assert first["file_count"] == 0
    assert "extras" not in first


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("params", "expected_ids"),
    [
        ({"status": "Finalizado"}, ["2"]),
        ({"status": "Em andamento"}, ["1", "3"]),
        ({"company": "ELIAS"}, ["3"]),
        ({"client_id": "2"}, ["2"]),
        ({"search": "cozinha"}, ["1"]),
        ({"search": "quarto", "status": "Em andamento"}, []),
    ],
)
async def test_list_projects_filters(app, params, expected_ids):
    async with _client(app) as client:
        response = await client.get("/api/v1/projects", params=params)

    assert [p["id"] for p in response.json()] == expected_ids


@pytest.mark.asyncio
async def test_list_projects_rejects_unknown_status(app):
    async with _client(app) as client:
        response = await client.get("/api/v1/projects", params={"status": "Pausado"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_get_project_detail(app):
    async with _client(app) as client:
        response = await client.get("/api/v1/projects/3")

    project = response.json()
    assert project["name"] == "Área Gourmet Premium"
    assert [e["name"] for e in project["extras"]] == ["Bancada de mármore", "Iluminação LED"]


@pytest.mark.asyncio
async def test_create_project_normalises_input(app):
    async with _client(app) as client:
        response = await client.post("/api/v1/projects", json=NEW_PROJECT)

    assert response.status_code == 201
    project = response.json()
    assert project["status"] == "Em andamento"
    assert project["environments"] == ["Escritório", "Quarto"]
    assert project["appliances"] is None
    assert [(e["name"], e["quantity"]) for e in project["extras"]] == [("Gaveteiro", 2)]
    assert project["extras"][0]["id"]
    assert project["measurement_date"].startswith("2024-04-02T10:00:00")
    assert project["created_at"] == project["updated_at"]


@pytest.mark.asyncio
async def test_create_project_rejects_unknown_company(app):
    async with _client(app) as client:
        response = await client.post("/api/v1/projects", json={**NEW_PROJECT, "company": "IKEA"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_project_applies_only_sent_fields(app):
    async with _client(app) as client:
        before = (await client.get("/api/v1/projects/1")).json()
        response = await client.put(
            "/api/v1/projects/1",
            json={"status": "Aguardando", "extras": [], "id": "hijack"},
        )

    assert response.status_code == 200
    project = response.json()
    assert project["id"] == "1"
    assert project["status"] == "Aguardando"
    assert project["extras"] == []
    assert project["name"] == before["name"]
    assert project["environments"] == before["environments"]
    assert project["created_at"] == before["created_at"]
    assert project["updated_at"] > before["updated_at"]


@pytest.mark.asyncio
async def test_update_project_rejects_null_required_field(app):
    async with _client(app) as client:
        response = await client.put("/api/v1/projects/1", json={"company": None})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_project_can_clear_optional_field(app):
    async with _client(app) as client:
        response = await client.put("/api/v1/projects/1", json={"observations": None})

    assert response.status_code == 200
    assert response.json()["observations"] is None


@pytest.mark.asyncio
async def test_delete_project(app):
    async with _client(app) as client:
        deleted = await client.delete("/api/v1/projects/2")
        again = await client.delete("/api/v1/projects/2")
        remaining = await client.get("/api/v1/projects")

    assert deleted.status_code == 204
    assert again.status_code == 404
    assert [p["id"] for p in remaining.json()] == ["1", "3"]


@pytest.mark.asyncio
async def test_unknown_project_returns_404(app):
    async with _client(app) as client:
        get = await client.get("/api/v1/projects/missing")
        put = await client.put("/api/v1/projects/missing", json={"name": "X"})

    assert get.status_code == 404
    assert put.status_code == 404
