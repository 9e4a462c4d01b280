"""API tests for project file attachments."""

from urllib.parse import quote

import pytest
from httpx import ASGITransport, AsyncClient

FILES_URL = "/api/v1/projects/1/files"


def _client(app) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


async def _upload(client: AsyncClient, *files: tuple[str, bytes, str]):
    return await client.post(
        FILES_URL,
        files=[("files", (name, content, mime)) for name, content, mime in files],
    )


@pytest.mark.asyncio
async def test_upload_attaches_files_to_project(app):
    async with _client(app) as client:
        response = await _upload(
            client,
            ("planta baixa.pdf", b"%PDF-1.4 planta", "application/pdf"),
            ("orcamento.xlsx", b"PK\x03\x04", "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"),
        )
        project = (await client.get("/api/v1/projects/1")).json()
        summaries = (await client.get("/api/v1/projects", params={"client_id": "1"})).json()
    await app.state.upload_progress.shutdown()

    assert response.status_code == 201
    result = response.json()
    assert result["total_count"] == 2
    assert result["message"] == "2 file(s) attached to the project"
    pdf, sheet = result["files"]
    assert pdf["type"] == "pdf"
    assert pdf["size"] == len(b"%PDF-1.4 planta")
    assert pdf["uploaded_by"] == "Usuário atual"
    assert pdf["url"] == f"/api/v1/projects/1/files/{pdf['id']}/content"
    assert sheet["type"] == "spreadsheet"
    assert [f["id"] for f in project["files"]] == [pdf["id"], sheet["id"]]
    assert summaries[0]["file_count"] == 2


@pytest.mark.asyncio
async def test_upload_rejects_batch_with_disallowed_extension(app):
    async with _client(app) as client:
        response = await _upload(
            client,
            ("planta.pdf", b"%PDF", "application/pdf"),
            ("setup.exe", b"MZ", "application/octet-stream"),
        )
        project = (await client.get("/api/v1/projects/1")).json()

    assert response.status_code == 415
    assert "setup.exe" in response.json()["detail"]
    assert project["files"] == []


@pytest.mark.asyncio
async def test_upload_rejects_oversized_file(make_app):
    app = make_app(max_upload_size_mb=0)
    async with _client(app) as client:
        response = await _upload(client, ("foto.jpg", b"\xff\xd8\xff", "image/jpeg"))

    assert response.status_code == 413


@pytest.mark.asyncio
async def test_upload_attaches_zero_byte_file(app):
    async with _client(app) as client:
        response = await _upload(client, ("vazio.pdf", b"", "application/pdf"))
    await app.state.upload_progress.shutdown()

    assert response.status_code == 201
    assert response.json()["files"][0]["size"] == 0


@pytest.mark.asyncio
async def test_over_long_file_name_keeps_project_readable(app):
    async with _client(app) as client:
        upload = await _upload(client, ("a" * 300 + ".pdf", b"%PDF", "application/pdf"))
        detail = await client.get("/api/v1/projects/1")
        client_projects = await client.get("/api/v1/clients/1/projects")
        update = await client.put("/api/v1/projects/1", json={"status": "Aguardando"})
    await app.state.upload_progress.shutdown()

    assert upload.status_code == 201
    name = upload.json()["files"][0]["name"]
    assert len(name) == 255
    assert name.endswith(".pdf")
    assert detail.status_code == 200
    assert detail.json()["files"][0]["name"] == name
    assert client_projects.status_code == 200
    assert update.status_code == 200


@pytest.mark.asyncio
async def test_deleting_project_discards_attachment_bytes(app):
    async with _client(app) as client:
        await _upload(client, ("a.pdf", b"%PDF", "application/pdf"))
        assert len(app.state.blob_storage) == 1
        response = await client.delete("/api/v1/projects/1")
    await app.state.upload_progress.shutdown()

    assert response.status_code == 204
    assert len(app.state.blob_storage) == 0


@pytest.mark.asyncio
async def test_replacing_files_list_discards_dropped_bytes(app):
    async with _client(app) as client:
        await _upload(client, ("a.pdf", b"%PDF", "application/pdf"))
        response = await client.put("/api/v1/projects/1", json={"files": []})
        listed = await client.get(FILES_URL)
    await app.state.upload_progress.shutdown()

    assert response.status_code == 200
    assert response.json()["files"] == []
    assert listed.json() == []
    assert len(app.state.blob_storage) == 0


@pytest.mark.asyncio
async def test_upload_to_unknown_project_returns_404(app):
    async with _client(app) as client:
        response = await client.post(
            "/api/v1/projects/missing/files",
            files=[("files", ("planta.pdf", b"%PDF", "application/pdf"))],
        )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_sort_rename_download_and_delete(app):
    async with _client(app) as client:
        uploaded = (
            await _upload(
                client,
                ("b-render.png", b"\x89PNG", "image/png"),
                ("a-contrato.docx", b"PK", "application/octet-stream"),
            )
        ).json()["files"]
        render_id = uploaded[0]["id"]

        by_name = await client.get(FILES_URL, params={"sort": "name"})
        assert [f["name"] for f in by_name.json()] == ["a-contrato.docx", "b-render.png"]

        by_name_desc = await client.get(FILES_URL, params={"sort": "name", "direction": "desc"})
        assert [f["name"] for f in by_name_desc.json()] == ["b-render.png", "a-contrato.docx"]

        searched = await client.get(FILES_URL, params={"search": "RENDER"})
        assert [f["id"] for f in searched.json()] == [render_id]

        renamed = await client.put(f"{FILES_URL}/{render_id}", json={"name": "  fachada.png "})
        assert renamed.status_code == 200
        assert renamed.json()["name"] == "fachada.png"

        blank = await client.put(f"{FILES_URL}/{render_id}", json={"name": "   "})
        assert blank.status_code == 422

        content = await client.get(f"{FILES_URL}/{render_id}/content")
        assert content.status_code == 200
        assert content.content == b"\x89PNG"
        assert content.headers["content-type"] == "image/png"
        assert content.headers["content-disposition"] == (
            f"attachment; filename*=UTF-8''{quote('fachada.png')}"
        )

        deleted = await client.delete(f"{FILES_URL}/{render_id}")
        assert deleted.status_code == 204
        gone = await client.get(f"{FILES_URL}/{render_id}/content")
        assert gone.status_code == 404
        remaining = await client.get(FILES_URL)
        assert [f["name"] for f in remaining.json()] == ["a-contrato.docx"]
    await app.state.upload_progress.shutdown()


@pytest.mark.asyncio
async def test_unknown_file_returns_404(app):
    async with _client(app) as client:
        rename = await client.put(f"{FILES_URL}/missing", json={"name": "x.pdf"})
        delete = await client.delete(f"{FILES_URL}/missing")

    assert rename.status_code == 404
    assert delete.status_code == 404
