"""
Notes Backend — HTTP API Tests
================================

What:  The REST contract end to end through FastAPI, against a per-test
       SQLite store.

What we test:
    ✅ Groceries scenario: POST → GET → PUT → GET → DELETE → GET → DELETE 404
    ✅ Status codes: 201 create, 204 delete, 404 missing / malformed id
    ✅ Store failures map to 500 with a generic body
    ✅ X-Request-ID echoed or generated; CORS open to any origin
    ✅ Unexpected errors still answer with X-Request-ID, CORS and an access log line
    ✅ /health reports database connectivity
"""

import logging

import pytest
from httpx import ASGITransport, AsyncClient
from unittest.mock import AsyncMock, patch
from uuid import uuid4

from notesapp.exceptions import StoreUnavailableError


class TestNotesScenario:

    @pytest.mark.asyncio
    async def test_groceries_lifecycle(self, test_client):
        created = await test_client.post(
            "/api/notes", json={"title": "Groceries", "content": "Milk, eggs"}
        )
        assert created.status_code == 201
        note = created.json()
        note_id = note["id"]
        assert note == {"id": note_id, "title": "Groceries", "content": "Milk, eggs"}

        listed = await test_client.get("/api/notes")
        assert listed.status_code == 200
        assert note in listed.json()

        updated = await test_client.put(
            f"/api/notes/{note_id}",
            json={"title": "Groceries", "content": "Milk, eggs, bread"},
        )
        assert updated.status_code == 200
        assert updated.json()["content"] == "Milk, eggs, bread"

        listed = await test_client.get("/api/notes")
        [match] = [n for n in listed.json() if n["id"] == note_id]
        assert match["content"] == "Milk, eggs, bread"

        deleted = await test_client.delete(f"/api/notes/{note_id}")
        assert deleted.status_code == 204
        assert deleted.content == b""

        listed = await test_client.get("/api/notes")
        assert note_id not in {n["id"] for n in listed.json()}

        again = await test_client.delete(f"/api/notes/{note_id}")
        assert again.status_code == 404
        assert again.json()["error"] == "not_found"


class TestNotesRoutes:

    @pytest.mark.asyncio
    async def test_list_empty(self, test_client):
        response = await test_client.get("/api/notes")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_get_by_id(self, test_client, sample_note_data):
        created = (await test_client.post("/api/notes", json=sample_note_data)).json()

        response = await test_client.get(f"/api/notes/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    @pytest.mark.asyncio
    async def test_create_without_fields_stores_empty_strings(self, test_client):
        response = await test_client.post("/api/notes", json={})

        assert response.status_code == 201
        body = response.json()
        assert body["title"] == ""
        assert body["content"] == ""

    @pytest.mark.asyncio
    async def test_repeated_posts_create_duplicates(self, test_client, sample_note_data):
        first = await test_client.post("/api/notes", json=sample_note_data)
        second = await test_client.post("/api/notes", json=sample_note_data)

        assert first.json()["id"] != second.json()["id"]
        assert len((await test_client.get("/api/notes")).json()) == 2

    @pytest.mark.asyncio
    async def test_create_rejects_non_string_title(self, test_client):
        response = await test_client.post("/api/notes", json={"title": ["x"], "content": "c"})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_update_missing_note_returns_404(self, test_client, sample_note_data):
        await test_client.post("/api/notes", json=sample_note_data)

        response = await test_client.put(
            f"/api/notes/{uuid4()}", json={"title": "x", "content": "y"}
        )

        assert response.status_code == 404
        notes = (await test_client.get("/api/notes")).json()
        assert [(n["title"], n["content"]) for n in notes] == [("Groceries", "Milk, eggs")]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["get", "delete"])
    async def test_malformed_id_returns_404(self, test_client, method):
        response = await getattr(test_client, method)("/api/notes/not-a-uuid")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_store_failure_returns_500(self, test_client):
        failing = AsyncMock(side_effect=StoreUnavailableError(context={"error_type": "OperationalError"}))
        with patch("notesapp.routes.notes.note_service.list_notes", failing):
            response = await test_client.get("/api/notes")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "server_error"
        assert "OperationalError" not in body["message"]

    @pytest.mark.asyncio
    async def test_store_failure_on_update_returns_500(self, test_client):
        failing = AsyncMock(side_effect=StoreUnavailableError())
        with patch("notesapp.routes.notes.note_service.update_note", failing):
            response = await test_client.put(
                f"/api/notes/{uuid4()}", json={"title": "t", "content": "c"}
            )

        assert response.status_code == 500


class TestCrossCutting:

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/api/notes", headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"

    @pytest.mark.asyncio
    async def test_request_id_generated(self, test_client):
        response = await test_client.get("/api/notes")

        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_error_body_carries_request_id(self, test_client):
        response = await test_client.delete(
            f"/api/notes/{uuid4()}", headers={"X-Request-ID": "trace-me"}
        )

        assert response.json()["request_id"] == "trace-me"

    @pytest.mark.asyncio
    async def test_cors_allows_any_origin(self, test_client):
        response = await test_client.get(
            "/api/notes", headers={"Origin": "http://example.com"}
        )

        assert response.headers["access-control-allow-origin"] == "*"

    @pytest.mark.asyncio
    async def test_unexpected_error_keeps_request_id_cors_and_access_log(self, app, caplog):
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        failing = AsyncMock(side_effect=RuntimeError("boom"))

        with patch("notesapp.routes.notes.note_service.list_notes", failing), \
             caplog.at_level(logging.ERROR, logger="notesapp.access"):
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                response = await client.get(
                    "/api/notes",
                    headers={"X-Request-ID": "trace-500", "Origin": "http://example.com"},
                )

        assert response.status_code == 500
        assert response.headers["X-Request-ID"] == "trace-500"
        assert response.headers["access-control-allow-origin"] == "*"
        body = response.json()
        assert body["error"] == "internal_server_error"
        assert body["request_id"] == "trace-500"
        assert "boom" not in body["message"]
        assert "GET /api/notes 500" in caplog.text


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_connected(self, test_client):
        with patch("notesapp.routes.health.ping_store", AsyncMock(return_value=True)):
            response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"

    @pytest.mark.asyncio
    async def test_health_disconnected(self, test_client):
        with patch("notesapp.routes.health.ping_store", AsyncMock(return_value=False)):
            response = await test_client.get("/health")

        assert response.status_code == 503
        assert response.json()["database"] == "disconnected"
