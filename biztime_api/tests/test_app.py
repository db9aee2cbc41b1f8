"""
App-level behaviour: error envelope for unmatched routes and bad bodies,
correlation id header (also on unexpected 500s), health and root endpoints.
"""
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from biztime.main import app
from biztime.services import company_service


@pytest.mark.asyncio
async def test_unmatched_route_is_404_envelope(client: AsyncClient) -> None:
    resp = await client.get("/nowhere")
    assert resp.status_code == 404
    assert resp.json() == {"error": {"message": "Not Found", "status": 404}}


@pytest.mark.asyncio
async def test_wrong_method_uses_envelope(client: AsyncClient) -> None:
    resp = await client.patch("/companies")
    assert resp.status_code == 405
    assert resp.json()["error"]["status"] == 405


@pytest.mark.asyncio
async def test_missing_body_field_is_400(client: AsyncClient) -> None:
    resp = await client.post("/industries", json={"code": "x"})
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"]["status"] == 400
    assert "industry" in body["error"]["message"]


@pytest.mark.asyncio
async def test_correlation_id_is_echoed(client: AsyncClient) -> None:
    resp = await client.get("/health", headers={"X-Correlation-ID": "abc-123"})
    assert resp.headers["X-Correlation-ID"] == "abc-123"

    resp = await client.get("/health")
    assert resp.headers["X-Correlation-ID"]


@pytest.mark.asyncio
async def test_health(client: AsyncClient) -> None:
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "db": "ok"}


@pytest.mark.asyncio
async def test_root(client: AsyncClient) -> None:
    resp = await client.get("/")
    assert resp.status_code == 200
    assert resp.json()["name"] == "biztime"


@pytest.mark.asyncio
async def test_unexpected_error_is_500_envelope_with_correlation_id(schema, monkeypatch) -> None:
    monkeypatch.setattr(company_service, "list_companies", AsyncMock(side_effect=RuntimeError("kaboom")))
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.get("/companies", headers={"X-Correlation-ID": "err-1"})

    assert resp.status_code == 500
    assert resp.json() == {"error": {"message": "kaboom", "status": 500}}
    assert resp.headers["X-Correlation-ID"] == "err-1"
