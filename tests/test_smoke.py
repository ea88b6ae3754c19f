"""
tests.test_smoke

Smoke tests for the FastAPI app: health probe and the openings route end to end.
"""

from __future__ import annotations

import httpx
import pytest
from conftest import VALID_BODY, FakeSigma

from gate_opener.api.app import create_app
from gate_opener.api.deps import transport_dep
from gate_opener.settings import Settings


def _app(settings: Settings, fake: FakeSigma):
    app = create_app(settings=settings)
    app.dependency_overrides[transport_dep] = fake.transport
    return app


@pytest.mark.asyncio
async def test_health_endpoint(settings: Settings) -> None:
    app = create_app(settings=settings)

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        r = await client.get("/healthz")

    assert r.status_code == 200
    assert r.json() == {"status": "ok"}
    assert r.headers["x-request-id"]


@pytest.mark.asyncio
async def test_open_gate_route_returns_envelope(settings: Settings) -> None:
    fake = FakeSigma()
    transport = httpx.ASGITransport(app=_app(settings, fake))

    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        r = await client.post(
            "/v1/openings?source=app",
            json=VALID_BODY,
            headers={"x-request-id": "req-1"},
        )

    assert r.status_code == 200
    assert r.headers["x-request-id"] == "req-1"
    body = r.json()
    assert body["status"] is True
    assert body["statusCode"] == 200
    assert body["method"] == "POST"
    assert body["path"] == "/v1/openings?source=app"
    assert body["query"] == {"source": "app"}
    assert body["headers"]["x-request-id"] == "req-1"
    assert body["body"] == VALID_BODY
    assert body["data"] == {"result": "opened"}
    assert body["timestamp"]
    assert fake.count("gateway") == 1


@pytest.mark.asyncio
async def test_open_gate_route_propagates_envelope_status(settings: Settings) -> None:
    fake = FakeSigma(account=None)
    transport = httpx.ASGITransport(app=_app(settings, fake))

    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        r = await client.post("/v1/openings", json=VALID_BODY)

    assert r.status_code == 404
    assert r.json()["message"] == "Account not found."


@pytest.mark.asyncio
async def test_open_gate_route_treats_invalid_json_as_missing_fields(settings: Settings) -> None:
    fake = FakeSigma()
    transport = httpx.ASGITransport(app=_app(settings, fake))

    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        r = await client.post(
            "/v1/openings",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )

    assert r.status_code == 400
    body = r.json()
    assert body["message"] == "Missing required fields."
    assert body["body"] is None
    assert fake.calls == []


@pytest.mark.asyncio
async def test_open_gate_route_maps_gateway_outage_to_500(settings: Settings) -> None:
    fake = FakeSigma(fail_at="gateway")
    transport = httpx.ASGITransport(app=_app(settings, fake))

    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        r = await client.post("/v1/openings", json=VALID_BODY)

    assert r.status_code == 500
    assert r.json()["message"] == "Something went wrong."
    assert fake.count("audit") == 0
