"""
gate_opener.api.routers.openings

Public endpoint that opens a gate for a monitoring account.

Responsibilities:
- Capture the request echo fields and a timestamp.
- Delegate to `OpeningService` with a request-scoped HTTP client.
- Return the envelope with its own status code.
"""

from __future__ import annotations

from datetime import UTC, datetime

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from gate_opener.api.deps import settings_dep, transport_dep
from gate_opener.services.envelope import InboundRequest
from gate_opener.services.opening_service import OpeningService
from gate_opener.settings import Settings
from gate_opener.sigma_clients.sigma_http import build_async_client

router = APIRouter(prefix="/v1/openings", tags=["openings"])


async def _inbound_request(request: Request, timestamp: str) -> InboundRequest:
    try:
        body = await request.json()
    except ValueError:
        # Empty or malformed JSON is reported as missing fields by the pipeline.
        body = None

    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"

    return InboundRequest(
        timestamp=timestamp,
        method=request.method,
        path=path,
        query=dict(request.query_params),
        headers=dict(request.headers),
        body=body,
    )


@router.post("")
async def create_opening(
    request: Request,
    settings: Settings = Depends(settings_dep),
    transport: httpx.AsyncBaseTransport | None = Depends(transport_dep),
) -> JSONResponse:
    timestamp = datetime.now(tz=UTC).isoformat()
    inbound = await _inbound_request(request, timestamp)

    # One client per request; no connection or credential state outlives it.
    async with build_async_client(settings, transport=transport) as http:
        envelope = await OpeningService(settings=settings, http=http).create_opening(inbound)

    return JSONResponse(status_code=envelope.status_code, content=envelope.to_body())


# --- Module Notes -----------------------------------------------------------
# No inbound authentication: access is enforced by the downstream services.
