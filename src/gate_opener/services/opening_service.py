"""
gate_opener.services.opening_service

Opening workflow service (failure boundary + envelope owner).

Responsibilities:
- Run the opening pipeline for one inbound request.
- Map rejections (400/404) and success (200) to response envelopes.
- Catch every unexpected failure exactly once and map it to a 500 envelope.
"""

from __future__ import annotations

import httpx

from gate_opener.observability.logging import get_logger
from gate_opener.orchestrator.graph import build_graph
from gate_opener.orchestrator.state import OpeningState
from gate_opener.services.envelope import InboundRequest, ResponseEnvelope, build_envelope
from gate_opener.settings import Settings
from gate_opener.sigma_clients.sigma_http import SigmaCloudClient

log = get_logger(__name__)

UNEXPECTED_ERROR_MESSAGE = "Something went wrong."
UNEXPECTED_ERROR_SUGGESTION = (
    "Please try again later. If this issue persists, contact our support team for assistance."
)


class OpeningService:
    def __init__(self, *, settings: Settings, http: httpx.AsyncClient) -> None:
        self._settings = settings
        self._http = http

    async def create_opening(self, request: InboundRequest) -> ResponseEnvelope:
        """
        Opens the gate described by `request.body` and records the audit event.

        Not idempotent: every successful call actuates the device and posts one event.
        If the audit post fails after the gate opened, the caller still gets a 500.
        """

        try:
            client = SigmaCloudClient(settings=self._settings, http=self._http)
            graph = build_graph(client=client)
            initial: OpeningState = {"body": request.body, "trace": []}
            final: OpeningState = await graph.ainvoke(initial)

            rejection = final.get("rejection")
            if rejection is not None:
                log.info(
                    "opening.rejected",
                    status_code=rejection.status_code,
                    reason=rejection.message,
                    trace=final.get("trace", []),
                )
                return build_envelope(
                    request,
                    status_code=rejection.status_code,
                    message=rejection.message,
                    suggestion=rejection.suggestion,
                )

            log.info("opening.completed", trace=final.get("trace", []))
            return build_envelope(request, status_code=200, data=final.get("gateway_data"))
        except Exception as e:
            log.exception(
                "opening.failed",
                request_timestamp=request.timestamp,
                location="OpeningService.create_opening",
                error=str(e),
            )
            return build_envelope(
                request,
                status_code=500,
                message=UNEXPECTED_ERROR_MESSAGE,
                suggestion=UNEXPECTED_ERROR_SUGGESTION,
            )


# --- Module Notes -----------------------------------------------------------
# Stages below this service never catch exceptions themselves; this is the only place
# where unexpected failures are normalized.
