"""
gate_opener.sigma_clients.sigma_http

HTTP client boundary used by the opening pipeline.

Responsibilities:
- Call the Sigma Cloud directory, receiver registry and event-ingestion APIs.
- Call the device gateway that physically opens the gate.
- Choose the credentials of each call explicitly (bearer, login-then-bearer, none).
"""

from __future__ import annotations

from typing import Any

import httpx

from gate_opener.auth.strategies import BasicAndBearerAuth, BearerAuth
from gate_opener.settings import Settings

# Body expected by the Sigma Cloud login endpoint for web sessions.
_LOGIN_BODY: dict[str, Any] = {"type": "WEB"}


def build_async_client(
    settings: Settings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    One client per inbound request; the caller owns its lifetime (`async with`).
    """

    return httpx.AsyncClient(
        transport=transport,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
    )


def _decode(response: httpx.Response) -> Any:
    # Non-2xx responses are failures, not "not found" answers.
    response.raise_for_status()
    if not response.content:
        return None
    if "json" in response.headers.get("content-type", ""):
        return response.json()
    return response.text


class SigmaCloudClient:
    """
    Each method performs exactly one logical downstream call and returns the decoded
    payload (`None` for an empty body). No retries.
    """

    def __init__(self, *, settings: Settings, http: httpx.AsyncClient) -> None:
        self._settings = settings
        self._http = http

    def _bearer(self) -> httpx.Auth:
        return BearerAuth(self._settings.sigma_bearer_token)

    def _login_then_bearer(self) -> httpx.Auth:
        return BasicAndBearerAuth(
            method="POST",
            url=self._settings.sigma_auth_url,
            username=self._settings.sigma_username,
            password=self._settings.sigma_password,
            body=_LOGIN_BODY,
            timeout=httpx.Timeout(self._settings.http_timeout_seconds),
        )

    def _api_url(self, path: str) -> str:
        return f"{self._settings.sigma_api_base_url.rstrip('/')}{path}"

    async def account(self, *, account_id: Any) -> Any:
        r = await self._http.get(
            self._api_url(f"/v5/accounts/{account_id}"),
            auth=self._bearer(),
        )
        return _decode(r)

    async def receiver(self, *, account_id: Any, receiver_id: Any) -> Any:
        # The receiver registry only accepts session tokens issued by the login endpoint.
        r = await self._http.get(
            self._api_url(f"/v1/accounts/{account_id}/receivers/{receiver_id}"),
            auth=self._login_then_bearer(),
        )
        return _decode(r)

    async def open_gate(self, *, server: Any, account_code: Any, partition_number: int) -> Any:
        # The gateway is reached without credentials (network-level trust).
        url = (
            f"{self._settings.gateway_base_url.rstrip('/')}:{server}"
            f"/conversor_get_post/portao/open/{account_code}/{partition_number}"
        )
        r = await self._http.get(url, auth=None)
        return _decode(r)

    async def report_access_control_events(self, *, events: list[dict[str, Any]]) -> Any:
        r = await self._http.post(
            self._api_url("/v2/events/accessControl"),
            auth=self._bearer(),
            json={"events": events},
        )
        return _decode(r)


# --- Module Notes -----------------------------------------------------------
# Timeouts are enforced by the httpx client built in `build_async_client`; the pipeline
# itself has no timeout or cancellation logic.
