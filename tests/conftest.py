"""
tests.conftest

Shared fixtures: settings and an in-memory stand-in for Sigma Cloud and the device gateway.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from gate_opener.services.envelope import InboundRequest
from gate_opener.settings import Settings

SESSION_TOKEN = "session-token-123"
STATIC_TOKEN = "static-bearer"

ACCOUNT: dict[str, Any] = {
    "accountCode": "A1",
    "companyId": "C1",
    "partitions": [{"id": "P0", "number": "1"}, {"id": "P1", "number": "3"}],
}
RECEIVER: dict[str, Any] = {"name": "Front Door"}
GATEWAY_RESPONSE: dict[str, Any] = {"result": "opened"}

VALID_BODY: dict[str, Any] = {
    "accountId": "1001",
    "code": "1401",
    "complement": "Opened from the app",
    "partitionId": "P1",
    "receiverDescription": "Front gate",
    "receiverId": "77",
    "server": "8090",
}


class FakeSigma:
    """
    Routes requests to canned responses and records every call by name
    (`login`, `account`, `receiver`, `gateway`, `audit`).

    `fail_at` makes one call site fail: with a connection error, or with
    the given HTTP status when `fail_status` is set.
    """

    def __init__(
        self,
        *,
        account: Any = ACCOUNT,
        receiver: Any = RECEIVER,
        gateway: Any = GATEWAY_RESPONSE,
        fail_at: str | None = None,
        fail_status: int | None = None,
    ) -> None:
        self.account = account
        self.receiver = receiver
        self.gateway = gateway
        self.fail_at = fail_at
        self.fail_status = fail_status
        self.calls: list[tuple[str, httpx.Request]] = []

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def count(self, name: str) -> int:
        return sum(1 for n, _ in self.calls if n == name)

    def requests(self, name: str) -> list[httpx.Request]:
        return [r for n, r in self.calls if n == name]

    def handler(self, request: httpx.Request) -> httpx.Response:
        name = _classify(request)
        self.calls.append((name, request))

        if name == self.fail_at:
            if self.fail_status is not None:
                return httpx.Response(self.fail_status, json={"error": "boom"})
            raise httpx.ConnectError("connection refused", request=request)

        if name == "login":
            return httpx.Response(200, text=SESSION_TOKEN)
        if name == "account":
            return _json_or_empty(self.account)
        if name == "receiver":
            if request.headers.get("authorization") != f"Bearer {SESSION_TOKEN}":
                return httpx.Response(401)
            return _json_or_empty(self.receiver)
        if name == "gateway":
            return _json_or_empty(self.gateway)
        if name == "audit":
            return httpx.Response(201, json={"accepted": len(json.loads(request.content)["events"])})
        return httpx.Response(404)


def _classify(request: httpx.Request) -> str:
    path = request.url.path
    if path.endswith("/server/v2/auth"):
        return "login"
    if "/conversor_get_post/portao/open/" in path:
        return "gateway"
    if path.startswith("/v5/accounts/"):
        return "account"
    if path.startswith("/v1/accounts/") and "/receivers/" in path:
        return "receiver"
    if path == "/v2/events/accessControl":
        return "audit"
    return "unknown"


def _json_or_empty(payload: Any) -> httpx.Response:
    if payload is None:
        return httpx.Response(200)
    if isinstance(payload, str):
        return httpx.Response(200, text=payload)
    return httpx.Response(200, json=payload)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        env="test",
        sigma_api_base_url="https://api.sigma.test",
        sigma_auth_url="https://cloud.sigma.test/server/v2/auth",
        sigma_bearer_token=STATIC_TOKEN,
        sigma_username="operator",
        sigma_password="secret",
        gateway_base_url="http://gateway.test",
    )


def make_inbound(body: Any = None) -> InboundRequest:
    return InboundRequest(
        timestamp="2026-10-18T12:00:00+00:00",
        method="POST",
        path="/v1/openings?source=app",
        query={"source": "app"},
        headers={"content-type": "application/json", "x-trace": "abc"},
        body=dict(VALID_BODY) if body is None else body,
    )
