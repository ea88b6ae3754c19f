"""
gate_opener.auth.strategies

Authentication strategies for outbound HTTP calls.

Responsibilities:
- `BearerAuth`: attach a static bearer token.
- `BasicAndBearerAuth`: log in with basic credentials, then call with the issued bearer token.

Strategies are passed per call (`client.get(..., auth=strategy)`), so a call site always
states which trust domain it talks to and no shared client state is switched in between.
"""

from __future__ import annotations

import base64
from collections.abc import Callable, Generator
from typing import Any

import httpx

TokenExtractor = Callable[[httpx.Response], str]


def _response_text(response: httpx.Response) -> str:
    return response.text.strip()


class BearerAuth(httpx.Auth):
    def __init__(self, token: str) -> None:
        self._token = token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request


class BasicAndBearerAuth(httpx.Auth):
    """
    Two-step flow:
    1. Send a login request to `url` with HTTP basic credentials (and optional JSON body).
    2. Pull the token out of the login response with `extract_token` and send the
       original request with `Authorization: Bearer <token>`.

    The token lives only for the duration of one call.
    """

    # The login response body must be read before `extract_token` can see it.
    requires_response_body = True

    def __init__(
        self,
        *,
        method: str,
        url: str,
        username: str,
        password: str,
        body: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        extract_token: TokenExtractor = _response_text,
        timeout: httpx.Timeout | None = None,
    ) -> None:
        self._method = method.upper()
        self._url = url
        self._username = username
        self._password = password
        self._body = body
        self._headers = headers or {}
        self._extract_token = extract_token
        self._timeout = timeout

    def _login_request(self) -> httpx.Request:
        credentials = f"{self._username}:{self._password}".encode()
        headers = {
            **self._headers,
            "Authorization": f"Basic {base64.b64encode(credentials).decode('ascii')}",
        }
        # Requests yielded from an auth flow bypass the client's request builder,
        # so the client timeout has to be attached here.
        extensions = {"timeout": self._timeout.as_dict()} if self._timeout is not None else {}
        return httpx.Request(
            self._method, self._url, headers=headers, json=self._body, extensions=extensions
        )

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        login_response = yield self._login_request()
        login_response.raise_for_status()

        token = self._extract_token(login_response)
        if not token:
            raise ValueError("Login response did not contain a bearer token")

        request.headers["Authorization"] = f"Bearer {token}"
        yield request


# --- Module Notes -----------------------------------------------------------
# Calls that need no credentials (the device gateway) pass `auth=None`.
