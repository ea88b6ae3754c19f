"""
gate_opener.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide the settings bound to the running app.
- Provide the outbound HTTP transport (overridable in tests).
"""

from __future__ import annotations

import httpx
from fastapi import Request

from gate_opener.settings import Settings, get_settings


def settings_dep(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def transport_dep() -> httpx.AsyncBaseTransport | None:
    # None lets httpx use its default network transport.
    return None
