"""
gate_opener.services.envelope

Uniform response envelope returned on every exit path.

Responsibilities:
- Capture the request echo fields once (`InboundRequest`).
- Build success and failure envelopes through a single function.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


@dataclass(frozen=True, slots=True)
class InboundRequest:
    """
    Framework-independent view of the inbound HTTP request.
    """

    timestamp: str
    method: str
    path: str
    query: dict[str, Any]
    headers: dict[str, Any]
    body: Any


class ResponseEnvelope(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    timestamp: str
    status: bool
    status_code: int
    method: str
    path: str
    query: dict[str, Any]
    headers: dict[str, Any]
    body: Any
    message: str | None = None
    suggestion: str | None = None
    data: Any = None

    def to_body(self) -> dict[str, Any]:
        # Only fields that were given are rendered: failures carry no `data`,
        # successes carry no `message`/`suggestion`.
        return self.model_dump(by_alias=True, exclude_unset=True)


def build_envelope(request: InboundRequest, *, status_code: int, **extra: Any) -> ResponseEnvelope:
    """
    `extra` is any of `message`, `suggestion`, `data`.
    """

    return ResponseEnvelope(
        timestamp=request.timestamp,
        status=200 <= status_code < 300,
        status_code=status_code,
        method=request.method,
        path=request.path,
        query=request.query,
        headers=request.headers,
        body=request.body,
        **extra,
    )
