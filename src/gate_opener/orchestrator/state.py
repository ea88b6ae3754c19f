"""
gate_opener.orchestrator.state

Typed state schema used by the opening pipeline.

Responsibilities:
- Define the contract between stages (each stage's output feeds the next).
"""

from __future__ import annotations

from typing import Annotated, Any, TypedDict

from gate_opener.orchestrator.models import (
    AccountMap,
    OpeningRequest,
    PartitionMap,
    ReceiverMap,
    Rejection,
)
from gate_opener.orchestrator.reducers import append_trace


class OpeningState(TypedDict, total=False):
    # Raw inbound body, exactly as received
    body: Any

    # Resolved entities, in pipeline order
    opening: OpeningRequest
    account: AccountMap
    partition: PartitionMap
    receiver: ReceiverMap

    # Device gateway payload (becomes the success envelope's `data`)
    gateway_data: Any

    # Set by the first stage that ends the pipeline early
    rejection: Rejection | None

    # Names of the stages that ran, in order
    trace: Annotated[list[str], append_trace]


# --- Module Notes -----------------------------------------------------------
# State is request-scoped and never persisted; nothing here outlives one invocation.
