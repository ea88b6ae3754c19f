"""
gate_opener.orchestrator.models

Request and downstream entity models used by the opening pipeline.

Responsibilities:
- Parse the inbound opening request and the Sigma Cloud payloads (camelCase on the wire).
- Describe pipeline rejections (400/404) as data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

REQUIRED_FIELDS: tuple[str, ...] = (
    "accountId",
    "code",
    "complement",
    "partitionId",
    "receiverDescription",
    "receiverId",
    "server",
)


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class OpeningRequest(_WireModel):
    account_id: Any
    code: Any
    complement: Any
    partition_id: Any
    # Required by the contract but not forwarded; the audit event uses the receiver's name.
    receiver_description: Any
    receiver_id: Any
    server: Any


class PartitionMap(_WireModel):
    # Optional: siblings of the targeted partition are never inspected beyond `id`.
    id: Any = None
    number: Any = None

    def device_index(self) -> int:
        # Only the matched partition is parsed; a missing or non-numeric number raises.
        return int(str(self.number).strip(), 10)


class AccountMap(_WireModel):
    account_code: Any
    company_id: Any
    partitions: list[PartitionMap]

    def find_partition(self, partition_id: Any) -> PartitionMap | None:
        # First match in list order wins.
        return next((p for p in self.partitions if p.id == partition_id), None)


class ReceiverMap(_WireModel):
    name: str | None = None


@dataclass(frozen=True, slots=True)
class Rejection:
    """
    Expected, non-exceptional early exit of the pipeline.
    """

    status_code: int
    message: str
    suggestion: str


MISSING_FIELDS = Rejection(
    status_code=400,
    message="Missing required fields.",
    suggestion=(
        "Please provide all required fields: accountId, code, complement, partitionId, "
        "receiverDescription, receiverId and server."
    ),
)
ACCOUNT_NOT_FOUND = Rejection(
    status_code=404,
    message="Account not found.",
    suggestion="Please check the accountId and try again.",
)
PARTITION_NOT_FOUND = Rejection(
    status_code=404,
    message="Partition not found.",
    suggestion="Please check the partitionId and try again.",
)
RECEIVER_NOT_FOUND = Rejection(
    status_code=404,
    message="Receiver not found.",
    suggestion="Please check the receiverId and try again.",
)


def is_blank(value: Any) -> bool:
    """
    True for JSON values that count as absent: null, false, "", 0.

    Empty arrays and objects are present values.
    """

    if value is None or isinstance(value, bool):
        return not value
    if isinstance(value, int | float):
        return value == 0 or value != value
    if isinstance(value, str):
        return value == ""
    return False


def missing_fields(body: Any) -> list[str]:
    if not isinstance(body, dict):
        return list(REQUIRED_FIELDS)
    return [name for name in REQUIRED_FIELDS if is_blank(body.get(name))]
