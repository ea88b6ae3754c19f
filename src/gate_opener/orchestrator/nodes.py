from __future__ import annotations

from typing import Any

from gate_opener.observability.logging import get_logger
from gate_opener.orchestrator.models import (
    ACCOUNT_NOT_FOUND,
    MISSING_FIELDS,
    PARTITION_NOT_FOUND,
    RECEIVER_NOT_FOUND,
    AccountMap,
    OpeningRequest,
    ReceiverMap,
    is_blank,
    missing_fields,
)
from gate_opener.orchestrator.state import OpeningState
from gate_opener.sigma_clients.sigma_http import SigmaCloudClient

log = get_logger(__name__)

# Contact-ID access-control event, as registered in Sigma Cloud.
EVENT_ID = "167618000"
PROTOCOL_TYPE = "CONTACT_ID"


async def validate_node(state: OpeningState) -> OpeningState:
    """
    Checks every required field before any remote call is made.
    """

    body = state.get("body")
    missing = missing_fields(body)
    if missing:
        log.info("opening.validation_failed", missing=missing)
        return {"rejection": MISSING_FIELDS, "trace": ["validate"]}
    return {"opening": OpeningRequest.model_validate(body), "trace": ["validate"]}


async def resolve_account_node(state: OpeningState, *, client: SigmaCloudClient) -> OpeningState:
    opening = state["opening"]
    payload = await client.account(account_id=opening.account_id)
    if is_blank(payload):
        return {"rejection": ACCOUNT_NOT_FOUND, "trace": ["resolve_account"]}

    account = AccountMap.model_validate(payload)
    log.info("opening.account_resolved", account_code=account.account_code)
    return {"account": account, "trace": ["resolve_account"]}


async def resolve_partition_node(state: OpeningState) -> OpeningState:
    partition = state["account"].find_partition(state["opening"].partition_id)
    if partition is None:
        return {"rejection": PARTITION_NOT_FOUND, "trace": ["resolve_partition"]}
    return {"partition": partition, "trace": ["resolve_partition"]}


async def resolve_receiver_node(state: OpeningState, *, client: SigmaCloudClient) -> OpeningState:
    opening = state["opening"]
    payload = await client.receiver(
        account_id=opening.account_id,
        receiver_id=opening.receiver_id,
    )
    if is_blank(payload):
        return {"rejection": RECEIVER_NOT_FOUND, "trace": ["resolve_receiver"]}
    return {"receiver": ReceiverMap.model_validate(payload), "trace": ["resolve_receiver"]}


async def actuate_node(state: OpeningState, *, client: SigmaCloudClient) -> OpeningState:
    # Physical side effect; from here on a failure cannot be undone.
    account = state["account"]
    partition_number = state["partition"].device_index()
    data = await client.open_gate(
        server=state["opening"].server,
        account_code=account.account_code,
        partition_number=partition_number,
    )
    log.info(
        "opening.gateway_opened",
        account_code=account.account_code,
        partition_number=partition_number,
    )
    return {"gateway_data": data, "trace": ["actuate"]}


async def report_audit_node(state: OpeningState, *, client: SigmaCloudClient) -> OpeningState:
    event = access_control_event(state)
    await client.report_access_control_events(events=[event])
    log.info("opening.audit_reported", account_code=event["account"], event_id=EVENT_ID)
    return {"trace": ["report_audit"]}


def access_control_event(state: OpeningState) -> dict[str, Any]:
    account = state["account"]
    opening = state["opening"]
    return {
        "account": account.account_code,
        "code": opening.code,
        "companyId": account.company_id,
        "complement": opening.complement,
        "eventId": EVENT_ID,
        "protocolType": PROTOCOL_TYPE,
        "receiverDescription": state["receiver"].name,
    }


def route_unless_rejected(next_node: str):
    """
    Conditional edge: stop when the previous stage recorded a rejection.
    """

    def _route(state: OpeningState) -> str:
        if state.get("rejection") is not None:
            return "rejected"
        return next_node

    return _route
