from __future__ import annotations

from collections.abc import Awaitable, Callable

from gate_opener.orchestrator.nodes import (
    actuate_node,
    report_audit_node,
    resolve_account_node,
    resolve_partition_node,
    resolve_receiver_node,
    route_unless_rejected,
    validate_node,
)
from gate_opener.orchestrator.state import OpeningState
from gate_opener.sigma_clients.sigma_http import SigmaCloudClient

# Stages in execution order; every stage but the last may end the pipeline early.
STAGES: tuple[str, ...] = (
    "validate",
    "resolve_account",
    "resolve_partition",
    "resolve_receiver",
    "actuate",
    "report_audit",
)


def build_graph(*, client: SigmaCloudClient):
    """
    Returns a compiled LangGraph runnable:

    validate -> resolve_account -> resolve_partition -> resolve_receiver -> actuate -> report_audit

    with an edge to END after each of the first four stages when they record a rejection.
    """

    try:
        from langgraph.graph import END, StateGraph  # type: ignore[import-not-found]
    except Exception as e:  # pragma: no cover
        raise RuntimeError(
            "LangGraph is not available. Install the project dependencies."
        ) from e

    graph = StateGraph(OpeningState)

    graph.add_node("validate", validate_node)
    graph.add_node("resolve_account", _bind_client(resolve_account_node, client))
    graph.add_node("resolve_partition", resolve_partition_node)
    graph.add_node("resolve_receiver", _bind_client(resolve_receiver_node, client))
    graph.add_node("actuate", _bind_client(actuate_node, client))
    graph.add_node("report_audit", _bind_client(report_audit_node, client))

    graph.set_entry_point("validate")

    for current, following in zip(STAGES[:4], STAGES[1:5]):
        graph.add_conditional_edges(
            current,
            route_unless_rejected(following),
            {following: following, "rejected": END},
        )
    graph.add_edge("actuate", "report_audit")
    graph.add_edge("report_audit", END)

    return graph.compile()


def _bind_client(
    fn: Callable[..., Awaitable[OpeningState]],
    client: SigmaCloudClient,
) -> Callable[[OpeningState], Awaitable[OpeningState]]:
    async def _wrapped(state: OpeningState) -> OpeningState:
        return await fn(state, client=client)

    return _wrapped
