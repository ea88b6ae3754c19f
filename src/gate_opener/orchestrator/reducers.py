"""
gate_opener.orchestrator.reducers

Reducers define how LangGraph merges partial state updates returned by nodes.
"""

from __future__ import annotations


def append_trace(left: list[str] | None, right: list[str] | None) -> list[str]:
    """
    Append-only reducer for the stage trace.

    Nodes return `{"trace": ["stage_name"]}` and this reducer concatenates.
    """

    return [*(left or []), *(right or [])]
