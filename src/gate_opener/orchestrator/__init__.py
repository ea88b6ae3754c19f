"""
gate_opener.orchestrator

Opening pipeline package (LangGraph state machine).

Responsibilities:
- Domain models, typed state schema, pipeline stages, routing, and graph compilation.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Call sites should go through `services.opening_service`, which owns the failure boundary.
