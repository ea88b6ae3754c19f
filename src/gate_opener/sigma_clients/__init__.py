"""
gate_opener.sigma_clients

Downstream client package.

Responsibilities:
- Provide the client boundary for Sigma Cloud APIs and the device gateway.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The orchestrator should depend on this boundary (not on raw HTTP calls).
