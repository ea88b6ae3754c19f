"""
gate_opener.services

Service-layer package.

Responsibilities:
- Own the failure boundary around the opening pipeline.
- Turn every pipeline outcome into a response envelope.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services should be pure Python and easily testable with fake transports.
