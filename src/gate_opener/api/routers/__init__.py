"""
gate_opener.api.routers

HTTP routers (health, openings).
"""
