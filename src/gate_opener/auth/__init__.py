"""
gate_opener.auth

Outbound authentication package.

Responsibilities:
- httpx auth strategies for each downstream trust domain.
"""

from gate_opener.auth.strategies import BasicAndBearerAuth, BearerAuth

__all__ = ["BasicAndBearerAuth", "BearerAuth"]
