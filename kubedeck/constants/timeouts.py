"""Timeout constants for the TUI.

All timeout and interval values for kubectl requests and refresh cycles.
"""

from typing import Final

# ============================================================================
# API/Cluster timeouts (string format for kubectl)
# ============================================================================

CLUSTER_REQUEST_TIMEOUT: Final = "30s"

# Process-level command timeouts (must be greater than request timeout)
KUBECTL_COMMAND_TIMEOUT: Final = 45
CONTEXT_LOOKUP_TIMEOUT: Final = 8

__all__ = [
    "CLUSTER_REQUEST_TIMEOUT",
    "CONTEXT_LOOKUP_TIMEOUT",
    "KUBECTL_COMMAND_TIMEOUT",
]
