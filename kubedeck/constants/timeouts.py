"""Timeout constants for the TUI.

All timeout and interval values for kubectl requests, tunnels and benchmarks.
"""

from typing import Final

# ============================================================================
# API/Cluster timeouts (string format for kubectl)
# ============================================================================

CLUSTER_REQUEST_TIMEOUT: Final = "20s"

# Process-level command timeouts (must be greater than request timeout)
KUBECTL_COMMAND_TIMEOUT: Final = 30
KUBECTL_TOP_TIMEOUT: Final = 10
CONTEXT_RESOLVE_TIMEOUT: Final = 8

# ============================================================================
# Async operation timeouts (float, in seconds)
# ============================================================================

PORT_FORWARD_STOP_TIMEOUT: Final = 5.0
BENCH_REQUEST_TIMEOUT: Final = 10.0

__all__ = [
    "BENCH_REQUEST_TIMEOUT",
    "CLUSTER_REQUEST_TIMEOUT",
    "CONTEXT_RESOLVE_TIMEOUT",
    "KUBECTL_COMMAND_TIMEOUT",
    "KUBECTL_TOP_TIMEOUT",
    "PORT_FORWARD_STOP_TIMEOUT",
]
