"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "KubeDeck"

# ============================================================================
# Table conventions
# ============================================================================

ALL_NAMESPACES: Final = "*"
NA: Final = "n/a"
FQN_CONTAINER_SEPARATOR: Final = "|"

# ============================================================================
# Container / pod states
# ============================================================================

STATE_RUNNING: Final = "Running"
STATE_COMPLETED: Final = "Completed"
STATE_TERMINATING: Final = "Terminating"

# Placeholder offered in the port-forward dialog when no TCP port is exposed.
PORT_PLACEHOLDER: Final = "MY_TCP_PORT!"

__all__ = [
    "ALL_NAMESPACES",
    "APP_TITLE",
    "FQN_CONTAINER_SEPARATOR",
    "NA",
    "PORT_PLACEHOLDER",
    "STATE_COMPLETED",
    "STATE_RUNNING",
    "STATE_TERMINATING",
]
