"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Table Enums
# =============================================================================

class RowAction(Enum):
    """Change classification of a resource row between two refreshes."""

    NEW = "new"
    UPDATE = "update"
    DELETE = "delete"
    UNCHANGED = "unchanged"


# =============================================================================
# Port-forward Enums
# =============================================================================

class ForwardState(Enum):
    """Lifecycle of a port-forward session."""

    CREATED = "created"
    ACTIVATING = "activating"
    ACTIVE = "active"
    STOPPED = "stopped"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (ForwardState.STOPPED, ForwardState.FAILED)


# =============================================================================
# Benchmark Enums
# =============================================================================

class BenchmarkState(Enum):
    """Lifecycle of a benchmark session."""

    IDLE = "idle"
    RUNNING = "running"
    CANCELED = "canceled"
    COMPLETED = "completed"

    @property
    def is_terminal(self) -> bool:
        return self in (BenchmarkState.CANCELED, BenchmarkState.COMPLETED)


# =============================================================================
# Status line Enums
# =============================================================================

class FlashLevel(Enum):
    """Severity of an operator status line."""

    INFO = "information"
    WARN = "warning"
    ERROR = "error"


__all__ = [
    "BenchmarkState",
    "FlashLevel",
    "ForwardState",
    "RowAction",
]
