"""Limit and threshold constants for the TUI.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Display limits
# ============================================================================

MAX_ROWS_DISPLAY: Final = 1000

# ============================================================================
# Validation limits
# ============================================================================

REFRESH_RATE_MIN: Final = 0.5
BENCH_CONCURRENCY_MAX: Final = 256

__all__ = [
    "BENCH_CONCURRENCY_MAX",
    "MAX_ROWS_DISPLAY",
    "REFRESH_RATE_MIN",
]
