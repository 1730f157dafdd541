"""Constants module for KubeDeck TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, numbers with Final)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings

Note: Keyboard bindings are defined in kubedeck.keyboard module.
"""

from kubedeck.constants.defaults import (
    BENCH_CONCURRENCY_DEFAULT,
    BENCH_HTTP_METHOD_DEFAULT,
    BENCH_HTTP_PATH_DEFAULT,
    BENCH_REQUEST_COUNT_DEFAULT,
    NAMESPACE_DEFAULT,
    REFRESH_RATE_DEFAULT,
)
from kubedeck.constants.enums import (
    BenchmarkState,
    FlashLevel,
    ForwardState,
    RowAction,
)
from kubedeck.constants.limits import MAX_ROWS_DISPLAY, REFRESH_RATE_MIN
from kubedeck.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)
from kubedeck.constants.values import (
    ALL_NAMESPACES,
    APP_TITLE,
    NA,
    STATE_RUNNING,
)

__all__ = [
    "ALL_NAMESPACES",
    "APP_TITLE",
    "BENCH_CONCURRENCY_DEFAULT",
    "BENCH_HTTP_METHOD_DEFAULT",
    "BENCH_HTTP_PATH_DEFAULT",
    "BENCH_REQUEST_COUNT_DEFAULT",
    "CLUSTER_REQUEST_TIMEOUT",
    "KUBECTL_COMMAND_TIMEOUT",
    "MAX_ROWS_DISPLAY",
    "NA",
    "NAMESPACE_DEFAULT",
    "REFRESH_RATE_DEFAULT",
    "REFRESH_RATE_MIN",
    "STATE_RUNNING",
    "BenchmarkState",
    "FlashLevel",
    "ForwardState",
    "RowAction",
]
