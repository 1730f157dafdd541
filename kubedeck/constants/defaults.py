"""Default values for settings.

All default values used in AppSettings, BenchmarkConfig and validation fallbacks.
"""

from typing import Final

# ============================================================================
# UI defaults
# ============================================================================

REFRESH_RATE_DEFAULT: Final = 2.0
NAMESPACE_DEFAULT: Final = "*"
LOG_LEVEL_DEFAULT: Final = "INFO"
BENCH_STATUS_HOLD_SECONDS_DEFAULT: Final = 2.0

# ============================================================================
# Benchmark defaults
# ============================================================================

BENCH_CONCURRENCY_DEFAULT: Final = 1
BENCH_REQUEST_COUNT_DEFAULT: Final = 200
BENCH_HTTP_METHOD_DEFAULT: Final = "GET"
BENCH_HTTP_PATH_DEFAULT: Final = "/"

# ============================================================================
# Filesystem defaults
# ============================================================================

HOME_ENV_VAR: Final = "KUBEDECK_HOME"
HOME_DIR_NAME: Final = ".kubedeck"
SETTINGS_FILE_NAME: Final = "config.yml"
BENCH_FILE_PREFIX: Final = "bench"
BENCH_REPORTS_DIR_NAME: Final = "benchmarks"
LOG_FILE_NAME: Final = "kubedeck.log"

__all__ = [
    "BENCH_CONCURRENCY_DEFAULT",
    "BENCH_FILE_PREFIX",
    "BENCH_HTTP_METHOD_DEFAULT",
    "BENCH_HTTP_PATH_DEFAULT",
    "BENCH_REPORTS_DIR_NAME",
    "BENCH_REQUEST_COUNT_DEFAULT",
    "BENCH_STATUS_HOLD_SECONDS_DEFAULT",
    "HOME_DIR_NAME",
    "HOME_ENV_VAR",
    "LOG_FILE_NAME",
    "LOG_LEVEL_DEFAULT",
    "NAMESPACE_DEFAULT",
    "REFRESH_RATE_DEFAULT",
    "SETTINGS_FILE_NAME",
]
