"""Benchmark controllers."""

from kubedeck.controllers.benchmark.config_loader import load_bench_file
from kubedeck.controllers.benchmark.config_watcher import ConfigWatcher
from kubedeck.controllers.benchmark.load_generator import LoadGenerator
from kubedeck.controllers.benchmark.orchestrator import (
    BENCH_CANCELED_MESSAGE,
    BENCH_COMPLETED_MESSAGE,
    BenchmarkOrchestrator,
    report_file_name,
)

__all__ = [
    "BENCH_CANCELED_MESSAGE",
    "BENCH_COMPLETED_MESSAGE",
    "BenchmarkOrchestrator",
    "ConfigWatcher",
    "LoadGenerator",
    "load_bench_file",
    "report_file_name",
]
