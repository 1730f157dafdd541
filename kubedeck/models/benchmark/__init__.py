"""Benchmark models."""

from kubedeck.models.benchmark.bench_config import (
    BenchmarkConfig,
    BenchmarkFile,
    BenchmarksSpec,
    container_id,
)
from kubedeck.models.benchmark.bench_report import BenchmarkReport, ReportSummary, percentile
from kubedeck.models.benchmark.bench_session import BenchmarkSession

__all__ = [
    "BenchmarkConfig",
    "BenchmarkFile",
    "BenchmarkReport",
    "BenchmarkSession",
    "BenchmarksSpec",
    "ReportSummary",
    "container_id",
    "percentile",
]
