"""Benchmark reports screen."""

from kubedeck.screens.benchmarks.benchmark_screen import BenchmarkScreen

__all__ = ["BenchmarkScreen"]
