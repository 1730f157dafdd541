"""Benchmark session model."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from kubedeck.constants.enums import BenchmarkState
from kubedeck.models.benchmark.bench_config import BenchmarkConfig
from kubedeck.models.benchmark.bench_report import BenchmarkReport
from kubedeck.utils.cancellation import CancelScope


@dataclass
class BenchmarkSession:
    """A single load-test run against a tunnel."""

    config: BenchmarkConfig
    target_name: str
    base_url: str
    scope: CancelScope
    state: BenchmarkState = BenchmarkState.IDLE
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    report: BenchmarkReport | None = None
    report_path: Path | None = None
    error: str | None = None
    task: asyncio.Task[None] | None = field(default=None, repr=False, compare=False)

    @property
    def cancel_requested(self) -> bool:
        return self.scope.cancelled

    @property
    def running(self) -> bool:
        return self.state is BenchmarkState.RUNNING

    def cancel(self) -> bool:
        """Request cancellation.

        Returns:
            True when the session moved from Running to Canceled.
        """
        if self.state is not BenchmarkState.RUNNING:
            return False
        self.state = BenchmarkState.CANCELED
        self.scope.cancel()
        return True


__all__ = ["BenchmarkSession"]
