"""Saved benchmark reports of the current cluster."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from kubedeck.controllers.kinds.base import ResourceKind
from kubedeck.models.benchmark.bench_report import ReportSummary
from kubedeck.models.table.row_event import Row
from kubedeck.utils.age import format_age

logger = logging.getLogger(__name__)

_STATUS_PASS = "pass"
_STATUS_FAIL = "fail"


@dataclass(frozen=True)
class ReportFile:
    path: Path
    namespace: str
    name: str
    summary: ReportSummary
    modified: datetime


def _read_reports(directory: Path) -> list[ReportFile]:
    if not directory.is_dir():
        return []
    reports: list[ReportFile] = []
    for path in sorted(directory.glob("*.txt")):
        namespace, _, rest = path.stem.partition("_")
        name = rest.rpartition("_")[0] or rest
        try:
            text = path.read_text(encoding="utf-8")
            modified = datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
        except OSError as exc:
            logger.warning("Skipping benchmark report %s: %s", path, exc)
            continue
        reports.append(ReportFile(path, namespace, name, ReportSummary.from_text(text), modified))
    return reports


class BenchmarkKind(ResourceKind):
    name = "benchmarks"
    title = "Benchmarks"
    aliases = ("be", "bench", "benchmark")
    header = ("NAMESPACE", "NAME", "STATUS", "TIME", "REQ/S", "2XX", "4XX/5XX", "REPORT", "AGE")
    numeric_columns = frozenset({"TIME", "REQ/S", "2XX", "4XX/5XX"})

    def __init__(self, reports_dir: Callable[[], Path]) -> None:
        self.reports_dir = reports_dir

    async def list_items(self, namespace: str) -> list[Any]:
        return await asyncio.to_thread(_read_reports, self.reports_dir())

    def fqn(self, item: Any) -> str:
        return f"{item.namespace}/{item.path.name}"

    def render(self, item: Any) -> Row:
        summary: ReportSummary = item.summary
        return (
            item.namespace,
            item.name,
            _STATUS_PASS if summary.passed else _STATUS_FAIL,
            f"{summary.elapsed_seconds:.4f}",
            f"{summary.requests_per_second:.4f}",
            str(summary.ok_count),
            str(summary.error_count),
            item.path.name,
            format_age(item.modified),
        )
