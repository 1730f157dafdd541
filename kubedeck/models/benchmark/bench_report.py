"""Benchmark result summaries."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field


def percentile(values: list[float], p: float) -> float:
    """Compute the p-th percentile with linear interpolation (0.0 when empty)."""
    if not values:
        return 0.0
    if p <= 0:
        return min(values)
    if p >= 100:
        return max(values)
    ordered = sorted(values)
    k = (len(ordered) - 1) * (p / 100.0)
    f = int(k)
    c = min(f + 1, len(ordered) - 1)
    if f == c:
        return ordered[f]
    return ordered[f] * (c - k) + ordered[c] * (k - f)


@dataclass
class BenchmarkReport:
    """Aggregated outcome of one load-test run."""

    target_name: str
    url: str
    method: str
    concurrency: int
    requested: int
    latencies_ms: list[float] = field(default_factory=list)
    status_codes: Counter[int] = field(default_factory=Counter)
    errors: Counter[str] = field(default_factory=Counter)
    elapsed_seconds: float = 0.0
    canceled: bool = False

    @property
    def completed(self) -> int:
        return sum(self.status_codes.values()) + sum(self.errors.values())

    @property
    def succeeded(self) -> int:
        return sum(count for code, count in self.status_codes.items() if 200 <= code < 400)

    @property
    def failed(self) -> int:
        return self.completed - self.succeeded

    @property
    def requests_per_second(self) -> float:
        if self.elapsed_seconds <= 0:
            return 0.0
        return self.completed / self.elapsed_seconds

    def count_in_range(self, low: int, high: int) -> int:
        return sum(count for code, count in self.status_codes.items() if low <= code < high)

    def record(self, status_code: int, latency_ms: float) -> None:
        self.status_codes[status_code] += 1
        self.latencies_ms.append(latency_ms)

    def record_error(self, error: str) -> None:
        self.errors[error] += 1

    def render(self) -> str:
        """Plain-text summary written to the report file."""
        lines = [
            f"Target:       {self.target_name}",
            f"URL:          {self.method} {self.url}",
            f"Concurrency:  {self.concurrency}",
            f"Requests:     {self.completed}/{self.requested}"
            + (" (canceled)" if self.canceled else ""),
            f"Total:        {self.elapsed_seconds:.4f} secs",
            f"Requests/sec: {self.requests_per_second:.4f}",
            "",
            "Latency distribution:",
        ]
        for p in (10, 50, 90, 95, 99):
            lines.append(f"  {p}% in {percentile(self.latencies_ms, p) / 1000:.4f} secs")
        lines.append("")
        lines.append("Status code distribution:")
        for code in sorted(self.status_codes):
            lines.append(f"  [{code}] {self.status_codes[code]} responses")
        if self.errors:
            lines.append("")
            lines.append("Error distribution:")
            for error, count in self.errors.most_common():
                lines.append(f"  [{count}] {error}")
        return "\n".join(lines) + "\n"


_SUMMARY_PATTERNS = {
    "total": re.compile(r"^Total:\s+([0-9.]+) secs", re.MULTILINE),
    "rps": re.compile(r"^Requests/sec:\s+([0-9.]+)", re.MULTILINE),
}
_STATUS_LINE = re.compile(r"^\s+\[(\d{3})\] (\d+) responses", re.MULTILINE)
_ERROR_SECTION = "Error distribution:"


@dataclass(frozen=True)
class ReportSummary:
    """Headline numbers read back from a saved report file."""

    elapsed_seconds: float
    requests_per_second: float
    ok_count: int
    error_count: int
    has_errors: bool

    @property
    def passed(self) -> bool:
        return self.error_count == 0 and not self.has_errors

    @classmethod
    def from_text(cls, text: str) -> ReportSummary:
        values: dict[str, float] = {}
        for key, pattern in _SUMMARY_PATTERNS.items():
            match = pattern.search(text)
            values[key] = float(match.group(1)) if match else 0.0
        ok_count = error_count = 0
        for code, count in _STATUS_LINE.findall(text):
            if 200 <= int(code) < 300:
                ok_count += int(count)
            elif int(code) >= 400:
                error_count += int(count)
        return cls(
            elapsed_seconds=values["total"],
            requests_per_second=values["rps"],
            ok_count=ok_count,
            error_count=error_count,
            has_errors=_ERROR_SECTION in text,
        )


__all__ = ["BenchmarkReport", "ReportSummary", "percentile"]
