"""Tests for benchmark reports and their summaries."""

from __future__ import annotations

import pytest

from kubedeck.models.benchmark import BenchmarkReport, ReportSummary
from kubedeck.models.benchmark.bench_report import percentile


def _report() -> BenchmarkReport:
    report = BenchmarkReport(
        target_name="ns/pod|app",
        url="http://localhost:8080/",
        method="GET",
        concurrency=2,
        requested=5,
        elapsed_seconds=2.0,
    )
    for latency in (10.0, 20.0, 30.0):
        report.record(200, latency)
    report.record(503, 40.0)
    report.record_error("ConnectError")
    return report


class TestPercentile:
    """Tests for percentile."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_interpolation(self) -> None:
        assert percentile([], 50) == 0.0
        assert percentile([1.0, 2.0, 3.0, 4.0], 50) == pytest.approx(2.5)
        assert percentile([5.0, 1.0], 0) == 1.0
        assert percentile([5.0, 1.0], 100) == 5.0


class TestBenchmarkReport:
    """Tests for BenchmarkReport."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_counts(self) -> None:
        report = _report()
        assert report.completed == 5
        assert report.succeeded == 3
        assert report.failed == 2
        assert report.requests_per_second == pytest.approx(2.5)
        assert report.count_in_range(500, 600) == 1

    @pytest.mark.unit
    @pytest.mark.fast
    def test_render_and_summary(self) -> None:
        """A rendered report reads back into the same headline numbers."""
        text = _report().render()
        assert "Total:        2.0000 secs" in text
        assert "  [200] 3 responses" in text
        assert "Error distribution:" in text

        summary = ReportSummary.from_text(text)
        assert summary.elapsed_seconds == pytest.approx(2.0)
        assert summary.requests_per_second == pytest.approx(2.5)
        assert summary.ok_count == 3
        assert summary.error_count == 1
        assert summary.has_errors is True
        assert summary.passed is False

    @pytest.mark.unit
    @pytest.mark.fast
    def test_clean_report_passes(self) -> None:
        report = BenchmarkReport("t", "http://x/", "GET", 1, 1, elapsed_seconds=1.0)
        report.record(204, 5.0)
        assert ReportSummary.from_text(report.render()).passed is True

    @pytest.mark.unit
    @pytest.mark.fast
    def test_summary_of_garbage(self) -> None:
        summary = ReportSummary.from_text("not a report")
        assert summary.elapsed_seconds == 0.0
        assert summary.ok_count == 0
