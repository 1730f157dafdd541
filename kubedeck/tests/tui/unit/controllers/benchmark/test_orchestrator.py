"""Tests for BenchmarkOrchestrator single-flight behavior."""

from __future__ import annotations

import asyncio
from datetime import datetime
from pathlib import Path

import pytest

from kubedeck.constants.enums import BenchmarkState, FlashLevel
from kubedeck.controllers.benchmark import (
    BENCH_CANCELED_MESSAGE,
    BENCH_COMPLETED_MESSAGE,
    BenchmarkOrchestrator,
    report_file_name,
)
from kubedeck.errors import BenchmarkAlreadyRunningError
from kubedeck.models.benchmark import BenchmarkConfig, BenchmarkReport, BenchmarkSession
from kubedeck.utils.cancellation import CancelScope
from kubedeck.utils.dispatcher import QueueDispatcher
from kubedeck.utils.flash import Flash, FlashMessage


class FakeGenerator:
    """Runs until released or cancelled, then returns a small report."""

    instances: list[FakeGenerator] = []

    def __init__(self, config: BenchmarkConfig, base_url: str, target_name: str) -> None:
        self.config = config
        self.base_url = base_url
        self.target_name = target_name
        self.release = asyncio.Event()
        self.error: Exception | None = None
        FakeGenerator.instances.append(self)

    async def run(self, scope: CancelScope) -> BenchmarkReport:
        stopped = asyncio.create_task(scope.wait())
        released = asyncio.create_task(self.release.wait())
        await asyncio.wait({stopped, released}, return_when=asyncio.FIRST_COMPLETED)
        stopped.cancel()
        released.cancel()
        if self.error is not None:
            raise self.error
        report = BenchmarkReport(self.target_name, self.base_url, "GET", self.config.concurrency, self.config.request_count)
        report.record(200, 1.0)
        report.elapsed_seconds = 0.5
        report.canceled = scope.cancelled
        return report


async def _settle(dispatcher: QueueDispatcher, rounds: int = 10) -> None:
    for _ in range(rounds):
        await asyncio.sleep(0.01)
        dispatcher.drain()


class TestBenchmarkOrchestrator:
    """Tests for BenchmarkOrchestrator."""

    @pytest.fixture(autouse=True)
    def _reset_instances(self) -> None:
        FakeGenerator.instances = []

    @pytest.fixture
    def dispatcher(self) -> QueueDispatcher:
        return QueueDispatcher()

    @pytest.fixture
    def messages(self) -> list[FlashMessage]:
        return []

    @pytest.fixture
    def orchestrator(
        self, dispatcher: QueueDispatcher, messages: list[FlashMessage], tmp_path: Path
    ) -> BenchmarkOrchestrator:
        flash = Flash()
        flash.add_listener(messages.append)
        return BenchmarkOrchestrator(
            dispatcher,
            flash,
            CancelScope("benchmarks"),
            reports_dir=lambda: tmp_path / "reports",
            generator_factory=FakeGenerator,  # type: ignore[arg-type]
        )

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_run_cancel_run(
        self,
        orchestrator: BenchmarkOrchestrator,
        dispatcher: QueueDispatcher,
        messages: list[FlashMessage],
    ) -> None:
        """Run, second Run rejected, Cancel, then Run succeeds."""
        config = BenchmarkConfig(concurrency=5, request_count=200)
        first = orchestrator.run("svc-a", "http://localhost:8080", config)
        assert first.state is BenchmarkState.RUNNING

        with pytest.raises(BenchmarkAlreadyRunningError, match="Only one benchmark allowed at a time"):
            orchestrator.run("svc-a", "http://localhost:8080", config)

        assert orchestrator.cancel() is True
        assert first.state is BenchmarkState.CANCELED

        second = orchestrator.run("svc-a", "http://localhost:8080", config)
        assert second.state is BenchmarkState.RUNNING

        await first.task
        await _settle(dispatcher)
        assert first.state is BenchmarkState.CANCELED
        assert orchestrator.session is second
        # The replaced session does not overwrite the new run's status line.
        assert BENCH_CANCELED_MESSAGE not in [message.text for message in messages]

        FakeGenerator.instances[-1].release.set()
        await second.task
        await _settle(dispatcher)
        assert second.state is BenchmarkState.COMPLETED
        assert orchestrator.session is None
        assert messages[-1].text == BENCH_COMPLETED_MESSAGE

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_cancel_without_replacement_flashes(
        self,
        orchestrator: BenchmarkOrchestrator,
        dispatcher: QueueDispatcher,
        messages: list[FlashMessage],
    ) -> None:
        """A cancel with no follow-up run reports the cancellation."""
        session = orchestrator.run("svc-a", "http://localhost:8080", BenchmarkConfig())
        ended: list[BenchmarkSession] = []
        orchestrator.add_listener(ended.append)

        assert orchestrator.cancel() is True
        await session.task
        await _settle(dispatcher)

        assert ended == [session]
        assert messages[-1].text == BENCH_CANCELED_MESSAGE
        assert orchestrator.session is None

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_completion_saves_report(
        self,
        orchestrator: BenchmarkOrchestrator,
        dispatcher: QueueDispatcher,
        messages: list[FlashMessage],
        tmp_path: Path,
    ) -> None:
        """A finished run writes its report and clears the slot."""
        done: list[BenchmarkSession] = []
        orchestrator.add_listener(done.append)
        session = orchestrator.run("ns/pod|app", "http://localhost:8080", BenchmarkConfig.builtin())
        await asyncio.sleep(0)
        FakeGenerator.instances[-1].release.set()
        await session.task
        await _settle(dispatcher)

        assert session.state is BenchmarkState.COMPLETED
        assert messages[-1].text == BENCH_COMPLETED_MESSAGE
        assert done == [session]
        assert session.report_path is not None
        assert session.report_path.parent == tmp_path / "reports"
        assert session.report_path.name.startswith("ns_pod_")
        assert "Total:" in session.report_path.read_text(encoding="utf-8")
        assert not orchestrator.is_running()

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_crash_still_completes(
        self,
        orchestrator: BenchmarkOrchestrator,
        dispatcher: QueueDispatcher,
        messages: list[FlashMessage],
    ) -> None:
        """A generator crash ends the session and frees the slot."""
        session = orchestrator.run("svc-a", "http://localhost:8080", BenchmarkConfig.builtin())
        await asyncio.sleep(0)
        generator = FakeGenerator.instances[-1]
        generator.error = RuntimeError("boom")
        generator.release.set()
        await _settle(dispatcher)

        assert session.state is BenchmarkState.COMPLETED
        assert session.error == "boom"
        assert messages[-1].level is FlashLevel.ERROR
        assert orchestrator.session is None
        again = orchestrator.run("svc-a", "http://localhost:8080", BenchmarkConfig.builtin())
        orchestrator.cancel()
        await again.task

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_cancel_without_session(self, orchestrator: BenchmarkOrchestrator) -> None:
        assert orchestrator.cancel() is False

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_running_session_keeps_its_config(
        self, orchestrator: BenchmarkOrchestrator, dispatcher: QueueDispatcher, tmp_path: Path
    ) -> None:
        """A reload mid-run does not change the config of the running session."""
        config = BenchmarkConfig(concurrency=5, request_count=200)
        session = orchestrator.run("ns/pod|app", "http://localhost:8080", config)
        await asyncio.sleep(0)

        path = tmp_path / "bench-dev.yml"
        path.write_text("benchmarks:\n  defaults:\n    concurrency: 9\n", encoding="utf-8")
        assert orchestrator.reload(path) is True
        assert orchestrator.resolve_config("ns/pod", "app").concurrency == 9

        config.concurrency = 7
        assert session.config.concurrency == 5
        assert FakeGenerator.instances[-1].config.concurrency == 5
        orchestrator.cancel()
        await session.task
        await _settle(dispatcher)


class TestReload:
    """Tests for benchmark config reload."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_failed_reload_keeps_previous_config(self, tmp_path: Path) -> None:
        """A malformed file is reported and the old config stays active."""
        messages: list[FlashMessage] = []
        flash = Flash()
        flash.add_listener(messages.append)
        orchestrator = BenchmarkOrchestrator(QueueDispatcher(), flash, CancelScope())

        good = tmp_path / "good.yml"
        good.write_text(
            "benchmarks:\n  defaults:\n    concurrency: 10\n    requests: 100\n"
            "  containers:\n    ns/pod|app:\n      concurrency: 0\n      requests: 50\n",
            encoding="utf-8",
        )
        assert orchestrator.reload(good) is True
        resolved = orchestrator.resolve_config("ns/pod", "app")
        assert (resolved.concurrency, resolved.request_count) == (10, 50)

        bad = tmp_path / "bad.yml"
        bad.write_text("benchmarks: {defaults: [", encoding="utf-8")
        assert orchestrator.reload(bad) is False
        assert messages[-1].level is FlashLevel.ERROR
        resolved = orchestrator.resolve_config("ns/pod", "app")
        assert (resolved.concurrency, resolved.request_count) == (10, 50)


class TestReportFileName:
    """Tests for report_file_name."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_name_from_target(self) -> None:
        stamp = datetime(2024, 5, 1, 12, 30, 45, 123456)
        assert report_file_name("ns/pod|app", stamp) == "ns_pod_20240501123045123456.txt"
        assert report_file_name("svc-a", stamp) == "default_svc-a_20240501123045123456.txt"
