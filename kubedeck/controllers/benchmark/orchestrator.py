"""Single-flight benchmark orchestration.

At most one BenchmarkSession is Running at any time. ``run`` and ``cancel``
are called on the UI thread; the load generator runs as a background task and
its completion is delivered back through the dispatcher on every exit path.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime
from functools import partial
from pathlib import Path

from kubedeck.constants.enums import BenchmarkState
from kubedeck.constants.values import FQN_CONTAINER_SEPARATOR
from kubedeck.controllers.benchmark.config_loader import load_bench_file
from kubedeck.controllers.benchmark.load_generator import LoadGenerator
from kubedeck.errors import BenchmarkAlreadyRunningError, BenchmarkConfigLoadError
from kubedeck.models.benchmark.bench_config import BenchmarkConfig, BenchmarkFile, container_id
from kubedeck.models.benchmark.bench_report import BenchmarkReport
from kubedeck.models.benchmark.bench_session import BenchmarkSession
from kubedeck.models.forward.port_forward import split_path
from kubedeck.utils.cancellation import CancelScope
from kubedeck.utils.dispatcher import Dispatcher
from kubedeck.utils.flash import Flash
from kubedeck.utils.paths import safe_file_name

logger = logging.getLogger(__name__)

GeneratorFactory = Callable[[BenchmarkConfig, str, str], LoadGenerator]
SessionListener = Callable[[BenchmarkSession], None]

BENCH_COMPLETED_MESSAGE = "Benchmark Completed!"
BENCH_CANCELED_MESSAGE = "Benchmark canceled"


def report_file_name(target_name: str, started_at: datetime) -> str:
    """``<namespace>_<pod>_<timestamp>.txt`` for a target ``ns/pod[|container]``."""
    path = target_name.split(FQN_CONTAINER_SEPARATOR, 1)[0]
    namespace, name = split_path(path)
    stamp = started_at.strftime("%Y%m%d%H%M%S%f")
    return f"{safe_file_name(namespace or 'default')}_{safe_file_name(name)}_{stamp}.txt"


class BenchmarkOrchestrator:
    """Runs one load test at a time against a tunnel."""

    def __init__(
        self,
        dispatcher: Dispatcher,
        flash: Flash,
        scope: CancelScope,
        *,
        reports_dir: Callable[[], Path] | None = None,
        generator_factory: GeneratorFactory = LoadGenerator,
        bench_file: BenchmarkFile | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._flash = flash
        self._scope = scope
        self._reports_dir = reports_dir
        self._generator_factory = generator_factory
        self._bench_file = bench_file or BenchmarkFile()
        self._session: BenchmarkSession | None = None
        self._listeners: list[SessionListener] = []

    # ========================================================================
    # Config
    # ========================================================================

    @property
    def bench_file(self) -> BenchmarkFile:
        return self._bench_file

    def resolve_config(self, path: str, container: str) -> BenchmarkConfig:
        """Defaults merged with the override for ``path|container``."""
        return self._bench_file.benchmarks.resolve(container_id(path, container))

    def reload(self, path: Path) -> bool:
        """Replace the benchmark config from ``path``.

        A malformed file is reported and the previous config stays in effect.
        Running sessions keep the config they were started with.
        """
        try:
            self._bench_file = load_bench_file(path)
        except BenchmarkConfigLoadError as exc:
            logger.error("Benchmark config reload failed: %s", exc)
            self._flash.err(exc)
            return False
        logger.info("Benchmark config reloaded from %s", path)
        return True

    # ========================================================================
    # Session lifecycle
    # ========================================================================

    @property
    def session(self) -> BenchmarkSession | None:
        return self._session

    def is_running(self) -> bool:
        return self._session is not None and self._session.state is BenchmarkState.RUNNING

    def add_listener(self, listener: SessionListener) -> None:
        """Register a callback run (on the UI thread) when a session ends."""
        self._listeners.append(listener)

    def remove_listener(self, listener: SessionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def run(self, target_name: str, base_url: str, config: BenchmarkConfig) -> BenchmarkSession:
        """Start a benchmark and return immediately.

        Raises:
            BenchmarkAlreadyRunningError: Another session is Running.
        """
        if self.is_running():
            raise BenchmarkAlreadyRunningError()
        session = BenchmarkSession(
            config=config.model_copy(deep=True),
            target_name=target_name,
            base_url=base_url,
            scope=self._scope.child(f"bench:{target_name}"),
            state=BenchmarkState.RUNNING,
        )
        self._session = session
        session.task = asyncio.create_task(self._execute(session), name=f"benchmark {target_name}")
        logger.info("Benchmark started for %s at %s", target_name, base_url)
        return session

    def cancel(self) -> bool:
        """Cancel the running session; no-op when none is running."""
        session = self._session
        if session is None or not session.cancel():
            logger.debug("No running benchmark to cancel")
            return False
        logger.info("Benchmark canceled for %s", session.target_name)
        return True

    async def _execute(self, session: BenchmarkSession) -> None:
        report: BenchmarkReport | None = None
        error: BaseException | None = None
        try:
            generator = self._generator_factory(session.config, session.base_url, session.target_name)
            report = await generator.run(session.scope)
            if self._reports_dir is not None and report.completed:
                session.report_path = await asyncio.to_thread(
                    self._save_report, self._reports_dir(), session, report
                )
        except asyncio.CancelledError:
            session.scope.cancel()
            raise
        except Exception as exc:
            error = exc
            logger.exception("Benchmark for %s failed", session.target_name)
        finally:
            self._dispatcher.queue_update(partial(self._complete, session, report, error))

    @staticmethod
    def _save_report(directory: Path, session: BenchmarkSession, report: BenchmarkReport) -> Path | None:
        target = directory / report_file_name(session.target_name, session.started_at)
        try:
            directory.mkdir(parents=True, exist_ok=True)
            target.write_text(report.render(), encoding="utf-8")
        except OSError as exc:
            logger.error("Unable to save benchmark report %s: %s", target, exc)
            return None
        return target

    def _complete(
        self,
        session: BenchmarkSession,
        report: BenchmarkReport | None,
        error: BaseException | None,
    ) -> None:
        session.report = report
        # A newer run owns the status line once this session was replaced.
        current = self._session is session
        if session.cancel_requested or session.state is BenchmarkState.CANCELED:
            session.state = BenchmarkState.CANCELED
            if current:
                self._flash.info(BENCH_CANCELED_MESSAGE)
        elif error is not None:
            session.state = BenchmarkState.COMPLETED
            session.error = str(error)
            if current:
                self._flash.errf("Benchmark failed: %s", error)
        else:
            session.state = BenchmarkState.COMPLETED
            if current:
                self._flash.info(BENCH_COMPLETED_MESSAGE)

        if current:
            self._session = None
        else:
            logger.info("Benchmark %s ended as %s after a newer run started", session.target_name, session.state.value)
        for listener in list(self._listeners):
            try:
                listener(session)
            except Exception:
                logger.exception("Benchmark listener failed")


__all__ = [
    "BENCH_CANCELED_MESSAGE",
    "BENCH_COMPLETED_MESSAGE",
    "BenchmarkOrchestrator",
    "GeneratorFactory",
    "SessionListener",
    "report_file_name",
]
