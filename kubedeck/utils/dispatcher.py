"""UI-thread dispatcher.

All mutations of shared rendering state (forwarder registry, benchmark slot,
painted table data) go through a dispatcher. Background tasks never touch that
state directly; they enqueue a job with ``queue_update`` and the UI thread runs
it. Two implementations are provided:

- ``QueueDispatcher``: a single-consumer FIFO drained explicitly (headless
  runs and tests).
- ``TextualDispatcher``: schedules jobs on a running Textual app's event loop.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from textual.app import App

    from kubedeck.utils.cancellation import CancelScope

logger = logging.getLogger(__name__)

Job = Callable[[], Any]


class Dispatcher(ABC):
    """Serializes shared-state mutations onto the UI thread."""

    def run_now(self, job: Job) -> Any:
        """Run a job immediately; the caller is already on the UI thread."""
        return job()

    @abstractmethod
    def queue_update(self, job: Job) -> None:
        """Enqueue a job for the UI thread and return immediately."""
        ...

    @staticmethod
    def _run_job(job: Job) -> None:
        try:
            job()
        except Exception:
            logger.exception("Dispatcher job %r failed", job)


class QueueDispatcher(Dispatcher):
    """Single-consumer job queue drained by the owner of the UI thread."""

    _PUMP_INTERVAL_SECONDS = 0.01

    def __init__(self) -> None:
        self._jobs: deque[Job] = deque()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._jobs)

    @property
    def pending(self) -> int:
        """Number of jobs waiting to run."""
        return len(self._jobs)

    def queue_update(self, job: Job) -> None:
        with self._lock:
            self._jobs.append(job)

    def drain(self) -> int:
        """Run queued jobs in FIFO order, including jobs they enqueue.

        Returns:
            Number of jobs executed.
        """
        count = 0
        while True:
            with self._lock:
                if not self._jobs:
                    return count
                job = self._jobs.popleft()
            self._run_job(job)
            count += 1

    async def pump(self, scope: CancelScope) -> None:
        """Drain continuously until the scope is cancelled."""
        while not scope.cancelled:
            self.drain()
            await asyncio.sleep(self._PUMP_INTERVAL_SECONDS)
        self.drain()


class TextualDispatcher(Dispatcher):
    """Dispatcher backed by a running Textual application.

    Jobs are handed to ``App.call_later`` on the app's own event loop, which
    makes ``queue_update`` safe to call from worker threads as well as from
    asyncio tasks.
    """

    def __init__(self, app: App[Any]) -> None:
        self._app = app
        self._loop: asyncio.AbstractEventLoop | None = None

    def bind_loop(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """Remember the app loop; call from the UI thread once mounted."""
        self._loop = loop or asyncio.get_running_loop()

    def queue_update(self, job: Job) -> None:
        loop = self._loop
        if loop is None or loop.is_closed():
            logger.debug("Dropping UI job %r: app loop not available", job)
            return
        loop.call_soon_threadsafe(self._app.call_later, self._run_job, job)


__all__ = [
    "Dispatcher",
    "Job",
    "QueueDispatcher",
    "TextualDispatcher",
]
