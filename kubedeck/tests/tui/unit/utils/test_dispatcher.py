"""Tests for the UI-thread dispatchers."""

from __future__ import annotations

import asyncio
import threading
from unittest.mock import MagicMock

import pytest

from kubedeck.utils.cancellation import CancelScope
from kubedeck.utils.dispatcher import QueueDispatcher, TextualDispatcher


class TestQueueDispatcher:
    """Tests for QueueDispatcher."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_jobs_run_in_fifo_order_on_drain(self) -> None:
        """Queued jobs only run when drained, in submission order."""
        dispatcher = QueueDispatcher()
        calls: list[int] = []
        for index in range(3):
            dispatcher.queue_update(lambda index=index: calls.append(index))
        assert calls == []
        assert dispatcher.pending == 3
        assert dispatcher.drain() == 3
        assert calls == [0, 1, 2]
        assert len(dispatcher) == 0

    @pytest.mark.unit
    @pytest.mark.fast
    def test_jobs_enqueued_by_jobs_run_in_same_drain(self) -> None:
        """A job may enqueue follow-up work."""
        dispatcher = QueueDispatcher()
        calls: list[str] = []

        def first() -> None:
            calls.append("first")
            dispatcher.queue_update(lambda: calls.append("second"))

        dispatcher.queue_update(first)
        assert dispatcher.drain() == 2
        assert calls == ["first", "second"]

    @pytest.mark.unit
    @pytest.mark.fast
    def test_failing_job_does_not_stop_queue(self) -> None:
        """Job exceptions are logged and the queue keeps going."""
        dispatcher = QueueDispatcher()
        calls: list[str] = []

        def boom() -> None:
            raise RuntimeError("boom")

        dispatcher.queue_update(boom)
        dispatcher.queue_update(lambda: calls.append("after"))
        dispatcher.drain()
        assert calls == ["after"]

    @pytest.mark.unit
    @pytest.mark.fast
    def test_queue_from_threads(self) -> None:
        """Background threads only enqueue; the owner runs everything."""
        dispatcher = QueueDispatcher()
        calls: list[int] = []
        threads = [
            threading.Thread(target=dispatcher.queue_update, args=(lambda i=i: calls.append(i),))
            for i in range(10)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert calls == []
        dispatcher.drain()
        assert sorted(calls) == list(range(10))

    @pytest.mark.unit
    @pytest.mark.fast
    def test_run_now(self) -> None:
        """run_now executes inline and returns the result."""
        assert QueueDispatcher().run_now(lambda: 42) == 42

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_pump_until_cancelled(self) -> None:
        """pump() drains until its scope is cancelled."""
        dispatcher = QueueDispatcher()
        scope = CancelScope()
        calls: list[str] = []
        pump = asyncio.create_task(dispatcher.pump(scope))
        dispatcher.queue_update(lambda: calls.append("job"))
        await asyncio.sleep(0.05)
        scope.cancel()
        await asyncio.wait_for(pump, timeout=1.0)
        assert calls == ["job"]


class TestTextualDispatcher:
    """Tests for TextualDispatcher."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_drops_jobs_before_bind(self) -> None:
        """Without a bound loop, jobs are dropped rather than run inline."""
        app = MagicMock()
        dispatcher = TextualDispatcher(app)
        dispatcher.queue_update(lambda: None)
        app.call_later.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_schedules_through_app(self) -> None:
        """Bound dispatchers hand jobs to App.call_later on the app loop."""
        app = MagicMock()
        dispatcher = TextualDispatcher(app)
        dispatcher.bind_loop()
        job = MagicMock()
        dispatcher.queue_update(job)
        await asyncio.sleep(0)
        app.call_later.assert_called_once()
        assert app.call_later.call_args.args[1] is job
