"""Tests for the benchmark config hot-reload watcher."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from pathlib import Path
from typing import Any

import pytest
from watchfiles import Change

from kubedeck.controllers.benchmark import ConfigWatcher
from kubedeck.errors import WatchSetupError
from kubedeck.utils.cancellation import CancelScope
from kubedeck.utils.dispatcher import QueueDispatcher


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("KUBEDECK_HOME", str(tmp_path))
    return tmp_path


class TestConfigWatcher:
    """Tests for ConfigWatcher."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_matches_current_cluster_file_only(self, home: Path) -> None:
        """Only the active cluster's bench file triggers a reload."""
        cluster = {"name": "dev"}
        watcher = ConfigWatcher(home, lambda: cluster["name"], lambda _: None, QueueDispatcher())
        assert watcher.matches(home / "bench-dev.yml")
        assert not watcher.matches(home / "bench-prod.yml")
        assert not watcher.matches(home / "config.yml")

        cluster["name"] = "prod"
        assert watcher.matches(str(home / "bench-prod.yml"))
        assert watcher.expected_path() == home / "bench-prod.yml"

    @pytest.mark.unit
    @pytest.mark.fast
    def test_one_reload_per_batch(self, home: Path) -> None:
        """A batch touching the file queues exactly one reload."""
        dispatcher = QueueDispatcher()
        reloads: list[Path] = []
        watcher = ConfigWatcher(home, lambda: "dev", reloads.append, dispatcher)
        target = str(home / "bench-dev.yml")

        assert watcher.handle_changes({(Change.modified, target), (Change.added, target)}) is True
        assert dispatcher.pending == 1
        dispatcher.drain()
        assert reloads == [home / "bench-dev.yml"]

    @pytest.mark.unit
    @pytest.mark.fast
    def test_ignores_deletes_and_other_files(self, home: Path) -> None:
        dispatcher = QueueDispatcher()
        watcher = ConfigWatcher(home, lambda: "dev", lambda _: None, dispatcher)
        changes = {
            (Change.deleted, str(home / "bench-dev.yml")),
            (Change.modified, str(home / "bench-prod.yml")),
        }
        assert watcher.handle_changes(changes) is False
        assert dispatcher.pending == 0

    @pytest.mark.unit
    @pytest.mark.fast
    def test_start_on_missing_directory(self, tmp_path: Path) -> None:
        """A missing home directory cannot be watched."""
        watcher = ConfigWatcher(tmp_path / "nope", lambda: "dev", lambda _: None, QueueDispatcher())
        with pytest.raises(WatchSetupError):
            watcher.start(CancelScope())

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_watch_delivers_changes_until_cancelled(self, home: Path) -> None:
        """watch() feeds batches from the watch function and stops on cancel."""
        dispatcher = QueueDispatcher()
        reloads: list[Path] = []
        target = str(home / "bench-dev.yml")
        received: dict[str, Any] = {}

        async def fake_awatch(directory: Path, **kwargs: Any) -> AsyncIterator[set[tuple[Change, str]]]:
            received.update(kwargs, directory=directory)
            yield {(Change.modified, target)}
            await kwargs["stop_event"].wait()

        watcher = ConfigWatcher(home, lambda: "dev", reloads.append, dispatcher, watch_fn=fake_awatch)
        scope = CancelScope()
        task = watcher.start(scope)
        await asyncio.sleep(0.01)
        dispatcher.drain()
        assert reloads == [home / "bench-dev.yml"]

        scope.cancel()
        await asyncio.wait_for(task, timeout=1.0)
        assert received["directory"] == home
        assert received["recursive"] is False
        assert scope._events == []

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_watch_failure_is_logged_not_raised(self, home: Path) -> None:
        async def broken_awatch(directory: Path, **kwargs: Any) -> AsyncIterator[set[tuple[Change, str]]]:
            raise OSError("inotify limit")
            yield set()

        watcher = ConfigWatcher(home, lambda: "dev", lambda _: None, QueueDispatcher(), watch_fn=broken_awatch)
        await asyncio.wait_for(watcher.watch(CancelScope()), timeout=1.0)
