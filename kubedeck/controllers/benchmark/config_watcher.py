"""Hot reload of the active cluster's benchmark file."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from functools import partial
from pathlib import Path
from typing import Any

from watchfiles import Change, awatch

from kubedeck.errors import WatchSetupError
from kubedeck.utils.cancellation import CancelScope
from kubedeck.utils.dispatcher import Dispatcher
from kubedeck.utils.paths import bench_config_path

logger = logging.getLogger(__name__)

ReloadCallback = Callable[[Path], None]

_RELOAD_CHANGES = frozenset({Change.added, Change.modified})


class ConfigWatcher:
    """Watches a directory and reloads when the current cluster's file changes.

    The expected file name is recomputed for every event, so switching
    clusters retargets the watch without restarting it.
    """

    def __init__(
        self,
        directory: Path,
        current_cluster: Callable[[], str],
        on_change: ReloadCallback,
        dispatcher: Dispatcher,
        *,
        watch_fn: Callable[..., Any] = awatch,
    ) -> None:
        self.directory = directory
        self._current_cluster = current_cluster
        self._on_change = on_change
        self._dispatcher = dispatcher
        self._watch_fn = watch_fn

    def expected_path(self) -> Path:
        return bench_config_path(self._current_cluster())

    def matches(self, changed: str | Path) -> bool:
        """True when ``changed`` is the benchmark file of the current cluster."""
        return Path(changed).name == self.expected_path().name

    def start(self, scope: CancelScope) -> asyncio.Task[None]:
        """Start watching in the background.

        Raises:
            WatchSetupError: The directory does not exist or is not a directory.
        """
        if not self.directory.is_dir():
            raise WatchSetupError(f"Unable to watch {self.directory}: not a directory")
        return asyncio.create_task(self.watch(scope), name=f"config watch {self.directory}")

    async def watch(self, scope: CancelScope) -> None:
        """Deliver reloads until ``scope`` is cancelled or the watch fails."""
        logger.debug("Watching %s for benchmark config changes", self.directory)
        stop_event = scope.as_event()
        try:
            async for changes in self._watch_fn(self.directory, stop_event=stop_event, recursive=False):
                if scope.cancelled:
                    break
                self.handle_changes(changes)
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            logger.error("Config watcher on %s stopped: %s", self.directory, exc)
            return
        finally:
            scope.release_event(stop_event)
        logger.debug("Config watcher on %s done", self.directory)

    def handle_changes(self, changes: set[tuple[Change, str]]) -> bool:
        """Queue one reload when a batch touches the expected file."""
        for change, changed in changes:
            if change not in _RELOAD_CHANGES or not self.matches(changed):
                continue
            logger.debug("Benchmark config changed: %s", changed)
            self._dispatcher.queue_update(partial(self._on_change, self.expected_path()))
            return True
        return False


__all__ = ["ConfigWatcher", "ReloadCallback"]
