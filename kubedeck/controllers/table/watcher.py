"""Periodic refresh of one resource kind into TableData snapshots.

Exactly one fetch/build/notify cycle runs at a time. A tick that fires
while a cycle is still in flight is dropped, not queued, so a slow cluster
never builds up a backlog of refreshes.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from contextlib import suppress

from kubedeck.constants.defaults import REFRESH_RATE_DEFAULT
from kubedeck.constants.values import ALL_NAMESPACES
from kubedeck.controllers.kinds.base import FetchedRows, ResourceKind
from kubedeck.models.table.table_data import TableData, build_table_data
from kubedeck.utils.cancellation import CancelScope

logger = logging.getLogger(__name__)

TableListener = Callable[[TableData], None]
ErrorListener = Callable[[Exception], None]


class TableWatcher:
    """Keeps one kind's TableData fresh and fans it out to listeners."""

    def __init__(
        self,
        kind: ResourceKind,
        namespace: str = ALL_NAMESPACES,
        refresh_rate: float = REFRESH_RATE_DEFAULT,
    ) -> None:
        self.kind = kind
        self._namespace = namespace or ALL_NAMESPACES
        self._refresh_rate = refresh_rate
        self._data = TableData.empty_for(kind.header, kind.numeric_columns, self._namespace)
        self._listeners: list[TableListener] = []
        self._error_listeners: list[ErrorListener] = []
        self._in_flight = False
        self._cycle_task: asyncio.Task[None] | None = None
        self._scope: CancelScope | None = None

    # ========================================================================
    # Configuration
    # ========================================================================

    @property
    def refresh_rate(self) -> float:
        return self._refresh_rate

    def set_refresh_rate(self, seconds: float) -> None:
        """Set the poll interval; applies from the next tick."""
        self._refresh_rate = seconds

    def get_namespace(self) -> str:
        return self._namespace

    def set_namespace(self, namespace: str) -> None:
        """Change the namespace filter; applies from the next tick."""
        self._namespace = namespace or ALL_NAMESPACES

    def in_namespace(self, namespace: str) -> bool:
        return self._namespace == namespace

    def cluster_wide(self) -> bool:
        return self._namespace == ALL_NAMESPACES

    # ========================================================================
    # Listeners
    # ========================================================================

    def add_listener(self, listener: TableListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: TableListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def add_error_listener(self, listener: ErrorListener) -> None:
        self._error_listeners.append(listener)

    def remove_error_listener(self, listener: ErrorListener) -> None:
        if listener in self._error_listeners:
            self._error_listeners.remove(listener)

    # ========================================================================
    # Snapshot access
    # ========================================================================

    def peek(self) -> TableData:
        """Latest snapshot without triggering a refresh."""
        return self._data

    def empty(self) -> bool:
        return self._data.empty()

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    # ========================================================================
    # Poll loop
    # ========================================================================

    async def watch(self, scope: CancelScope) -> None:
        """Refresh immediately, then every ``refresh_rate`` until cancelled."""
        self._scope = scope
        logger.debug("Watching %s in %s", self.kind.name, self._namespace)
        try:
            self.tick()
            while not await scope.sleep(self._refresh_rate):
                self.tick()
        finally:
            task = self._cycle_task
            if task is not None and not task.done():
                task.cancel()
                with suppress(asyncio.CancelledError):
                    await task
            logger.debug("Stopped watching %s", self.kind.name)

    def tick(self) -> bool:
        """Start a cycle unless one is running.

        Returns:
            False when the tick was dropped.
        """
        scope = self._scope
        if scope is None or scope.cancelled:
            return False
        if self._in_flight:
            logger.debug("Dropping %s refresh tick: cycle in flight", self.kind.name)
            return False
        self._in_flight = True
        self._cycle_task = asyncio.create_task(self._cycle(scope), name=f"refresh {self.kind.name}")
        return True

    async def refresh(self) -> bool:
        """Run one cycle now, outside the timer.

        Returns:
            False when a cycle was already in flight.
        """
        if self._in_flight:
            return False
        self._in_flight = True
        await self._cycle(self._scope or CancelScope(f"refresh:{self.kind.name}"))
        return True

    async def _cycle(self, scope: CancelScope) -> None:
        try:
            namespace = self._namespace
            rows = await self.kind.fetch(namespace)
            if scope.cancelled:
                return
            data = build_table_data(
                self.kind.header,
                self._filter(rows, namespace),
                self._data,
                numeric_columns=self.kind.numeric_columns,
                namespace=namespace,
            )
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            if not scope.cancelled:
                logger.error("Refresh of %s failed: %s", self.kind.name, exc)
                self._notify_error(exc)
            return
        finally:
            self._in_flight = False

        self._data = data
        for listener in list(self._listeners):
            try:
                listener(data)
            except Exception:
                logger.exception("Table listener failed for %s", self.kind.name)

    def _filter(self, rows: FetchedRows, namespace: str) -> FetchedRows:
        if not self.kind.namespaced or namespace == ALL_NAMESPACES:
            return rows
        prefix = f"{namespace}/"
        return [row for row in rows if row[0].startswith(prefix)]

    def _notify_error(self, error: Exception) -> None:
        for listener in list(self._error_listeners):
            try:
                listener(error)
            except Exception:
                logger.exception("Error listener failed for %s", self.kind.name)


__all__ = ["ErrorListener", "TableListener", "TableWatcher"]
