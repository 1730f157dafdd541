"""Explicit parent/child cancellation handles.

A ``CancelScope`` is handed down through constructors to every background
loop (table watch, tunnel transport, load generator, file watch). Cancelling a
scope cancels all of its descendants, so dismissing a screen stops the work
that screen started.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable

logger = logging.getLogger(__name__)


class CancelScope:
    """Cancellation handle that propagates to child scopes."""

    def __init__(self, name: str = "root", parent: CancelScope | None = None) -> None:
        self.name = name
        self._parent = parent
        self._children: list[CancelScope] = []
        self._callbacks: list[Callable[[], None]] = []
        self._events: list[tuple[asyncio.AbstractEventLoop, asyncio.Event]] = []
        self._cancelled = False
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        state = "cancelled" if self._cancelled else "active"
        return f"<CancelScope {self.name!r} {state}>"

    @property
    def cancelled(self) -> bool:
        """Return True once this scope (or an ancestor) was cancelled."""
        return self._cancelled

    @property
    def parent(self) -> CancelScope | None:
        return self._parent

    def child(self, name: str = "") -> CancelScope:
        """Create a child scope cancelled together with this one.

        A child derived from an already-cancelled scope is born cancelled.
        """
        scope = CancelScope(name or f"{self.name}/child", parent=self)
        with self._lock:
            if not self._cancelled:
                self._children.append(scope)
                return scope
        scope.cancel()
        return scope

    def cancel(self) -> None:
        """Cancel this scope and every descendant. Idempotent."""
        with self._lock:
            if self._cancelled:
                return
            self._cancelled = True
            children, self._children = self._children, []
            callbacks, self._callbacks = self._callbacks, []
            events, self._events = self._events, []

        logger.debug("Cancel scope %s", self.name)
        for child in children:
            child.cancel()
        for loop, event in events:
            if loop.is_closed():
                continue
            loop.call_soon_threadsafe(event.set)
        for callback in callbacks:
            try:
                callback()
            except Exception:
                logger.exception("Cancel callback failed for scope %s", self.name)
        if self._parent is not None:
            self._parent._forget(self)

    def _forget(self, child: CancelScope) -> None:
        with self._lock:
            if child in self._children:
                self._children.remove(child)

    def add_done_callback(self, callback: Callable[[], None]) -> None:
        """Run callback on cancellation (immediately if already cancelled)."""
        with self._lock:
            if not self._cancelled:
                self._callbacks.append(callback)
                return
        callback()

    def as_event(self) -> asyncio.Event:
        """Return an asyncio.Event set when this scope is cancelled.

        Must be called from within a running event loop.
        """
        loop = asyncio.get_running_loop()
        event = asyncio.Event()
        with self._lock:
            if not self._cancelled:
                self._events.append((loop, event))
                return event
        event.set()
        return event

    def release_event(self, event: asyncio.Event) -> None:
        """Forget an event obtained from ``as_event`` that is no longer awaited."""
        with self._lock:
            self._events = [item for item in self._events if item[1] is not event]

    async def wait(self) -> None:
        """Block until the scope is cancelled."""
        event = self.as_event()
        try:
            await event.wait()
        finally:
            self.release_event(event)

    async def sleep(self, seconds: float) -> bool:
        """Sleep for ``seconds`` unless cancelled first.

        Returns:
            True if the scope was cancelled while sleeping.
        """
        if self._cancelled:
            return True
        event = self.as_event()
        try:
            await asyncio.wait_for(event.wait(), timeout=max(0.0, seconds))
        except asyncio.TimeoutError:
            return False
        finally:
            self.release_event(event)
        return True


__all__ = ["CancelScope"]
