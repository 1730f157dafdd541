"""Operator status line.

Every recoverable failure ends up here as a single human-readable line.
Listeners (the app status bar) are told about each new message.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from kubedeck.constants.enums import FlashLevel

logger = logging.getLogger(__name__)

FlashListener = Callable[["FlashMessage"], None]


@dataclass(frozen=True)
class FlashMessage:
    """One status line."""

    level: FlashLevel
    text: str
    created_at: datetime = field(default_factory=datetime.now)


class Flash:
    """Keeps the latest status line and fans it out to listeners."""

    def __init__(self) -> None:
        self._listeners: list[FlashListener] = []
        self._last: FlashMessage | None = None

    @property
    def last(self) -> FlashMessage | None:
        return self._last

    def add_listener(self, listener: FlashListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: FlashListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def info(self, text: str) -> None:
        self._emit(FlashLevel.INFO, text)

    def infof(self, fmt: str, *args: object) -> None:
        self._emit(FlashLevel.INFO, fmt % args)

    def warn(self, text: str) -> None:
        self._emit(FlashLevel.WARN, text)

    def err(self, error: BaseException | str) -> None:
        self._emit(FlashLevel.ERROR, str(error))

    def errf(self, fmt: str, *args: object) -> None:
        self._emit(FlashLevel.ERROR, fmt % args)

    def clear(self) -> None:
        self._last = None

    def _emit(self, level: FlashLevel, text: str) -> None:
        message = FlashMessage(level=level, text=text)
        self._last = message
        if level is FlashLevel.ERROR:
            logger.warning("Flash: %s", text)
        for listener in list(self._listeners):
            try:
                listener(message)
            except Exception:
                logger.exception("Flash listener failed")


__all__ = ["Flash", "FlashListener", "FlashMessage"]
