"""Structural widgets."""

from kubedeck.widgets.structure.status_bar import StatusBar

__all__ = ["StatusBar"]
