"""Resource screen base."""

from kubedeck.screens.resource.resource_screen import ResourceScreen

__all__ = ["ResourceScreen"]
