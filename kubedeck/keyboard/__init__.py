"""Keyboard bindings module.

Bindings are organized into two categories:

- app: App-level bindings (APP_BINDINGS)
- navigation: Screen-specific bindings (*_SCREEN_BINDINGS)
"""

from kubedeck.keyboard.app import APP_BINDINGS
from kubedeck.keyboard.navigation import (
    BASE_SCREEN_BINDINGS,
    CONTAINER_SCREEN_BINDINGS,
    FORWARD_SCREEN_BINDINGS,
    POD_SCREEN_BINDINGS,
)

__all__ = [
    "APP_BINDINGS",
    # Screen-specific bindings
    "BASE_SCREEN_BINDINGS",
    "CONTAINER_SCREEN_BINDINGS",
    "FORWARD_SCREEN_BINDINGS",
    "POD_SCREEN_BINDINGS",
]
