"""Port-forwards screen."""

from kubedeck.screens.forwards.forward_screen import ForwardScreen

__all__ = ["ForwardScreen"]
