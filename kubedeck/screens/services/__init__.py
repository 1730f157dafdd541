"""Services screen."""

from kubedeck.screens.services.service_screen import ServiceScreen

__all__ = ["ServiceScreen"]
