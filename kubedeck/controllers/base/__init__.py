"""Base controller classes."""

from kubedeck.controllers.base.base_controller import BaseController

__all__ = ["BaseController"]
