"""Containers screen."""

from kubedeck.screens.containers.container_screen import ContainerScreen, first_tcp_port

__all__ = ["ContainerScreen", "first_tcp_port"]
