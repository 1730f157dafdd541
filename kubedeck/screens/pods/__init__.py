"""Pods screen."""

from kubedeck.screens.pods.pod_screen import PodScreen

__all__ = ["PodScreen"]
