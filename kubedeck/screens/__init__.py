"""Screens for KubeDeck."""

from kubedeck.screens.benchmarks import BenchmarkScreen
from kubedeck.screens.containers import ContainerScreen
from kubedeck.screens.forwards import ForwardScreen
from kubedeck.screens.pods import PodScreen
from kubedeck.screens.resource import ResourceScreen
from kubedeck.screens.services import ServiceScreen

__all__ = [
    "BenchmarkScreen",
    "ContainerScreen",
    "ForwardScreen",
    "PodScreen",
    "ResourceScreen",
    "ServiceScreen",
]
