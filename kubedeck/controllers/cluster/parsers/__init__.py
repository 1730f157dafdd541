"""Parsers for cluster resources."""

from kubedeck.controllers.cluster.parsers.container_parser import (
    ContainerParser,
    format_port,
    is_tcp_port,
    strip_port,
)
from kubedeck.controllers.cluster.parsers.pod_parser import PodParser
from kubedeck.controllers.cluster.parsers.service_parser import ServiceParser

__all__ = [
    "ContainerParser",
    "PodParser",
    "ServiceParser",
    "format_port",
    "is_tcp_port",
    "strip_port",
]
