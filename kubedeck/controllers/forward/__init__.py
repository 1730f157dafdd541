"""Port-forward controllers."""

from kubedeck.controllers.forward.forwarder import PortForwarder
from kubedeck.controllers.forward.registry import ForwarderRegistry
from kubedeck.controllers.forward.transport import (
    KubectlPortForwardTransport,
    ReadyCallback,
    Transport,
)

__all__ = [
    "ForwarderRegistry",
    "KubectlPortForwardTransport",
    "PortForwarder",
    "ReadyCallback",
    "Transport",
]
