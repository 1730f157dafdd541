"""Port-forward models."""

from kubedeck.models.forward.port_forward import (
    PortForwardSession,
    forward_fqn,
    split_path,
)

__all__ = ["PortForwardSession", "forward_fqn", "split_path"]
