"""Port-forward session model."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone

from kubedeck.constants.enums import ForwardState
from kubedeck.constants.values import FQN_CONTAINER_SEPARATOR
from kubedeck.utils.cancellation import CancelScope

logger = logging.getLogger(__name__)

_TRANSITIONS: dict[ForwardState, frozenset[ForwardState]] = {
    ForwardState.CREATED: frozenset({ForwardState.ACTIVATING, ForwardState.STOPPED, ForwardState.FAILED}),
    ForwardState.ACTIVATING: frozenset({ForwardState.ACTIVE, ForwardState.STOPPED, ForwardState.FAILED}),
    ForwardState.ACTIVE: frozenset({ForwardState.STOPPED, ForwardState.FAILED}),
    ForwardState.STOPPED: frozenset(),
    ForwardState.FAILED: frozenset(),
}


def forward_fqn(path: str, container: str) -> str:
    """Return the uniqueness key of a tunnel: ``namespace/pod|container``."""
    return f"{path}{FQN_CONTAINER_SEPARATOR}{container}"


def split_path(path: str) -> tuple[str, str]:
    """Split ``namespace/name`` into its parts (namespace may be empty)."""
    namespace, sep, name = path.rpartition("/")
    if not sep:
        return "", path
    return namespace, name


@dataclass
class PortForwardSession:
    """One tunnel from a local port to a port inside a container."""

    fqn: str
    path: str
    container: str
    local_port: str
    pod_port: str
    active: bool = False
    state: ForwardState = ForwardState.CREATED
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    scope: CancelScope | None = field(default=None, repr=False, compare=False)
    error: str | None = None

    @property
    def namespace(self) -> str:
        return split_path(self.path)[0]

    @property
    def name(self) -> str:
        return split_path(self.path)[1]

    def ports(self) -> list[str]:
        """Port mapping specs handed to the transport (``local:pod``)."""
        return [f"{self.local_port}:{self.pod_port}"]

    def address(self) -> str:
        return f"localhost:{self.local_port}"

    def age(self, now: datetime | None = None) -> float:
        """Seconds since the session was created."""
        current = now or datetime.now(timezone.utc)
        return max(0.0, (current - self.started_at).total_seconds())

    def transition(self, target: ForwardState) -> bool:
        """Move to ``target`` if the state machine allows it.

        Returns:
            True when the state changed.
        """
        if target not in _TRANSITIONS[self.state]:
            logger.debug("Ignoring forward %s transition %s -> %s", self.fqn, self.state.value, target.value)
            return False
        self.state = target
        self.active = target is ForwardState.ACTIVE
        return True


__all__ = ["PortForwardSession", "forward_fqn", "split_path"]
