"""Container parser - container specs and statuses of a single pod."""

from __future__ import annotations

from typing import Any

from kubedeck.constants.values import STATE_RUNNING

_TCP_SUFFIX = "TCP"


def format_port(port: dict[str, Any]) -> str:
    """Render a container port as ``name:port/PROTO`` (name omitted when unset)."""
    number = port.get("containerPort", "")
    protocol = port.get("protocol") or _TCP_SUFFIX
    name = port.get("name")
    prefix = f"{name}:" if name else ""
    return f"{prefix}{number}/{protocol}"


def is_tcp_port(port: str) -> bool:
    """Tell whether a rendered port spec uses TCP."""
    return port.strip().upper().endswith(_TCP_SUFFIX)


def strip_port(port: str) -> str:
    """Extract the bare port number from ``name:port/PROTO`` input."""
    value = port.strip()
    value = value.split("/", 1)[0]
    return value.rsplit(":", 1)[-1].strip()


class ContainerParser:
    """Builds per-container display values from a pod object."""

    @staticmethod
    def specs(pod: dict[str, Any], include_init: bool = False) -> list[tuple[dict[str, Any], bool]]:
        """Container specs paired with an is-init flag, init containers first."""
        spec = pod.get("spec", {}) or {}
        containers: list[tuple[dict[str, Any], bool]] = []
        if include_init:
            containers.extend((item, True) for item in spec.get("initContainers") or [])
        containers.extend((item, False) for item in spec.get("containers") or [])
        return containers

    @staticmethod
    def status_for(pod: dict[str, Any], name: str, init: bool) -> dict[str, Any]:
        status = pod.get("status", {}) or {}
        key = "initContainerStatuses" if init else "containerStatuses"
        for item in status.get(key) or []:
            if isinstance(item, dict) and item.get("name") == name:
                return item
        return {}

    @staticmethod
    def state(status: dict[str, Any]) -> str:
        """Running, Completed, or the waiting/terminated reason."""
        state = status.get("state", {}) or {}
        if state.get("running"):
            return STATE_RUNNING
        waiting = state.get("waiting")
        if waiting:
            return str(waiting.get("reason") or "Waiting")
        terminated = state.get("terminated")
        if terminated:
            return str(terminated.get("reason") or "Terminated")
        return "Pending"

    @staticmethod
    def ports(spec: dict[str, Any]) -> list[str]:
        return [format_port(port) for port in spec.get("ports") or [] if isinstance(port, dict)]


__all__ = ["ContainerParser", "format_port", "is_tcp_port", "strip_port"]
