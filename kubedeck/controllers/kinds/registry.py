"""Static alias table of resource kinds."""

from __future__ import annotations

from kubedeck.controllers.kinds.base import ResourceKind
from kubedeck.controllers.kinds.bench import BenchmarkKind
from kubedeck.controllers.kinds.container import ContainerKind
from kubedeck.controllers.kinds.forward import ForwardKind
from kubedeck.controllers.kinds.pod import PodKind
from kubedeck.controllers.kinds.service import ServiceKind

RESOURCE_KINDS: dict[str, type[ResourceKind]] = {
    kind.name: kind
    for kind in (PodKind, ContainerKind, ServiceKind, ForwardKind, BenchmarkKind)
}

_ALIASES: dict[str, type[ResourceKind]] = {
    alias: kind
    for kind in RESOURCE_KINDS.values()
    for alias in (kind.name, *kind.aliases)
}


def lookup_kind(alias: str) -> type[ResourceKind] | None:
    """Resolve a command alias (``po``, ``svc``, ``pf``...) to its kind."""
    return _ALIASES.get(alias.strip().lower().lstrip(":"))


__all__ = ["RESOURCE_KINDS", "lookup_kind"]
