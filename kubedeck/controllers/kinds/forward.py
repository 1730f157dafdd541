"""Port-forwards, listed from the registry rather than the cluster."""

from __future__ import annotations

from typing import Any

from kubedeck.controllers.benchmark.orchestrator import BenchmarkOrchestrator
from kubedeck.controllers.forward.registry import ForwarderRegistry
from kubedeck.controllers.kinds.base import ResourceKind
from kubedeck.models.forward.port_forward import PortForwardSession
from kubedeck.models.table.row_event import Row
from kubedeck.utils.age import format_duration


class ForwardKind(ResourceKind):
    name = "portforwards"
    title = "PortForwards"
    aliases = ("pf", "fw", "portforward")
    header = ("NAMESPACE", "NAME", "CONTAINER", "PORTS", "URL", "C", "N", "AGE")
    numeric_columns = frozenset({"C", "N"})

    # Sort offsets relative to the NAME column.
    PORTS_OFFSET = 2
    URL_OFFSET = 3

    def __init__(self, registry: ForwarderRegistry, orchestrator: BenchmarkOrchestrator) -> None:
        self.registry = registry
        self.orchestrator = orchestrator

    async def list_items(self, namespace: str) -> list[Any]:
        return self.registry.list()

    def fqn(self, item: Any) -> str:
        return item.fqn

    def render(self, item: Any) -> Row:
        session: PortForwardSession = item
        config = self.orchestrator.resolve_config(session.path, session.container)
        return (
            session.namespace,
            session.name,
            session.container,
            ",".join(session.ports()),
            config.url_for(session.local_port),
            str(config.concurrency),
            str(config.request_count),
            format_duration(session.age()),
        )
