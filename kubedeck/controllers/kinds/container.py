"""Containers of a single pod."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any

from kubedeck.constants.values import NA
from kubedeck.controllers.cluster.controller import ClusterController, PodMetrics
from kubedeck.controllers.cluster.parsers import ContainerParser
from kubedeck.controllers.kinds.base import ResourceKind
from kubedeck.models.forward.port_forward import forward_fqn, split_path
from kubedeck.models.table.row_event import Row
from kubedeck.utils.age import format_age


@dataclass(frozen=True)
class ContainerItem:
    spec: dict[str, Any]
    status: dict[str, Any]
    init: bool
    pod_created: str | None


class ContainerKind(ResourceKind):
    name = "containers"
    title = "Containers"
    aliases = ("co", "container")
    header = ("NAME", "IMAGE", "READY", "STATE", "INIT", "RS", "CPU", "MEM", "PORTS", "AGE")
    numeric_columns = frozenset({"RS", "CPU", "MEM"})
    namespaced = False
    requires_parent = True

    STATE_COLUMN = header.index("STATE")
    PORTS_COLUMN = header.index("PORTS")

    def __init__(self, cluster: ClusterController, pod_path: str, include_init: bool = True) -> None:
        self.cluster = cluster
        self.pod_path = pod_path
        self.include_init = include_init
        self._metrics: PodMetrics = {}

    async def list_items(self, namespace: str) -> list[Any]:
        pod_namespace = split_path(self.pod_path)[0]
        pod, self._metrics = await asyncio.gather(
            self.cluster.get_resource("pods", self.pod_path),
            self.cluster.top_pods(pod_namespace, containers=True),
        )
        created = (pod.get("metadata", {}) or {}).get("creationTimestamp")
        return [
            ContainerItem(spec, ContainerParser.status_for(pod, spec.get("name", ""), init), init, created)
            for spec, init in ContainerParser.specs(pod, self.include_init)
        ]

    def fqn(self, item: Any) -> str:
        return forward_fqn(self.pod_path, str(item.spec.get("name", "")))

    def render(self, item: Any) -> Row:
        status = item.status
        cpu, mem = self._metrics.get(self.fqn(item), (NA, NA))
        running = (status.get("state", {}) or {}).get("running") or {}
        return (
            str(item.spec.get("name", "")),
            str(item.spec.get("image", "")),
            str(bool(status.get("ready"))).lower(),
            ContainerParser.state(status),
            str(item.init).lower(),
            str(int(status.get("restartCount", 0) or 0)),
            cpu,
            mem,
            ",".join(ContainerParser.ports(item.spec)),
            format_age(running.get("startedAt") or item.pod_created),
        )
