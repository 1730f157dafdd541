"""Pods."""

from __future__ import annotations

import asyncio
from typing import Any

from kubedeck.constants.values import NA
from kubedeck.controllers.cluster.controller import ClusterController, PodMetrics
from kubedeck.controllers.cluster.parsers import PodParser
from kubedeck.controllers.kinds.base import ResourceKind
from kubedeck.models.table.row_event import Row
from kubedeck.utils.age import format_age


class PodKind(ResourceKind):
    name = "pods"
    title = "Pods"
    aliases = ("po", "pod")
    header = ("NAMESPACE", "NAME", "READY", "STATUS", "RS", "CPU", "MEM", "IP", "NODE", "AGE")
    numeric_columns = frozenset({"READY", "RS", "CPU", "MEM"})

    def __init__(self, cluster: ClusterController) -> None:
        self.cluster = cluster
        self._metrics: PodMetrics = {}

    async def list_items(self, namespace: str) -> list[Any]:
        pods, self._metrics = await asyncio.gather(
            self.cluster.list_resources("pods", namespace),
            self.cluster.top_pods(namespace),
        )
        return pods

    def fqn(self, item: Any) -> str:
        return PodParser.path(item)

    def render(self, item: Any) -> Row:
        metadata = item.get("metadata", {}) or {}
        cpu, mem = self._metrics.get(self.fqn(item), (NA, NA))
        return (
            str(metadata.get("namespace", "")),
            str(metadata.get("name", "")),
            PodParser.ready(item),
            PodParser.status(item),
            str(PodParser.restarts(item)),
            cpu,
            mem,
            PodParser.pod_ip(item),
            PodParser.node_name(item),
            format_age(metadata.get("creationTimestamp")),
        )
