"""Services."""

from __future__ import annotations

from typing import Any

from kubedeck.controllers.cluster.controller import ClusterController
from kubedeck.controllers.cluster.parsers import ServiceParser
from kubedeck.controllers.kinds.base import ResourceKind
from kubedeck.models.table.row_event import Row
from kubedeck.utils.age import format_age


class ServiceKind(ResourceKind):
    name = "services"
    title = "Services"
    aliases = ("svc", "service")
    header = ("NAMESPACE", "NAME", "TYPE", "CLUSTER-IP", "EXTERNAL-IP", "PORTS", "AGE")

    def __init__(self, cluster: ClusterController) -> None:
        self.cluster = cluster

    async def list_items(self, namespace: str) -> list[Any]:
        return await self.cluster.list_resources("services", namespace)

    def fqn(self, item: Any) -> str:
        metadata = item.get("metadata", {}) or {}
        return f"{metadata.get('namespace', '')}/{metadata.get('name', '')}"

    def render(self, item: Any) -> Row:
        metadata = item.get("metadata", {}) or {}
        return (
            str(metadata.get("namespace", "")),
            str(metadata.get("name", "")),
            ServiceParser.service_type(item),
            ServiceParser.cluster_ip(item),
            ServiceParser.external_ip(item),
            ServiceParser.ports(item),
            format_age(metadata.get("creationTimestamp")),
        )
