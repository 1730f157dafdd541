"""Resource kinds shown in tables."""

from kubedeck.controllers.kinds.base import FetchedRows, ResourceKind
from kubedeck.controllers.kinds.bench import BenchmarkKind
from kubedeck.controllers.kinds.container import ContainerKind
from kubedeck.controllers.kinds.forward import ForwardKind
from kubedeck.controllers.kinds.pod import PodKind
from kubedeck.controllers.kinds.registry import RESOURCE_KINDS, lookup_kind
from kubedeck.controllers.kinds.service import ServiceKind

__all__ = [
    "RESOURCE_KINDS",
    "BenchmarkKind",
    "ContainerKind",
    "FetchedRows",
    "ForwardKind",
    "PodKind",
    "ResourceKind",
    "ServiceKind",
    "lookup_kind",
]
