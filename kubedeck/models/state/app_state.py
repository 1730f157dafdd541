"""Process-scoped application state.

One instance is built at startup and passed to every screen; nothing here is
a module-level global.
"""

from __future__ import annotations

import logging
from pathlib import Path

from kubedeck.controllers.benchmark.orchestrator import BenchmarkOrchestrator
from kubedeck.controllers.cluster.controller import ClusterController
from kubedeck.controllers.forward.forwarder import PortForwarder
from kubedeck.controllers.forward.registry import ForwarderRegistry
from kubedeck.controllers.forward.transport import KubectlPortForwardTransport, Transport
from kubedeck.models.state.app_settings import AppSettings
from kubedeck.utils.cancellation import CancelScope
from kubedeck.utils.dispatcher import Dispatcher
from kubedeck.utils.flash import Flash
from kubedeck.utils.paths import bench_config_path, bench_reports_dir, kubedeck_home

logger = logging.getLogger(__name__)


class AppState:
    """Shared collaborators: settings, dispatcher, flash, tunnels, benchmarks."""

    def __init__(
        self,
        settings: AppSettings,
        dispatcher: Dispatcher,
        *,
        cluster: ClusterController | None = None,
        transport: Transport | None = None,
        scope: CancelScope | None = None,
    ) -> None:
        self.settings = settings
        self.dispatcher = dispatcher
        self.scope = scope or CancelScope("app")
        self.flash = Flash()
        context = settings.current_context or None
        self.cluster = cluster or ClusterController(context, settings.kubectl_timeout)
        self.registry = ForwarderRegistry()
        self.forwarder = PortForwarder(
            self.registry,
            transport or KubectlPortForwardTransport(context),
            dispatcher,
            self.flash,
            self.scope.child("forwards"),
        )
        self.orchestrator = BenchmarkOrchestrator(
            dispatcher,
            self.flash,
            self.scope.child("benchmarks"),
            reports_dir=self.bench_reports_dir,
        )

    @property
    def namespace(self) -> str:
        return self.settings.namespace

    def current_cluster(self) -> str:
        return self.settings.cluster_key

    def home_dir(self) -> Path:
        return kubedeck_home()

    def bench_config_path(self) -> Path:
        return bench_config_path(self.current_cluster())

    def bench_reports_dir(self) -> Path:
        return bench_reports_dir(self.current_cluster())

    def load_bench_config(self) -> bool:
        """Load the current cluster's benchmark file into the orchestrator."""
        return self.orchestrator.reload(self.bench_config_path())

    async def shutdown(self) -> None:
        """Cancel background work and wait for tunnels to close."""
        logger.info("Shutting down: %d port-forward(s) active", len(self.registry))
        self.orchestrator.cancel()
        await self.forwarder.shutdown()
        self.scope.cancel()


__all__ = ["AppState"]
