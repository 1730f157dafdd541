"""Cluster controller for kubectl-backed resource operations.

All cluster access goes through ``kubectl`` subprocesses run in worker
threads, so awaiting any method here never blocks the UI loop.
"""

from __future__ import annotations

import asyncio
import json
import logging
import subprocess
from typing import Any

from kubedeck.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    CONTEXT_RESOLVE_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
    KUBECTL_TOP_TIMEOUT,
)
from kubedeck.constants.values import ALL_NAMESPACES
from kubedeck.controllers.base import BaseController
from kubedeck.controllers.cluster.parsers import ContainerParser
from kubedeck.models.forward.port_forward import split_path

logger = logging.getLogger(__name__)

PodMetrics = dict[str, tuple[str, str]]


class ClusterController(BaseController):
    """Runs kubectl against one context and returns parsed JSON."""

    def __init__(self, context: str | None = None, timeout: int = KUBECTL_COMMAND_TIMEOUT) -> None:
        """Initialize the cluster controller.

        Args:
            context: Optional Kubernetes context name.
            timeout: Process timeout for kubectl calls, in seconds.
        """
        self.context = context
        self.timeout = timeout

    @staticmethod
    def resolve_current_context(timeout_seconds: int = CONTEXT_RESOLVE_TIMEOUT) -> str | None:
        """Resolve active kubectl context name from local kubeconfig."""
        try:
            result = subprocess.run(
                ["kubectl", "config", "current-context"],
                capture_output=True,
                text=True,
                timeout=max(1, timeout_seconds),
            )
        except (OSError, subprocess.TimeoutExpired):
            return None

        if result.returncode != 0:
            return None
        resolved = (result.stdout or "").strip()
        return resolved or None

    @staticmethod
    def namespace_args(namespace: str) -> list[str]:
        if not namespace or namespace == ALL_NAMESPACES:
            return ["--all-namespaces"]
        return ["--namespace", namespace]

    def _run_kubectl_sync(self, args: tuple[str, ...], timeout: int | None = None) -> str:
        """Run a kubectl command synchronously (thread-safe wrapper target)."""
        cmd = ["kubectl"]
        if self.context:
            cmd.extend(["--context", self.context])
        cmd.extend(args)
        result = subprocess.run(
            cmd, capture_output=True, text=True, timeout=timeout or self.timeout
        )
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise RuntimeError(stderr or "kubectl command failed")
        return result.stdout

    async def run_kubectl(self, *args: str, timeout: int | None = None) -> str:
        """Run kubectl in a worker thread.

        Raises:
            RuntimeError: kubectl exited non-zero (message is its stderr).
            subprocess.TimeoutExpired: kubectl did not finish in time.
        """
        logger.debug("kubectl %s", " ".join(args))
        return await asyncio.to_thread(self._run_kubectl_sync, tuple(args), timeout)

    async def _run_json(self, *args: str) -> dict[str, Any]:
        output = await self.run_kubectl(*args, "-o", "json", f"--request-timeout={CLUSTER_REQUEST_TIMEOUT}")
        try:
            payload = json.loads(output or "{}")
        except json.JSONDecodeError as exc:
            raise RuntimeError(f"kubectl returned invalid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise RuntimeError("kubectl returned an unexpected payload")
        return payload

    async def list_resources(self, kind: str, namespace: str = ALL_NAMESPACES) -> list[dict[str, Any]]:
        """List every object of a kind in a namespace ("*" for all)."""
        payload = await self._run_json("get", kind, *self.namespace_args(namespace))
        return [item for item in payload.get("items") or [] if isinstance(item, dict)]

    async def get_resource(self, kind: str, path: str) -> dict[str, Any]:
        """Fetch one object by ``namespace/name``."""
        namespace, name = split_path(path)
        args = ["get", kind, name]
        if namespace:
            args.extend(["--namespace", namespace])
        return await self._run_json(*args)

    async def containers(self, path: str, include_init: bool = False) -> list[str]:
        """Names of the containers of pod ``path``, init containers first."""
        pod = await self.get_resource("pods", path)
        return [str(spec.get("name", "")) for spec, _ in ContainerParser.specs(pod, include_init)]

    async def top_pods(self, namespace: str = ALL_NAMESPACES, containers: bool = False) -> PodMetrics:
        """Best-effort ``kubectl top pod``; empty when metrics are unavailable.

        Returns:
            ``namespace/pod`` (or ``namespace/pod|container``) -> (cpu, memory).
        """
        args = ["top", "pod", "--no-headers", *self.namespace_args(namespace)]
        if containers:
            args.append("--containers")
        try:
            output = await self.run_kubectl(*args, timeout=KUBECTL_TOP_TIMEOUT)
        except (RuntimeError, subprocess.TimeoutExpired, OSError) as exc:
            logger.debug("kubectl top unavailable: %s", exc)
            return {}
        return self.parse_top_output(output, namespace, containers)

    @staticmethod
    def parse_top_output(output: str, namespace: str, containers: bool = False) -> PodMetrics:
        all_namespaces = not namespace or namespace == ALL_NAMESPACES
        metrics: PodMetrics = {}
        for line in output.splitlines():
            columns = line.split()
            expected = 3 + int(all_namespaces) + int(containers)
            if len(columns) < expected:
                continue
            if all_namespaces:
                ns, columns = columns[0], columns[1:]
            else:
                ns = namespace
            key = f"{ns}/{columns[0]}"
            if containers:
                key = f"{key}|{columns[1]}"
                columns = columns[1:]
            metrics[key] = (columns[1], columns[2])
        return metrics

    async def check_connection(self) -> bool:
        """Check if the cluster API answers."""
        try:
            await self.run_kubectl("version", f"--request-timeout={CLUSTER_REQUEST_TIMEOUT}")
        except (RuntimeError, subprocess.TimeoutExpired, OSError) as exc:
            logger.warning("Cluster connection check failed: %s", exc)
            return False
        return True


__all__ = ["ClusterController", "PodMetrics"]
