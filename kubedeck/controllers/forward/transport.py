"""Tunnel transports.

A transport call blocks for the whole life of a tunnel: it returns when the
tunnel's scope is cancelled and raises when the tunnel ends on its own.
"""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from collections.abc import Callable, Sequence
from contextlib import suppress
from typing import Protocol

from kubedeck.constants.timeouts import PORT_FORWARD_STOP_TIMEOUT
from kubedeck.errors import TransportFailureError
from kubedeck.models.forward.port_forward import split_path
from kubedeck.utils.cancellation import CancelScope

logger = logging.getLogger(__name__)

ReadyCallback = Callable[[], None]

_READY_MARKER = "Forwarding from"
STDERR_TAIL_LINES = 50


class Transport(Protocol):
    """Establishes one tunnel and blocks until it ends."""

    async def forward(
        self,
        path: str,
        container: str,
        ports: Sequence[str],
        on_ready: ReadyCallback,
        scope: CancelScope,
    ) -> None: ...


class KubectlPortForwardTransport:
    """Tunnel backed by a long-lived ``kubectl port-forward`` process."""

    def __init__(self, context: str | None = None, stop_timeout: float = PORT_FORWARD_STOP_TIMEOUT) -> None:
        self.context = context
        self.stop_timeout = stop_timeout

    def command(self, path: str, ports: Sequence[str]) -> list[str]:
        namespace, name = split_path(path)
        cmd = ["kubectl"]
        if self.context:
            cmd.extend(["--context", self.context])
        cmd.extend(["port-forward", f"pod/{name}", *ports])
        if namespace:
            cmd.extend(["--namespace", namespace])
        return cmd

    async def forward(
        self,
        path: str,
        container: str,
        ports: Sequence[str],
        on_ready: ReadyCallback,
        scope: CancelScope,
    ) -> None:
        """Run the tunnel until ``scope`` is cancelled.

        kubectl forwards pod ports, so ``container`` is only used for logging.

        Raises:
            TransportFailureError: kubectl exited without being asked to stop.
        """
        cmd = self.command(path, ports)
        logger.debug("Starting %s (container %s)", " ".join(cmd), container)
        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise TransportFailureError(f"Unable to start port-forward for {path}: {exc}") from exc

        errors: deque[str] = deque(maxlen=STDERR_TAIL_LINES)
        reader = asyncio.create_task(self._watch_output(process, on_ready))
        drainer = asyncio.create_task(self._drain_errors(process, errors))
        exited = asyncio.create_task(process.wait())
        stopped = asyncio.create_task(scope.wait())
        try:
            await asyncio.wait({exited, stopped}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            stopped.cancel()
            if process.returncode is None:
                await self._terminate(process)
            # Pipes inherited by a stray child would otherwise never reach EOF.
            _, pending = await asyncio.wait({reader, drainer}, timeout=self.stop_timeout)
            for task in pending:
                task.cancel()
            await asyncio.gather(exited, reader, drainer, return_exceptions=True)

        if scope.cancelled:
            logger.debug("Port-forward %s stopped", path)
            return
        message = errors[-1] if errors else f"exit code {process.returncode}"
        raise TransportFailureError(f"Port-forward {path} ended: {message}")

    async def _terminate(self, process: asyncio.subprocess.Process) -> None:
        with suppress(ProcessLookupError):
            process.terminate()
        try:
            await asyncio.wait_for(process.wait(), timeout=self.stop_timeout)
        except asyncio.TimeoutError:
            logger.warning("kubectl port-forward did not exit, killing pid %s", process.pid)
            with suppress(ProcessLookupError):
                process.kill()
            await process.wait()

    @staticmethod
    async def _watch_output(process: asyncio.subprocess.Process, on_ready: ReadyCallback) -> None:
        if process.stdout is None:
            return
        ready = False
        while True:
            line = await process.stdout.readline()
            if not line:
                return
            text = line.decode("utf-8", errors="replace").strip()
            logger.debug("port-forward: %s", text)
            if not ready and _READY_MARKER in text:
                ready = True
                on_ready()

    @staticmethod
    async def _drain_errors(process: asyncio.subprocess.Process, errors: deque[str]) -> None:
        """Read stderr for the tunnel's whole life, keeping only the tail."""
        if process.stderr is None:
            return
        while True:
            line = await process.stderr.readline()
            if not line:
                return
            text = line.decode("utf-8", errors="replace").strip()
            if text:
                logger.debug("port-forward stderr: %s", text)
                errors.append(text)


__all__ = ["KubectlPortForwardTransport", "ReadyCallback", "Transport"]
