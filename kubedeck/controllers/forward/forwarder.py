"""Port-forward session runner.

Launches a session's blocking transport in the background and reports its
lifecycle back to the UI thread through the dispatcher:

- tunnel ready -> ``registry.activate``
- operator stop -> session ends Stopped, nothing reported as failure
- transport ended on its own -> session removed, one TransportFailureError
"""

from __future__ import annotations

import asyncio
import logging
from functools import partial

from kubedeck.constants.enums import ForwardState
from kubedeck.controllers.forward.registry import ForwarderRegistry
from kubedeck.controllers.forward.transport import Transport
from kubedeck.errors import TransportFailureError
from kubedeck.models.forward.port_forward import PortForwardSession, forward_fqn
from kubedeck.utils.cancellation import CancelScope
from kubedeck.utils.dispatcher import Dispatcher
from kubedeck.utils.flash import Flash

logger = logging.getLogger(__name__)


class PortForwarder:
    """Starts and stops tunnels registered in a ForwarderRegistry."""

    def __init__(
        self,
        registry: ForwarderRegistry,
        transport: Transport,
        dispatcher: Dispatcher,
        flash: Flash,
        scope: CancelScope,
    ) -> None:
        self.registry = registry
        self._transport = transport
        self._dispatcher = dispatcher
        self._flash = flash
        self._scope = scope
        self._tasks: dict[str, asyncio.Task[None]] = {}

    def start(
        self,
        path: str,
        container: str,
        local_port: str,
        pod_port: str,
        container_state: str | None = None,
    ) -> PortForwardSession:
        """Validate, register and launch a tunnel.

        Must be called from the UI thread with a running event loop.

        Raises:
            InvalidStateError: ``container_state`` was given and is not Running.
            ForwardAlreadyExistsError: A tunnel already exists for the container.
        """
        fqn = forward_fqn(path, container)
        if container_state is not None:
            self.registry.check_runnable(container_state, container)
        session = self.registry.start(
            fqn,
            path,
            container,
            local_port,
            pod_port,
            scope=self._scope.child(f"forward:{fqn}"),
        )
        session.transition(ForwardState.ACTIVATING)
        task = asyncio.create_task(self._run(session), name=f"port-forward {fqn}")
        self._tasks[fqn] = task
        task.add_done_callback(partial(self._forget_task, fqn))
        return session

    def stop(self, fqn: str) -> bool:
        """Operator-initiated stop; idempotent on unknown FQNs."""
        return self.registry.stop(fqn) is not None

    async def shutdown(self) -> None:
        """Stop every tunnel and wait for the transports to exit."""
        self.registry.stop_all()
        tasks = list(self._tasks.values())
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    def _forget_task(self, fqn: str, task: asyncio.Task[None]) -> None:
        if self._tasks.get(fqn) is task:
            del self._tasks[fqn]

    async def _run(self, session: PortForwardSession) -> None:
        scope = session.scope or self._scope.child(f"forward:{session.fqn}")
        error: BaseException | None = None
        try:
            await self._transport.forward(
                session.path,
                session.container,
                session.ports(),
                partial(self._dispatcher.queue_update, partial(self._activated, session)),
                scope,
            )
        except asyncio.CancelledError:
            scope.cancel()
            raise
        except Exception as exc:
            error = exc
            if not scope.cancelled:
                logger.error("Port-forward %s failed: %s", session.fqn, exc)

        if scope.cancelled:
            self._dispatcher.queue_update(partial(self._stopped, session, error))
        else:
            self._dispatcher.queue_update(partial(self._failed, session, error))

    def _activated(self, session: PortForwardSession) -> None:
        if self.registry.get(session.fqn) is not session:
            return
        if self.registry.activate(session.fqn):
            self._flash.infof("PortForward activated %s:%s", session.path, session.ports()[0])

    def _stopped(self, session: PortForwardSession, error: BaseException | None) -> None:
        session.transition(ForwardState.STOPPED)
        if error is not None:
            self._flash.warn(f"PortForward {session.fqn} stopped with error: {error}")

    def _failed(self, session: PortForwardSession, error: BaseException | None) -> None:
        failure = error if isinstance(error, TransportFailureError) else TransportFailureError(
            f"Port-forward {session.fqn} ended: {error or 'transport closed'}"
        )
        if self.registry.discard(session, str(failure)):
            self._flash.err(failure)


__all__ = ["PortForwarder"]
