"""Process-wide bookkeeping of port-forward sessions.

The registry is the single source of truth for which tunnels exist. It is
mutated only from the UI thread; background transports request changes
through the dispatcher.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from kubedeck.constants.enums import ForwardState
from kubedeck.constants.values import STATE_RUNNING
from kubedeck.errors import ForwardAlreadyExistsError, InvalidStateError
from kubedeck.models.forward.port_forward import PortForwardSession
from kubedeck.utils.cancellation import CancelScope

logger = logging.getLogger(__name__)

RegistryListener = Callable[[], None]


class ForwarderRegistry:
    """At most one PortForwardSession per FQN."""

    def __init__(self) -> None:
        self._sessions: dict[str, PortForwardSession] = {}
        self._listeners: list[RegistryListener] = []

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, fqn: object) -> bool:
        return fqn in self._sessions

    def __iter__(self) -> Iterator[PortForwardSession]:
        return iter(self.list())

    def add_listener(self, listener: RegistryListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: RegistryListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @staticmethod
    def check_runnable(state: str | None, name: str) -> None:
        """Reject tunnels into containers that are not running.

        Raises:
            InvalidStateError: ``state`` is not ``Running``.
        """
        if (state or "").strip() != STATE_RUNNING:
            raise InvalidStateError(f"Container {name} is not running?")

    def start(
        self,
        fqn: str,
        path: str,
        container: str,
        local_port: str,
        pod_port: str,
        scope: CancelScope | None = None,
    ) -> PortForwardSession:
        """Register a new, inactive session.

        Registration is synchronous so ``list()`` shows the pending entry
        before any transport work begins.

        Raises:
            ForwardAlreadyExistsError: A session already exists for ``fqn``.
        """
        if fqn in self._sessions:
            raise ForwardAlreadyExistsError(fqn)
        session = PortForwardSession(
            fqn=fqn,
            path=path,
            container=container,
            local_port=local_port,
            pod_port=pod_port,
            scope=scope,
        )
        self._sessions[fqn] = session
        logger.info("Registered port-forward %s %s", fqn, session.ports())
        self._notify()
        return session

    def activate(self, fqn: str) -> bool:
        """Mark a session live. Must run on the UI thread."""
        session = self._sessions.get(fqn)
        if session is None:
            logger.debug("Activate on unknown port-forward %s", fqn)
            return False
        if session.state is ForwardState.CREATED:
            session.transition(ForwardState.ACTIVATING)
        if not session.transition(ForwardState.ACTIVE):
            return False
        logger.info("Port-forward %s active on %s", fqn, session.address())
        self._notify()
        return True

    def stop(self, fqn: str) -> PortForwardSession | None:
        """Stop a session's transport and drop it. Missing entries are logged only."""
        session = self._sessions.pop(fqn, None)
        if session is None:
            logger.info("No port-forward registered for %s", fqn)
            return None
        session.transition(ForwardState.STOPPED)
        if session.scope is not None:
            session.scope.cancel()
        logger.info("Stopped port-forward %s", fqn)
        self._notify()
        return session

    def discard(self, session: PortForwardSession, error: str | None = None) -> bool:
        """Remove a session whose transport ended on its own.

        Only removes the entry when it still refers to ``session``.
        """
        session.error = error
        session.transition(ForwardState.FAILED)
        if self._sessions.get(session.fqn) is not session:
            return False
        del self._sessions[session.fqn]
        logger.warning("Port-forward %s removed: %s", session.fqn, error or "transport ended")
        self._notify()
        return True

    def stop_all(self) -> int:
        """Stop every session; returns how many were stopped."""
        fqns = list(self._sessions)
        for fqn in fqns:
            self.stop(fqn)
        return len(fqns)

    def list(self) -> list[PortForwardSession]:
        """Snapshot of registered sessions in registration order."""
        return list(self._sessions.values())

    def get(self, fqn: str) -> PortForwardSession | None:
        return self._sessions.get(fqn)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("Registry listener failed")


__all__ = ["ForwarderRegistry", "RegistryListener"]
