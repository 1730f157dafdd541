"""Recoverable error taxonomy for KubeDeck.

Every error here is caught at a component boundary and surfaced to the
operator as a single status line; none of them terminate the process.
"""


class KubeDeckError(Exception):
    """Base exception for recoverable KubeDeck errors."""


class ForwardAlreadyExistsError(KubeDeckError):
    """Raised when a port-forward is already registered for an FQN."""

    def __init__(self, fqn: str) -> None:
        super().__init__(f"A PortForward already exists for {fqn}")
        self.fqn = fqn


class InvalidStateError(KubeDeckError):
    """Raised when the target resource is not in a runnable state."""


class BenchmarkAlreadyRunningError(KubeDeckError):
    """Raised when a benchmark is started while another one is running."""

    def __init__(self) -> None:
        super().__init__("Only one benchmark allowed at a time")


class TransportFailureError(KubeDeckError):
    """Raised when a port-forward tunnel ends abnormally."""


class BenchmarkConfigLoadError(KubeDeckError):
    """Raised when the benchmark-defaults file cannot be loaded."""


class WatchSetupError(KubeDeckError):
    """Raised when a filesystem watch cannot be established."""


__all__ = [
    "BenchmarkAlreadyRunningError",
    "BenchmarkConfigLoadError",
    "ForwardAlreadyExistsError",
    "InvalidStateError",
    "KubeDeckError",
    "TransportFailureError",
    "WatchSetupError",
]
