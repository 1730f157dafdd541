"""KubeDeck: terminal dashboard with port-forwards and HTTP benchmarks."""

__version__ = "0.1.0"
