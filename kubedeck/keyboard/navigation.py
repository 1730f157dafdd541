"""Screen-specific keyboard bindings."""

from typing import Annotated

# ============================================================================
# SCREEN BINDINGS
# ============================================================================

BASE_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("escape", "pop_screen", "Back"),
    ("r", "refresh", "Refresh"),
    ("shift+n", "sort_name", "Sort Name"),
    ("shift+a", "sort_age", "Sort Age"),
    ("ctrl+r", "toggle_sort_order", "Reverse Sort"),
]

# ============================================================================
# Pod Screen Bindings
# ============================================================================

POD_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("enter", "show_containers", "Containers"),
    ("shift+r", "sort_column(1, False)", "Sort Ready"),
    ("shift+s", "sort_column(2, True)", "Sort Status"),
    ("shift+t", "sort_column(3, False)", "Sort Restart"),
    ("shift+c", "sort_column(4, False)", "Sort CPU"),
    ("shift+m", "sort_column(5, False)", "Sort MEM"),
    ("shift+d", "sort_column(6, True)", "Sort IP"),
    ("shift+o", "sort_column(7, True)", "Sort Node"),
]

# ============================================================================
# Container Screen Bindings
# ============================================================================

CONTAINER_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("shift+f", "port_forward", "PortForward"),
]

# ============================================================================
# PortForward Screen Bindings
# ============================================================================

FORWARD_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("enter", "show_benchmarks", "Benchmarks"),
    ("ctrl+b", "bench_run", "Bench"),
    ("alt+b", "bench_stop", "Bench Stop"),
    ("ctrl+d", "delete_forward", "Delete"),
    ("shift+p", "sort_column(2, True)", "Sort Ports"),
    ("shift+u", "sort_column(3, True)", "Sort URL"),
]

__all__ = [
    "BASE_SCREEN_BINDINGS",
    "CONTAINER_SCREEN_BINDINGS",
    "FORWARD_SCREEN_BINDINGS",
    "POD_SCREEN_BINDINGS",
]
