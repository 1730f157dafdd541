"""Tests for the application module.

This module tests:
- KubeDeckApp class attributes
- Screen factories reachable from the command prompt
- Help rows built from key bindings
"""

from __future__ import annotations

import pytest
from textual.binding import Binding

from kubedeck.app import SCREEN_FACTORIES, KubeDeckApp, _binding_rows
from kubedeck.controllers.kinds import RESOURCE_KINDS
from kubedeck.screens import BenchmarkScreen, ForwardScreen, PodScreen, ServiceScreen


class TestKubeDeckApp:
    """Tests for KubeDeckApp class attributes."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_app_attributes(self) -> None:
        assert KubeDeckApp.TITLE == "KubeDeck"
        assert KubeDeckApp.CSS_PATH == "css/app.tcss"
        actions = {binding.action for binding in KubeDeckApp.BINDINGS}
        assert {"command_prompt", "show_help", "app.quit"} <= actions

    @pytest.mark.unit
    @pytest.mark.fast
    def test_screen_factories(self) -> None:
        assert SCREEN_FACTORIES == {
            "pods": PodScreen,
            "services": ServiceScreen,
            "portforwards": ForwardScreen,
            "benchmarks": BenchmarkScreen,
        }
        assert set(SCREEN_FACTORIES) == {
            name for name, kind in RESOURCE_KINDS.items() if not kind.requires_parent
        }


class TestBindingRows:
    """Tests for _binding_rows."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_mixed_bindings(self) -> None:
        rows = _binding_rows(
            [
                Binding("q", "quit", "Quit"),
                ("r", "refresh", "Refresh"),
                ("x", "hidden"),
                Binding("z", "silent", ""),
            ]
        )
        assert rows == [("q", "Quit"), ("r", "Refresh")]
