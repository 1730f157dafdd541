"""Tests for container screen helpers."""

from __future__ import annotations

import pytest

from kubedeck.screens.containers import first_tcp_port


class TestFirstTcpPort:
    """Tests for first_tcp_port."""

    @pytest.mark.unit
    @pytest.mark.fast
    @pytest.mark.parametrize(
        ("cell", "expected"),
        [
            ("http:8080/TCP", "http:8080/TCP"),
            ("53/UDP,metrics:9090/TCP", "metrics:9090/TCP"),
            ("53/UDP", None),
            ("", None),
        ],
    )
    def test_first_tcp_port(self, cell: str, expected: str | None) -> None:
        assert first_tcp_port(cell) == expected
