"""Saved benchmark reports of the current cluster."""

from __future__ import annotations

import logging

from kubedeck.controllers.kinds.bench import BenchmarkKind
from kubedeck.models.state.app_state import AppState
from kubedeck.screens.resource import ResourceScreen
from kubedeck.widgets import ReportViewerDialog

logger = logging.getLogger(__name__)


class BenchmarkScreen(ResourceScreen):
    """Report list; enter opens the selected report."""

    # Newest first.
    DEFAULT_SORT_OFFSET = 7
    DEFAULT_SORT_ASCENDING = True

    def __init__(self, state: AppState, namespace: str | None = None) -> None:
        super().__init__(BenchmarkKind(state.bench_reports_dir), state, namespace)

    def select_row(self, fqn: str) -> None:
        report_name = fqn.split("/", 1)[-1]
        path = self.state.bench_reports_dir() / report_name
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("Unable to open benchmark report %s: %s", path, exc)
            self.flash.errf("Unable to open report %s", report_name)
            return
        self.app.push_screen(ReportViewerDialog(report_name, text))
