"""Base screen for live resource tables.

A ResourceScreen binds one TableWatcher to one CustomDataTable:

- the watcher runs as a worker under a scope derived from the app scope,
  cancelled when the screen is dismissed;
- every snapshot is re-sorted with the current SortColumn before painting;
- sort commands are expressed relative to the NAME column.
"""

from __future__ import annotations

import logging
from contextlib import suppress
from typing import TYPE_CHECKING, ClassVar, cast

from textual.app import ComposeResult
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header

from kubedeck.constants.limits import MAX_ROWS_DISPLAY
from kubedeck.constants.values import ALL_NAMESPACES, APP_TITLE
from kubedeck.controllers.kinds.base import ResourceKind
from kubedeck.controllers.table.watcher import TableWatcher
from kubedeck.keyboard import BASE_SCREEN_BINDINGS
from kubedeck.models.state.app_state import AppState
from kubedeck.models.table.row_event import RowEvent
from kubedeck.models.table.sort_column import SortColumn
from kubedeck.models.table.table_data import TableData
from kubedeck.utils.cancellation import CancelScope
from kubedeck.utils.flash import Flash
from kubedeck.utils.sorter import sort_table
from kubedeck.widgets import CustomDataTable, StatusBar

if TYPE_CHECKING:
    from kubedeck.app import KubeDeckApp

logger = logging.getLogger(__name__)


class ResourceScreen(Screen[None]):
    """Live table of one resource kind."""

    BINDINGS = BASE_SCREEN_BINDINGS

    DEFAULT_SORT_OFFSET: ClassVar[int] = 0
    DEFAULT_SORT_ASCENDING: ClassVar[bool] = True

    def __init__(self, kind: ResourceKind, state: AppState, namespace: str | None = None) -> None:
        super().__init__()
        self.kind = kind
        self.state = state
        self.watcher = TableWatcher(
            kind,
            namespace if namespace is not None else state.namespace,
            state.settings.refresh_rate,
        )
        self.sort_col = SortColumn.relative(
            kind.name_index,
            self.DEFAULT_SORT_OFFSET,
            len(kind.header),
            self.DEFAULT_SORT_ASCENDING,
        )
        self.scope: CancelScope | None = None

    @property
    def app(self) -> KubeDeckApp:
        """Get the application instance."""
        return cast("KubeDeckApp", super().app)

    @property
    def flash(self) -> Flash:
        return self.state.flash

    @property
    def screen_title(self) -> str:
        return self.kind.title

    def compose(self) -> ComposeResult:
        yield Header()
        yield CustomDataTable(self.kind.header, id="resource-table")
        yield StatusBar(id="status-bar")
        yield Footer()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def on_mount(self) -> None:
        self.scope = self.state.scope.child(f"screen:{self.kind.name}")
        self.watcher.add_listener(self.on_table_data)
        self.watcher.add_error_listener(self.on_watch_error)
        self.run_worker(
            self.watcher.watch(self.scope),
            name=f"watch-{self.kind.name}",
            group="watch",
            exclusive=True,
        )
        self.update_title()

    def on_unmount(self) -> None:
        if self.scope is not None:
            self.scope.cancel()
        self.watcher.remove_listener(self.on_table_data)
        self.watcher.remove_error_listener(self.on_watch_error)

    # =========================================================================
    # Table
    # =========================================================================

    @property
    def table(self) -> CustomDataTable:
        return self.query_one("#resource-table", CustomDataTable)

    def on_table_data(self, data: TableData) -> None:
        """Watcher listener: repaint with the current sort."""
        self.render_table(data)

    def on_watch_error(self, error: Exception) -> None:
        self.flash.err(error)

    def sorted_rows(self, data: TableData | None = None) -> list[tuple[str, RowEvent]]:
        return sort_table(data or self.watcher.peek(), self.sort_col)[:MAX_ROWS_DISPLAY]

    def render_table(self, data: TableData | None = None) -> None:
        with suppress(NoMatches):
            self.table.update_rows(self.sorted_rows(data))
        self.update_title()

    def update_title(self) -> None:
        namespace = self.watcher.get_namespace()
        scope = "all" if namespace == ALL_NAMESPACES else namespace
        self.app.title = f"{APP_TITLE} - {self.screen_title}({scope})"
        direction = "asc" if self.sort_col.ascending else "desc"
        column = self.kind.header[self.sort_col.index] if self.sort_col.is_valid() else "-"
        self.app.sub_title = f"{len(self.watcher.peek().live_rows())} rows, sorted by {column} {direction}"

    def selected_fqn(self) -> str | None:
        with suppress(NoMatches):
            return self.table.selected_fqn()
        return None

    def selected_cell(self, index: int) -> str | None:
        with suppress(NoMatches):
            return self.table.selected_cell(index)
        return None

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        event.stop()
        fqn = self.selected_fqn()
        if fqn is not None:
            self.select_row(fqn)

    def select_row(self, fqn: str) -> None:
        """Enter on a row; screens with a drill-down override this."""

    # =========================================================================
    # Actions
    # =========================================================================

    def action_refresh(self) -> None:
        self.run_worker(self.watcher.refresh(), name=f"refresh-{self.kind.name}", group="refresh")

    def action_pop_screen(self) -> None:
        if len(self.app.screen_stack) > 2:
            self.app.pop_screen()

    def action_sort_column(self, offset: int, ascending: bool = True) -> None:
        self.sort_col = SortColumn.relative(self.kind.name_index, offset, len(self.kind.header), ascending)
        self.render_table()

    def action_sort_name(self) -> None:
        self.action_sort_column(0, True)

    def action_sort_age(self) -> None:
        if "AGE" in self.kind.header:
            self.action_sort_column(self.kind.header.index("AGE") - self.kind.name_index, True)

    def action_toggle_sort_order(self) -> None:
        self.sort_col = self.sort_col.toggled()
        self.render_table()


__all__ = ["ResourceScreen"]
