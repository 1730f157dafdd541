"""CustomDataTable widget - live resource table over Textual's DataTable."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from rich.text import Text
from textual.containers import Container
from textual.widgets import DataTable as TextualDataTable

from kubedeck.constants.enums import RowAction
from kubedeck.models.table.row_event import RowEvent

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from textual.app import ComposeResult

_ACTION_STYLES: dict[RowAction, str] = {
    RowAction.NEW: "bold green",
    RowAction.UPDATE: "",
    RowAction.DELETE: "dim red strike",
    RowAction.UNCHANGED: "",
}
_CHANGED_CELL_STYLE = "bold yellow"


def render_cells(event: RowEvent) -> list[Text]:
    """Style each cell by row action, highlighting cells that just changed."""
    row_style = _ACTION_STYLES[event.action]
    changed = set(event.changed_indices)
    return [
        Text(value, style=_CHANGED_CELL_STYLE if index in changed else row_style)
        for index, value in enumerate(event.fields)
    ]


class CustomDataTable(Container):
    """Row-cursor table keyed by resource FQN.

    Rows are replaced wholesale on each refresh; the cursor stays on the same
    FQN when that row is still present.

    CSS Classes: widget-custom-data-table
    """

    DEFAULT_CSS = """
    CustomDataTable {
        height: 1fr;
        width: 1fr;
        min-height: 3;
    }
    CustomDataTable > DataTable {
        height: 1fr;
        width: 1fr;
        border: none;
    }
    """

    def __init__(
        self,
        header: Sequence[str] = (),
        *,
        id: str | None = None,
        classes: str = "",
        zebra_stripes: bool = False,
    ) -> None:
        super().__init__(id=id, classes=f"widget-custom-data-table {classes}".strip())
        self._header = tuple(header)
        self._zebra_stripes = zebra_stripes
        self._inner_widget: TextualDataTable | None = None
        self._row_keys: list[str] = []
        self._events: dict[str, RowEvent] = {}

    def compose(self) -> ComposeResult:
        table: TextualDataTable = TextualDataTable(cursor_type="row")
        table.zebra_stripes = self._zebra_stripes
        self._inner_widget = table
        yield table

    def on_mount(self) -> None:
        if self._header:
            self.set_columns(self._header)

    @property
    def row_keys(self) -> list[str]:
        return list(self._row_keys)

    def set_columns(self, header: Iterable[str]) -> None:
        self._header = tuple(header)
        table = self._inner_widget
        if table is None:
            return
        table.clear(columns=True)
        for name in self._header:
            table.add_column(name, key=name)

    def update_rows(self, rows: Sequence[tuple[str, RowEvent]]) -> None:
        """Replace the table content, keeping the cursor on the same row."""
        table = self._inner_widget
        if table is None:
            return
        selected = self.selected_fqn()
        self._row_keys = [fqn for fqn, _ in rows]
        self._events = dict(rows)
        with table.app.batch_update():
            table.clear()
            for fqn, event in rows:
                table.add_row(*render_cells(event), key=fqn)
        if selected in self._events:
            table.move_cursor(row=self._row_keys.index(selected))

    def selected_fqn(self) -> str | None:
        table = self._inner_widget
        if table is None or not self._row_keys:
            return None
        row = table.cursor_row
        if 0 <= row < len(self._row_keys):
            return self._row_keys[row]
        return None

    def selected_event(self) -> RowEvent | None:
        fqn = self.selected_fqn()
        return self._events.get(fqn) if fqn is not None else None

    def selected_cell(self, index: int) -> str | None:
        """Trimmed cell of the selected row."""
        event = self.selected_event()
        if event is None or not 0 <= index < len(event.fields):
            return None
        return event.fields[index].strip()


__all__ = ["CustomDataTable", "render_cells"]
