"""Live table models."""

from kubedeck.models.table.row_event import Deltas, Row, RowEvent, diff_row
from kubedeck.models.table.sort_column import SortColumn
from kubedeck.models.table.table_data import TableData, build_table_data

__all__ = [
    "Deltas",
    "Row",
    "RowEvent",
    "SortColumn",
    "TableData",
    "build_table_data",
    "diff_row",
]
