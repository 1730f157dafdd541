"""Table row ordering.

Pure functions: safe to call from any thread holding a TableData snapshot.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from kubedeck.models.table.row_event import RowEvent
from kubedeck.models.table.sort_column import SortColumn
from kubedeck.models.table.table_data import TableData
from kubedeck.utils.age import parse_duration
from kubedeck.utils.resource_parser import parse_numeric_cell

SortedRows = list[tuple[str, RowEvent]]

AGE_COLUMN = "AGE"


def _numeric_key(cell: str) -> tuple[int, float]:
    value = parse_numeric_cell(cell)
    # Malformed and empty cells sort as the minimum value.
    if value is None:
        return (0, 0.0)
    return (1, value)


def _age_key(cell: str) -> tuple[int, float]:
    value = parse_duration(cell)
    if value is None:
        return (0, 0.0)
    return (1, value)


def _text_key(cell: str) -> str:
    return cell.strip()


def sort_rows(
    rows: Mapping[str, RowEvent] | Iterable[tuple[str, RowEvent]],
    sort_col: SortColumn,
    header: Iterable[str] = (),
    numeric_columns: Iterable[str] = (),
) -> SortedRows:
    """Order rows by one column.

    The sort is stable: rows with equal keys keep their insertion order in
    both directions, since ``ascending=False`` reverses the comparison rather
    than the resulting sequence.

    Args:
        rows: FQN -> RowEvent mapping or (fqn, event) pairs in insertion order.
        sort_col: Column to order by. Out of range indexes leave the order as is.
        header: Column names, used to detect numeric columns.
        numeric_columns: Names of columns compared by parsed value. The AGE
            column is always compared as a duration.

    Returns:
        (fqn, event) pairs in display order.
    """
    items: SortedRows = list(rows.items()) if isinstance(rows, Mapping) else list(rows)
    header = tuple(header)
    index = sort_col.index
    if index < 0 or not items:
        return items

    column = header[index] if index < len(header) else ""
    numeric = column in set(numeric_columns)

    def cell_of(item: tuple[str, RowEvent]) -> str:
        fields = item[1].fields
        return fields[index] if index < len(fields) else ""

    if column == AGE_COLUMN:
        return sorted(items, key=lambda item: _age_key(cell_of(item)), reverse=not sort_col.ascending)
    if numeric:
        return sorted(items, key=lambda item: _numeric_key(cell_of(item)), reverse=not sort_col.ascending)
    return sorted(items, key=lambda item: _text_key(cell_of(item)), reverse=not sort_col.ascending)


def sort_table(data: TableData, sort_col: SortColumn) -> SortedRows:
    """Order a snapshot's rows by ``sort_col``."""
    return sort_rows(data.rows, sort_col, data.header, data.numeric_columns)


__all__ = ["SortedRows", "sort_rows", "sort_table"]
