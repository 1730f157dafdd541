"""Immutable per-refresh table snapshots."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from kubedeck.constants.enums import RowAction
from kubedeck.constants.values import ALL_NAMESPACES
from kubedeck.models.table.row_event import Row, RowEvent, diff_row


@dataclass(frozen=True)
class TableData:
    """One refresh worth of rows for a resource kind.

    Attributes:
        header: Column names.
        numeric_columns: Columns compared by value when sorting.
        rows: FQN -> RowEvent, in insertion order.
        namespace: Namespace the snapshot was scoped to, ``"*"`` for all.
    """

    header: Row
    rows: Mapping[str, RowEvent] = field(default_factory=dict)
    numeric_columns: frozenset[str] = frozenset()
    namespace: str = ALL_NAMESPACES

    def __post_init__(self) -> None:
        object.__setattr__(self, "header", tuple(self.header))
        object.__setattr__(self, "numeric_columns", frozenset(self.numeric_columns))
        object.__setattr__(self, "rows", MappingProxyType(dict(self.rows)))
        width = len(self.header)
        for fqn, event in self.rows.items():
            if len(event.fields) != width:
                raise ValueError(
                    f"row {fqn!r} has {len(event.fields)} fields, header has {width}"
                )

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[str]:
        return iter(self.rows)

    def empty(self) -> bool:
        return not self.rows

    def get(self, fqn: str) -> RowEvent | None:
        return self.rows.get(fqn)

    def column_index(self, name: str) -> int:
        """Return the index of a header column, -1 when absent."""
        try:
            return self.header.index(name)
        except ValueError:
            return -1

    def cell(self, fqn: str, column: str) -> str | None:
        """Return one cell by row FQN and column name."""
        event = self.rows.get(fqn)
        index = self.column_index(column)
        if event is None or index < 0:
            return None
        return event.fields[index]

    def live_rows(self) -> dict[str, RowEvent]:
        """Rows that still exist (everything but Delete events)."""
        return {fqn: event for fqn, event in self.rows.items() if not event.is_deleted()}

    @classmethod
    def empty_for(
        cls,
        header: Iterable[str],
        numeric_columns: Iterable[str] = (),
        namespace: str = ALL_NAMESPACES,
    ) -> TableData:
        return cls(tuple(header), {}, frozenset(numeric_columns), namespace)


def build_table_data(
    header: Iterable[str],
    current: Iterable[tuple[str, Row]],
    previous: TableData | None = None,
    *,
    numeric_columns: Iterable[str] = (),
    namespace: str = ALL_NAMESPACES,
) -> TableData:
    """Build the next snapshot and classify every row against the previous one.

    - FQN absent from ``previous`` -> New.
    - FQN present in both -> Update (with deltas) or Unchanged.
    - FQN present in ``previous`` but not ``current`` -> Delete, reported once;
      a previous Delete event that is still absent is dropped.

    Args:
        header: Column names.
        current: (fqn, fields) pairs for the resources now present.
        previous: The prior snapshot, or None on the first refresh.
        numeric_columns: Columns sorted by value.
        namespace: Namespace scope of this snapshot.

    Raises:
        ValueError: When an FQN repeats or a row width mismatches the header.
    """
    prior = previous.rows if previous is not None else {}
    rows: dict[str, RowEvent] = {}

    for fqn, fields in current:
        if fqn in rows:
            raise ValueError(f"duplicate row identity {fqn!r}")
        fields = tuple(fields)
        old = prior.get(fqn)
        if old is None or old.action is RowAction.DELETE:
            rows[fqn] = RowEvent.new(fields)
        else:
            rows[fqn] = diff_row(old.fields, fields)

    for fqn, old in prior.items():
        if fqn in rows or old.action is RowAction.DELETE:
            continue
        rows[fqn] = RowEvent.deleted(old.fields)

    return TableData(tuple(header), rows, frozenset(numeric_columns), namespace)


__all__ = ["TableData", "build_table_data"]
