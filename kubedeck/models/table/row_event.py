"""Row-level change events for live tables."""

from __future__ import annotations

from dataclasses import dataclass

from kubedeck.constants.enums import RowAction

Row = tuple[str, ...]
# Previous value for each changed cell, None where the cell did not change.
Deltas = tuple[str | None, ...]


@dataclass(frozen=True)
class RowEvent:
    """One resource's display fields plus its change classification.

    Attributes:
        action: How the row changed since the previous snapshot.
        fields: Display cells, in header order.
        deltas: Parallel to ``fields``; holds the previous cell value where the
            cell changed and None elsewhere.
    """

    action: RowAction
    fields: Row
    deltas: Deltas

    def __post_init__(self) -> None:
        if len(self.fields) != len(self.deltas):
            raise ValueError(
                f"deltas length {len(self.deltas)} does not match fields length {len(self.fields)}"
            )

    @classmethod
    def new(cls, fields: Row) -> RowEvent:
        return cls(RowAction.NEW, tuple(fields), blank_deltas(len(fields)))

    @classmethod
    def unchanged(cls, fields: Row) -> RowEvent:
        return cls(RowAction.UNCHANGED, tuple(fields), blank_deltas(len(fields)))

    @classmethod
    def deleted(cls, fields: Row) -> RowEvent:
        return cls(RowAction.DELETE, tuple(fields), blank_deltas(len(fields)))

    @property
    def changed_indices(self) -> tuple[int, ...]:
        """Indices of the cells that changed in this refresh."""
        return tuple(i for i, delta in enumerate(self.deltas) if delta is not None)

    def is_deleted(self) -> bool:
        return self.action is RowAction.DELETE


def blank_deltas(size: int) -> Deltas:
    return (None,) * size


def diff_row(previous: Row, current: Row) -> RowEvent:
    """Classify a row present in both snapshots.

    Rows of different widths (a kind whose columns changed) are treated as
    fully updated.
    """
    current = tuple(current)
    if len(previous) != len(current):
        return RowEvent(RowAction.UPDATE, current, tuple("" for _ in current))

    deltas = tuple(
        old if old != new else None for old, new in zip(previous, current)
    )
    if all(delta is None for delta in deltas):
        return RowEvent.unchanged(current)
    return RowEvent(RowAction.UPDATE, current, deltas)


__all__ = ["Deltas", "Row", "RowEvent", "blank_deltas", "diff_row"]
