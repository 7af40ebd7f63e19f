"""
Sparse cell matrix assembled once from a reader's cell stream.

Only populated cells are stored. ``row_count``/``col_count`` are upper bounds
(max index seen + 1), so a row or column may be shorter than the bounds.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Sequence

from tabular.exceptions import ColumnOutOfRangeError, RowOutOfRangeError
from tabular.models import CellRecord, CellValue, Slot
from tabular.utils.column_reference import to_index, to_label

_EMPTY_ROW: Mapping[int, CellValue] = MappingProxyType({})


class SparseTable:
    """Immutable row -> col -> value storage with tracked bounds."""

    __slots__ = ("_rows", "_row_count", "_col_count")

    def __init__(self, rows: Dict[int, Dict[int, CellValue]], row_count: int, col_count: int):
        self._rows: Mapping[int, Mapping[int, CellValue]] = MappingProxyType(
            {r: MappingProxyType(dict(sorted(cols.items()))) for r, cols in sorted(rows.items())}
        )
        self._row_count = row_count
        self._col_count = col_count

    @classmethod
    def from_records(cls, records: Iterable[CellRecord]) -> "SparseTable":
        rows: Dict[int, Dict[int, CellValue]] = {}
        row_count = 0
        col_count = 0
        for record in records:
            row_index = record.row_reference - 1
            col_index = to_index(record.column_label)
            rows.setdefault(row_index, {})[col_index] = record.value
            row_count = max(row_count, row_index + 1)
            col_count = max(col_count, col_index + 1)
        return cls(rows, row_count, col_count)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]) -> "SparseTable":
        """Build from an A1-anchored list of rows; ``None`` cells are skipped."""
        return cls.from_records(records_from_rows(rows))

    @property
    def row_count(self) -> int:
        return self._row_count

    @property
    def col_count(self) -> int:
        return self._col_count

    @property
    def rows(self) -> Mapping[int, Mapping[int, CellValue]]:
        """Populated rows in ascending row order."""
        return self._rows

    def row(self, index: int) -> Mapping[int, CellValue]:
        """Populated cells of an in-range row (empty for a gap row)."""
        if index < 0 or index >= self._row_count:
            raise RowOutOfRangeError(index, self._row_count)
        return self._rows.get(index, _EMPTY_ROW)

    def slot(self, row: int, col: int) -> Slot:
        """Slot at (row, col); an in-range gap resolves to an empty slot."""
        if col < 0 or col >= self._col_count:
            raise ColumnOutOfRangeError(col, self._col_count, row=row)
        value = self.row(row).get(col)
        if value is None:
            return Slot(row=row, col=col, content=CellValue.empty())
        return Slot(row=row, col=col, content=value)

    def __repr__(self) -> str:
        return (
            f"SparseTable(rows={len(self._rows)}, row_count={self._row_count}, "
            f"col_count={self._col_count})"
        )


def records_from_rows(rows: Sequence[Sequence[Any]]) -> List[CellRecord]:
    records: List[CellRecord] = []
    for r, row in enumerate(rows):
        for c, value in enumerate(row):
            if value is None:
                continue
            records.append(
                CellRecord(row_reference=r + 1, column_label=to_label(c), value=value)
            )
    return records
