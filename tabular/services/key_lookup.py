"""
Key-based row/column lookup.

Rows are scanned in ascending row order and columns in ascending column
order, so duplicate keys always resolve to the same (first) match.
"""

from __future__ import annotations

from tabular.exceptions import ColumnOutOfRangeError, NotFoundError
from tabular.models import Slot
from tabular.services.sparse_table import SparseTable


def match_value(value: str, exact: bool) -> str:
    """Comparison form of a key or cell: as-is when exact, else trimmed and case-folded."""
    return value if exact else value.strip().casefold()


def row_matching(table: SparseTable, key: str, exact: bool = False, at_col: int = 0) -> Slot:
    """First row whose cell at ``at_col`` matches ``key``."""
    if at_col < 0 or at_col >= table.col_count:
        raise ColumnOutOfRangeError(at_col, table.col_count)

    wanted = match_value(key, exact)
    for row_index, cols in table.rows.items():
        value = cols.get(at_col)
        if value is None:
            continue
        if match_value(value.as_text(), exact) == wanted:
            return Slot(row=row_index, col=at_col, content=value)

    raise NotFoundError(
        f"Cannot find row in col {at_col} matching key [{wanted}] (exact = {exact})",
        details={"col": at_col, "key": key, "exact": exact},
    )


def col_matching(table: SparseTable, key: str, exact: bool = False, at_row: int = 0) -> Slot:
    """First column whose cell in ``at_row`` matches ``key``."""
    wanted = match_value(key, exact)
    for col_index, value in table.row(at_row).items():
        if match_value(value.as_text(), exact) == wanted:
            return Slot(row=at_row, col=col_index, content=value)

    raise NotFoundError(
        f"Cannot find col in row {at_row} matching key [{wanted}] (exact = {exact})",
        details={"row": at_row, "key": key, "exact": exact},
    )


def at_row(table: SparseTable, key: str, col: int = 1, exact: bool = False) -> Slot:
    """Slot in column ``col`` of the row whose first column matches ``key``."""
    match = row_matching(table, key, exact=exact)
    return table.slot(match.row, col)


def at_col(table: SparseTable, key: str, row: int, exact: bool = False) -> Slot:
    """Slot in row ``row`` of the column whose header matches ``key``."""
    match = col_matching(table, key, exact=exact)
    return table.slot(row, match.col)
