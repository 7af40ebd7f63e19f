"""
Sequential column family collection.

A family is a run of header columns sharing a base key with increasing
numeric suffixes ("Item 1", "Item 2", ...), optionally nested one level
("Grid 1.1", "Grid 1.2", "Grid 2.1", ...).

Probing stops at the first suffix whose column does not exist. That is the
normal end of a family and is reported by ``_probe_col`` returning ``None``;
every other failure propagates.
"""

from __future__ import annotations

from typing import List, Optional

from tabular.exceptions import ColumnOutOfRangeError, NotFoundError
from tabular.models import Slot
from tabular.services.key_lookup import at_col
from tabular.services.sparse_table import SparseTable
from tabular.utils.app_logger import get_logger

logger = get_logger(__name__)


def _probe_col(table: SparseTable, key: str, row: int, exact: bool) -> Optional[Slot]:
    # no header row to search
    if table.row_count == 0:
        return None
    try:
        return at_col(table, key, row, exact=exact)
    except (NotFoundError, ColumnOutOfRangeError):
        return None


def _probe_array(
    table: SparseTable, col: str, row: int, separator: str, exact: bool, compact: bool
) -> Optional[List[Slot]]:
    try:
        return collect_array(table, col, row, separator=separator, exact=exact, compact=compact)
    except NotFoundError:
        return None


def collect_array(
    table: SparseTable,
    col: str,
    row: int,
    *,
    separator: str = " ",
    exact: bool = False,
    compact: bool = True,
) -> List[Slot]:
    """
    Slots in ``row`` for columns ``{col}{separator}1``, ``{col}{separator}2``, ...

    With ``compact`` an empty slot ends the family. Raises ``NotFoundError``
    when the first column of the family does not exist.
    """
    slots: List[Slot] = []
    found = False
    i = 1
    while True:
        slot = _probe_col(table, f"{col}{separator}{i}", row, exact)
        if slot is None:
            break
        found = True
        if compact and slot.is_empty:
            break
        slots.append(slot)
        i += 1

    if not found:
        raise NotFoundError(
            f"Cannot find col matching key [{col}{separator}1] (exact = {exact})",
            details={"key": f"{col}{separator}1", "row": row, "exact": exact},
        )
    logger.debug(f"Collected family {col!r} at row {row}: {len(slots)} slot(s)")
    return slots


def collect_array2(
    table: SparseTable,
    col: str,
    row: int,
    *,
    outer_separator: str = " ",
    inner_separator: str = ".",
    exact: bool = False,
    compact: bool = True,
) -> List[List[Slot]]:
    """
    Nested family: one inner family per outer index.

    Outer probing stops when an inner family is absent (or empty with
    ``compact``). Raises ``NotFoundError`` when the (1, 1) column is absent.
    """
    families: List[List[Slot]] = []
    found = False
    i = 1
    while True:
        inner = _probe_array(
            table, f"{col}{outer_separator}{i}", row, inner_separator, exact, compact
        )
        if inner is None:
            break
        found = True
        if compact and not inner:
            break
        families.append(inner)
        i += 1

    if not found:
        first = f"{col}{outer_separator}1{inner_separator}1"
        raise NotFoundError(
            f"Cannot find col matching key [{first}] (exact = {exact})",
            details={"key": first, "row": row, "exact": exact},
        )
    logger.debug(f"Collected nested family {col!r} at row {row}: {len(families)} group(s)")
    return families
