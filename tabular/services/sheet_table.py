"""
SheetTable: a worksheet as a coordinate-addressable, type-coercing table.

Callers locate rows/columns by header text and read cells as typed values:

    table = SheetTable.from_xlsx("inventory.xlsx")
    price = table.at_row("Widget", col=2).double(if_empty=0.0)
    for row in table.enumerate_rows():
        name = table.at_col("Name", row).text()
        items = [slot.text() for slot in table.array("Item", row)]
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Pattern, Sequence, Tuple, Union

from tabular.models import CellRecord, CellValue, Slot
from tabular.services import family_collector, key_lookup, pattern_finder
from tabular.services.sparse_table import SparseTable
from tabular.services.xlsx_reader import XlsxReadOptions, XlsxSheetReader
from tabular.utils.app_logger import get_logger

logger = get_logger(__name__)


class SheetTable:
    """Read-only view over one worksheet. Built once; never mutated."""

    def __init__(self, matrix: SparseTable, name: str = "", path: str = ""):
        self.matrix = matrix
        self.name = name
        self.path = path

    # -------------------------
    # Construction
    # -------------------------

    @classmethod
    def from_xlsx(
        cls,
        path: str,
        book: int = 0,
        sheet: int = 0,
        *,
        options: Optional[XlsxReadOptions] = None,
    ) -> "SheetTable":
        sheet_cells = XlsxSheetReader(options).read(path, book=book, sheet=sheet)
        table = cls.from_records(sheet_cells.cells, name=sheet_cells.name, path=sheet_cells.path)
        logger.info(
            f"Loaded table [{table.name}] from [{path}] "
            f"(rows={table.row_count}, cols={table.col_count})"
        )
        return table

    @classmethod
    def from_records(
        cls, records: Iterable[CellRecord], name: str = "", path: str = ""
    ) -> "SheetTable":
        return cls(SparseTable.from_records(records), name=name, path=path)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]], name: str = "") -> "SheetTable":
        return cls(SparseTable.from_rows(rows), name=name)

    # -------------------------
    # Bounds and direct access
    # -------------------------

    @property
    def row_count(self) -> int:
        return self.matrix.row_count

    @property
    def col_count(self) -> int:
        return self.matrix.col_count

    def enumerate_rows(self, include_top: bool = False) -> range:
        """Row indices, skipping the header row unless ``include_top``."""
        return range(0 if include_top else 1, self.row_count)

    def enumerate_cols(self, include_left: bool = False) -> range:
        """Column indices, skipping the first column unless ``include_left``."""
        return range(0 if include_left else 1, self.col_count)

    def row(self, index: int) -> Mapping[int, CellValue]:
        return self.matrix.row(index)

    def slot(self, row: int, col: int) -> Slot:
        return self.matrix.slot(row, col)

    # -------------------------
    # Lookup
    # -------------------------

    def row_matching(self, key: str, exact: bool = False, at_col: int = 0) -> Slot:
        return key_lookup.row_matching(self.matrix, key, exact=exact, at_col=at_col)

    def col_matching(self, key: str, exact: bool = False, at_row: int = 0) -> Slot:
        return key_lookup.col_matching(self.matrix, key, exact=exact, at_row=at_row)

    def cols_matching(
        self, pattern: Union[str, Pattern[str]], at_row: int = 0
    ) -> List[Tuple[int, Any]]:
        return pattern_finder.cols_matching(self.matrix, pattern, at_row=at_row)

    def at_row(self, key: str, col: int = 1, exact: bool = False) -> Slot:
        return key_lookup.at_row(self.matrix, key, col=col, exact=exact)

    def at_col(self, key: str, row: int, exact: bool = False) -> Slot:
        return key_lookup.at_col(self.matrix, key, row, exact=exact)

    # -------------------------
    # Column families
    # -------------------------

    def array(
        self,
        col: str,
        row: int,
        *,
        separator: str = " ",
        exact: bool = False,
        compact: bool = True,
    ) -> List[Slot]:
        return family_collector.collect_array(
            self.matrix, col, row, separator=separator, exact=exact, compact=compact
        )

    def array2(
        self,
        col: str,
        row: int,
        *,
        outer_separator: str = " ",
        inner_separator: str = ".",
        exact: bool = False,
        compact: bool = True,
    ) -> List[List[Slot]]:
        return family_collector.collect_array2(
            self.matrix,
            col,
            row,
            outer_separator=outer_separator,
            inner_separator=inner_separator,
            exact=exact,
            compact=compact,
        )

    def __repr__(self) -> str:
        return f"SheetTable(name={self.name!r}, rows={self.row_count}, cols={self.col_count})"
