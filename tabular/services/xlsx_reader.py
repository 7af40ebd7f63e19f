"""
XLSX worksheet reader.

Wraps openpyxl: opens a workbook, selects a worksheet by index and turns its
populated cells into an ordered stream of CellRecord (1-based row reference,
column label, resolved CellValue). Container decoding, shared strings and
date handling are all left to openpyxl.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from openpyxl import load_workbook

from tabular.config.settings import TabularSettings, get_settings
from tabular.exceptions import ConstructionError, SheetNotFoundError, WorkbookNotFoundError
from tabular.models import CellRecord, CellValue, SheetCells
from tabular.utils.app_logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class XlsxReadOptions:
    """Options for reading a worksheet."""

    data_only: bool = True
    max_rows: Optional[int] = None
    max_cols: Optional[int] = None

    @classmethod
    def from_settings(cls, settings: Optional[TabularSettings] = None) -> "XlsxReadOptions":
        s = settings or get_settings()
        return cls(data_only=s.excel_data_only, max_rows=s.max_rows, max_cols=s.max_cols)


class XlsxSheetReader:
    """Reads one worksheet of an .xlsx file into a cell stream."""

    def __init__(self, options: Optional[XlsxReadOptions] = None):
        self.options = options or XlsxReadOptions.from_settings()

    def read(self, path: str, book: int = 0, sheet: int = 0) -> SheetCells:
        # An .xlsx package holds a single workbook part
        if book != 0:
            raise WorkbookNotFoundError(path, book)

        try:
            wb = load_workbook(filename=path, data_only=self.options.data_only, read_only=False)
        except Exception as e:
            raise ConstructionError(
                f"Path [{path}] does not contain a valid XLSX",
                details={"path": path, "error": str(e)},
            ) from e

        try:
            worksheets = wb.worksheets
            if sheet < 0 or sheet >= len(worksheets):
                raise SheetNotFoundError(path, book, sheet)
            ws = worksheets[sheet]

            cells: List[CellRecord] = []
            for row in ws.iter_rows(max_row=self.options.max_rows, max_col=self.options.max_cols):
                for cell in row:
                    if cell.value is None:
                        continue
                    cells.append(
                        CellRecord(
                            row_reference=cell.row,
                            column_label=cell.column_letter,
                            value=CellValue.from_native(cell.value),
                        )
                    )

            logger.info(f"Read worksheet [{ws.title}] from [{path}]: {len(cells)} populated cell(s)")
            return SheetCells(name=str(ws.title or ""), path=f"{path}#{ws.title}", cells=cells)
        finally:
            wb.close()
