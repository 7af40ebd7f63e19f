"""
tabular: read spreadsheets as header-addressable, type-coercing tables.
"""

from tabular.exceptions import (
    ColumnOutOfRangeError,
    ConstructionError,
    InvalidCoordinateError,
    NoMatchesError,
    NotConvertibleError,
    NotFoundError,
    RowOutOfRangeError,
    SheetNotFoundError,
    TabularException,
    WorkbookNotFoundError,
)
from tabular.models import CellKind, CellRecord, CellValue, SheetCells, Slot
from tabular.services import SheetTable, SparseTable, XlsxReadOptions, XlsxSheetReader

__version__ = "0.1.0"

__all__ = [
    "SheetTable",
    "SparseTable",
    "Slot",
    "CellKind",
    "CellValue",
    "CellRecord",
    "SheetCells",
    "XlsxReadOptions",
    "XlsxSheetReader",
    "TabularException",
    "ConstructionError",
    "WorkbookNotFoundError",
    "SheetNotFoundError",
    "InvalidCoordinateError",
    "RowOutOfRangeError",
    "ColumnOutOfRangeError",
    "NotFoundError",
    "NoMatchesError",
    "NotConvertibleError",
]
