"""
Data models for the tabular library.
"""

from .cell_value import CellKind, CellValue
from .sheet_cells import CellRecord, SheetCells
from .slot import Slot

__all__ = [
    "CellKind",
    "CellValue",
    "CellRecord",
    "SheetCells",
    "Slot",
]
