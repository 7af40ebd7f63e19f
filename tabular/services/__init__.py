"""
Table services: sparse storage, lookups, column families and the XLSX reader.
"""

from .sparse_table import SparseTable
from .xlsx_reader import XlsxReadOptions, XlsxSheetReader
from .sheet_table import SheetTable

__all__ = [
    "SparseTable",
    "XlsxReadOptions",
    "XlsxSheetReader",
    "SheetTable",
]
