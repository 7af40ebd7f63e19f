"""
Table construction, lookup and coercion errors.
"""

from typing import Any, Dict, Optional

from .base import TabularException


class ConstructionError(TabularException):
    """The table could not be built from its source."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            code="CONSTRUCTION_ERROR",
            details=details or {}
        )


class WorkbookNotFoundError(ConstructionError):
    """The source does not contain a workbook at the requested index."""

    def __init__(self, path: str, book: int):
        super().__init__(
            message=f"XLSX at [{path}] does not contain a workbook at index {book}",
            details={"path": path, "book": book}
        )
        self.code = "WORKBOOK_NOT_FOUND"


class SheetNotFoundError(ConstructionError):
    """The workbook does not contain a worksheet at the requested index."""

    def __init__(self, path: str, book: int, sheet: int):
        super().__init__(
            message=(
                f"XLSX at [{path}] workbook at index {book} "
                f"does not contain a worksheet at index {sheet}"
            ),
            details={"path": path, "book": book, "sheet": sheet}
        )
        self.code = "SHEET_NOT_FOUND"


class InvalidCoordinateError(TabularException):
    """A column label or index is not a valid spreadsheet coordinate."""

    def __init__(self, coordinate: Any, reason: str):
        super().__init__(
            message=f"Invalid coordinate [{coordinate}]: {reason}",
            code="INVALID_COORDINATE",
            details={"coordinate": coordinate, "reason": reason}
        )


class RowOutOfRangeError(TabularException):
    """The requested row is outside the tracked row bounds."""

    def __init__(self, row: int, row_count: int):
        super().__init__(
            message=f"There is no row at index {row} (row count = {row_count})",
            code="ROW_OUT_OF_RANGE",
            details={"row": row, "row_count": row_count}
        )


class ColumnOutOfRangeError(TabularException):
    """The requested column is outside the tracked column bounds."""

    def __init__(self, col: int, col_count: int, row: Optional[int] = None):
        where = f"{row},{col}" if row is not None else f"{col}"
        super().__init__(
            message=f"There is no col at index {where} (col count = {col_count})",
            code="COLUMN_OUT_OF_RANGE",
            details={"row": row, "col": col, "col_count": col_count}
        )


class NotFoundError(TabularException):
    """No row or column matched a lookup key."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            code="NOT_FOUND",
            details=details or {}
        )


class NoMatchesError(NotFoundError):
    """No cell in a row matched a pattern."""

    def __init__(self, row: int, pattern: str):
        super().__init__(
            message=f"Cannot find cols in row {row} matching {pattern!r}",
            details={"row": row, "pattern": pattern}
        )
        self.code = "NO_MATCHES"


class NotConvertibleError(TabularException):
    """A cell's textual form cannot be coerced to the requested type."""

    def __init__(self, source: str, target: str):
        super().__init__(
            message=f"Cannot convert [{source}] to [{target}]",
            code="NOT_CONVERTIBLE",
            details={"source": source, "target": target}
        )
        self.source = source
        self.target = target
