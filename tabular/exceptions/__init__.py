"""
Exceptions raised by the tabular library.
"""

from .base import TabularException

from .table import (
    ConstructionError,
    WorkbookNotFoundError,
    SheetNotFoundError,
    InvalidCoordinateError,
    RowOutOfRangeError,
    ColumnOutOfRangeError,
    NotFoundError,
    NoMatchesError,
    NotConvertibleError,
)


__all__ = [
    # Base
    "TabularException",

    # Construction
    "ConstructionError",
    "WorkbookNotFoundError",
    "SheetNotFoundError",

    # Coordinates
    "InvalidCoordinateError",
    "RowOutOfRangeError",
    "ColumnOutOfRangeError",

    # Lookup / coercion
    "NotFoundError",
    "NoMatchesError",
    "NotConvertibleError",
]
