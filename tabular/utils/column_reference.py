"""
Spreadsheet column label <-> zero-based index conversion.

Labels use the bijective base-26 letter encoding: A=0 ... Z=25, AA=26, AB=27 ...
openpyxl counts columns from 1 and stops at "ZZZ" (index 18277).
"""

from __future__ import annotations

from openpyxl.utils import column_index_from_string, get_column_letter

from tabular.exceptions import InvalidCoordinateError


def to_index(label: str) -> int:
    """Convert a column label ("A", "AA", ...) to a 0-based column index."""
    if not isinstance(label, str) or not label:
        raise InvalidCoordinateError(label, "column label must be a non-empty string")
    # str.upper() maps some non-ASCII letters onto A-Z ("ß" -> "SS")
    if not (label.isascii() and label.isalpha()):
        raise InvalidCoordinateError(label, "column label must contain only letters A-Z")

    try:
        return column_index_from_string(label.upper()) - 1
    except ValueError as e:
        raise InvalidCoordinateError(label, str(e)) from e


def to_label(index: int) -> str:
    """Convert a 0-based column index to its column label."""
    if isinstance(index, bool) or not isinstance(index, int) or index < 0:
        raise InvalidCoordinateError(index, "column index must be a non-negative integer")

    try:
        return get_column_letter(index + 1)
    except ValueError as e:
        raise InvalidCoordinateError(index, str(e)) from e
