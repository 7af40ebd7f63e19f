"""
Resolved cell content.

Whatever shape a spreadsheet reader hands us (shared string, inline string,
number, date, ...) is turned into one of a closed set of variants at the
boundary, so coercion downstream only has to handle these.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Union


class CellKind(str, Enum):
    """Cell content variants"""
    EMPTY = "empty"
    TEXT = "text"
    INTEGER = "integer"
    REAL = "real"
    DATE = "date"


@dataclass(frozen=True)
class CellValue:
    kind: CellKind
    value: Optional[Union[str, int, float, datetime]] = None

    @classmethod
    def empty(cls) -> "CellValue":
        return _EMPTY

    @classmethod
    def text(cls, value: str) -> "CellValue":
        return cls(CellKind.TEXT, str(value))

    @classmethod
    def integer(cls, value: int) -> "CellValue":
        return cls(CellKind.INTEGER, int(value))

    @classmethod
    def real(cls, value: float) -> "CellValue":
        return cls(CellKind.REAL, float(value))

    @classmethod
    def date(cls, value: datetime) -> "CellValue":
        return cls(CellKind.DATE, value)

    @classmethod
    def from_native(cls, value: Any) -> "CellValue":
        """
        Map a reader-native Python value onto a variant.

        bool is tested before int (bool is an int subclass) and kept as text,
        plain dates become midnight datetimes, times are kept as ISO text.
        """
        if value is None:
            return _EMPTY
        if isinstance(value, CellValue):
            return value
        if isinstance(value, str):
            return cls.text(value)
        if isinstance(value, bool):
            return cls.text("true" if value else "false")
        if isinstance(value, int):
            return cls.integer(value)
        if isinstance(value, (float, Decimal)):
            return cls.real(float(value))
        if isinstance(value, datetime):
            return cls.date(value)
        if isinstance(value, date):
            return cls.date(datetime.combine(value, time.min))
        if isinstance(value, time):
            return cls.text(value.isoformat())
        return cls.text(str(value))

    @property
    def is_empty(self) -> bool:
        return self.kind is CellKind.EMPTY

    def as_text(self) -> str:
        """Textual form used for matching and string coercion."""
        if self.kind is CellKind.EMPTY:
            return ""
        if self.kind is CellKind.DATE:
            dt = self.value
            # Excel stores plain dates as midnight datetimes
            if dt.hour == 0 and dt.minute == 0 and dt.second == 0 and dt.microsecond == 0:
                return dt.date().isoformat()
            return dt.isoformat(sep=" ")
        return str(self.value)


_EMPTY = CellValue(CellKind.EMPTY)
