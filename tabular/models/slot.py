"""
Slot: a (row, col, value) read view into a table, with typed coercion.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from tabular.exceptions import NotConvertibleError
from tabular.models.cell_value import CellKind, CellValue

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class Slot:
    row: int
    col: int
    content: CellValue

    @property
    def string(self) -> str:
        return self.content.as_text()

    @property
    def trimmed(self) -> str:
        return self.string.strip()

    @property
    def is_empty(self) -> bool:
        return self.string == ""

    def text(self) -> str:
        """Trimmed text; a blank cell is never valid text."""
        value = self.trimmed
        if not value:
            raise NotConvertibleError(self.string, "text")
        return value

    def int(self, if_empty: Optional[int] = None) -> int:
        """
        Integer value of the cell.

        Native integers are returned as-is. Text is trimmed and must be a
        plain base-10 integer; a blank cell yields ``if_empty`` when given.
        """
        if self.content.kind is CellKind.INTEGER:
            return self.content.value
        value = self.trimmed
        if not value and if_empty is not None:
            return if_empty
        if not _INT_RE.fullmatch(value):
            raise NotConvertibleError(value, "Int")
        return int(value)

    def double(self, if_empty: Optional[float] = None) -> float:
        """Real value of the cell; native integers are widened."""
        if self.content.kind is CellKind.REAL:
            return self.content.value
        if self.content.kind is CellKind.INTEGER:
            return float(self.content.value)
        value = self.trimmed
        if not value and if_empty is not None:
            return if_empty
        if not _FLOAT_RE.fullmatch(value):
            raise NotConvertibleError(value, "Double")
        return float(value)

    def date(self, if_empty: Optional[datetime] = None) -> datetime:
        if self.content.kind is CellKind.DATE:
            return self.content.value
        value = self.trimmed
        if not value and if_empty is not None:
            return if_empty
        try:
            return datetime.fromisoformat(value)
        except ValueError as e:
            raise NotConvertibleError(value, "date") from e
