"""
Cell stream models exchanged with spreadsheet readers.

A reader hands the table a sheet descriptor plus an ordered stream of cell
records, each addressed by a 1-based row reference and a column label.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tabular.models.cell_value import CellValue


class CellRecord(BaseModel):
    """One populated cell as produced by a reader."""

    row_reference: int = Field(..., ge=1, description="1-based row number")
    column_label: str = Field(..., min_length=1, description="Column label, e.g. 'A' or 'AB'")
    value: CellValue = Field(default_factory=CellValue.empty)

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="ignore")

    @field_validator("value", mode="before")
    @classmethod
    def resolve_value(cls, v):
        return CellValue.from_native(v)


class SheetCells(BaseModel):
    """A worksheet read from a source file."""

    name: str = Field(default="", description="Worksheet title")
    path: str = Field(default="", description="Identifier of the worksheet within its source file")
    cells: List[CellRecord] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="ignore")
