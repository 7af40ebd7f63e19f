from __future__ import annotations

from datetime import datetime

import pytest

from tabular import SheetTable


@pytest.fixture
def inventory_table() -> SheetTable:
    return SheetTable.from_rows(
        [
            ["Name", "Qty", "Price", "Notes"],
            ["Widget", 3, 2.5, "first"],
            ["  GADGET ", "7", "", None],
            ["Widget", 9, 1.0, "dup"],
        ],
        name="Inventory",
    )


@pytest.fixture
def family_table() -> SheetTable:
    return SheetTable.from_rows(
        [
            ["Key", "Item 1", "Item 2", "Item 3", "Grid 1.1", "Grid 1.2", "Grid 2.1", "Other"],
            ["r1", "a", "b", "", "g11", "g12", "g21", "o"],
            ["r2", "c", "d", "e", "h11", None, "h21"],
            ["r3", "", "x", "y", "", "k12", ""],
        ]
    )


@pytest.fixture
def xlsx_path(tmp_path):
    from openpyxl import Workbook

    wb = Workbook()
    ws = wb.active
    ws.title = "Inventory"
    ws.append(["Name", "Qty", "Price", "Shipped", "Active", "Item 1", "Item 2"])
    ws.append(["Widget", 3, 2.5, datetime(2024, 5, 1), True, "bolt", "nut"])
    ws.append(["Gadget", "7", None, datetime(2024, 5, 2, 13, 30), False, "gear", None])
    ws["B6"] = 42

    other = wb.create_sheet("Other")
    other["A1"] = "Only"

    path = tmp_path / "inventory.xlsx"
    wb.save(path)
    return path
