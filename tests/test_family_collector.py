import pytest

from tabular import SheetTable
from tabular.exceptions import NotFoundError, RowOutOfRangeError


def _texts(slots):
    return [slot.string for slot in slots]


class TestArray:
    def test_compact_stops_at_blank(self, family_table):
        slots = family_table.array("Item", 1)
        assert _texts(slots) == ["a", "b"]
        assert [(s.row, s.col) for s in slots] == [(1, 1), (1, 2)]

    def test_stops_when_column_is_missing(self, family_table):
        assert _texts(family_table.array("Item", 2)) == ["c", "d", "e"]

    def test_non_compact_keeps_blanks(self, family_table):
        slots = family_table.array("Item", 1, compact=False)
        assert _texts(slots) == ["a", "b", ""]
        assert slots[-1].is_empty

    def test_blank_first_member_gives_empty_list(self, family_table):
        assert family_table.array("Item", 3) == []

    def test_matching_mode(self, family_table):
        assert _texts(family_table.array("item", 2)) == ["c", "d", "e"]
        with pytest.raises(NotFoundError):
            family_table.array("item", 2, exact=True)

    def test_missing_family(self, family_table):
        with pytest.raises(NotFoundError) as exc:
            family_table.array("Missing", 1)
        assert "[Missing 1]" in str(exc.value)

    def test_empty_table_has_no_family(self):
        table = SheetTable.from_rows([])
        with pytest.raises(NotFoundError):
            table.array("Item", 0)
        with pytest.raises(NotFoundError):
            table.array2("Grid", 0)

    def test_row_out_of_range_is_not_absorbed(self, family_table):
        with pytest.raises(RowOutOfRangeError):
            family_table.array("Item", 99)

    def test_custom_separator(self):
        table = SheetTable.from_rows([["Tag_1", "Tag_2", "Tag 3"], ["x", "y", "z"]])
        assert _texts(table.array("Tag", 1, separator="_")) == ["x", "y"]

    def test_header_gap_ends_family(self):
        table = SheetTable.from_rows([["Item 1", "Item 2", "Item 4"], ["a", "b", "d"]])
        assert _texts(table.array("Item", 1)) == ["a", "b"]


class TestArray2:
    def test_nested_order(self, family_table):
        groups = family_table.array2("Grid", 1)
        assert [_texts(g) for g in groups] == [["g11", "g12"], ["g21"]]
        assert [[s.col for s in g] for g in groups] == [[4, 5], [6]]

    def test_inner_gap_ends_inner_family(self, family_table):
        groups = family_table.array2("Grid", 2)
        assert [_texts(g) for g in groups] == [["h11"], ["h21"]]

    def test_empty_inner_family_ends_outer(self, family_table):
        assert family_table.array2("Grid", 3) == []

    def test_non_compact(self, family_table):
        groups = family_table.array2("Grid", 3, compact=False)
        assert [_texts(g) for g in groups] == [["", "k12"], [""]]

    def test_missing_family(self, family_table):
        with pytest.raises(NotFoundError) as exc:
            family_table.array2("Nope", 1)
        assert "[Nope 1.1]" in str(exc.value)

    def test_custom_separators(self):
        table = SheetTable.from_rows(
            [["M-1/1", "M-1/2", "M-2/1", "M-3/2"], ["a", "b", "c", "z"]]
        )
        groups = table.array2("M", 1, outer_separator="-", inner_separator="/")
        assert [_texts(g) for g in groups] == [["a", "b"], ["c"]]
