from datetime import datetime

import pytest

from tabular.exceptions import NotConvertibleError
from tabular.models import CellValue, Slot


def _slot(value) -> Slot:
    return Slot(row=0, col=0, content=CellValue.from_native(value))


class TestSlotText:
    def test_text_is_trimmed(self):
        assert _slot("  hi ").text() == "hi"
        assert _slot(12).text() == "12"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_is_never_text(self, value):
        with pytest.raises(NotConvertibleError) as exc:
            _slot(value).text()
        assert exc.value.target == "text"

    def test_is_empty_uses_untrimmed_form(self):
        assert _slot(None).is_empty
        assert _slot("").is_empty
        assert not _slot("  ").is_empty
        assert not _slot(0).is_empty


class TestSlotInt:
    def test_blank_uses_default(self):
        assert _slot(None).int(if_empty=0) == 0
        assert _slot("  ").int(if_empty=-1) == -1

    def test_text_parsing(self):
        assert _slot("42").int() == 42
        assert _slot(" 42 ").int() == 42
        assert _slot("+7").int() == 7
        assert _slot("-3").int() == -3

    def test_native_integer_is_verbatim(self):
        big = 10 ** 20 + 1
        assert _slot(big).int() == big

    @pytest.mark.parametrize("value", ["abc", "4 2", "1_000", "3.0", "12abc", "0x10"])
    def test_rejects_non_integers(self, value):
        with pytest.raises(NotConvertibleError) as exc:
            _slot(value).int()
        assert exc.value.source == value
        assert exc.value.target == "Int"
        assert "Cannot convert" in str(exc.value)

    def test_blank_without_default_fails(self):
        with pytest.raises(NotConvertibleError):
            _slot(None).int()

    def test_real_cell_goes_through_text(self):
        with pytest.raises(NotConvertibleError):
            _slot(3.0).int()


class TestSlotDouble:
    def test_native_values(self):
        assert _slot(2.5).double() == 2.5
        widened = _slot(3).double()
        assert widened == 3.0
        assert isinstance(widened, float)

    def test_text_parsing(self):
        assert _slot("1e3").double() == 1000.0
        assert _slot(".5").double() == 0.5
        assert _slot(" -2.25 ").double() == -2.25
        assert _slot("7").double() == 7.0

    def test_blank_uses_default(self):
        assert _slot("").double(if_empty=1.5) == 1.5

    @pytest.mark.parametrize("value", ["abc", "nan", "inf", "1.2.3", "1,5"])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(NotConvertibleError) as exc:
            _slot(value).double()
        assert exc.value.target == "Double"


class TestSlotDate:
    def test_native_date(self):
        when = datetime(2024, 5, 1, 9, 30)
        assert _slot(when).date() == when

    def test_iso_text(self):
        assert _slot(" 2024-05-01 ").date() == datetime(2024, 5, 1)

    def test_blank_default_and_failure(self):
        fallback = datetime(2000, 1, 1)
        assert _slot(None).date(if_empty=fallback) == fallback
        with pytest.raises(NotConvertibleError) as exc:
            _slot("yesterday").date()
        assert exc.value.target == "date"
