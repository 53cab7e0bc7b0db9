"""Tests for case conversion and value dispatch (core/text.py)."""

from __future__ import annotations

import pytest

from snippet_kit.core.models import CaseOption, NumberValue, TextValue
from snippet_kit.core.text import DEFAULT_CASE, as_value, format_string, process_value
from snippet_kit.exceptions import UnsupportedValueError


# ---------------------------------------------------------------------------
# format_string
# ---------------------------------------------------------------------------

class TestFormatString:
    def test_lower(self) -> None:
        assert format_string("hello", CaseOption.LOWER) == "hello"

    def test_upper(self) -> None:
        assert format_string("hello", CaseOption.UPPER) == "HELLO"

    def test_default_is_upper(self) -> None:
        assert DEFAULT_CASE is CaseOption.UPPER
        assert format_string("hello") == "HELLO"

    def test_lower_on_mixed_case(self) -> None:
        assert format_string("HeLLo World", CaseOption.LOWER) == "hello world"

    def test_from_flag_round_trip(self) -> None:
        assert format_string("Hi", CaseOption.from_flag(False)) == "hi"
        assert format_string("Hi", CaseOption.from_flag(None)) == "HI"

    def test_empty_string(self) -> None:
        assert format_string("") == ""


# ---------------------------------------------------------------------------
# process_value
# ---------------------------------------------------------------------------

class TestProcessValue:
    def test_text_returns_length(self) -> None:
        assert process_value(TextValue("hello")) == 5

    def test_empty_text(self) -> None:
        assert process_value(TextValue("")) == 0

    def test_number_doubles(self) -> None:
        assert process_value(NumberValue(10)) == 20

    def test_int_stays_int(self) -> None:
        assert isinstance(process_value(NumberValue(10)), int)

    def test_float_keeps_precision(self) -> None:
        result = process_value(NumberValue(1.25))
        assert isinstance(result, float)
        assert result == 2.5

    def test_negative_keeps_sign(self) -> None:
        assert process_value(NumberValue(-3)) == -6

    def test_other_type_raises(self) -> None:
        with pytest.raises(UnsupportedValueError):
            process_value("hello")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# as_value
# ---------------------------------------------------------------------------

class TestAsValue:
    def test_str(self) -> None:
        assert as_value("hi") == TextValue("hi")

    def test_int(self) -> None:
        assert as_value(3) == NumberValue(3)

    def test_float(self) -> None:
        assert as_value(0.5) == NumberValue(0.5)

    @pytest.mark.parametrize("raw", [True, None, [1], b"x"])
    def test_rejects_other_types(self, raw: object) -> None:
        with pytest.raises(UnsupportedValueError) as exc_info:
            as_value(raw)
        assert exc_info.value.hint is not None
