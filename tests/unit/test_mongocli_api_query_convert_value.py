"""Unit tests for typed value conversion."""

import pytest

from mongocli.api.query.convert_value import convert_value
from mongocli.api.query.FieldType import FieldType
from mongocli.api.query.QueryInputError import QueryInputError


class TestConvertValue:
    def test_string_unchanged(self):
        assert convert_value("  John ", FieldType.STRING) == "  John "

    @pytest.mark.parametrize(("raw", "expected"), [("30", 30), ("-4", -4), ("+7", 7), (" 12 ", 12)])
    def test_integral_number_is_int(self, raw, expected):
        value = convert_value(raw, FieldType.NUMBER)
        assert value == expected
        assert isinstance(value, int)

    @pytest.mark.parametrize(("raw", "expected"), [("2.5", 2.5), ("1e3", 1000.0), ("-0.25", -0.25)])
    def test_fractional_number_is_float(self, raw, expected):
        value = convert_value(raw, FieldType.NUMBER)
        assert value == expected
        assert isinstance(value, float)

    @pytest.mark.parametrize("raw", ["abc", "", "nan", "inf", "1e400", "12abc"])
    def test_invalid_number_raises(self, raw):
        with pytest.raises(QueryInputError, match="Invalid number"):
            convert_value(raw, FieldType.NUMBER)

    @pytest.mark.parametrize(("raw", "expected"), [("true", True), ("TRUE", True), (" True ", True), ("yes", False), ("1", False), ("false", False)])
    def test_boolean(self, raw, expected):
        assert convert_value(raw, FieldType.BOOLEAN) is expected

    def test_json_parsed(self):
        assert convert_value('{"city": "Oslo", "zip": [1, 2]}', FieldType.JSON) == {"city": "Oslo", "zip": [1, 2]}

    def test_invalid_json_falls_back_to_string_with_warning(self):
        warnings = []
        assert convert_value("{oops", FieldType.JSON, warn=warnings.append) == "{oops"
        assert len(warnings) == 1
        assert "storing as string" in warnings[0]

    def test_invalid_json_without_warn_callback(self):
        assert convert_value("{oops", FieldType.JSON) == "{oops"
