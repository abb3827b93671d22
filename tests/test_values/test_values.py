"""Tests for value normalization."""

import pytest

from domstylesheet.errors import InvalidValueError
from domstylesheet.model import Declaration
from domstylesheet.values import (
    ToCSSConvertible,
    ValueKind,
    classify,
    format_scalar,
    hyphenate,
    is_nested,
    resolve_value,
)


class _Length:
    def __init__(self, amount):
        self.amount = amount

    def to_css(self):
        return self.amount


class _Nested:
    def to_css(self):
        return _Length(1)


# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------


class TestClassify:
    @pytest.mark.parametrize("value", ["red", 10, 1.5, ""])
    def test_scalars(self, value):
        assert classify(value) is ValueKind.SCALAR

    def test_convertible(self):
        assert classify(_Length(3)) is ValueKind.CONVERTIBLE
        assert isinstance(_Length(3), ToCSSConvertible)

    @pytest.mark.parametrize("value", [[], ["a"], (1, 2)])
    def test_arrays(self, value):
        assert classify(value) is ValueKind.ARRAY

    def test_nested(self):
        assert classify({"color": "red"}) is ValueKind.NESTED

    @pytest.mark.parametrize("value", [None, True, False, lambda: "red", {1, 2}, object()])
    def test_unsupported(self, value):
        with pytest.raises(InvalidValueError) as exc_info:
            classify(value, "color")
        assert exc_info.value.prop == "color"


# ---------------------------------------------------------------------------
# hyphenate / format_scalar
# ---------------------------------------------------------------------------


class TestHyphenate:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("color", "color"),
            ("fontSize", "font-size"),
            ("borderTopLeftRadius", "border-top-left-radius"),
            ("MozAppearance", "-moz-appearance"),
        ],
    )
    def test_hyphenate(self, name, expected):
        assert hyphenate(name) == expected


class TestFormatScalar:
    def test_string_passes_through(self):
        assert format_scalar("12pt") == "12pt"

    def test_int_gets_unit(self):
        assert format_scalar(10) == "10px"

    def test_zero_gets_unit(self):
        assert format_scalar(0) == "0px"

    def test_integral_float_drops_fraction(self):
        assert format_scalar(10.0) == "10px"

    def test_fractional_float(self):
        assert format_scalar(1.5, "em") == "1.5em"


# ---------------------------------------------------------------------------
# resolve_value
# ---------------------------------------------------------------------------


class TestResolveValue:
    def test_scalar(self):
        assert resolve_value("fontSize", 12) == [Declaration("font-size", "12px")]

    def test_array_in_order(self):
        assert resolve_value("color", ["red", _Length("white")]) == [
            Declaration("color", "red"),
            Declaration("color", "white"),
        ]

    def test_empty_array(self):
        assert resolve_value("color", []) == [Declaration("color", "")]

    def test_convertible_number_gets_unit(self):
        assert resolve_value("width", _Length(42)) == [Declaration("width", "42px")]

    def test_converted_result_is_not_converted_again(self):
        with pytest.raises(InvalidValueError):
            resolve_value("width", _Nested())

    def test_nested_array_rejected(self):
        with pytest.raises(InvalidValueError):
            resolve_value("width", [[1, 2]])

    def test_nested_spec_rejected(self):
        with pytest.raises(InvalidValueError):
            resolve_value("hover", {"color": "red"})

    def test_declaration_str(self):
        assert str(Declaration("color", "")) == "color:"


# ---------------------------------------------------------------------------
# Malformed convertibles and numbers
# ---------------------------------------------------------------------------


class _Shouty(str):
    def to_css(self):
        return self.upper()


class _ThemeRef(dict):
    def to_css(self):
        return self["value"]


class TestMalformedValues:
    def test_class_instead_of_instance(self):
        with pytest.raises(InvalidValueError) as exc_info:
            resolve_value("width", _Length)
        assert exc_info.value.value is _Length

    def test_class_inside_array(self):
        with pytest.raises(InvalidValueError):
            resolve_value("width", [1, _Length])

    def test_non_callable_to_css(self):
        class Broken:
            to_css = "red"

        with pytest.raises(InvalidValueError):
            classify(Broken(), "color")

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_numbers(self, value):
        with pytest.raises(InvalidValueError):
            resolve_value("width", value)

    def test_non_finite_conversion_result(self):
        with pytest.raises(InvalidValueError):
            resolve_value("width", _Length(float("nan")))


class TestConversionPrecedence:
    def test_str_subclass_is_converted(self):
        assert classify(_Shouty("red")) is ValueKind.CONVERTIBLE
        assert resolve_value("color", _Shouty("red")) == [Declaration("color", "RED")]

    def test_mapping_with_to_css_is_a_leaf(self):
        ref = _ThemeRef(value="blue")
        assert classify(ref) is ValueKind.CONVERTIBLE
        assert not is_nested(ref)
        assert is_nested({"color": "red"})
        assert resolve_value("color", ref) == [Declaration("color", "blue")]
