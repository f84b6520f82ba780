"""Tests for Style and the style value union."""

from decimal import Decimal

import pytest

from stylesmith.model.color import Hex, Named
from stylesmith.model.style import Style
from stylesmith.model.value import (
    Callback,
    ClassVar,
    ColorValue,
    CssLiteral,
    Dimension,
    Float,
    Integer,
    Nested,
    Percent,
    QuotedString,
    ThemeToken,
    class_var,
    to_value,
)


# ---------------------------------------------------------------------------
# Value coercion
# ---------------------------------------------------------------------------


class TestToValue:
    def test_numbers(self):
        assert to_value(3) == Integer(3)
        assert to_value(1.5) == Float(Decimal("1.5"))

    def test_bool(self):
        assert to_value(True) == CssLiteral("true")
        assert to_value(False) == CssLiteral("false")

    def test_palette_selector_string(self):
        assert to_value("background.body") == ThemeToken("background", "body")
        assert to_value("success.050") == ThemeToken("success", "050")

    def test_string_with_whitespace_is_literal(self):
        assert to_value("1px solid red") == CssLiteral("1px solid red")

    def test_other_strings_are_parsed(self):
        assert to_value("10px") == Dimension(10, "px")
        assert to_value("red") == ColorValue(Named("red"))
        assert to_value("#0f0f0f") == ColorValue(Hex(0x0F0F0F))

    def test_color(self):
        assert to_value(Named("red")) == ColorValue(Named("red"))

    def test_mapping_becomes_nested(self):
        value = to_value({"color": "red"})
        assert isinstance(value, Nested)
        assert value.style == Style(color="red")

    def test_callable_becomes_callback(self):
        assert isinstance(to_value(lambda theme: "1px"), Callback)

    def test_values_pass_through(self):
        token = ThemeToken("a", "b")
        assert to_value(token) is token

    def test_unsupported(self):
        with pytest.raises(TypeError):
            to_value(None)

    def test_class_var_coerces_fallback(self):
        assert class_var("sheet", "bg", "10px") == ClassVar("sheet", "bg", Dimension(10, "px"))
        assert class_var("sheet", "bg").fallback is None


class TestValueCss:
    def test_numbers(self):
        assert Integer(5).to_css() == "5"
        assert Float(2.0).to_css() == "2"
        assert Float(Decimal("0.125")).to_css() == "0.125"

    def test_percent(self):
        assert Percent(0.15).to_css() == "15%"
        assert Percent(Decimal("-0.153")).to_css() == "-15.3%"

    def test_percent_from_float_matches_decimal(self):
        assert Percent(0.15) == Percent(Decimal("0.15"))

    def test_dimension(self):
        assert Dimension(5, "px").to_css() == "5px"
        assert Dimension(Decimal("1.50"), "rem").to_css() == "1.5rem"
        assert Dimension(1.5, "em").is_float
        assert not Dimension(2, "em").is_float

    def test_strings(self):
        assert CssLiteral("inherit").to_css() == "inherit"
        assert QuotedString("hello").to_css() == '"hello"'

    def test_unresolved_values_have_no_css(self):
        assert ThemeToken("a", "b").to_css() is None
        assert ClassVar("a", "b").to_css() is None


class TestCallback:
    def test_identity_equality(self):
        def fn(theme):
            return "1px"

        first = Callback(fn)
        second = Callback(fn)
        assert first == first
        assert first != second
        assert len({first, second}) == 2

    def test_evaluate_coerces_result(self):
        seen = []

        def fn(theme):
            seen.append(theme)
            return "2px"

        assert Callback(fn).evaluate("theme") == Dimension(2, "px")
        assert seen == ["theme"]


# ---------------------------------------------------------------------------
# Style
# ---------------------------------------------------------------------------


class TestInsert:
    def test_shorthand_expands_to_two_keys(self):
        style = Style(pX="10px")
        assert list(style) == ["margin-left", "margin-right"]
        assert style["margin-left"] == Dimension(10, "px")
        assert style["margin-right"] == style["margin-left"]

    def test_single_shorthand(self):
        style = Style(bgcolor="background.body")
        assert list(style) == ["background-color"]

    def test_camel_case_is_kebab_cased(self):
        style = Style(borderTopWidth=1)
        assert "border-top-width" in style

    def test_selector_keys_are_untouched(self):
        style = Style({"&:hover": {"color": "red"}, "[data-Open=true]": {"p": 1}})
        assert list(style) == ["&:hover", "[data-Open=true]"]
        assert isinstance(style["&:hover"], Nested)

    def test_insertion_order(self):
        style = Style()
        style.insert("z-index", 1)
        style.insert("color", "red")
        style.insert("p", "2px")
        assert list(style.properties()) == ["z-index", "color", "padding"]

    def test_reinsert_replaces_value(self):
        style = Style(color="red")
        style.insert("color", "blue")
        assert style["color"] == ColorValue(Named("blue"))
        assert len(style) == 1

    def test_accepts_another_style(self):
        assert Style(Style(p=1)) == Style(p=1)


class TestMerge:
    def test_nested_rules_are_combined(self):
        left = Style({"&:hover": {"color": "red"}})
        right = Style({"&:hover": {"background": "blue"}})
        merged = left.merge(right)
        assert list(merged) == ["&:hover"]
        hover = merged["&:hover"].style
        assert hover["color"] == ColorValue(Named("red"))
        assert hover["background"] == ColorValue(Named("blue"))

    def test_left_value_wins(self):
        merged = Style(color="red").merge(Style(color="blue"))
        assert merged["color"] == ColorValue(Named("red"))

    def test_absent_keys_are_adopted_in_order(self):
        merged = Style(color="red").merge(Style(margin=0, padding=1))
        assert list(merged) == ["color", "margin", "padding"]

    def test_no_override_when_only_one_side_is_nested(self):
        left = Style({"a": {"color": "red"}})
        assert isinstance(left.merge(Style(a="1px"))["a"], Nested)
        right = Style({"a": {"color": "red"}})
        assert Style(a="1px").merge(right)["a"] == Dimension(1, "px")

    def test_inputs_are_untouched(self):
        left = Style({"&:hover": {"color": "red"}})
        right = Style({"&:hover": {"background": "blue"}}, margin=0)
        left.merge(right)
        assert list(left) == ["&:hover"]
        assert list(left["&:hover"].style) == ["color"]

    def test_deep_merge(self):
        left = Style({"md": {"&:hover": {"color": "red"}}})
        right = Style({"md": {"&:hover": {"margin": 0}, "padding": 1}})
        merged = left.merge(right)
        md = merged["md"].style
        assert list(md) == ["&:hover", "padding"]
        assert list(md["&:hover"].style) == ["color", "margin"]
