"""Tests for loading themes from JSON."""

import json
from decimal import Decimal

import pytest

from stylesmith.errors import GradientError, ThemeLoadError
from stylesmith.model.color import Hsla, Rgb, Rgba, Var
from stylesmith.model.theme import Theme
from stylesmith.model.theme_mode import ThemeMode
from stylesmith.model.value import CssLiteral, Float, Integer, Nested
from stylesmith.themes import load_theme, loads_theme, theme_from_dict

LIGHT = ThemeMode.LIGHT
DARK = ThemeMode.DARK


def _gradient_palette(mode: str | None = "rgb") -> dict:
    gradient: dict = {"points": {"0": "#000000", "1": "#FFFFFF"}}
    if mode is not None:
        gradient["mode"] = mode
    return {"gradient": gradient}


# ---------------------------------------------------------------------------
# Palettes
# ---------------------------------------------------------------------------


class TestPalettes:
    def test_gradient_is_sampled_into_selectors(self):
        theme = theme_from_dict({"palettes": {"brand": _gradient_palette()}})
        palette = theme.get_palette("brand")
        assert list(palette.selectors()) == [
            "000", "010", "020", "030", "040", "050", "060", "070", "080", "090", "100",
        ]
        assert palette.select("000", LIGHT) == Rgba(0, 0, 0, 255)
        assert palette.select("050", LIGHT) == Rgba(128, 128, 128, 255)
        assert palette.select("100", LIGHT) == Rgba(255, 255, 255, 255)

    def test_hsl_gradient(self):
        theme = theme_from_dict({"palettes": {"brand": _gradient_palette("hsl")}})
        assert theme.get_palette("brand").select("000", LIGHT) == Hsla(0, 0, 0, 100)

    def test_gradient_without_mode_keeps_colors(self):
        theme = theme_from_dict({"palettes": {"brand": _gradient_palette(None)}})
        assert theme.get_palette("brand").select("000", LIGHT) == Rgb(0, 0, 0)

    def test_gradient_needs_boundaries(self):
        data = {"palettes": {"brand": {"gradient": {"points": {"0": "#000000"}}}}}
        with pytest.raises(GradientError):
            theme_from_dict(data)

    def test_unknown_gradient_mode(self):
        with pytest.raises(ThemeLoadError):
            theme_from_dict({"palettes": {"brand": _gradient_palette("lab")}})

    def test_unconvertible_gradient(self):
        data = {
            "palettes": {
                "brand": {"gradient": {"points": {"0": "red", "1": "blue"}, "mode": "hsl"}}
            }
        }
        with pytest.raises(ThemeLoadError):
            theme_from_dict(data)

    def test_selectors(self):
        data = {
            "palettes": {
                "background": {
                    "selectors": {
                        "ink": "#111111",
                        "body": {"dark": "#000000", "light": "#FFFFFF"},
                    }
                }
            }
        }
        palette = theme_from_dict(data).get_palette("background")
        assert palette.select("ink", DARK) == Rgb(17, 17, 17)
        assert palette.select("body", DARK) == Rgb(0, 0, 0)
        assert palette.select("body", LIGHT) == Rgb(255, 255, 255)

    def test_palette_var_references_are_rewritten(self):
        data = {
            "prefix": "joy",
            "palettes": {
                "brand": _gradient_palette(),
                "accent": {"selectors": {"main": {"var": "brand.050", "fallback": "#000000"}}},
            },
        }
        main = theme_from_dict(data).get_palette("accent").select("main", LIGHT)
        assert main == Var("--joy-palette-brand-050", Rgb(0, 0, 0))

    def test_other_vars_are_kept(self):
        data = {"palettes": {"accent": {"selectors": {"main": {"var": "--custom"}}}}}
        assert theme_from_dict(data).get_palette("accent").select("main", LIGHT) == Var(
            "--custom"
        )

    def test_explicit_selector_overrides_sample(self):
        palette = _gradient_palette()
        palette["selectors"] = {"050": "#FF0000"}
        theme = theme_from_dict({"palettes": {"brand": palette}})
        assert theme.get_palette("brand").select("050", LIGHT) == Rgb(255, 0, 0)


# ---------------------------------------------------------------------------
# Typography, classes, prefix
# ---------------------------------------------------------------------------


class TestTheme:
    def test_prefix(self):
        assert theme_from_dict({"palettes": {}}).prefix == "happy"
        assert theme_from_dict({"prefix": "joy", "palettes": {}}).prefix == "joy"

    def test_typography_values(self):
        data = {
            "palettes": {},
            "typography": {
                "h1": {
                    "fontSize": "2rem",
                    "fontWeight": 700,
                    "lineHeight": 1.2,
                    "italic": True,
                    "&:hover": {"color": "red"},
                }
            },
        }
        h1 = theme_from_dict(data).typography.scale("h1")
        assert h1["font-size"] == CssLiteral("2rem")
        assert h1["font-weight"] == Integer(700)
        assert h1["line-height"] == Float(Decimal("1.2"))
        assert h1["italic"] == CssLiteral("true")
        assert isinstance(h1["&:hover"], Nested)

    def test_classes(self):
        theme = theme_from_dict({"palettes": {}, "classes": {"sheet": ["bg", "fg"]}})
        assert theme.has_class_var("sheet", "bg")
        assert theme.has_class_var("sheet", "fg")

    def test_classes_must_be_lists(self):
        with pytest.raises(ThemeLoadError):
            theme_from_dict({"palettes": {}, "classes": {"sheet": "bg"}})


# ---------------------------------------------------------------------------
# Text and files
# ---------------------------------------------------------------------------


class TestLoading:
    def test_invalid_json(self):
        with pytest.raises(ThemeLoadError) as exc_info:
            loads_theme("{not json")
        assert isinstance(exc_info.value.cause, json.JSONDecodeError)

    def test_requires_palettes(self):
        with pytest.raises(ThemeLoadError):
            loads_theme("{}")
        with pytest.raises(ThemeLoadError):
            loads_theme("[]")

    def test_bad_color(self):
        with pytest.raises(ThemeLoadError):
            loads_theme('{"palettes": {"a": {"selectors": {"b": 12}}}}')

    def test_out_of_range_channel(self):
        data = {"palettes": {"a": {"selectors": {"b": {"r": 300, "g": 0, "b": 0}}}}}
        with pytest.raises(ThemeLoadError):
            theme_from_dict(data)

    def test_load_file(self, tmp_path):
        path = tmp_path / "theme.json"
        path.write_text(json.dumps({"prefix": "file", "palettes": {}}))
        assert load_theme(path).prefix == "file"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ThemeLoadError):
            load_theme(tmp_path / "nope.json")

    def test_default_theme(self):
        theme = Theme.default()
        assert theme.prefix == "happy"
        names = [name for name, _ in theme.palettes()]
        assert {"background", "text", "success", "common"} <= set(names)
        success = theme.get_palette("success")
        assert success.select("000", LIGHT) == Hsla(120, 60, 96, 100)
        assert success.select("050", LIGHT) == Hsla(120, 60, 40, 100)
        assert success.select("outlinedBorder", LIGHT) == Var("--happy-palette-success-030")
        assert theme.has_class_var("sheet", "color")
        assert theme.typography.at("h1") is not None
