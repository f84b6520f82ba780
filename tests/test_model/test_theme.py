"""Tests for theme building blocks: modes, palettes, breakpoints, typography."""

import pytest

from stylesmith.model.breakpoint import Breakpoints
from stylesmith.model.color import Rgb
from stylesmith.model.palette import Palette
from stylesmith.model.style import Style
from stylesmith.model.theme import Theme
from stylesmith.model.theme_mode import ThemeMode
from stylesmith.model.typography import Size, TypographyLevel, TypographyScale

BLACK = Rgb(0, 0, 0)
WHITE = Rgb(255, 255, 255)


# ---------------------------------------------------------------------------
# ThemeMode
# ---------------------------------------------------------------------------


class TestThemeMode:
    def test_resolve_keeps_concrete_modes(self):
        assert ThemeMode.DARK.resolve() is ThemeMode.DARK
        assert ThemeMode.LIGHT.resolve(lambda: ThemeMode.DARK) is ThemeMode.LIGHT

    def test_system_defaults_to_light(self):
        assert ThemeMode.SYSTEM.resolve() is ThemeMode.LIGHT

    def test_system_uses_detector(self):
        assert ThemeMode.SYSTEM.resolve(lambda: ThemeMode.DARK) is ThemeMode.DARK

    def test_parse(self):
        assert ThemeMode.parse("Dark") is ThemeMode.DARK
        assert ThemeMode.parse(ThemeMode.LIGHT) is ThemeMode.LIGHT
        with pytest.raises(ValueError, match="unknown theme mode"):
            ThemeMode.parse("dusk")


# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------


class TestPalette:
    @pytest.fixture()
    def palette(self) -> Palette:
        palette = Palette()
        palette.insert_constant("ink", BLACK)
        palette.insert_by_mode("body", dark=BLACK, light=WHITE)
        return palette

    def test_constant(self, palette):
        assert palette.select("ink", ThemeMode.LIGHT) == BLACK
        assert palette.select("ink", ThemeMode.DARK) == BLACK

    def test_by_mode(self, palette):
        assert palette.select("body", ThemeMode.LIGHT) == WHITE
        assert palette.select("body", ThemeMode.DARK) == BLACK

    def test_missing_selector(self, palette):
        assert palette.select("nope", ThemeMode.LIGHT) is None

    def test_system_must_be_resolved(self, palette):
        with pytest.raises(ValueError):
            palette.select("ink", ThemeMode.SYSTEM)

    def test_selectors_keep_order(self, palette):
        assert list(palette.selectors()) == ["ink", "body"]
        assert "body" in palette
        assert len(palette) == 2


# ---------------------------------------------------------------------------
# Breakpoints
# ---------------------------------------------------------------------------


class TestBreakpoints:
    def test_defaults(self):
        bps = Breakpoints()
        assert [(bp.abbrev, bp.width) for bp in bps] == [
            ("xs", 0),
            ("sm", 600),
            ("md", 768),
            ("lg", 992),
            ("xl", 1200),
        ]

    def test_media_query(self):
        assert Breakpoints().get("md").media_query == "@media (min-width: 768px)"

    def test_set_keeps_width_order(self):
        bps = Breakpoints.empty()
        bps.set("wide", 1000)
        bps.set("narrow", 300)
        assert [bp.abbrev for bp in bps] == ["narrow", "wide"]

    def test_set_updates_existing(self):
        bps = Breakpoints()
        bps.set("md", 800)
        assert bps.get("md").width == 800
        assert len(bps) == 5

    def test_negative_width(self):
        with pytest.raises(ValueError):
            Breakpoints().set("neg", -1)


# ---------------------------------------------------------------------------
# Typography
# ---------------------------------------------------------------------------


class TestTypographyLevel:
    @pytest.mark.parametrize("text", ["h1", "h4", "title-lg", "body-xs", "*", "caption"])
    def test_round_trip(self, text):
        assert str(TypographyLevel.parse(text)) == text

    def test_sized_levels(self):
        level = TypographyLevel.parse("title-lg")
        assert level.kind == "title"
        assert level.size is Size.LG

    def test_unknown_size_is_custom(self):
        assert TypographyLevel.parse("title-huge").kind == "custom"

    def test_default(self):
        assert str(TypographyLevel.default()) == "body-md"


class TestTypographyScale:
    def test_at_merges_star_level(self):
        scale = TypographyScale()
        scale.insert("*", Style(fontWeight=400, fontFamily="serif"))
        scale.insert("h1", Style(fontWeight=700))
        style = scale.at("h1")
        assert list(style) == ["font-weight", "font-family"]
        assert style["font-weight"].to_css() == "700"

    def test_at_without_star(self):
        scale = TypographyScale()
        scale.insert("h2", Style(fontSize="2rem"))
        assert scale.at("h2") == Style(fontSize="2rem")

    def test_missing_level(self):
        assert TypographyScale().at("h3") is None


# ---------------------------------------------------------------------------
# Theme
# ---------------------------------------------------------------------------


class TestTheme:
    def test_variable_names(self):
        theme = Theme()
        assert theme.palette_var("background", "body") == "--happy-palette-background-body"
        assert theme.palette_var("success", "outlinedBorder") == (
            "--happy-palette-success-outlined-border"
        )
        assert theme.class_var("sheet", "bgColor") == "--happy-sheet-bg-color"

    def test_system_class(self):
        assert Theme("joy").system_class() == ".joy-system"

    def test_palette_get_or_create(self):
        theme = Theme()
        assert theme.get_palette("brand") is None
        created = theme.palette("brand")
        assert theme.palette("brand") is created
        assert [name for name, _ in theme.palettes()] == ["brand"]

    def test_class_var_registry(self):
        theme = Theme()
        theme.declare_class_var("sheet", "bg")
        theme.declare_class_var("sheet", "bg")
        assert theme.has_class_var("sheet", "bg")
        assert not theme.has_class_var("sheet", "fg")
        assert list(theme.class_vars()) == [("sheet", ["bg"])]

    def test_default_is_shared(self):
        assert Theme.default() is Theme.default()

    def test_copy_is_independent(self):
        original = Theme()
        original.palette("brand").insert_constant("main", BLACK)
        clone = original.copy()
        clone.palette("brand").insert_constant("alt", WHITE)
        assert "alt" not in original.palette("brand")
        assert clone != original
