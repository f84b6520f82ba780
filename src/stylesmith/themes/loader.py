"""Load themes from JSON definitions."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from stylesmith.errors import ColorError, ThemeLoadError
from stylesmith.model.color import Color, Var, color_from_json
from stylesmith.model.gradient import Gradient
from stylesmith.model.palette import Palette
from stylesmith.model.style import Style
from stylesmith.model.theme import Theme
from stylesmith.model.value import (
    PALETTE_SELECTOR_RE,
    CssLiteral,
    Float,
    Integer,
    Nested,
    StyleValue,
)

logger = logging.getLogger("stylesmith.themes")

DEFAULT_THEME_PATH = Path(__file__).parent / "default_theme.json"

# Gradients are sampled at 0.0, 0.1 ... 1.0 into selectors "000" ... "100".
GRADIENT_SAMPLES = 10


def load_default_theme() -> Theme:
    return load_theme(DEFAULT_THEME_PATH)


def load_theme(path: str | Path) -> Theme:
    """Read and build a theme from a JSON file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ThemeLoadError(f"could not read theme file {path}: {exc}", cause=exc) from exc
    return loads_theme(text)


def loads_theme(text: str) -> Theme:
    """Build a theme from JSON text."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ThemeLoadError(f"invalid theme JSON: {exc}", cause=exc) from exc
    return theme_from_dict(data)


def theme_from_dict(data: Mapping[str, Any]) -> Theme:
    """Build a theme from its decoded JSON structure.

    Palettes are built in definition order.  A gradient palette contributes
    the sampled selectors ``"000"`` through ``"100"`` before any explicit
    selectors, which may then override them.
    """
    if not isinstance(data, Mapping):
        raise ThemeLoadError("theme definition must be a JSON object")
    palettes = data.get("palettes")
    if not isinstance(palettes, Mapping):
        raise ThemeLoadError("theme definition requires a 'palettes' object")

    prefix = data.get("prefix")
    theme = Theme(prefix) if prefix is not None else Theme()

    for level, mapping in (data.get("typography") or {}).items():
        if not isinstance(mapping, Mapping):
            raise ThemeLoadError(f"typography level {level!r} must be an object")
        theme.typography.insert(level, _style_from_json(mapping))

    for name, definition in palettes.items():
        theme.insert_palette(name, _palette_from_json(name, definition, theme))

    for class_name, names in (data.get("classes") or {}).items():
        if isinstance(names, str) or not isinstance(names, list):
            raise ThemeLoadError(f"class {class_name!r} must list its variable names")
        for var in names:
            theme.declare_class_var(class_name, str(var))

    logger.info(
        "Loaded theme: prefix=%s palettes=%d levels=%d",
        theme.prefix,
        sum(1 for _ in theme.palettes()),
        len(theme.typography),
    )
    return theme


# ---------------------------------------------------------------------------
# Palettes
# ---------------------------------------------------------------------------


def _palette_from_json(name: str, definition: Any, theme: Theme) -> Palette:
    if not isinstance(definition, Mapping):
        raise ThemeLoadError(f"palette {name!r} must be an object")
    palette = Palette()

    gradient_def = definition.get("gradient")
    if gradient_def is not None:
        gradient = _gradient_from_json(name, gradient_def)
        for i in range(GRADIENT_SAMPLES + 1):
            step = i * (100 // GRADIENT_SAMPLES)
            palette.insert_constant(f"{step:03}", gradient.get(i / GRADIENT_SAMPLES))
        logger.debug("Palette %s: sampled %d gradient colors", name, GRADIENT_SAMPLES + 1)

    for selector, color_def in (definition.get("selectors") or {}).items():
        if isinstance(color_def, Mapping) and set(color_def) == {"dark", "light"}:
            palette.insert_by_mode(
                selector,
                dark=_adjust_color(_color(color_def["dark"]), theme),
                light=_adjust_color(_color(color_def["light"]), theme),
            )
        else:
            palette.insert_constant(selector, _adjust_color(_color(color_def), theme))
    return palette


def _gradient_from_json(name: str, definition: Any) -> Gradient:
    if not isinstance(definition, Mapping) or "points" not in definition:
        raise ThemeLoadError(f"gradient of palette {name!r} requires 'points'")
    gradient = Gradient.from_json(definition["points"])

    mode = definition.get("mode")
    try:
        if mode == "hsl":
            gradient = gradient.map_colors(lambda c: c.to_hsla_color())
        elif mode == "rgb":
            gradient = gradient.map_colors(lambda c: c.to_rgba_color())
        elif mode is not None:
            raise ThemeLoadError(f"unknown gradient mode {mode!r} in palette {name!r}")
    except ColorError as exc:
        raise ThemeLoadError(
            f"could not convert gradient of palette {name!r} to {mode}", cause=exc
        ) from exc
    return gradient


def _color(data: Any) -> Color:
    try:
        return color_from_json(data)
    except ValueError as exc:
        raise ThemeLoadError(str(exc), cause=exc) from exc


def _adjust_color(color: Color, theme: Theme) -> Color:
    """Point ``{"var": "palette.selector"}`` colors at that palette's variable."""
    if isinstance(color, Var):
        match = PALETTE_SELECTOR_RE.match(color.var)
        if match is not None:
            return Var(
                theme.palette_var(match.group("palette"), match.group("selector")),
                color.fallback,
            )
    return color


# ---------------------------------------------------------------------------
# Typography
# ---------------------------------------------------------------------------


def _style_value(value: Any) -> StyleValue:
    if isinstance(value, bool):
        return CssLiteral(str(value).lower())
    if isinstance(value, str):
        return CssLiteral(value)
    if isinstance(value, int):
        return Integer(value)
    if isinstance(value, float):
        return Float(value)
    if isinstance(value, Mapping):
        return Nested(_style_from_json(value))
    raise ThemeLoadError(f"unsupported typography value: {value!r}")


def _style_from_json(mapping: Mapping[str, Any]) -> Style:
    style = Style()
    for key, value in mapping.items():
        style.insert(key, _style_value(value))
    return style
