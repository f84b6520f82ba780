"""The baseline stylesheet: palette variables, typography levels, document resets."""

from __future__ import annotations

from stylesmith.errors import ColorError
from stylesmith.model.color import Color
from stylesmith.model.style import Style
from stylesmith.model.theme import Theme
from stylesmith.model.theme_mode import ThemeMode
from stylesmith.model.typography import STAR
from stylesmith.model.value import ColorValue


def _as_rgba(color: Color) -> Color:
    try:
        return color.to_rgba_color()
    except ColorError:
        return color


def baseline(theme: Theme, mode: ThemeMode | str) -> Style:
    """Build the document-wide style every page using *theme* starts from.

    Each palette selector becomes a CSS variable on ``html`` (as RGBA when
    the color is convertible), each typography level a
    ``.{prefix}-system.{level}`` rule.
    """
    mode = ThemeMode.parse(mode).resolve()
    system_class = theme.system_class()
    emit = Style()

    for level, _ in theme.typography:
        if level != STAR:
            emit.insert(f"{system_class}.{level}", theme.typography.at(level))

    for palette_name, palette in theme.palettes():
        variables = Style()
        for selector in palette.selectors():
            color = _as_rgba(palette.select(selector, mode))
            variables.insert(theme.palette_var(palette_name, selector), ColorValue(color))
        emit = emit.merge(Style({"html": variables}))

    return emit.merge(
        Style(
            {
                ":root, html": {
                    "color": "text.primary",
                    "bgcolor": "background.body",
                },
                "p, span, code, h1, h2, h3, h4": {
                    "margin-block-start": "0.1em",
                    "margin-block-end": "0.1em",
                    "margin-inline-start": "0px",
                    "margin-inline-end": "0px",
                },
                "body": {
                    "margin": "0",
                },
                system_class: {
                    "&[color=success]": {
                        "color": "success.050",
                    },
                    "&[variant=outlined]": {
                        "borderWidth": "3px",
                        "borderStyle": "solid",
                        "padding": "3px",
                        "borderColor": "inherit",
                        "&[color=success]": {
                            "borderColor": "success.outlinedBorder",
                            "color": "success.outlinedColor",
                            "&[disabled]": {
                                "borderColor": "success.outlinedDisabledBorder",
                                "color": "success.outlinedDisabledColor",
                            },
                        },
                    },
                },
            }
        )
    )
