from stylesmith.model.bounded import BoundedFloat, UnitInterval
from stylesmith.model.breakpoint import Breakpoint, Breakpoints
from stylesmith.model.color import (
    Color,
    Hex,
    Hsl,
    Hsla,
    Named,
    Rgb,
    Rgba,
    Var,
    hsl_to_rgb,
    rgb_to_hsl,
)
from stylesmith.model.gradient import Gradient
from stylesmith.model.palette import ByMode, Palette
from stylesmith.model.style import Style
from stylesmith.model.theme import Theme
from stylesmith.model.theme_mode import ThemeMode
from stylesmith.model.typography import Size, TypographyLevel, TypographyScale
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
    StyleValue,
    ThemeToken,
    class_var,
    to_value,
)

__all__ = [
    "BoundedFloat",
    "UnitInterval",
    "Breakpoint",
    "Breakpoints",
    "Color",
    "Hex",
    "Hsl",
    "Hsla",
    "Named",
    "Rgb",
    "Rgba",
    "Var",
    "hsl_to_rgb",
    "rgb_to_hsl",
    "Gradient",
    "ByMode",
    "Palette",
    "Style",
    "Theme",
    "ThemeMode",
    "Size",
    "TypographyLevel",
    "TypographyScale",
    "Callback",
    "ClassVar",
    "ColorValue",
    "CssLiteral",
    "Dimension",
    "Float",
    "Integer",
    "Nested",
    "Percent",
    "QuotedString",
    "StyleValue",
    "ThemeToken",
    "class_var",
    "to_value",
]
