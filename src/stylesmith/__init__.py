"""Stylesmith: compile declarative style trees into flat CSS."""

__version__ = "0.3.0"

from stylesmith.errors import (  # noqa: E402
    ColorError,
    CompileError,
    GradientError,
    NonEligibleColorError,
    ParseError,
    StyleError,
    ThemeLoadError,
    ThemeResolutionError,
)
from stylesmith.model import (  # noqa: E402
    Color,
    Gradient,
    Palette,
    Style,
    Theme,
    ThemeMode,
    class_var,
    to_value,
)
from stylesmith.compiler import compile_css, compile_style  # noqa: E402
from stylesmith.parser import parse_value  # noqa: E402
from stylesmith.stylesheet import Stylesheet  # noqa: E402

__all__ = [
    "__version__",
    "ColorError",
    "CompileError",
    "GradientError",
    "NonEligibleColorError",
    "ParseError",
    "StyleError",
    "ThemeLoadError",
    "ThemeResolutionError",
    "Color",
    "Gradient",
    "Palette",
    "Style",
    "Theme",
    "ThemeMode",
    "class_var",
    "to_value",
    "compile_css",
    "compile_style",
    "parse_value",
    "Stylesheet",
]
