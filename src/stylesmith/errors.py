"""Error hierarchy for stylesmith."""
from __future__ import annotations

from typing import Any


class StyleError(Exception):
    """Base error for all stylesmith errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class ParseError(StyleError):
    """A literal could not be tokenized or is malformed.

    ``token`` holds the offending text.
    """

    def __init__(
        self,
        message: str,
        *,
        token: str = "",
        line: int | None = None,
        column: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.token = token
        self.line = line
        self.column = column


# ---------------------------------------------------------------------------
# Color conversion
# ---------------------------------------------------------------------------


class ColorError(StyleError):
    """A color could not be converted between representations."""


class NonEligibleColorError(ColorError):
    """The color variant has no channel representation (literal or var)."""

    def __init__(self, color: Any, **kwargs: Any) -> None:
        super().__init__(
            f"{color!r} can not be converted because it's non-eligible", **kwargs
        )
        self.color = color


# ---------------------------------------------------------------------------
# Fatal configuration errors
# ---------------------------------------------------------------------------


class ThemeResolutionError(StyleError):
    """A theme reference names a palette, selector, class or var that doesn't exist."""

    def __init__(
        self,
        message: str,
        *,
        palette: str | None = None,
        selector: str | None = None,
        class_name: str | None = None,
        var: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.palette = palette
        self.selector = selector
        self.class_name = class_name
        self.var = var


class GradientError(StyleError):
    """Gradient constructed without boundary points, or interpolation is undefined."""


class CompileError(StyleError):
    """A resolved style value can not be rendered as CSS."""


class ThemeLoadError(StyleError):
    """A theme definition could not be read."""
