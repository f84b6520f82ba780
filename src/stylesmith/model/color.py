"""Color model: CSS color representations, RGB/HSL conversion and formatting.

Colors reduce to one of two normalized forms before converting onward:

- :class:`NormalizedRgba` with 0-255 channels, for hex and RGB colors.
- :class:`NormalizedHsla` with every component in ``[0, 1]``, for HSL colors.

Named CSS literals are only convertible when their text is itself a hex
literal (``#RRGGBB[AA]``).  Variable references never are.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, NamedTuple

from stylesmith.errors import NonEligibleColorError, ParseError

__all__ = [
    "Color",
    "Named",
    "Hex",
    "Rgb",
    "Rgba",
    "Hsl",
    "Hsla",
    "Var",
    "NormalizedRgba",
    "NormalizedHsla",
    "hsl_to_rgb",
    "rgb_to_hsl",
    "parse_color",
    "color_from_json",
    "color_to_json",
]

_HEX_COLOR_RE = re.compile(
    r"""
    ^\#
    (?P<r>[0-9a-fA-F]{2})
    (?P<g>[0-9a-fA-F]{2})
    (?P<b>[0-9a-fA-F]{2})
    (?P<a>[0-9a-fA-F]{2})?
    $
    """,
    re.VERBOSE,
)


def _round(value: float) -> int:
    """Round half away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


class NormalizedRgba(NamedTuple):
    r: int
    g: int
    b: int
    a: int


class NormalizedHsla(NamedTuple):
    h: float
    s: float
    l: float  # noqa: E741
    a: float


# ---------------------------------------------------------------------------
# Channel math
# ---------------------------------------------------------------------------


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 0.5:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:  # noqa: E741
    """Convert HSL components in ``[0, 1]`` to 0-255 RGB channels."""
    if s == 0.0:
        r = g = b = l
    else:
        q = l * (1.0 + s) if l < 0.5 else l + s - l * s
        p = 2.0 * l - q
        r = _hue_to_rgb(p, q, h + 1.0 / 3.0)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1.0 / 3.0)
    return _round(r * 255.0), _round(g * 255.0), _round(b * 255.0)


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Convert 0-255 RGB channels to HSL components in ``[0, 1]``.

    Achromatic input (all channels equal) yields hue 0 and saturation 0.
    """
    rf, gf, bf = r / 255.0, g / 255.0, b / 255.0
    vmax = max(rf, gf, bf)
    vmin = min(rf, gf, bf)
    lightness = (vmax + vmin) / 2.0
    if vmax == vmin:
        return 0.0, 0.0, lightness

    d = vmax - vmin
    if lightness > 0.5:
        saturation = d / (2.0 - vmax - vmin)
    else:
        saturation = d / (vmax + vmin)
    if vmax == rf:
        hue = (gf - bf) / d + (6.0 if gf < bf else 0.0)
    elif vmax == gf:
        hue = (bf - rf) / d + 2.0
    else:
        hue = (rf - gf) / d + 4.0
    return hue / 6.0, saturation, lightness


def _u32_to_rgb(value: int) -> tuple[int, int, int]:
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


# ---------------------------------------------------------------------------
# Color variants
# ---------------------------------------------------------------------------


class Color:
    """Base for all color variants."""

    __slots__ = ()

    @staticmethod
    def named(name: str) -> Named:
        return Named(name)

    @staticmethod
    def hex_code(value: int) -> Hex:
        return Hex(value)

    @staticmethod
    def rgb(r: int, g: int, b: int) -> Rgb:
        return Rgb(r, g, b)

    @staticmethod
    def hsl(h: int, s: int, l: int) -> Hsl:  # noqa: E741
        return Hsl(h, s, l)

    @staticmethod
    def parse(text: str) -> Rgb | Rgba:
        return parse_color(text)

    def normalize(self) -> NormalizedRgba | NormalizedHsla:
        """Reduce this color to its normalized RGBA or HSLA form."""
        raise NonEligibleColorError(self)

    def to_hsla(self) -> tuple[float, float, float, float]:
        """Return ``(h, s, l, a)`` with every component in ``[0, 1]``."""
        simple = self.normalize()
        if isinstance(simple, NormalizedRgba):
            h, s, l = rgb_to_hsl(simple.r, simple.g, simple.b)  # noqa: E741
            return h, s, l, simple.a / 255.0
        return tuple(simple)  # type: ignore[return-value]

    def to_hsla_color(self) -> Hsla:
        h, s, l, a = self.to_hsla()  # noqa: E741
        return Hsla(_round(h * 360.0), _round(s * 100.0), _round(l * 100.0), _round(a * 100.0))

    def to_rgba(self) -> tuple[int, int, int, int]:
        """Return ``(r, g, b, a)`` with every channel in 0-255."""
        simple = self.normalize()
        if isinstance(simple, NormalizedHsla):
            r, g, b = hsl_to_rgb(simple.h, simple.s, simple.l)
            return r, g, b, int(simple.a * 255.0)
        return tuple(simple)  # type: ignore[return-value]

    def to_rgba_color(self) -> Rgba:
        return Rgba(*self.to_rgba())


@dataclass(frozen=True)
class Named(Color):
    """A CSS literal such as ``red`` or ``#ff0000``."""

    name: str

    def normalize(self) -> NormalizedRgba | NormalizedHsla:
        try:
            parsed = parse_color(self.name)
        except ParseError as exc:
            raise NonEligibleColorError(self, cause=exc) from exc
        return parsed.normalize()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Hex(Color):
    """A packed ``0xRRGGBB`` color.

    Normalizes with alpha 0 while displaying as opaque ``#RRGGBB``.
    """

    value: int

    def normalize(self) -> NormalizedRgba:
        r, g, b = _u32_to_rgb(self.value)
        return NormalizedRgba(r, g, b, 0)

    def __str__(self) -> str:
        return f"#{self.value:06X}"


@dataclass(frozen=True)
class Rgb(Color):
    r: int
    g: int
    b: int

    def normalize(self) -> NormalizedRgba:
        return NormalizedRgba(self.r, self.g, self.b, 255)

    def __str__(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


@dataclass(frozen=True)
class Rgba(Color):
    """RGBA with alpha on the 0-255 scale."""

    r: int
    g: int
    b: int
    a: int

    def normalize(self) -> NormalizedRgba:
        return NormalizedRgba(self.r, self.g, self.b, self.a)

    def __str__(self) -> str:
        if self.a == 255:
            return f"#{self.r:02X}{self.g:02X}{self.b:02X}"
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}{self.a:02X}"


@dataclass(frozen=True)
class Hsl(Color):
    h: int
    s: int
    l: int  # noqa: E741

    def normalize(self) -> NormalizedHsla:
        return NormalizedHsla(self.h / 360.0, self.s / 100.0, self.l / 100.0, 1.0)

    def __str__(self) -> str:
        return f"hsla({self.h}, {self.s}%, {self.l}%)"


@dataclass(frozen=True)
class Hsla(Color):
    """HSLA with alpha on the 0-100 scale (unlike :class:`Rgba`)."""

    h: int
    s: int
    l: int  # noqa: E741
    a: int

    def normalize(self) -> NormalizedHsla:
        return NormalizedHsla(
            self.h / 360.0, self.s / 100.0, self.l / 100.0, self.a / 100.0
        )

    def __str__(self) -> str:
        if self.a == 100:
            return f"hsla({self.h}, {self.s}%, {self.l}%)"
        return f"hsla({self.h}, {self.s}%, {self.l}%, {self.a / 100.0:.2f})"


@dataclass(frozen=True)
class Var(Color):
    """A CSS variable reference with an optional fallback color."""

    var: str
    fallback: Color | None = None

    def __str__(self) -> str:
        if self.fallback is None:
            return f"var({self.var})"
        return f"var({self.var}, {self.fallback})"


# ---------------------------------------------------------------------------
# Text and wire formats
# ---------------------------------------------------------------------------


def parse_color(text: str) -> Rgb | Rgba:
    """Parse ``#RRGGBB`` or ``#RRGGBBAA`` into an :class:`Rgb` / :class:`Rgba`."""
    match = _HEX_COLOR_RE.match(text)
    if match is None:
        raise ParseError(f"not a hex color: {text!r}", token=text)
    r, g, b = (int(match.group(k), 16) for k in ("r", "g", "b"))
    alpha = match.group("a")
    if alpha is None:
        return Rgb(r, g, b)
    return Rgba(r, g, b, int(alpha, 16))


def _component(data: dict[str, Any], key: str, high: int) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= high:
        raise ValueError(
            f"color component {key!r} must be an integer in [0, {high}], got {value!r}"
        )
    return value


def color_from_json(data: Any) -> Color:
    """Build a color from its structured form.

    Accepts a hex string, a bare CSS literal string, ``{r,g,b[,a]}``,
    ``{h,s,l[,a]}`` or ``{var[, fallback]}``.
    """
    if isinstance(data, str):
        if _HEX_COLOR_RE.match(data):
            return parse_color(data)
        return Named(data)
    if isinstance(data, dict):
        keys = set(data)
        if keys in ({"r", "g", "b"}, {"r", "g", "b", "a"}):
            r, g, b = (_component(data, k, 255) for k in ("r", "g", "b"))
            if "a" in keys:
                return Rgba(r, g, b, _component(data, "a", 255))
            return Rgb(r, g, b)
        if keys in ({"h", "s", "l"}, {"h", "s", "l", "a"}):
            h = _component(data, "h", 360)
            s, l = (_component(data, k, 100) for k in ("s", "l"))  # noqa: E741
            if "a" in keys:
                return Hsla(h, s, l, _component(data, "a", 100))
            return Hsl(h, s, l)
        if keys in ({"var"}, {"var", "fallback"}):
            fallback = data.get("fallback")
            return Var(
                str(data["var"]),
                color_from_json(fallback) if fallback is not None else None,
            )
    raise ValueError(f"not a color definition: {data!r}")


def color_to_json(color: Color) -> Any:
    """Inverse of :func:`color_from_json`."""
    if isinstance(color, Named):
        return color.name
    if isinstance(color, Hex):
        return str(color)
    if isinstance(color, Rgb):
        return {"r": color.r, "g": color.g, "b": color.b}
    if isinstance(color, Rgba):
        return {"r": color.r, "g": color.g, "b": color.b, "a": color.a}
    if isinstance(color, Hsl):
        return {"h": color.h, "s": color.s, "l": color.l}
    if isinstance(color, Hsla):
        return {"h": color.h, "s": color.s, "l": color.l, "a": color.a}
    if isinstance(color, Var):
        data: dict[str, Any] = {"var": color.var}
        if color.fallback is not None:
            data["fallback"] = color_to_json(color.fallback)
        return data
    raise TypeError(f"unknown color type: {type(color).__name__}")
