"""Style values: the tagged union stored under each property of a Style."""

from __future__ import annotations

import itertools
import re
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Callable

from stylesmith.model.color import Color

if TYPE_CHECKING:
    from stylesmith.model.style import Style
    from stylesmith.model.theme import Theme

__all__ = [
    "StyleValue",
    "Integer",
    "Float",
    "Percent",
    "Dimension",
    "CssLiteral",
    "QuotedString",
    "ColorValue",
    "ThemeToken",
    "ClassVar",
    "Callback",
    "Nested",
    "PALETTE_SELECTOR_RE",
    "class_var",
    "to_value",
]

# "palette.selector" in a plain string is a theme token.
PALETTE_SELECTOR_RE = re.compile(r"^(?P<palette>[A-Za-z_]\w*)\.(?P<selector>\w+)$")


def _decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def format_number(value: int | Decimal) -> str:
    """Render a number without exponent or trailing zeros."""
    if isinstance(value, int):
        return str(value)
    text = format(value.normalize(), "f")
    return "0" if text == "-0" else text


class StyleValue:
    """Base for every style value variant."""

    __slots__ = ()

    def to_css(self) -> str | None:
        """Render as CSS text, or ``None`` if the value needs resolving first."""
        return None


@dataclass(frozen=True)
class Integer(StyleValue):
    value: int

    def to_css(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Float(StyleValue):
    value: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _decimal(self.value))

    def to_css(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class Percent(StyleValue):
    """A percentage stored as a fraction: ``15%`` is ``Percent(0.15)``."""

    value: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _decimal(self.value))

    def to_css(self) -> str:
        return f"{format_number(self.value * 100)}%"


@dataclass(frozen=True)
class Dimension(StyleValue):
    """A magnitude with a unit suffix, e.g. ``5px`` or ``1.5rem``."""

    value: int | Decimal
    unit: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, int):
            object.__setattr__(self, "value", _decimal(self.value))

    @property
    def is_float(self) -> bool:
        return not isinstance(self.value, int)

    def to_css(self) -> str:
        return f"{format_number(self.value)}{self.unit}"


@dataclass(frozen=True)
class CssLiteral(StyleValue):
    text: str

    def to_css(self) -> str:
        return self.text


@dataclass(frozen=True)
class QuotedString(StyleValue):
    text: str

    def to_css(self) -> str:
        return f'"{self.text}"'


@dataclass(frozen=True)
class ColorValue(StyleValue):
    color: Color

    def to_css(self) -> str:
        return str(self.color)


@dataclass(frozen=True)
class ThemeToken(StyleValue):
    """A reference to ``palette.selector``, compiled to a palette CSS variable."""

    palette: str
    selector: str


@dataclass(frozen=True)
class ClassVar(StyleValue):
    """A reference to a class-scoped CSS variable, with optional fallback."""

    class_name: str
    var: str
    fallback: StyleValue | None = None


_callback_ids = itertools.count(1)
_callback_lock = threading.Lock()


class Callback(StyleValue):
    """A value computed from the theme at compile time.

    Each callback gets an identity when created; two callbacks are equal
    only if they share it, regardless of what they compute.  The wrapped
    function must be safe to call from several threads.
    """

    __slots__ = ("id", "_fn")

    def __init__(self, fn: Callable[[Theme], Any]) -> None:
        with _callback_lock:
            self.id = next(_callback_ids)
        self._fn = fn

    def evaluate(self, theme: Theme) -> StyleValue:
        return to_value(self._fn(theme))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Callback):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("callback", self.id))

    def __repr__(self) -> str:
        return f"Callback(id={self.id})"


@dataclass(frozen=True)
class Nested(StyleValue):
    """A sub-rule; the owning key is a selector fragment."""

    style: Style


# ---------------------------------------------------------------------------
# Coercion
# ---------------------------------------------------------------------------


def class_var(class_name: str, var: str, fallback: Any = None) -> ClassVar:
    return ClassVar(class_name, var, None if fallback is None else to_value(fallback))


def _from_str(text: str) -> StyleValue:
    match = PALETTE_SELECTOR_RE.match(text)
    if match is not None:
        return ThemeToken(match.group("palette"), match.group("selector"))
    if any(ch.isspace() for ch in text):
        return CssLiteral(text)

    from stylesmith.parser import parse_value

    return parse_value(text)


def to_value(obj: Any) -> StyleValue:
    """Coerce a Python value into a :class:`StyleValue`.

    Strings of the form ``palette.selector`` become theme tokens, strings
    containing whitespace are kept as CSS literals and every other string
    goes through the value parser (raising :class:`ParseError` on failure).
    """
    from stylesmith.model.style import Style

    if isinstance(obj, StyleValue):
        return obj
    if isinstance(obj, bool):
        return CssLiteral("true" if obj else "false")
    if isinstance(obj, int):
        return Integer(obj)
    if isinstance(obj, (float, Decimal)):
        return Float(obj)
    if isinstance(obj, Color):
        return ColorValue(obj)
    if isinstance(obj, Style):
        return Nested(obj)
    if isinstance(obj, Mapping):
        return Nested(Style(obj))
    if isinstance(obj, str):
        return _from_str(obj)
    if callable(obj):
        return Callback(obj)
    raise TypeError(f"can not convert {type(obj).__name__} to a style value")
