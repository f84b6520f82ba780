"""Lark Transformer that converts a tokenized value literal into a StyleValue."""

from __future__ import annotations

import functools
import re
from decimal import Decimal
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, VisitError

from stylesmith.errors import ParseError
from stylesmith.model.color import Hex, Named, Rgba
from stylesmith.model.named_colors import CSS_NAMED_COLORS
from stylesmith.model.value import (
    ColorValue,
    CssLiteral,
    Dimension,
    Float,
    Integer,
    Percent,
    QuotedString,
    StyleValue,
    ThemeToken,
)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# Numeric prefix of a DIMENSION token; the rest is the unit.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)")


class _Sentinel:
    """Tokens whose meaning depends on what follows them."""

    def __init__(self, text: str):
        self.text = text


class _Ident(_Sentinel):
    def value(self) -> StyleValue:
        if self.text in CSS_NAMED_COLORS:
            return ColorValue(Named(self.text))
        return CssLiteral(self.text)


class _Delim(_Sentinel):
    pass


class _Function(_Sentinel):
    pass


def _number(text: str) -> int | Decimal:
    if "." in text:
        return Decimal(text)
    return int(text)


def _unexpected(token: object) -> ParseError:
    text = token.text if isinstance(token, _Sentinel) else str(token)
    return ParseError(f"Unexpected token in input: {text!r}", token=text)


class ValueTransformer(Transformer):  # type: ignore[type-arg]
    """Map value tokens to style values; ``start`` applies the lookahead rules."""

    # ---- tokens ----

    def percentage(self, items: list[Token]) -> Percent:
        return Percent(Decimal(str(items[0])[:-1]) / 100)

    def dimension(self, items: list[Token]) -> Dimension:
        raw = str(items[0])
        end = _NUMBER_RE.match(raw).end()  # type: ignore[union-attr]
        return Dimension(_number(raw[:end]), raw[end:])

    def number(self, items: list[Token]) -> Integer | Float:
        value = _number(str(items[0]))
        if isinstance(value, int):
            return Integer(value)
        return Float(value)

    def function(self, items: list[Token]) -> _Function:
        return _Function(str(items[0]))

    def hex_color(self, items: list[Token]) -> ColorValue:
        token = str(items[0])
        digits = token[1:]
        if len(digits) not in (3, 6, 8):
            raise ParseError(f"invalid hex color: {token}", token=token)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        try:
            value = int(digits, 16)
        except ValueError as exc:
            raise ParseError(f"invalid hex color: {token}", token=token, cause=exc) from exc
        if len(digits) == 8:
            return ColorValue(Rgba(value >> 24, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF))
        return ColorValue(Hex(value))

    def quoted(self, items: list[Token]) -> StyleValue:
        text = str(items[0])[1:-1]
        parts = text.split(".")
        if len(parts) == 2:
            return ThemeToken(parts[0], parts[1])
        return QuotedString(text)

    def ident(self, items: list[Token]) -> _Ident:
        return _Ident(str(items[0]))

    def delim(self, items: list[Token]) -> _Delim:
        return _Delim(str(items[0]))

    # ---- structural ----

    def start(self, items: list[object]) -> StyleValue:
        first = items[0]
        if isinstance(first, _Ident):
            value = first.value()
            # literal "." ident  ->  palette.selector; named colors are never palettes
            dotted = len(items) > 1 and isinstance(items[1], _Delim) and items[1].text == "."
            if dotted and isinstance(value, CssLiteral):
                if len(items) < 3:
                    raise ParseError("Unexpected end of input after '.'", token=".")
                if not isinstance(items[2], _Ident):
                    raise _unexpected(items[2])
                return ThemeToken(first.text, items[2].text)
            return value
        if isinstance(first, _Sentinel):
            raise _unexpected(first)
        return first  # type: ignore[return-value]


@functools.lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def parse_value(source: str) -> StyleValue:
    """Parse one CSS value literal into a StyleValue.

    Raises :class:`ParseError` carrying the offending token's text.
    """
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        token = getattr(e, "token", None)
        raise ParseError(
            f"could not parse value {source!r}",
            token="" if token is None else str(token),
            line=line if isinstance(line, int) and line > 0 else None,
            column=column if isinstance(column, int) and column > 0 else None,
            cause=e,
        ) from e
    try:
        return ValueTransformer().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, ParseError):
            raise e.orig_exc from None
        raise
