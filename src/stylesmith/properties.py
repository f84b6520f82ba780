"""Property translation: shorthand expansion, key normalization, breakpoints."""

from __future__ import annotations

import re
from types import MappingProxyType

from stylesmith.model.breakpoint import Breakpoints

SHORTHANDS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "p": ("padding",),
        "pl": ("padding-left",),
        "pr": ("padding-right",),
        "pt": ("padding-top",),
        "pb": ("padding-bottom",),
        "pX": ("margin-left", "margin-right"),
        "pY": ("margin-top", "margin-bottom"),
        "bgcolor": ("background-color",),
        "bg": ("background",),
        "marginX": ("margin-left", "margin-right"),
        "marginY": ("margin-top", "margin-bottom"),
    }
)

# Keys starting with one of these are selector syntax and are never rewritten.
SELECTOR_PREFIXES = ("[", ".", "+", ">", "~", "&", ",")

_CAMEL_RE = re.compile(r"([a-z0-9])([A-Z])")
_ATTRIBUTE_RE = re.compile(r"(\[[^\]]*\])")


def to_property(key: str) -> str:
    """Normalize *key* to kebab-case, leaving selector syntax untouched.

    Attribute selector spans (``[...]``) inside the key keep their case.
    """
    if not key or key.startswith(SELECTOR_PREFIXES):
        return key
    parts = _ATTRIBUTE_RE.split(key)
    return "".join(
        part if part.startswith("[") else _CAMEL_RE.sub(r"\1-\2", part).lower()
        for part in parts
    )


def expand_shorthand(key: str) -> list[str]:
    """Return the real property names *key* stands for."""
    expanded = SHORTHANDS.get(key)
    if expanded is not None:
        return list(expanded)
    return [to_property(key)]


class TranslationUnit:
    """Translates style keys against a set of breakpoints.

    A shorthand maps to its real properties, a breakpoint abbreviation to
    its media query, and anything else to its normalized property name.
    """

    def __init__(self, breakpoints: Breakpoints | None = None) -> None:
        self.breakpoints = breakpoints if breakpoints is not None else Breakpoints()

    def translate(self, key: str) -> list[str]:
        if key in SHORTHANDS:
            return list(SHORTHANDS[key])
        breakpoint = self.breakpoints.get(key)
        if breakpoint is not None:
            return [breakpoint.media_query]
        return [to_property(key)]

    def is_breakpoint(self, key: str) -> bool:
        return key not in SHORTHANDS and key in self.breakpoints
