"""Palette: named color selectors, optionally varying by theme mode."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from stylesmith.model.color import Color
from stylesmith.model.theme_mode import ThemeMode


@dataclass(frozen=True)
class ByMode:
    """A selector whose color depends on the theme mode."""

    dark: Color
    light: Color


class Palette:
    """An ordered mapping of selector name to a constant or mode-based color."""

    def __init__(self) -> None:
        self._selectors: dict[str, Color | ByMode] = {}

    def insert_constant(self, name: str, color: Color) -> None:
        self._selectors[name] = color

    def insert_by_mode(self, name: str, dark: Color, light: Color) -> None:
        self._selectors[name] = ByMode(dark=dark, light=light)

    def selectors(self) -> Iterator[str]:
        """Yield selector names in insertion order."""
        return iter(self._selectors)

    def __contains__(self, name: object) -> bool:
        return name in self._selectors

    def __len__(self) -> int:
        return len(self._selectors)

    def select(self, name: str, mode: ThemeMode) -> Color | None:
        """Return the color for *name* under *mode*, or ``None`` if absent.

        *mode* must already be resolved; ``ThemeMode.SYSTEM`` is rejected.
        """
        if mode is ThemeMode.SYSTEM:
            raise ValueError("ThemeMode.SYSTEM must be resolved before palette lookup")
        entry = self._selectors.get(name)
        if entry is None:
            return None
        if isinstance(entry, ByMode):
            return entry.dark if mode is ThemeMode.DARK else entry.light
        return entry

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Palette):
            return list(self._selectors.items()) == list(other._selectors.items())
        return NotImplemented

    def __repr__(self) -> str:
        return f"Palette(selectors={list(self._selectors)})"
