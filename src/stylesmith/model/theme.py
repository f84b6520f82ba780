"""Theme: prefix, breakpoints, palettes, typography and class variables."""

from __future__ import annotations

import copy
import functools
from typing import Iterator

from stylesmith.model.breakpoint import Breakpoints
from stylesmith.model.palette import Palette
from stylesmith.model.typography import TypographyScale
from stylesmith.properties import to_property

DEFAULT_PREFIX = "happy"


class Theme:
    """Everything the compiler reads to resolve theme references.

    The compiler only ever reads a theme.  :meth:`default` returns one
    shared instance; call :meth:`copy` before changing it.
    """

    def __init__(self, prefix: str = DEFAULT_PREFIX) -> None:
        self.prefix = prefix
        self.breakpoints = Breakpoints()
        self.typography = TypographyScale()
        self._palettes: dict[str, Palette] = {}
        self._class_vars: dict[str, list[str]] = {}

    @classmethod
    def default(cls) -> Theme:
        """The packaged default theme, loaded on first use."""
        return _default_theme()

    def copy(self) -> Theme:
        return copy.deepcopy(self)

    # --- palettes ------------------------------------------------------------

    def get_palette(self, name: str) -> Palette | None:
        return self._palettes.get(name)

    def insert_palette(self, name: str, palette: Palette) -> None:
        self._palettes[name] = palette

    def palette(self, name: str) -> Palette:
        """Return the palette called *name*, creating an empty one if needed."""
        return self._palettes.setdefault(name, Palette())

    def palettes(self) -> Iterator[tuple[str, Palette]]:
        return iter(self._palettes.items())

    def palette_var(self, palette: str, selector: str) -> str:
        return to_property(f"--{self.prefix}-palette-{palette}-{selector}")

    # --- class variables -----------------------------------------------------

    def declare_class_var(self, class_name: str, var: str) -> None:
        names = self._class_vars.setdefault(class_name, [])
        if var not in names:
            names.append(var)

    def has_class_var(self, class_name: str, var: str) -> bool:
        return var in self._class_vars.get(class_name, ())

    def class_vars(self) -> Iterator[tuple[str, list[str]]]:
        return iter(self._class_vars.items())

    def class_var(self, class_name: str, var: str) -> str:
        return to_property(f"--{self.prefix}-{class_name}-{var}")

    def system_class(self) -> str:
        return f".{self.prefix}-system"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Theme):
            return (
                self.prefix == other.prefix
                and self.breakpoints == other.breakpoints
                and self._palettes == other._palettes
                and self.typography == other.typography
                and self._class_vars == other._class_vars
            )
        return NotImplemented

    __hash__ = object.__hash__

    def __repr__(self) -> str:
        return f"Theme(prefix={self.prefix!r}, palettes={list(self._palettes)})"


@functools.lru_cache(maxsize=1)
def _default_theme() -> Theme:
    from stylesmith.themes.loader import load_default_theme

    return load_default_theme()
