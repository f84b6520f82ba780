"""Breakpoints: named minimum widths used to build media queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

DEFAULT_BREAKPOINTS: tuple[tuple[str, int], ...] = (
    ("xs", 0),
    ("sm", 600),
    ("md", 768),
    ("lg", 992),
    ("xl", 1200),
)


@dataclass(frozen=True)
class Breakpoint:
    abbrev: str
    width: int

    @property
    def media_query(self) -> str:
        return f"@media (min-width: {self.width}px)"


class Breakpoints:
    """A set of breakpoints kept in ascending width order."""

    def __init__(self, points: Iterable[tuple[str, int]] | None = None) -> None:
        self._points: dict[str, Breakpoint] = {}
        for abbrev, width in DEFAULT_BREAKPOINTS if points is None else points:
            self.set(abbrev, width)

    @classmethod
    def empty(cls) -> Breakpoints:
        return cls(())

    def set(self, abbrev: str, width: int) -> None:
        """Add a breakpoint, or update the width of an existing one."""
        if width < 0:
            raise ValueError(f"breakpoint width must be non-negative, got {width}")
        self._points[abbrev] = Breakpoint(abbrev, int(width))

    def get(self, abbrev: str) -> Breakpoint | None:
        return self._points.get(abbrev)

    def __contains__(self, abbrev: object) -> bool:
        return abbrev in self._points

    def __iter__(self) -> Iterator[Breakpoint]:
        return iter(sorted(self._points.values(), key=lambda bp: bp.width))

    def __len__(self) -> int:
        return len(self._points)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Breakpoints):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        inner = ", ".join(f"{bp.abbrev}={bp.width}" for bp in self)
        return f"Breakpoints({inner})"
