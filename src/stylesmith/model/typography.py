"""Typography levels and the scale mapping each level to a style."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from stylesmith.model.style import Style


class Size(Enum):
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"


@dataclass(frozen=True)
class TypographyLevel:
    """A typography level such as ``h1``, ``title-lg``, ``body-md`` or ``*``.

    ``kind`` is one of ``h1``..``h4``, ``title``, ``body``, ``star`` or
    ``custom``.  ``size`` is set for title and body levels only.
    """

    kind: str
    size: Size | None = None
    name: str = ""

    @classmethod
    def parse(cls, text: str) -> TypographyLevel:
        if text == "*":
            return cls("star")
        if text in ("h1", "h2", "h3", "h4"):
            return cls(text)
        for kind in ("title", "body"):
            prefix = f"{kind}-"
            if text.startswith(prefix):
                try:
                    return cls(kind, Size(text[len(prefix):]))
                except ValueError:
                    break
        return cls("custom", name=text)

    @classmethod
    def default(cls) -> TypographyLevel:
        return cls("body", Size.MD)

    def __str__(self) -> str:
        if self.kind == "star":
            return "*"
        if self.kind == "custom":
            return self.name
        if self.size is not None:
            return f"{self.kind}-{self.size.value}"
        return self.kind


STAR = TypographyLevel("star")


class TypographyScale:
    """Styles for each typography level, in insertion order."""

    def __init__(self, levels: dict[TypographyLevel, Style] | None = None) -> None:
        self._levels: dict[TypographyLevel, Style] = dict(levels or {})

    def insert(self, level: TypographyLevel | str, style: Style) -> None:
        if isinstance(level, str):
            level = TypographyLevel.parse(level)
        self._levels[level] = style

    def scale(self, level: TypographyLevel | str) -> Style | None:
        if isinstance(level, str):
            level = TypographyLevel.parse(level)
        return self._levels.get(level)

    def at(self, level: TypographyLevel | str) -> Style | None:
        """The level's style merged with the ``*`` level; the level wins."""
        style = self.scale(level)
        if style is None:
            return None
        star = self._levels.get(STAR)
        if star is None:
            return style
        return style.merge(star)

    def __iter__(self) -> Iterator[tuple[TypographyLevel, Style]]:
        return iter(self._levels.items())

    def __len__(self) -> int:
        return len(self._levels)

    def __contains__(self, level: object) -> bool:
        if isinstance(level, str):
            level = TypographyLevel.parse(level)
        return level in self._levels

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TypographyScale):
            return self._levels == other._levels
        return NotImplemented
