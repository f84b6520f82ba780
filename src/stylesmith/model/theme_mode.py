"""Light/dark theme mode."""

from __future__ import annotations

from enum import Enum
from typing import Callable


class ThemeMode(Enum):
    """The color mode a theme is rendered in."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"

    def resolve(self, detector: Callable[[], ThemeMode] | None = None) -> ThemeMode:
        """Resolve ``SYSTEM`` to ``LIGHT`` or ``DARK``.

        *detector* reports the platform preference; without one, ``SYSTEM``
        resolves to ``LIGHT``.  Other modes are returned unchanged.
        """
        if self is not ThemeMode.SYSTEM:
            return self
        if detector is None:
            return ThemeMode.LIGHT
        detected = detector()
        if detected is ThemeMode.SYSTEM:
            return ThemeMode.LIGHT
        return detected

    @classmethod
    def parse(cls, value: str | ThemeMode) -> ThemeMode:
        if isinstance(value, ThemeMode):
            return value
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError(
                f"unknown theme mode {value!r}; expected one of "
                + ", ".join(m.value for m in cls)
            ) from None
