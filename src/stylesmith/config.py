from __future__ import annotations

from dataclasses import dataclass

from stylesmith.cache import StyleCache
from stylesmith.model.theme import Theme
from stylesmith.model.theme_mode import ThemeMode


@dataclass(frozen=True)
class StyleConfig:
    prefix: str | None = None  # None keeps the theme's own prefix
    mode: str = "system"
    base_selector: str | None = None
    theme_path: str | None = None  # None loads the packaged default theme
    cache_size: int = 256

    def load_theme(self) -> Theme:
        if self.theme_path is None:
            theme = Theme.default()
        else:
            from stylesmith.themes.loader import load_theme

            theme = load_theme(self.theme_path)
        if self.prefix is not None and self.prefix != theme.prefix:
            theme = theme.copy()
            theme.prefix = self.prefix
        return theme

    def theme_mode(self) -> ThemeMode:
        return ThemeMode.parse(self.mode)

    def cache(self) -> StyleCache:
        return StyleCache(self.cache_size)
