from stylesmith.themes.baseline import baseline
from stylesmith.themes.loader import (
    DEFAULT_THEME_PATH,
    load_default_theme,
    load_theme,
    loads_theme,
    theme_from_dict,
)

__all__ = [
    "DEFAULT_THEME_PATH",
    "baseline",
    "load_default_theme",
    "load_theme",
    "loads_theme",
    "theme_from_dict",
]
