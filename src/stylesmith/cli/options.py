"""Options shared by commands that need a theme."""

from __future__ import annotations

from typing import Any, Callable

import click

from stylesmith.config import StyleConfig

MODE_CHOICE = click.Choice(["light", "dark", "system"], case_sensitive=False)


def theme_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Add ``--theme``, ``--prefix`` and ``--mode`` to a command."""
    fn = click.option(
        "--mode", type=MODE_CHOICE, default="system", show_default=True,
        help="Theme mode to resolve palette colors in.",
    )(fn)
    fn = click.option(
        "--prefix", default=None, help="Override the theme's CSS variable prefix."
    )(fn)
    fn = click.option(
        "--theme", "theme_path", type=click.Path(exists=True, dir_okay=False),
        default=None, help="Theme JSON file (defaults to the packaged theme).",
    )(fn)
    return fn


def build_config(
    theme_path: str | None, prefix: str | None, mode: str, base: str | None = None
) -> StyleConfig:
    return StyleConfig(prefix=prefix, mode=mode, base_selector=base, theme_path=theme_path)
