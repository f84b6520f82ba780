"""CLI commands: stylesmith baseline / palette -- inspect a theme."""

from __future__ import annotations

import sys

import click

from stylesmith.cli.options import build_config, theme_options
from stylesmith.compiler import compile_style
from stylesmith.errors import StyleError
from stylesmith.themes.baseline import baseline as build_baseline


@click.command()
@theme_options
@click.option("--compact", is_flag=True, help="Emit the compact mounting form.")
def baseline(theme_path: str | None, prefix: str | None, mode: str, compact: bool) -> None:
    """Print the baseline stylesheet for a theme."""
    config = build_config(theme_path, prefix, mode)
    try:
        theme = config.load_theme()
        resolved = config.theme_mode().resolve()
        sheet = compile_style(build_baseline(theme, resolved), resolved, theme)
    except StyleError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(sheet.to_style_str() if compact else sheet.to_css())


@click.command()
@theme_options
def palette(theme_path: str | None, prefix: str | None, mode: str) -> None:
    """List every palette selector with its color and CSS variable."""
    config = build_config(theme_path, prefix, mode)
    try:
        theme = config.load_theme()
    except StyleError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    resolved = config.theme_mode().resolve()
    for name, pal in theme.palettes():
        click.echo(click.style(name, bold=True))
        for selector in pal.selectors():
            color = pal.select(selector, resolved)
            click.echo(f"  {selector:<24} {str(color):<28} {theme.palette_var(name, selector)}")
