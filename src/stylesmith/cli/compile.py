"""CLI command: stylesmith compile -- compile a JSON style tree to CSS."""

from __future__ import annotations

import json
import sys
from typing import IO

import click

from stylesmith.cli.options import build_config, theme_options
from stylesmith.errors import StyleError
from stylesmith.model.style import Style


@click.command(name="compile")
@click.argument("style_json", type=click.File("r", encoding="utf-8"))
@theme_options
@click.option("--base", default=None, help="Selector to scope the compiled rules under.")
@click.option("--compact", is_flag=True, help="Emit the compact mounting form.")
def compile_cmd(
    style_json: IO[str],
    theme_path: str | None,
    prefix: str | None,
    mode: str,
    base: str | None,
    compact: bool,
) -> None:
    """Compile STYLE_JSON (a file, or - for stdin) to CSS.

    The file holds one JSON object mapping property names to values;
    nested objects are sub-rules keyed by selector fragment.
    """
    config = build_config(theme_path, prefix, mode, base)
    try:
        data = json.load(style_json)
    except json.JSONDecodeError as exc:
        click.echo(f"Invalid style JSON: {exc}", err=True)
        sys.exit(1)
    if not isinstance(data, dict):
        click.echo("Style JSON must be an object", err=True)
        sys.exit(1)

    try:
        theme = config.load_theme()
        sheet = config.cache().get_or_compile(
            Style(data), config.theme_mode(), theme, config.base_selector
        )
    except StyleError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(sheet.to_style_str() if compact else sheet.to_css())
