"""CLI commands: stylesmith parse / gradient -- inspect values and colors."""

from __future__ import annotations

import sys

import click

from stylesmith.errors import ColorError, GradientError, ParseError
from stylesmith.model.color import color_from_json
from stylesmith.model.gradient import Gradient
from stylesmith.parser import parse_value


@click.command()
@click.argument("value")
def parse(value: str) -> None:
    """Parse VALUE as a style literal and show what it becomes."""
    try:
        parsed = parse_value(value)
    except ParseError as exc:
        click.echo(f"Parse error: {exc} (token {exc.token!r})", err=True)
        sys.exit(1)

    click.echo(repr(parsed))
    css = parsed.to_css()
    if css is not None:
        click.echo(f"css: {css}")


@click.command()
@click.argument("low")
@click.argument("high")
@click.option("--steps", default=10, show_default=True, type=click.IntRange(min=1))
@click.option(
    "--space", type=click.Choice(["rgb", "hsl"]), default="rgb", show_default=True,
    help="Color space to interpolate in.",
)
def gradient(low: str, high: str, steps: int, space: str) -> None:
    """Sample a two-point gradient from LOW to HIGH (hex colors)."""
    try:
        grad = Gradient.between(color_from_json(low), color_from_json(high))
        if space == "hsl":
            grad = grad.map_colors(lambda c: c.to_hsla_color())
        else:
            grad = grad.map_colors(lambda c: c.to_rgba_color())
        colors = grad.sample(steps)
    except (ColorError, GradientError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    for i, color in enumerate(colors):
        r, g, b, _ = color.to_rgba()
        swatch = click.style("    ", bg=(r, g, b))
        click.echo(f"{i / steps:>5.2f} {swatch} {color}")
