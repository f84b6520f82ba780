"""Stylesmith CLI entry point: Click group with subcommands."""

import logging

import click

from stylesmith import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stylesmith")
@click.option("-v", "--verbose", is_flag=True, help="Log compiler and theme activity.")
def cli(verbose: bool) -> None:
    """Stylesmith - compile declarative style trees into CSS."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from stylesmith.cli.compile import compile_cmd  # noqa: E402
from stylesmith.cli.inspect import gradient, parse  # noqa: E402
from stylesmith.cli.theme import baseline, palette  # noqa: E402

cli.add_command(compile_cmd)
cli.add_command(baseline)
cli.add_command(palette)
cli.add_command(parse)
cli.add_command(gradient)
