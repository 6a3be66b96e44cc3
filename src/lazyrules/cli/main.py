"""Lazyrules CLI entry point: Click group with subcommands."""

import click

from lazyrules import __version__


@click.group()
@click.version_option(version=__version__, prog_name="lazyrules")
def cli() -> None:
    """Lazyrules - generate background-image CSS rules from image files."""


# Import and register subcommands
from lazyrules.cli.build import build  # noqa: E402
from lazyrules.cli.inspect import inspect  # noqa: E402

cli.add_command(build)
cli.add_command(inspect)
