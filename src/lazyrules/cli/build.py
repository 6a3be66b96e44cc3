"""CLI command: lazyrules build -- compile images into a stylesheet."""

from __future__ import annotations

import logging
import sys

import click

from lazyrules.config import LazyRulesConfig
from lazyrules.errors import EmptyInputError
from lazyrules.runner import LazyRulesRunner


@click.command()
@click.argument("images", nargs=-1, required=True)
@click.option(
    "-o", "--stylesheet", required=True, help="Path to the output stylesheet"
)
@click.option("--watch", is_flag=True, help="Watch for file changes")
@click.option(
    "--interval", default=0.2, type=float, show_default=True,
    help="Seconds between polls in watch mode",
)
@click.option("--fail-on-empty", is_flag=True, help="Exit 1 if no image matched")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging threshold",
)
def build(
    images: tuple[str, ...],
    stylesheet: str,
    watch: bool,
    interval: float,
    fail_on_empty: bool,
    log_level: str,
) -> None:
    """Generate CSS rules for IMAGES (files or glob patterns).

    Exits with code 1 if any image could not be turned into a rule.
    """
    logging.basicConfig(
        level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s"
    )
    config = LazyRulesConfig(
        images=images,
        stylesheet=stylesheet,
        watch=watch,
        interval=interval,
        fail_on_empty=fail_on_empty,
    )
    runner = LazyRulesRunner(config)

    if config.watch:
        click.echo(f"Watching {' '.join(images)} (Ctrl+C to stop)")
        try:
            runner.watch()
        except KeyboardInterrupt:
            click.echo("Stopped")
        sys.exit(0)

    try:
        result = runner.build()
    except EmptyInputError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    for failure in result.failures:
        click.echo(f"  {failure}", err=True)
    click.echo(
        f"Stylesheet generated at {stylesheet}: "
        f"{len(result.descriptors)} rule(s), {len(result.failures)} failure(s)"
    )
    sys.exit(0 if result.ok else 1)
