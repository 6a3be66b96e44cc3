"""CLI command: lazyrules inspect -- show how each image would be compiled."""

from __future__ import annotations

import sys

import click

from lazyrules.config import LazyRulesConfig
from lazyrules.emitter import format_px
from lazyrules.grouping import group_by_ratio
from lazyrules.runner import LazyRulesRunner


@click.command()
@click.argument("images", nargs=-1, required=True)
@click.option(
    "-o", "--stylesheet", default="style.css", show_default=True,
    help="Stylesheet location used to resolve relative urls",
)
def inspect(images: tuple[str, ...], stylesheet: str) -> None:
    """Display ratio, size, url, and selector for IMAGES without writing."""
    result = LazyRulesRunner(
        LazyRulesConfig(images=images, stylesheet=stylesheet)
    ).compile()

    click.echo(f"Assets:   {len(result.descriptors) + len(result.failures)}")
    click.echo(f"Failures: {len(result.failures)}")

    for ratio, descriptors in group_by_ratio(result.descriptors).items():
        click.echo()
        click.echo(f"Ratio {ratio}x:")
        for d in descriptors:
            raw = f"{format_px(d.dimensions.width)}x{format_px(d.dimensions.height)}"
            scaled = f"{format_px(d.width)}x{format_px(d.height)}"
            click.echo(f"  {d.url}  size={raw} css={scaled}")
            click.echo(f"    {d.selector}")

    if result.failures:
        click.echo()
        click.echo("Failures:")
        for failure in result.failures:
            click.echo(f"  {failure}")
        sys.exit(1)
