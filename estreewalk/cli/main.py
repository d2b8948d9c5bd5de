"""CLI interface for estreewalk."""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from estreewalk.cli.commands.find import find
from estreewalk.cli.commands.stats import stats
from estreewalk.cli.commands.tree import tree
from estreewalk.version import ESTREEWALK_VERSION


@click.group()
@click.version_option(version=ESTREEWALK_VERSION, prog_name="estreewalk")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """estreewalk - Walk and search ESTree syntax trees."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


cli.add_command(find)
cli.add_command(stats)
cli.add_command(tree)


if __name__ == "__main__":
    cli()
