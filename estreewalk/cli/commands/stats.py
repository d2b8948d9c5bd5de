"""CLI command for node type statistics."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from estreewalk.ast.base import Node
from estreewalk.cli.utils import load_tree_or_fail
from estreewalk.walk import BASE, CATEGORIES, simple
from estreewalk.walk.registry import WalkFunc

console = Console()


def collect_type_counts(node: Node, registry: Mapping[str, WalkFunc] | None = None) -> Counter:
    """Count how often each type and category is dispatched during a walk."""
    counts: Counter = Counter()
    walkers = BASE if registry is None else registry

    def counter(type_name: str):
        def visit(_node, _state) -> None:
            counts[type_name] += 1

        return visit

    simple(node, {type_name: counter(type_name) for type_name in walkers}, walkers)
    return counts


@click.command()
@click.argument("input_file", type=click.Path(exists=True))
@click.option(
    "--categories/--no-categories",
    default=True,
    help="Include category dispatch counts",
)
def stats(input_file: str, categories: bool) -> None:
    """Show how many nodes of each type a tree contains."""
    tree = load_tree_or_fail(input_file)
    try:
        counts = collect_type_counts(tree)
    except KeyError as e:
        msg = f"Unknown node type: {e.args[0]}"
        raise click.ClickException(msg) from e

    table = Table(title=f"Node statistics: {Path(input_file).name}")
    table.add_column("Type", style="cyan")
    table.add_column("Kind", style="magenta")
    table.add_column("Count", justify="right", style="green")

    for type_name, count in sorted(counts.items(), key=lambda item: (-item[1], item[0])):
        is_category = type_name in CATEGORIES
        if is_category and not categories:
            continue
        table.add_row(type_name, "category" if is_category else "node", str(count))

    console.print(table)
