"""CLI command for position-based node search."""

from __future__ import annotations

import json
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax

from estreewalk.ast.base import node_to_dict
from estreewalk.cli.utils import load_tree_or_fail, node_label
from estreewalk.walk import find_node_after, find_node_around, find_node_at, find_node_before

console = Console()


def _bound(value: str) -> int | None:
    """Parse a search bound, ``*`` being a wildcard."""
    if value == "*":
        return None
    try:
        return int(value)
    except ValueError as e:
        msg = f"Invalid offset: {value!r}"
        raise click.BadParameter(msg) from e


@click.command()
@click.argument("input_file", type=click.Path(exists=True))
@click.option("--at", "at", nargs=2, type=str, help="Exact START END bounds ('*' = any)")
@click.option("--around", type=int, help="Innermost node containing the offset")
@click.option("--after", type=int, help="Outermost node starting at or after the offset")
@click.option("--before", type=int, help="Node ending last at or before the offset")
@click.option("-t", "--type", "node_type", help="Node type or category to match")
@click.option("--json", "as_json", is_flag=True, help="Print the matching node as JSON")
def find(
    input_file: str,
    at: tuple[str, str] | None,
    around: int | None,
    after: int | None,
    before: int | None,
    node_type: str | None,
    as_json: bool,
) -> None:
    """Find a node by source position.

    Example:
        estreewalk find tree.json --around 42 --type CallExpression
        estreewalk find tree.json --at 5 '*' --type Identifier

    """
    modes = [mode for mode in (at, around, after, before) if mode is not None]
    if len(modes) != 1:
        msg = "Use exactly one of --at, --around, --after or --before"
        raise click.UsageError(msg)

    tree = load_tree_or_fail(input_file)
    try:
        if at is not None:
            result = find_node_at(tree, _bound(at[0]), _bound(at[1]), node_type)
        elif around is not None:
            result = find_node_around(tree, around, node_type)
        elif after is not None:
            result = find_node_after(tree, after, node_type)
        else:
            result = find_node_before(tree, before, node_type)
    except KeyError as e:
        msg = f"Unknown node type: {e.args[0]}"
        raise click.ClickException(msg) from e

    if result is None:
        console.print("[yellow]No matching node[/yellow]")
        sys.exit(1)

    node_json = json.dumps(node_to_dict(result.node), indent=2, ensure_ascii=False)
    if as_json:
        click.echo(node_json)
    else:
        syntax = Syntax(node_json, "json", theme="monokai", line_numbers=False)
        console.print(Panel(syntax, title=escape(node_label(result.node))))
