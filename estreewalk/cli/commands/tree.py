"""CLI command for displaying a tree."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from estreewalk.ast.base import Node
from estreewalk.cli.utils import load_tree_or_fail, node_label
from estreewalk.walk import BASE, NODE_TYPES, recursive

console = Console()


def build_rich_tree(node: Node, title: str = "AST", max_depth: int | None = None) -> Tree:
    """Render a tree as a rich ``Tree``, one branch per node."""
    root = Tree(f"[bold]{escape(title)}[/bold]")

    def branch_walker(type_name: str):
        def walk(node, st, c) -> None:
            parent, depth = st
            if max_depth is not None and depth >= max_depth:
                return
            branch = parent.add(escape(node_label(node)))
            BASE[type_name](node, (branch, depth + 1), c)

        return walk

    # Categories keep their default walkers so every node gets one branch
    recursive(node, (root, 0), {type_name: branch_walker(type_name) for type_name in NODE_TYPES})
    return root


@click.command()
@click.argument("input_file", type=click.Path(exists=True))
@click.option("-d", "--max-depth", type=int, help="Only show this many levels")
def tree(input_file: str, max_depth: int | None) -> None:
    """Display a tree file as a node hierarchy."""
    root = load_tree_or_fail(input_file)
    try:
        rendered = build_rich_tree(root, Path(input_file).name, max_depth)
    except KeyError as e:
        msg = f"Unknown node type: {e.args[0]}"
        raise click.ClickException(msg) from e
    console.print(rendered)
