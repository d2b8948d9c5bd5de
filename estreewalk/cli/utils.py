"""Shared helpers for CLI commands."""

from __future__ import annotations

import json

import click
import yaml

from estreewalk.ast.base import Node
from estreewalk.serialization import load_tree


def load_tree_or_fail(input_file: str) -> Node:
    """Load a tree file, turning load errors into CLI errors."""
    try:
        return load_tree(input_file)
    except (OSError, ValueError, json.JSONDecodeError, yaml.YAMLError) as e:
        msg = f"Could not load {input_file}: {e}"
        raise click.ClickException(msg) from e


def node_label(node: Node) -> str:
    """Short one-line description of a node."""
    label = f"{node.type} [{node.start}, {node.end}]"
    name = getattr(node, "name", None)
    if isinstance(name, str):
        return f"{label} {name}"
    raw = getattr(node, "raw", None)
    if isinstance(raw, str):
        return f"{label} {raw}"
    return label
