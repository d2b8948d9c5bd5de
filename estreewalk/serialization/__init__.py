"""Serialization of ESTree trees to and from JSON and YAML."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from estreewalk.serialization.json_serializer import JsonSerializer, count_nodes
from estreewalk.serialization.yaml_serializer import YamlSerializer

if TYPE_CHECKING:
    from estreewalk.ast.base import Node

YAML_SUFFIXES = (".yaml", ".yml")


def load_tree(path: str | Path) -> Node:
    """Load a tree from a JSON or YAML file, chosen by extension."""
    path = Path(path)
    serializer = YamlSerializer() if path.suffix.lower() in YAML_SUFFIXES else JsonSerializer()
    return serializer.deserialize(input_path=path)


__all__ = [
    "JsonSerializer",
    "YamlSerializer",
    "count_nodes",
    "load_tree",
]
