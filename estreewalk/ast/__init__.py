"""Tree node classes for ESTree-compatible syntax trees."""

from estreewalk.ast.base import (
    NODE_METADATA,
    Node,
    Position,
    SourceLocation,
    is_closed,
    iter_child_nodes,
    node_fields,
    node_to_dict,
)

__all__ = [
    "NODE_METADATA",
    "Node",
    "Position",
    "SourceLocation",
    "is_closed",
    "iter_child_nodes",
    "node_fields",
    "node_to_dict",
]
