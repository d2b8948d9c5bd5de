"""Grammar-driven traversal of ESTree syntax trees."""

from estreewalk.walk.base import (
    BASE,
    CATEGORIES,
    DECLARATION_TYPES,
    MODULE_DECLARATION_TYPES,
    NODE_TYPES,
    ignore,
    skip_through,
)
from estreewalk.walk.registry import Registry, make
from estreewalk.walk.walker import (
    Found,
    ancestor,
    find_node_after,
    find_node_around,
    find_node_at,
    find_node_before,
    recursive,
    simple,
)

__all__ = [
    "BASE",
    "CATEGORIES",
    "DECLARATION_TYPES",
    "MODULE_DECLARATION_TYPES",
    "NODE_TYPES",
    "Found",
    "Registry",
    "ancestor",
    "find_node_after",
    "find_node_around",
    "find_node_at",
    "find_node_before",
    "ignore",
    "make",
    "recursive",
    "simple",
    "skip_through",
]
