"""estreewalk - Grammar-driven traversal of ESTree syntax trees."""

from estreewalk.ast import Node, Position, SourceLocation
from estreewalk.parser import NodeFactory, ParserOptions
from estreewalk.version import (
    ECMA_VERSION,
    ESTREEWALK_VERSION,
    ESTREEWALK_VERSION_MAJOR,
    ESTREEWALK_VERSION_MINOR,
    ESTREEWALK_VERSION_PATCH,
    get_version_info,
    get_version_string,
)
from estreewalk.walk import (
    BASE,
    Found,
    Registry,
    ancestor,
    find_node_after,
    find_node_around,
    find_node_at,
    find_node_before,
    make,
    recursive,
    simple,
)

__version__ = ESTREEWALK_VERSION
__all__ = [
    "BASE",
    "ECMA_VERSION",
    "ESTREEWALK_VERSION",
    "ESTREEWALK_VERSION_MAJOR",
    "ESTREEWALK_VERSION_MINOR",
    "ESTREEWALK_VERSION_PATCH",
    "Found",
    "Node",
    "NodeFactory",
    "ParserOptions",
    "Position",
    "Registry",
    "SourceLocation",
    "ancestor",
    "find_node_after",
    "find_node_around",
    "find_node_at",
    "find_node_before",
    "get_version_info",
    "get_version_string",
    "make",
    "recursive",
    "simple",
]
