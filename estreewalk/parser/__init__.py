"""Node construction support for parsers."""

from estreewalk.parser.node_factory import (
    DeprecatedUsageError,
    NodeFactory,
    NodeFactoryError,
    NodePositionError,
)
from estreewalk.parser.options import DeprecationMode, ParserOptions

__all__ = [
    "DeprecatedUsageError",
    "DeprecationMode",
    "NodeFactory",
    "NodeFactoryError",
    "NodePositionError",
    "ParserOptions",
]
