"""Node lifecycle: starting and finishing nodes during a parse."""

from __future__ import annotations

import logging
import warnings
from typing import Any

from estreewalk.ast.base import Node, Position, SourceLocation
from estreewalk.parser.options import DeprecationMode, ParserOptions

logger = logging.getLogger(__name__)


class NodeFactoryError(Exception):
    """Node factory error exception."""


class NodePositionError(NodeFactoryError, TypeError):
    """Invalid position argument."""

    def __init__(self, method: str, pos: Any) -> None:
        super().__init__(
            f"Parameter 'pos' to {method}(pos, loc) is expected to be a number, "
            f"{type(pos).__name__} given"
        )
        self.method = method
        self.pos = pos


class DeprecatedUsageError(NodeFactoryError):
    """Deprecated calling convention used while deprecations are errors."""


class NodeFactory:
    """Builds tree nodes with the offset conventions the walker relies on.

    Parsers subclass this and keep ``start``/``start_loc`` pointing at the
    current token and ``last_tok_end``/``last_tok_end_loc`` at the end of the
    previous one.
    """

    def __init__(self, options: ParserOptions | None = None) -> None:
        self.options = options or ParserOptions()
        self.start = 0
        self.start_loc: Position | None = None
        self.last_tok_end = 0
        self.last_tok_end_loc: Position | None = None
        self._deprecations_reported: set[str] = set()

    def start_node(self) -> Node:
        """Start a node at the current token."""
        return self._open_node(self.start, self.start_loc)

    def start_node_at(self, pos: int, loc: Position | None = None) -> Node:
        """Start a node at an explicit position."""
        if isinstance(pos, list | tuple):
            pos, loc = self._flatten_position("start_node_at", pos, loc)
        return self._open_node(pos, loc)

    def finish_node(self, node: Node, type: str) -> Node:
        """Finish a node at the end of the previous token."""
        return self._close_node(node, type, self.last_tok_end, self.last_tok_end_loc)

    def finish_node_at(
        self,
        node: Node,
        type: str,
        pos: int,
        loc: Position | None = None,
    ) -> Node:
        """Finish a node at an explicit position."""
        if isinstance(pos, list | tuple):
            pos, loc = self._flatten_position("finish_node_at", pos, loc)
        return self._close_node(node, type, pos, loc)

    def _open_node(self, pos: int, loc: Position | None) -> Node:
        node = Node(start=pos)
        if self.options.locations:
            node.loc = SourceLocation(loc, source=self.options.source_file)
        if self.options.direct_source_file:
            node.sourceFile = self.options.direct_source_file
        if self.options.ranges:
            node.range = [pos, 0]
        return node

    def _close_node(self, node: Node, type: str, pos: int, loc: Position | None) -> Node:
        node.type = type
        node.end = pos
        if self.options.locations:
            node.loc.end = loc
        if self.options.ranges:
            node.range[1] = pos
        return node

    def _flatten_position(
        self,
        method: str,
        pos: list[Any] | tuple[Any, ...],
        loc: Position | None,
    ) -> tuple[int, Position | None]:
        """Unpack a legacy ``[offset, loc]`` pair."""
        if loc is not None or len(pos) != 2:
            raise NodePositionError(method, pos)

        self._report_deprecation(
            method,
            f"Usage of {method}([pos, loc]) is deprecated, call {method}(pos, loc) instead",
        )
        return pos[0], pos[1]

    def _report_deprecation(self, method: str, msg: str) -> None:
        mode = self.options.deprecation
        if mode is DeprecationMode.ERROR:
            raise DeprecatedUsageError(msg)

        if method in self._deprecations_reported:
            return
        self._deprecations_reported.add(method)

        if mode is DeprecationMode.TRACE:
            logger.warning(msg, stack_info=True)
        else:
            warnings.warn(msg, FutureWarning, stacklevel=4)
