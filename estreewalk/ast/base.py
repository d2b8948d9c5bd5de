"""Base tree node classes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

# Metadata attributes every node may carry, as opposed to type-specific fields.
NODE_METADATA = ("type", "start", "end", "loc", "range", "sourceFile")


@dataclass
class Position:
    """Line/column pair. Lines are 1-based, columns 0-based."""

    line: int
    column: int

    def offset(self, n: int) -> Position:
        """Return a copy moved ``n`` columns to the right."""
        return Position(self.line, self.column + n)

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "column": self.column}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Position:
        return cls(line=data["line"], column=data["column"])


@dataclass
class SourceLocation:
    """Source location information for tree nodes."""

    start: Position | None = None
    end: Position | None = None
    source: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "start": self.start.to_dict() if self.start else None,
            "end": self.end.to_dict() if self.end else None,
        }
        if self.source is not None:
            result["source"] = self.source
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SourceLocation:
        start = data.get("start")
        end = data.get("end")
        return cls(
            start=Position.from_dict(start) if start else None,
            end=Position.from_dict(end) if end else None,
            source=data.get("source"),
        )


class Node:
    """ESTree-compatible tree node.

    A node carries a ``type`` tag, ``start``/``end`` source offsets and an open
    set of type-specific fields, all exposed as attributes. Nodes compare by
    identity. Generic helpers live in module-level functions so that any field
    name (JSX ``children``, for one) is available to the tree.
    """

    def __init__(
        self,
        type: str | None = None,
        start: int = 0,
        end: int | None = None,
        **fields: Any,
    ) -> None:
        self.type = type
        self.start = start
        self.end = end
        for name, value in fields.items():
            setattr(self, name, value)

    def __repr__(self) -> str:
        return f"Node(type={self.type!r}, start={self.start!r}, end={self.end!r})"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Node:
        """Build a node tree from a plain ESTree dictionary."""
        if "type" not in data:
            msg = "Node dictionary is missing 'type'"
            raise ValueError(msg)

        fields = {}
        for name, value in data.items():
            if name in ("type", "start", "end"):
                continue
            if name == "loc" and isinstance(value, dict):
                fields[name] = SourceLocation.from_dict(value)
            else:
                fields[name] = _value_from_dict(value)
        return cls(data["type"], data.get("start", 0), data.get("end"), **fields)


def is_closed(node: Node) -> bool:
    """Whether the node has been finished (type and end set)."""
    return node.type is not None and node.end is not None


def node_fields(node: Node) -> dict[str, Any]:
    """Return the type-specific fields of a node in insertion order."""
    return {name: value for name, value in vars(node).items() if name not in NODE_METADATA}


def iter_child_nodes(node: Node) -> Iterator[Node]:
    """Yield directly owned child nodes, without grammar knowledge."""
    for value in node_fields(node).values():
        if isinstance(value, Node):
            yield value
        elif isinstance(value, list):
            yield from (v for v in value if isinstance(v, Node))


def node_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node tree to a plain ESTree dictionary."""
    result: dict[str, Any] = {"type": node.type, "start": node.start, "end": node.end}
    for name, value in vars(node).items():
        if name in ("type", "start", "end"):
            continue
        result[name] = _value_to_dict(value)
    return result


def _value_to_dict(value: Any) -> Any:
    if isinstance(value, Node):
        return node_to_dict(value)
    if isinstance(value, SourceLocation | Position):
        return value.to_dict()
    if isinstance(value, list):
        return [_value_to_dict(v) for v in value]
    return value


def _value_from_dict(value: Any) -> Any:
    if isinstance(value, dict):
        # Only dictionaries tagged with a type are nodes (Literal.regex is not)
        return Node.from_dict(value) if "type" in value else value
    if isinstance(value, list):
        return [_value_from_dict(v) for v in value]
    return value
