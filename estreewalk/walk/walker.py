"""Traversal primitives driven by a walker registry.

A simple walk calls visitor callbacks for specific node types::

    simple(tree, {"Expression": lambda node, state: ...})

Visitors may be keyed by concrete node types as well as by categories such as
``Expression``, ``Statement`` or ``ScopeBody``. ``registry`` selects a custom
set of walkers (see :func:`estreewalk.walk.registry.make`) and ``state`` is
threaded through every callback.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from estreewalk.ast.base import Node
from estreewalk.walk.base import BASE
from estreewalk.walk.registry import WalkFunc, make

Visitor = Callable[..., None]
NodeTest = Callable[[str, Node], bool]


@dataclass(frozen=True)
class Found:
    """Search result: the matching node and the state it was reached with."""

    node: Node
    state: Any = None


def _registry(registry: Mapping[str, WalkFunc] | None) -> Mapping[str, WalkFunc]:
    return BASE if registry is None else registry


def _make_test(test: str | NodeTest | None) -> NodeTest:
    if isinstance(test, str):
        return lambda type_name, node: type_name == test
    if test is None:
        return lambda type_name, node: True
    return test


def simple(
    node: Node,
    visitors: Mapping[str, Visitor],
    registry: Mapping[str, WalkFunc] | None = None,
    state: Any = None,
    override: str | None = None,
) -> None:
    """Walk the tree, calling ``visitors[type](node, state)`` after each descent."""
    walkers = _registry(registry)

    def c(node: Node, st: Any, override: str | None = None) -> None:
        type_name = override or node.type
        walkers[type_name](node, st, c)
        found = visitors.get(type_name)
        if found is not None:
            found(node, st)

    c(node, state, override)


def ancestor(
    node: Node,
    visitors: Mapping[str, Visitor],
    registry: Mapping[str, WalkFunc] | None = None,
    state: Any = None,
) -> None:
    """Walk the tree keeping the list of ancestors of the current node.

    Visitors are called as ``visitor(node, state, ancestors)``, where
    ``ancestors`` runs from the root to ``node`` inclusive. When no state is
    given the ancestor list is passed as state as well. The list is reused
    during the walk; copy it to keep it.
    """
    walkers = _registry(registry)
    ancestors: list[Node] = []

    def c(node: Node, st: Any, override: str | None = None) -> None:
        type_name = override or node.type
        found = visitors.get(type_name)
        # A node re-dispatched under another category is pushed only once
        is_new = not ancestors or node is not ancestors[-1]
        if is_new:
            ancestors.append(node)
        walkers[type_name](node, st, c)
        if found is not None:
            found(node, ancestors if st is None else st, ancestors)
        if is_new:
            ancestors.pop()

    c(node, state)


def recursive(
    node: Node,
    state: Any,
    funcs: Mapping[str, WalkFunc] | None = None,
    registry: Mapping[str, WalkFunc] | None = None,
    override: str | None = None,
) -> None:
    """Walk the tree with walkers that decide themselves whether to descend.

    ``funcs`` override the walkers of ``registry`` for the types they name.
    Each receives ``(node, state, c)`` and only the children it passes to
    ``c`` are visited; the state given to ``c`` is what the child sees.
    """
    walkers = make(funcs, registry) if funcs else _registry(registry)

    def c(node: Node, st: Any, override: str | None = None) -> None:
        walkers[override or node.type](node, st, c)

    c(node, state, override)


def find_node_at(
    node: Node,
    start: int | None,
    end: int | None,
    test: str | NodeTest | None = None,
    registry: Mapping[str, WalkFunc] | None = None,
    state: Any = None,
) -> Found | None:
    """Find a node with the given start, end and type.

    ``start``, ``end`` and ``test`` may all be ``None`` to act as wildcards.
    Returns ``None`` when no node matches.
    """
    test = _make_test(test)
    walkers = _registry(registry)
    result: Found | None = None

    def c(node: Node, st: Any, override: str | None = None) -> None:
        nonlocal result
        if result is not None:
            return
        type_name = override or node.type
        if (start is None or node.start <= start) and (end is None or node.end >= end):
            walkers[type_name](node, st, c)
            if result is not None:
                return
        if (
            (start is None or node.start == start)
            and (end is None or node.end == end)
            and test(type_name, node)
        ):
            result = Found(node, st)

    c(node, state)
    return result


def find_node_around(
    node: Node,
    pos: int,
    test: str | NodeTest | None = None,
    registry: Mapping[str, WalkFunc] | None = None,
    state: Any = None,
) -> Found | None:
    """Find the innermost matching node that contains ``pos``."""
    test = _make_test(test)
    walkers = _registry(registry)
    result: Found | None = None

    def c(node: Node, st: Any, override: str | None = None) -> None:
        nonlocal result
        if result is not None:
            return
        if node.start > pos or node.end < pos:
            return
        type_name = override or node.type
        walkers[type_name](node, st, c)
        # A match below this node takes precedence over the node itself
        if result is None and test(type_name, node):
            result = Found(node, st)

    c(node, state)
    return result


def find_node_after(
    node: Node,
    pos: int,
    test: str | NodeTest | None = None,
    registry: Mapping[str, WalkFunc] | None = None,
    state: Any = None,
) -> Found | None:
    """Find the outermost matching node that starts at or after ``pos``."""
    test = _make_test(test)
    walkers = _registry(registry)
    result: Found | None = None

    def c(node: Node, st: Any, override: str | None = None) -> None:
        nonlocal result
        if result is not None or node.end < pos:
            return
        type_name = override or node.type
        if node.start >= pos and test(type_name, node):
            result = Found(node, st)
            return
        walkers[type_name](node, st, c)

    c(node, state)
    return result


def find_node_before(
    node: Node,
    pos: int,
    test: str | NodeTest | None = None,
    registry: Mapping[str, WalkFunc] | None = None,
    state: Any = None,
) -> Found | None:
    """Find the matching node that ends at or before ``pos`` and ends last.

    The whole tree is scanned; among nodes with the same end the first one
    reached wins.
    """
    test = _make_test(test)
    walkers = _registry(registry)
    best: Found | None = None

    def c(node: Node, st: Any, override: str | None = None) -> None:
        nonlocal best
        if node.start > pos:
            return
        type_name = override or node.type
        if (
            node.end <= pos
            and (best is None or best.node.end < node.end)
            and test(type_name, node)
        ):
            best = Found(node, st)
        walkers[type_name](node, st, c)

    c(node, state)
    return best
