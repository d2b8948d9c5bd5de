"""Shared tree fixtures."""

import pytest

from estreewalk.ast import Node


def ident(name, start, end):
    return Node("Identifier", start, end, name=name)


def expr_stmt(expression, start, end):
    return Node("ExpressionStatement", start, end, expression=expression)


@pytest.fixture
def if_tree():
    """``if (a) { f(b); } else { g(c); }``"""
    consequent = Node(
        "BlockStatement",
        7,
        16,
        body=[
            expr_stmt(
                Node("CallExpression", 9, 13, callee=ident("f", 9, 10), arguments=[ident("b", 11, 12)]),
                9,
                14,
            )
        ],
    )
    alternate = Node(
        "BlockStatement",
        22,
        31,
        body=[
            expr_stmt(
                Node("CallExpression", 24, 28, callee=ident("g", 24, 25), arguments=[ident("c", 26, 27)]),
                24,
                29,
            )
        ],
    )
    if_stmt = Node(
        "IfStatement",
        0,
        31,
        test=ident("a", 4, 5),
        consequent=consequent,
        alternate=alternate,
    )
    return Node("Program", 0, 31, body=[if_stmt], sourceType="script")


@pytest.fixture
def call_tree():
    """``f(g(x))   ;`` with ``f(...)`` at [0, 10] and ``g(x)`` at [2, 6]."""
    inner = Node("CallExpression", 2, 6, callee=ident("g", 2, 3), arguments=[ident("x", 4, 5)])
    outer = Node("CallExpression", 0, 10, callee=ident("f", 0, 1), arguments=[inner])
    return Node("Program", 0, 11, body=[expr_stmt(outer, 0, 11)], sourceType="script")


@pytest.fixture
def statements_tree():
    """Three statements ending at offsets 5, 12 and 20."""
    return Node(
        "Program",
        0,
        20,
        body=[
            expr_stmt(ident("first", 0, 4), 0, 5),
            expr_stmt(ident("second", 6, 11), 6, 12),
            expr_stmt(ident("third", 13, 19), 13, 20),
        ],
        sourceType="script",
    )
