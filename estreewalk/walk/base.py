"""Default walkers for every ESTree node type and category.

Each walker receives ``(node, state, c)`` and calls the continuation ``c`` on
every child, in source order, optionally naming the category the child is
dispatched under. Besides the concrete node types the table holds these
categories:

``Statement``, ``Declaration``, ``ForInit``, ``Expression``, ``Pattern``,
``Function``, ``Class``, ``ScopeBody``, ``ScopeExpression``,
``ModuleDeclaration`` and ``ModuleSpecifier``.

Visitors keyed by a category name fire for every node dispatched under it.
"""

from __future__ import annotations

from typing import Any

from estreewalk.walk.registry import Continuation, Registry

MODULE_DECLARATION_TYPES = frozenset(
    {
        "ImportDeclaration",
        "ExportNamedDeclaration",
        "ExportDefaultDeclaration",
        "ExportAllDeclaration",
    }
)

DECLARATION_TYPES = frozenset(
    {
        "VariableDeclaration",
        "FunctionDeclaration",
        "ClassDeclaration",
    }
)

CATEGORIES = frozenset(
    {
        "Statement",
        "Declaration",
        "ForInit",
        "Expression",
        "Pattern",
        "Function",
        "Class",
        "ScopeBody",
        "ScopeExpression",
        "ModuleDeclaration",
        "ModuleSpecifier",
    }
)


def skip_through(node: Any, st: Any, c: Continuation) -> None:
    """Re-dispatch the node under its own type."""
    c(node, st)


def ignore(node: Any, st: Any, c: Continuation) -> None:
    """Leaf walker."""


# Statements


def _program(node, st, c):
    for child in node.body:
        if child.type in MODULE_DECLARATION_TYPES:
            c(child, st, "ModuleDeclaration")
        else:
            c(child, st, "Statement")


def _block_statement(node, st, c):
    for child in node.body:
        c(child, st, "Statement")


def _statement(node, st, c):
    if node.type in DECLARATION_TYPES:
        c(node, st, "Declaration")
    else:
        c(node, st)


def _expression_statement(node, st, c):
    c(node.expression, st, "Expression")


def _if_statement(node, st, c):
    c(node.test, st, "Expression")
    c(node.consequent, st, "Statement")
    if getattr(node, "alternate", None):
        c(node.alternate, st, "Statement")


def _labeled_statement(node, st, c):
    c(node.body, st, "Statement")


def _with_statement(node, st, c):
    c(node.object, st, "Expression")
    c(node.body, st, "Statement")


def _switch_statement(node, st, c):
    c(node.discriminant, st, "Expression")
    for case in node.cases:
        c(case, st, "SwitchCase")


def _switch_case(node, st, c):
    if getattr(node, "test", None):
        c(node.test, st, "Expression")
    for cons in node.consequent:
        c(cons, st, "Statement")


def _optional_argument(node, st, c):
    if getattr(node, "argument", None):
        c(node.argument, st, "Expression")


def _argument(node, st, c):
    c(node.argument, st, "Expression")


def _try_statement(node, st, c):
    c(node.block, st, "Statement")
    if getattr(node, "handler", None):
        c(node.handler, st)
    if getattr(node, "finalizer", None):
        c(node.finalizer, st, "Statement")


def _catch_clause(node, st, c):
    # ES2019 optional catch binding leaves param empty
    if getattr(node, "param", None):
        c(node.param, st, "Pattern")
    c(node.body, st, "ScopeBody")


def _while_statement(node, st, c):
    c(node.test, st, "Expression")
    c(node.body, st, "Statement")


def _for_statement(node, st, c):
    if getattr(node, "init", None):
        c(node.init, st, "ForInit")
    if getattr(node, "test", None):
        c(node.test, st, "Expression")
    if getattr(node, "update", None):
        c(node.update, st, "Expression")
    c(node.body, st, "Statement")


def _for_in_statement(node, st, c):
    c(node.left, st, "ForInit")
    c(node.right, st, "Expression")
    c(node.body, st, "Statement")


def _for_init(node, st, c):
    if node.type == "VariableDeclaration":
        c(node, st)
    else:
        c(node, st, "Expression")


# Declarations and functions


def _function_node(node, st, c):
    c(node, st, "Function")


def _variable_declaration(node, st, c):
    for decl in node.declarations:
        c(decl, st)


def _variable_declarator(node, st, c):
    c(node.id, st, "Pattern")
    if getattr(node, "init", None):
        c(node.init, st, "Expression")


def _function(node, st, c):
    if getattr(node, "id", None):
        c(node.id, st, "Pattern")
    for param in node.params:
        c(param, st, "Pattern")
    c(node.body, st, "ScopeExpression" if getattr(node, "expression", False) else "ScopeBody")


def _scope_body(node, st, c):
    c(node, st, "Statement")


def _scope_expression(node, st, c):
    c(node, st, "Expression")


# Patterns


def _pattern(node, st, c):
    if node.type in ("Identifier", "MemberExpression"):
        c(node, st, "Expression")
    else:
        c(node, st)


def _rest_element(node, st, c):
    c(node.argument, st, "Pattern")


def _array_pattern(node, st, c):
    for elt in node.elements:
        if elt:
            c(elt, st, "Pattern")


def _object_pattern(node, st, c):
    for prop in node.properties:
        if prop.type == "Property":
            if getattr(prop, "computed", False):
                c(prop.key, st, "Expression")
            c(prop.value, st, "Pattern")
        elif prop.type == "RestElement":
            c(prop.argument, st, "Pattern")


# Expressions


def _array_expression(node, st, c):
    for elt in node.elements:
        if elt:
            c(elt, st, "Expression")


def _object_expression(node, st, c):
    for prop in node.properties:
        c(prop, st)


def _template_literal(node, st, c):
    for quasi in node.quasis:
        c(quasi, st)
    for expr in node.expressions:
        c(expr, st, "Expression")


def _sequence_expression(node, st, c):
    for expr in node.expressions:
        c(expr, st, "Expression")


def _binary_expression(node, st, c):
    c(node.left, st, "Expression")
    c(node.right, st, "Expression")


def _assignment_expression(node, st, c):
    c(node.left, st, "Pattern")
    c(node.right, st, "Expression")


def _conditional_expression(node, st, c):
    c(node.test, st, "Expression")
    c(node.consequent, st, "Expression")
    c(node.alternate, st, "Expression")


def _call_expression(node, st, c):
    c(node.callee, st, "Expression")
    for arg in getattr(node, "arguments", None) or ():
        c(arg, st, "Expression")


def _member_expression(node, st, c):
    c(node.object, st, "Expression")
    if getattr(node, "computed", False):
        c(node.property, st, "Expression")


def _import_expression(node, st, c):
    c(node.source, st, "Expression")
    if getattr(node, "options", None):
        c(node.options, st, "Expression")


def _tagged_template_expression(node, st, c):
    c(node.tag, st, "Expression")
    c(node.quasi, st)


# Modules


def _export_default_declaration(node, st, c):
    if node.declaration.type in DECLARATION_TYPES:
        c(node.declaration, st, "Declaration")
    else:
        c(node.declaration, st, "Expression")


def _export_named_declaration(node, st, c):
    if getattr(node, "declaration", None):
        c(node.declaration, st, "Declaration")
    for spec in node.specifiers:
        c(spec, st, "ModuleSpecifier")
    if getattr(node, "source", None):
        c(node.source, st, "Expression")


def _export_all_declaration(node, st, c):
    if getattr(node, "exported", None):
        c(node.exported, st)
    c(node.source, st, "Expression")


def _import_declaration(node, st, c):
    for spec in node.specifiers:
        c(spec, st, "ModuleSpecifier")
    c(node.source, st, "Expression")


# Classes


def _class_node(node, st, c):
    c(node, st, "Class")


def _class(node, st, c):
    if getattr(node, "id", None):
        c(node.id, st, "Pattern")
    if getattr(node, "superClass", None):
        c(node.superClass, st, "Expression")
    c(node.body, st, "ClassBody")


def _class_body(node, st, c):
    for item in node.body:
        c(item, st)


def _method_definition(node, st, c):
    if getattr(node, "computed", False):
        c(node.key, st, "Expression")
    c(node.value, st, "Expression")


def _property_definition(node, st, c):
    if getattr(node, "computed", False):
        c(node.key, st, "Expression")
    if getattr(node, "value", None):
        c(node.value, st, "Expression")


BASE = Registry(
    {
        # Statements
        "Program": _program,
        "BlockStatement": _block_statement,
        "StaticBlock": _block_statement,
        "Statement": _statement,
        "EmptyStatement": ignore,
        "ExpressionStatement": _expression_statement,
        "ParenthesizedExpression": _expression_statement,
        "ChainExpression": _expression_statement,
        "IfStatement": _if_statement,
        "LabeledStatement": _labeled_statement,
        "BreakStatement": ignore,
        "ContinueStatement": ignore,
        "WithStatement": _with_statement,
        "SwitchStatement": _switch_statement,
        "SwitchCase": _switch_case,
        "ReturnStatement": _optional_argument,
        "YieldExpression": _optional_argument,
        "AwaitExpression": _optional_argument,
        "ThrowStatement": _argument,
        "SpreadElement": _argument,
        "TryStatement": _try_statement,
        "CatchClause": _catch_clause,
        "WhileStatement": _while_statement,
        "DoWhileStatement": _while_statement,
        "ForStatement": _for_statement,
        "ForInStatement": _for_in_statement,
        "ForOfStatement": _for_in_statement,
        "ForInit": _for_init,
        "DebuggerStatement": ignore,
        # Declarations and functions
        "Declaration": skip_through,
        "FunctionDeclaration": _function_node,
        "FunctionExpression": _function_node,
        "ArrowFunctionExpression": _function_node,
        "VariableDeclaration": _variable_declaration,
        "VariableDeclarator": _variable_declarator,
        "Function": _function,
        "ScopeBody": _scope_body,
        "ScopeExpression": _scope_expression,
        # Patterns
        "Pattern": _pattern,
        "RestElement": _rest_element,
        "ArrayPattern": _array_pattern,
        "ObjectPattern": _object_pattern,
        "AssignmentPattern": _assignment_expression,
        # Expressions
        "Expression": skip_through,
        "ThisExpression": ignore,
        "Super": ignore,
        "MetaProperty": ignore,
        "ArrayExpression": _array_expression,
        "ObjectExpression": _object_expression,
        "TemplateLiteral": _template_literal,
        "TemplateElement": ignore,
        "TaggedTemplateExpression": _tagged_template_expression,
        "SequenceExpression": _sequence_expression,
        "UnaryExpression": _argument,
        "UpdateExpression": _argument,
        "BinaryExpression": _binary_expression,
        "LogicalExpression": _binary_expression,
        "AssignmentExpression": _assignment_expression,
        "ConditionalExpression": _conditional_expression,
        "NewExpression": _call_expression,
        "CallExpression": _call_expression,
        "MemberExpression": _member_expression,
        "ImportExpression": _import_expression,
        "Identifier": ignore,
        "PrivateIdentifier": ignore,
        "Literal": ignore,
        # Modules
        "ModuleDeclaration": skip_through,
        "ExportDefaultDeclaration": _export_default_declaration,
        "ExportNamedDeclaration": _export_named_declaration,
        "ExportAllDeclaration": _export_all_declaration,
        "ImportDeclaration": _import_declaration,
        "ModuleSpecifier": skip_through,
        "ImportSpecifier": ignore,
        "ImportDefaultSpecifier": ignore,
        "ImportNamespaceSpecifier": ignore,
        "ExportSpecifier": ignore,
        # Classes
        "ClassDeclaration": _class_node,
        "ClassExpression": _class_node,
        "Class": _class,
        "ClassBody": _class_body,
        "MethodDefinition": _method_definition,
        "Property": _method_definition,
        "PropertyDefinition": _property_definition,
    }
)

NODE_TYPES = frozenset(type_name for type_name in BASE if type_name not in CATEGORIES)
