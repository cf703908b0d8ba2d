"""Dispatch-table tree walker for ESTree-shaped syntax trees.

Three traversal modes share one table format, a plain ``dict`` from node type
(or category) name to a handler ``(node, state, c)``:

- ``simple_walk`` calls side-effecting visitors keyed by type or category
  while the table drives the descent.
- ``recursive_walk`` lets the caller replace table entries; an override that
  does not call its continuation ``c`` stops descent into that subtree.
- ``build_walker`` layers overrides over a base table, so custom walkers
  (e.g. ``scope.scope_visitor``) inherit every shape they do not override.

Category names (``Statement``, ``Expression``, ``ScopeBody``, ``ForInit``,
``Function``) are table entries too. Handlers pass one as the third argument
of ``c`` to dispatch a child by its syntactic role instead of its own type.

The ``state`` argument is threaded through every call unchanged unless a
handler passes something else to ``c``. Mutable state is shared between
siblings; a handler that wants isolated state must pass a new value down.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

from . import constants

logger = logging.getLogger(__name__)

Continuation = Callable[..., None]
Handler = Callable[[Any, Any, Continuation], None]
Visitor = Callable[[Any, Any], None]


class UnknownNodeTypeError(LookupError):
    """Raised when dispatch reaches a type name absent from the active table."""

    def __init__(self, type_name: str):
        super().__init__(f"No walker for node type: {type_name!r}")
        self.type_name = type_name


def _lookup(table: Mapping[str, Any], type_name: str) -> Any:
    try:
        return table[type_name]
    except KeyError:
        raise UnknownNodeTypeError(type_name) from None


# ── traversal drivers ────────────────────────────────────────────


def simple_walk(
    root,
    visitors: Mapping[str, Visitor],
    base: Optional[Mapping[str, Handler]] = None,
    state: Any = None,
) -> None:
    """Walk *root*, calling ``visitors[name](node, state)`` along the way.

    A visitor fires whenever a node is dispatched under a name it is keyed
    by, concrete type or category, so ``{"Expression": f}`` sees every
    expression. Visitors cannot alter the descent, which always follows
    *base* (default ``BASE``).
    """
    table = BASE if base is None else base

    def c(node, st, override: Optional[str] = None) -> None:
        type_name = override or node.type
        found = visitors.get(type_name)
        if found:
            found(node, st)
        _lookup(table, type_name)(node, st, c)

    c(root, state)


def recursive_walk(
    root,
    state: Any,
    overrides: Mapping[str, Handler],
    base: Optional[Mapping[str, Handler]] = None,
) -> None:
    """Walk *root* through ``build_walker(overrides, base)``.

    Each override replaces the default handler outright; it recurses into
    children only by calling its continuation, and may pass different state
    or a category override when doing so.
    """
    visitor = build_walker(overrides, base)

    def c(node, st, override: Optional[str] = None) -> None:
        _lookup(visitor, override or node.type)(node, st, c)

    c(root, state)


def build_walker(
    overrides: Mapping[str, Handler],
    base: Optional[Mapping[str, Handler]] = None,
) -> dict[str, Handler]:
    """Return a complete table: *overrides* layered over *base*.

    The keys of *base* (default ``BASE``) define the result; override keys
    not present there are ignored rather than rejected.
    """
    if base is None:
        base = BASE
    ignored = [type_name for type_name in overrides if type_name not in base]
    if ignored:
        logger.debug("Ignoring overrides for unknown node types: %s", ignored)
    return {
        type_name: overrides[type_name] if type_name in overrides else handler
        for type_name, handler in base.items()
    }


# ── default node handlers ────────────────────────────────────────


def _skip_through(node, st, c) -> None:
    c(node, st)


def _ignore(node, st, c) -> None:
    pass


def _walk_statement_list(node, st, c) -> None:
    for stmt in node.body:
        c(stmt, st, constants.STATEMENT)


def _walk_expression_statement(node, st, c) -> None:
    c(node.expression, st, constants.EXPRESSION)


def _walk_if(node, st, c) -> None:
    c(node.test, st, constants.EXPRESSION)
    c(node.consequent, st, constants.STATEMENT)
    if getattr(node, "alternate", None):
        c(node.alternate, st, constants.STATEMENT)


def _walk_labeled(node, st, c) -> None:
    c(node.body, st, constants.STATEMENT)


def _walk_with(node, st, c) -> None:
    c(node.object, st, constants.EXPRESSION)
    c(node.body, st, constants.STATEMENT)


def _walk_switch(node, st, c) -> None:
    c(node.discriminant, st, constants.EXPRESSION)
    for case in node.cases:
        if getattr(case, "test", None):
            c(case.test, st, constants.EXPRESSION)
        for stmt in case.consequent:
            c(stmt, st, constants.STATEMENT)


def _walk_return(node, st, c) -> None:
    if getattr(node, "argument", None):
        c(node.argument, st, constants.EXPRESSION)


def _walk_throw(node, st, c) -> None:
    c(node.argument, st, constants.EXPRESSION)


def catch_clauses(node) -> list:
    """Catch clauses of a ``TryStatement``.

    Parser API trees list them under ``handlers``; current ESTree trees carry
    at most one, under ``handler``.
    """
    handlers = getattr(node, "handlers", None)
    if handlers is not None:
        return list(handlers)
    handler = getattr(node, "handler", None)
    return [handler] if handler else []


def _walk_try(node, st, c) -> None:
    c(node.block, st, constants.STATEMENT)
    for handler in catch_clauses(node):
        c(handler.body, st, constants.SCOPE_BODY)
    if getattr(node, "finalizer", None):
        c(node.finalizer, st, constants.STATEMENT)


def _walk_while(node, st, c) -> None:
    c(node.test, st, constants.EXPRESSION)
    c(node.body, st, constants.STATEMENT)


def _walk_for(node, st, c) -> None:
    if getattr(node, "init", None):
        c(node.init, st, constants.FOR_INIT)
    if getattr(node, "test", None):
        c(node.test, st, constants.EXPRESSION)
    if getattr(node, "update", None):
        c(node.update, st, constants.EXPRESSION)
    c(node.body, st, constants.STATEMENT)


def _walk_for_in(node, st, c) -> None:
    c(node.left, st, constants.FOR_INIT)
    c(node.right, st, constants.EXPRESSION)
    c(node.body, st, constants.STATEMENT)


def _walk_for_init(node, st, c) -> None:
    if node.type == constants.VARIABLE_DECLARATION:
        c(node, st)
    else:
        c(node, st, constants.EXPRESSION)


def _walk_function_node(node, st, c) -> None:
    c(node, st, constants.FUNCTION)


def _walk_variable_declaration(node, st, c) -> None:
    for decl in node.declarations:
        if getattr(decl, "init", None):
            c(decl.init, st, constants.EXPRESSION)


def _walk_function(node, st, c) -> None:
    c(node.body, st, constants.SCOPE_BODY)


def _walk_scope_body(node, st, c) -> None:
    c(node, st, constants.STATEMENT)


def _walk_array(node, st, c) -> None:
    for elt in node.elements:
        if elt:
            c(elt, st, constants.EXPRESSION)


def _walk_object(node, st, c) -> None:
    for prop in node.properties:
        c(prop.value, st, constants.EXPRESSION)


def _walk_sequence(node, st, c) -> None:
    for expr in node.expressions:
        c(expr, st, constants.EXPRESSION)


def _walk_unary(node, st, c) -> None:
    c(node.argument, st, constants.EXPRESSION)


def _walk_binary(node, st, c) -> None:
    c(node.left, st, constants.EXPRESSION)
    c(node.right, st, constants.EXPRESSION)


def _walk_conditional(node, st, c) -> None:
    c(node.test, st, constants.EXPRESSION)
    c(node.consequent, st, constants.EXPRESSION)
    c(node.alternate, st, constants.EXPRESSION)


def _walk_call(node, st, c) -> None:
    c(node.callee, st, constants.EXPRESSION)
    for arg in getattr(node, "arguments", None) or []:
        c(arg, st, constants.EXPRESSION)


def _walk_member(node, st, c) -> None:
    c(node.object, st, constants.EXPRESSION)
    if node.computed:
        c(node.property, st, constants.EXPRESSION)


BASE: dict[str, Handler] = {
    # programs and statements
    "Program": _walk_statement_list,
    "BlockStatement": _walk_statement_list,
    constants.STATEMENT: _skip_through,
    "EmptyStatement": _ignore,
    "ExpressionStatement": _walk_expression_statement,
    "IfStatement": _walk_if,
    "LabeledStatement": _walk_labeled,
    "BreakStatement": _ignore,
    "ContinueStatement": _ignore,
    "WithStatement": _walk_with,
    "SwitchStatement": _walk_switch,
    "ReturnStatement": _walk_return,
    "ThrowStatement": _walk_throw,
    "TryStatement": _walk_try,
    "WhileStatement": _walk_while,
    "DoWhileStatement": _walk_while,
    "ForStatement": _walk_for,
    "ForInStatement": _walk_for_in,
    constants.FOR_INIT: _walk_for_init,
    "DebuggerStatement": _ignore,
    # declarations
    constants.FUNCTION_DECLARATION: _walk_function_node,
    constants.VARIABLE_DECLARATION: _walk_variable_declaration,
    constants.FUNCTION: _walk_function,
    constants.SCOPE_BODY: _walk_scope_body,
    # expressions
    constants.EXPRESSION: _skip_through,
    "ThisExpression": _ignore,
    "ArrayExpression": _walk_array,
    "ObjectExpression": _walk_object,
    "FunctionExpression": _walk_function_node,
    "SequenceExpression": _walk_sequence,
    "UnaryExpression": _walk_unary,
    "UpdateExpression": _walk_unary,
    "BinaryExpression": _walk_binary,
    "AssignmentExpression": _walk_binary,
    "LogicalExpression": _walk_binary,
    "ConditionalExpression": _walk_conditional,
    "NewExpression": _walk_call,
    "CallExpression": _walk_call,
    "MemberExpression": _walk_member,
    constants.IDENTIFIER: _ignore,
    "Literal": _ignore,
}
