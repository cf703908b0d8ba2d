"""Scope-tracking walker — a recursive walker that records lexical bindings."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from . import constants
from .walk import build_walker, catch_clauses

logger = logging.getLogger(__name__)


class BindingKind(str, Enum):
    ARGUMENT = "argument"
    FUNCTION = "function"
    FUNCTION_NAME = "function-name"
    CATCH_PARAMETER = "catch-parameter"
    VARIABLE = "variable"


@dataclass(frozen=True)
class Binding:
    """A name introduced into a scope, and the Identifier that declared it."""

    kind: BindingKind
    node: Any


@dataclass(eq=False)
class Scope:
    """One level of the scope chain.

    ``parent`` links to the enclosing scope for lookups only; nothing here
    writes through it. A catch scope holds only its catch parameter; ``var``
    declarations inside the catch body belong to the enclosing function.
    ``node`` is the function or catch clause that opened the scope, and is
    ``None`` for a scope the caller created.
    """

    variables: dict[str, Binding] = field(default_factory=dict)
    parent: Optional[Scope] = None
    is_catch: bool = False
    node: Any = None

    def declare(self, kind: BindingKind, ident) -> None:
        self.variables[ident.name] = Binding(kind=kind, node=ident)

    def function_scope(self) -> Scope:
        """The nearest scope, starting here, that is not a catch scope."""
        scope = self
        while scope.is_catch and scope.parent is not None:
            scope = scope.parent
        return scope

    def in_function(self) -> bool:
        """True if this scope is, or sits inside, a function body."""
        return self.function_scope().parent is not None

    def lookup(self, name: str) -> Optional[Binding]:
        """Resolve *name* here or in the nearest enclosing scope."""
        scope: Optional[Scope] = self
        while scope is not None:
            if name in scope.variables:
                return scope.variables[name]
            scope = scope.parent
        return None

    def depth(self) -> int:
        return 0 if self.parent is None else self.parent.depth() + 1


def _function(node, scope: Scope, c) -> None:
    inner = Scope(parent=scope, node=node)
    for param in node.params:
        inner.declare(BindingKind.ARGUMENT, param)
    if getattr(node, "id", None):
        if node.type == constants.FUNCTION_DECLARATION:
            scope.declare(BindingKind.FUNCTION, node.id)
        else:
            inner.declare(BindingKind.FUNCTION_NAME, node.id)
    c(node.body, inner, constants.SCOPE_BODY)


def _try_statement(node, scope: Scope, c) -> None:
    c(node.block, scope, constants.STATEMENT)
    for handler in catch_clauses(node):
        inner = Scope(parent=scope, is_catch=True, node=handler)
        if getattr(handler, "param", None):
            inner.declare(BindingKind.CATCH_PARAMETER, handler.param)
        c(handler.body, inner, constants.SCOPE_BODY)
    if getattr(node, "finalizer", None):
        c(node.finalizer, scope, constants.STATEMENT)


def _variable_declaration(node, scope: Scope, c) -> None:
    target = scope.function_scope()
    for decl in node.declarations:
        target.declare(BindingKind.VARIABLE, decl.id)
        if getattr(decl, "init", None):
            c(decl.init, scope, constants.EXPRESSION)


scope_visitor = build_walker(
    {
        constants.FUNCTION: _function,
        "TryStatement": _try_statement,
        constants.VARIABLE_DECLARATION: _variable_declaration,
    }
)
