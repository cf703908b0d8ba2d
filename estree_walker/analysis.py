"""Walkers built on the core: node-type counts, scope listing, global references."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Any, Optional

from . import constants
from .scope import Scope, scope_visitor
from .walk import BASE, recursive_walk, simple_walk

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScopeEntry:
    """A scope seen during traversal and the node whose body it covers."""

    owner: Any
    scope: Scope


def count_node_types(root) -> dict[str, int]:
    """Return a frequency map of concrete node types reachable from *root*.

    Category names never appear as keys.
    """
    counts: Counter[str] = Counter()

    def visit(node, _st) -> None:
        counts[node.type] += 1

    visitors = {
        type_name: visit
        for type_name in BASE
        if type_name not in constants.CATEGORY_NAMES
    }
    simple_walk(root, visitors)
    return dict(counts)


def collect_scopes(root, global_scope: Optional[Scope] = None) -> list[ScopeEntry]:
    """Walk *root* with ``scope_visitor`` and return every scope it created.

    Entry 0 is the global scope, owned by *root*. The rest follow in the
    order their bodies were entered; a scope's owner is the function body
    or catch block it covers.
    """
    top = Scope() if global_scope is None else global_scope
    entries = [ScopeEntry(owner=root, scope=top)]
    seen = {id(top)}

    def scope_body(node, scope: Scope, c) -> None:
        if id(scope) not in seen:
            seen.add(id(scope))
            entries.append(ScopeEntry(owner=node, scope=scope))
        scope_visitor[constants.SCOPE_BODY](node, scope, c)

    recursive_walk(root, top, {constants.SCOPE_BODY: scope_body}, scope_visitor)
    logger.info("Collected %d scopes", len(entries))
    return entries


def _is_bound(name: str, scope: Scope) -> bool:
    if name == constants.IMPLICIT_ARGUMENTS and scope.in_function():
        return True
    return scope.lookup(name) is not None


def find_global_references(root, known_globals: frozenset[str] = frozenset()) -> list:
    """Return identifiers read or written without a binding in scope.

    Names are resolved after the whole tree has been walked, so a ``var``
    declared later in the same function still counts as bound. The implicit
    ``arguments`` object is bound anywhere inside a function body. Names in
    *known_globals* are never reported.
    """
    references: list[tuple[Any, Scope]] = []

    def identifier(node, scope: Scope, c) -> None:
        references.append((node, scope))

    recursive_walk(root, Scope(), {constants.IDENTIFIER: identifier}, scope_visitor)
    unbound = [
        node
        for node, scope in references
        if node.name not in known_globals and not _is_bound(node.name, scope)
    ]
    logger.info(
        "Resolved %d identifier references, %d unbound", len(references), len(unbound)
    )
    return unbound
