"""Composable API functions for the walker pipelines.

Each function corresponds to a CLI report (--report types/scopes/globals)
but is callable programmatically without argparse.
"""

from __future__ import annotations

import logging

from . import constants
from .analysis import collect_scopes, count_node_types, find_global_references
from .node import Node, load_tree
from .report_types import ReportConfig, ReportKind
from .scope import Scope

logger = logging.getLogger(__name__)

__all__ = [
    "load_tree",
    "dump_node_types",
    "dump_scopes",
    "dump_globals",
    "run_report",
]


def _source_loc(node) -> str:
    loc = getattr(node, "loc", None)
    if not loc:
        return ""
    return f"{loc.start.line}:{loc.start.column}"


def dump_node_types(root: Node) -> str:
    """Count the node types in *root* and return one ``type: count`` per line.

    Lines are ordered by descending count, then by type name.
    """
    counts = count_node_types(root)
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return "\n".join(f"  {type_name}: {count}" for type_name, count in ordered)


def _scope_label(scope: Scope) -> str:
    """``FunctionDeclaration f``, ``CatchClause e``; bare type when unnamed."""
    opener = scope.node
    if opener is None:
        return "<scope>"
    name_node = getattr(opener, "param" if scope.is_catch else "id", None)
    return f"{opener.type} {name_node.name}" if name_node else opener.type


def dump_scopes(root: Node) -> str:
    """Walk *root* with the scope walker and return its scopes as text.

    Args:
        root: The tree to walk; its top-level scope is the global scope.

    Returns:
        A multi-line string: one header per scope naming the function or
        catch clause that opened it, indented by nesting depth, followed by
        that scope's bindings as ``name: kind``.
    """
    lines: list[str] = []
    for index, entry in enumerate(collect_scopes(root)):
        indent = "  " * entry.scope.depth()
        if index == 0:
            label = constants.GLOBAL_SCOPE_LABEL
        else:
            label = _scope_label(entry.scope)
        loc = _source_loc(entry.scope.node or entry.owner)
        header = f"{indent}#{index} {label}"
        lines.append(f"{header}  # {loc}" if loc else header)
        for name, binding in entry.scope.variables.items():
            lines.append(f"{indent}  {name}: {binding.kind.value}")
    return "\n".join(lines)


def dump_globals(root: Node, known_globals: frozenset[str] = frozenset()) -> str:
    """Return the unbound identifier references in *root*, one per line.

    Args:
        root: The tree to walk.
        known_globals: Names treated as bound (e.g. host-provided globals).

    Returns:
        A multi-line string of identifier names, in traversal order,
        each followed by its source location when the tree carries one.
    """
    lines = []
    for ident in find_global_references(root, known_globals):
        loc = _source_loc(ident)
        lines.append(f"  {ident.name}  # {loc}" if loc else f"  {ident.name}")
    return "\n".join(lines)


def run_report(root: Node, config: ReportConfig = ReportConfig()) -> str:
    """Run the report selected by *config* over *root*."""
    logger.info("Running %s report over %s", config.report.value, root.type)
    if config.report == ReportKind.SCOPES:
        return dump_scopes(root)
    if config.report == ReportKind.GLOBALS:
        return dump_globals(root, config.known_globals)
    return dump_node_types(root)
