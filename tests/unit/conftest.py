"""Shared helpers for building ESTree fixtures and tracing walks."""

from __future__ import annotations

from typing import Any

from estree_walker import constants
from estree_walker.node import Node, from_estree
from estree_walker.walk import BASE, simple_walk


# ── ESTree builders (plain dicts, converted with from_estree) ────


def ident(name: str) -> dict:
    return {"type": "Identifier", "name": name}


def lit(value: Any) -> dict:
    return {"type": "Literal", "value": value}


def program(*body: dict) -> dict:
    return {"type": "Program", "body": list(body)}


def block(*body: dict) -> dict:
    return {"type": "BlockStatement", "body": list(body)}


def expr_stmt(expression: dict) -> dict:
    return {"type": "ExpressionStatement", "expression": expression}


def declarator(name: str, init: dict | None = None) -> dict:
    return {"type": "VariableDeclarator", "id": ident(name), "init": init}


def var(*declarators: dict) -> dict:
    return {
        "type": "VariableDeclaration",
        "kind": "var",
        "declarations": list(declarators),
    }


def func_decl(name: str, params: list[str], *body: dict) -> dict:
    return {
        "type": "FunctionDeclaration",
        "id": ident(name),
        "params": [ident(p) for p in params],
        "body": block(*body),
    }


def func_expr(name: str | None, params: list[str], *body: dict) -> dict:
    return {
        "type": "FunctionExpression",
        "id": ident(name) if name else None,
        "params": [ident(p) for p in params],
        "body": block(*body),
    }


def binary(left: dict, operator: str, right: dict) -> dict:
    return {
        "type": "BinaryExpression",
        "operator": operator,
        "left": left,
        "right": right,
    }


def call(callee: dict, *arguments: dict) -> dict:
    return {"type": "CallExpression", "callee": callee, "arguments": list(arguments)}


def catch(param: str, *body: dict) -> dict:
    return {"type": "CatchClause", "param": ident(param), "body": block(*body)}


def try_stmt(block_body: list[dict], handlers: list[dict], finalizer=None) -> dict:
    return {
        "type": "TryStatement",
        "block": block(*block_body),
        "handlers": handlers,
        "finalizer": block(*finalizer) if finalizer is not None else None,
    }


def tree(data: dict) -> Node:
    return from_estree(data)


# ── tracing ──────────────────────────────────────────────────────


CONCRETE_TYPES: list[str] = [t for t in BASE if t not in constants.CATEGORY_NAMES]


def label(node) -> str:
    """``type`` plus name/value for leaves, to make traces readable."""
    if node.type == "Identifier":
        return f"Identifier:{node.name}"
    if node.type == "Literal":
        return f"Literal:{node.value}"
    return node.type


def trace_simple(root, names: list[str] | None = None, base=None) -> list[str]:
    """Labels of every dispatch under one of *names* (default: concrete types)."""
    seen: list[str] = []

    def visit(node, _st) -> None:
        seen.append(label(node))

    keys = CONCRETE_TYPES if names is None else names
    simple_walk(root, {name: visit for name in keys}, base)
    return seen


def trace_pairs(root, names: list[str], base=None) -> list[tuple[str, str]]:
    """``(dispatch name, node label)`` for every dispatch under one of *names*."""
    seen: list[tuple[str, str]] = []

    def visitor_for(name: str):
        def visit(node, _st) -> None:
            seen.append((name, label(node)))

        return visit

    simple_walk(root, {name: visitor_for(name) for name in names}, base)
    return seen


def trace_leaves(root) -> list[str]:
    """Labels of every Identifier and Literal, in visiting order."""
    return trace_simple(root, ["Identifier", "Literal"])
