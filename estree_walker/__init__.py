"""ESTree syntax tree walker."""

from .walk import (  # noqa: F401
    BASE,
    UnknownNodeTypeError,
    build_walker,
    recursive_walk,
    simple_walk,
)
from .scope import Binding, BindingKind, Scope, scope_visitor  # noqa: F401
from .node import Node, from_estree, load_tree  # noqa: F401
