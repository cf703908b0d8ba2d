"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

# Category names: dispatch keys for a syntactic role rather than a node shape
STATEMENT = "Statement"
EXPRESSION = "Expression"
SCOPE_BODY = "ScopeBody"
FOR_INIT = "ForInit"
FUNCTION = "Function"

CATEGORY_NAMES: frozenset[str] = frozenset(
    {STATEMENT, EXPRESSION, SCOPE_BODY, FOR_INIT, FUNCTION}
)

FUNCTION_DECLARATION = "FunctionDeclaration"
VARIABLE_DECLARATION = "VariableDeclaration"
IDENTIFIER = "Identifier"

# bound implicitly inside every function body
IMPLICIT_ARGUMENTS = "arguments"

GLOBAL_SCOPE_LABEL = "<global>"

REPORT_TYPES = "types"
REPORT_SCOPES = "scopes"
REPORT_GLOBALS = "globals"
