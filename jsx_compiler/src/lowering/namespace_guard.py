"""Rejects XML namespaced names before any rewriting happens."""

from __future__ import annotations

from jsx_compiler.src.ast import ASTVisitor, JSXNamespacedName, Program
from jsx_compiler.src.common.constants import NAMESPACE_ERROR_MESSAGE

from .exceptions import JSXTransformError


class NamespaceGuard(ASTVisitor):
    """Raises on the first ``prefix:name`` tag or attribute name."""

    def visit_JSXNamespacedName(self, node: JSXNamespacedName) -> None:
        raise JSXTransformError(NAMESPACE_ERROR_MESSAGE, node)


def check_namespaces(program: Program) -> None:
    """Walk the whole tree and fail the file on any namespaced name."""
    NamespaceGuard().visit(program)
