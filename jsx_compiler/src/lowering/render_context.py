"""Injection of the ``h`` binding into component methods that use JSX.

Lowered calls refer to ``h`` by name, so a method that renders JSX without
receiving ``h`` as its first parameter gets one bound at the top of its
body: from the first argument in ``render`` (Vue passes ``createElement``
there), from ``this.$createElement`` anywhere else.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from jsx_compiler.src.ast import (
    ASTNode,
    ASTVisitor,
    ClassMethod,
    Identifier,
    JSXElement,
    MemberExpression,
    NumericLiteral,
    ObjectMethod,
    Program,
    ThisExpression,
    VariableDeclaration,
    VariableDeclarator,
    walk,
)
from jsx_compiler.src.common.constants import DEFAULT_CONFIG, TransformConfig

logger = logging.getLogger(__name__)

Method = Union[ObjectMethod, ClassMethod]


def contains_jsx(node: ASTNode) -> bool:
    """True when any JSX element occurs at or below ``node``."""
    return any(isinstance(child, JSXElement) for child in walk(node))


def _method_name(method: Method) -> Optional[str]:
    if not method.computed and isinstance(method.key, Identifier):
        return method.key.name
    return None


class RenderContextInjector(ASTVisitor):
    """Prepends ``const h = ...`` to methods that need it."""

    def __init__(self, config: TransformConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self.injected: List[Method] = []

    def _receives_h(self, method: Method) -> bool:
        if not method.params:
            return False
        first = method.params[0]
        return isinstance(first, Identifier) and first.name == self.config.pragma

    def _binding(self, method: Method) -> VariableDeclaration:
        if _method_name(method) == self.config.render_method:
            init = MemberExpression(
                Identifier("arguments"), NumericLiteral(0, raw_text="0"), computed=True
            )
        else:
            init = MemberExpression(
                ThisExpression(), Identifier(self.config.create_element_slot)
            )
        declarator = VariableDeclarator(Identifier(self.config.pragma), init)
        return VariableDeclaration("const", [declarator])

    def _inject(self, method: Method) -> None:
        if not self._receives_h(method) and contains_jsx(method.body):
            method.body.body.insert(0, self._binding(method))
            self.injected.append(method)
            logger.debug(
                "Injected %s binding into %s()",
                self.config.pragma,
                _method_name(method) or "<computed>",
            )
        # Nested component definitions get their own binding.
        self.generic_visit(method)

    def visit_ObjectMethod(self, node: ObjectMethod) -> None:
        self._inject(node)

    def visit_ClassMethod(self, node: ClassMethod) -> None:
        self._inject(node)


def inject_render_context(
    program: Program, config: TransformConfig = DEFAULT_CONFIG
) -> List[Method]:
    """Run the injector over ``program``; returns the methods that were changed."""
    injector = RenderContextInjector(config)
    injector.visit(program)
    return injector.injected
