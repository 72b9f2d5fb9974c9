"""
JSX lowering pass.

This module orchestrates the helpers that turn a parsed program containing
JSX into a plain JavaScript program: namespace rejection, ``h`` binding
injection, element lowering and helper import emission.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from jsx_compiler.src.ast import ASTNode, Identifier, Program
from jsx_compiler.src.common.constants import DEFAULT_CONFIG, TransformConfig
from jsx_compiler.src.common.diagnostics import ProgramDiagnostics

from .attribute_lowerer import AttributeLowerer
from .element_lowerer import ElementLowerer
from .imports import HelperImport, ImportRegistry
from .namespace_guard import check_namespaces
from .render_context import inject_render_context


@dataclass
class TransformResult:
    """Outcome of transforming one file."""

    program: Program
    imports: List[HelperImport] = field(default_factory=list)
    injected_methods: List[ASTNode] = field(default_factory=list)
    elements_lowered: int = 0


class JSXLowerer:
    """Facade that coordinates the lowering helpers for one file."""

    def __init__(
        self,
        config: TransformConfig = DEFAULT_CONFIG,
        diagnostics: Optional[ProgramDiagnostics] = None,
    ):
        self.config = config
        self.diagnostics = diagnostics or ProgramDiagnostics()
        self.diagnostics.default_stage = "transform"

        self.registry: Optional[ImportRegistry] = None
        self.elements_lowered = 0
        self.merge_sites = 0

        self.attr_lowerer = AttributeLowerer(self)
        self.element_lowerer = ElementLowerer(self)

    def lower_program(self, program: Program) -> TransformResult:
        """Rewrite ``program`` in place and describe what changed.

        Raises:
            JSXTransformError: on a namespaced tag or attribute name; the
                program is left untouched in that case.
        """
        check_namespaces(program)

        self.registry = ImportRegistry(program)
        self.elements_lowered = 0
        self.merge_sites = 0

        injected: List[ASTNode] = []
        if self.config.inject_render_context:
            injected = inject_render_context(program, self.config)

        self.element_lowerer.visit(program)
        self.registry.apply()

        for method in injected:
            self.diagnostics.info(
                f"Bound {self.config.pragma} in {_describe(method)}", node=method
            )
        if self.merge_sites:
            self.diagnostics.info(
                f"{self.merge_sites} spread merge(s) use {self.config.merge_helper_module}"
            )

        return TransformResult(
            program=program,
            imports=self.registry.imports,
            injected_methods=injected,
            elements_lowered=self.elements_lowered,
        )


def _describe(method: ASTNode) -> str:
    key = getattr(method, "key", None)
    if isinstance(key, Identifier) and not getattr(method, "computed", False):
        return f"{key.name}()"
    return "computed method"


# =============================================================================
# Public API
# =============================================================================


def transform_program(
    program: Program,
    config: TransformConfig = DEFAULT_CONFIG,
    diagnostics: Optional[ProgramDiagnostics] = None,
) -> TransformResult:
    """Lower every JSX element of ``program`` into ``h()`` calls."""
    return JSXLowerer(config, diagnostics).lower_program(program)
