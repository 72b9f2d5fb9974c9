"""Per-file registry of helper imports added by the transform."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Set, Tuple

from jsx_compiler.src.ast import (
    Identifier,
    ImportDeclaration,
    ImportDefaultSpecifier,
    ImportSpecifier,
    JSXIdentifier,
    Program,
    StringLiteral,
    walk,
)

logger = logging.getLogger(__name__)


@dataclass
class HelperImport:
    """One ``import local from "module"`` the output file needs."""

    module: str
    export: str
    local: str

    def to_declaration(self) -> ImportDeclaration:
        local = Identifier(self.local)
        if self.export == "default":
            specifier = ImportDefaultSpecifier(local)
        else:
            specifier = ImportSpecifier(Identifier(self.export), local)
        return ImportDeclaration([specifier], StringLiteral(self.module))


class ImportRegistry:
    """Resolves helper exports to local names, importing each at most once.

    Local names avoid every name already used in the file: the preferred
    alias is tried first, then ``alias2``, ``alias3`` and so on.
    """

    def __init__(self, program: Program) -> None:
        self.program = program
        self.helpers: Dict[Tuple[str, str], HelperImport] = {}
        self._used_names: Set[str] = {
            node.name
            for node in walk(program)
            if isinstance(node, (Identifier, JSXIdentifier))
        }

    def _unique_name(self, alias: str) -> str:
        candidate = alias
        suffix = 2
        while candidate in self._used_names:
            candidate = f"{alias}{suffix}"
            suffix += 1
        self._used_names.add(candidate)
        return candidate

    def resolve(self, module: str, export: str, alias: str) -> Identifier:
        """Identifier bound to ``export`` of ``module`` in this file."""
        helper = self.helpers.get((module, export))
        if helper is None:
            helper = HelperImport(module, export, self._unique_name(alias))
            self.helpers[(module, export)] = helper
            logger.debug("Registered helper import %s from %s", helper.local, module)
        return Identifier(helper.local)

    @property
    def imports(self) -> List[HelperImport]:
        return list(self.helpers.values())

    def apply(self) -> List[ImportDeclaration]:
        """Prepend the registered imports to the program body."""
        declarations = [helper.to_declaration() for helper in self.helpers.values()]
        self.program.body[:0] = declarations
        return declarations
