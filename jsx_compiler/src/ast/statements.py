from __future__ import annotations
from typing import List, Optional

from .base import ASTNode
from .expressions import Expr, Identifier
from .literals import StringLiteral

"""Statement and module-level node definitions."""


class Statement(ASTNode):
    """Base class for all statements."""

    def __init__(self, line: int = 0, column: int = 0) -> None:
        super().__init__(line, column)


class Program(ASTNode):
    """Root node: one source file."""

    def __init__(self, body: List[Statement], line: int = 0, column: int = 0) -> None:
        super().__init__(line, column)
        self.body = body


class BlockStatement(Statement):
    """{ statements... }"""

    def __init__(self, body: List[Statement], line: int = 0, column: int = 0) -> None:
        super().__init__(line, column)
        self.body = body


class ExpressionStatement(Statement):
    """expression;"""

    def __init__(self, expression: Expr, line: int = 0, column: int = 0) -> None:
        super().__init__(line, column)
        self.expression = expression


class VariableDeclarator(ASTNode):
    """id = init inside a declaration."""

    def __init__(
        self, id: ASTNode, init: Optional[Expr] = None, line: int = 0, column: int = 0
    ) -> None:
        super().__init__(line, column)
        self.id = id
        self.init = init


class VariableDeclaration(Statement):
    """const/let/var declarators..."""

    def __init__(
        self,
        kind: str,
        declarations: List[VariableDeclarator],
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.kind = kind
        self.declarations = declarations


class ReturnStatement(Statement):
    """return argument;"""

    def __init__(
        self, argument: Optional[Expr] = None, line: int = 0, column: int = 0
    ) -> None:
        super().__init__(line, column)
        self.argument = argument


class ThrowStatement(Statement):
    """throw argument;"""

    def __init__(self, argument: Expr, line: int = 0, column: int = 0) -> None:
        super().__init__(line, column)
        self.argument = argument


class IfStatement(Statement):
    """if (test) consequent else alternate"""

    def __init__(
        self,
        test: Expr,
        consequent: Statement,
        alternate: Optional[Statement] = None,
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.test = test
        self.consequent = consequent
        self.alternate = alternate


class FunctionDeclaration(Statement):
    """function name(params) { body }"""

    def __init__(
        self,
        id: Optional[Identifier],
        params: List[ASTNode],
        body: BlockStatement,
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.id = id
        self.params = params
        self.body = body


class Decorator(ASTNode):
    """@expression"""

    def __init__(self, expression: Expr, line: int = 0, column: int = 0) -> None:
        super().__init__(line, column)
        self.expression = expression


class ClassMethod(ASTNode):
    """Method inside a class body."""

    def __init__(
        self,
        key: Expr,
        params: List[ASTNode],
        body: BlockStatement,
        kind: str = "method",
        static: bool = False,
        computed: bool = False,
        decorators: Optional[List[Decorator]] = None,
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.key = key
        self.params = params
        self.body = body
        self.kind = kind  # method, get, set
        self.static = static
        self.computed = computed
        self.decorators = decorators or []


class ClassProperty(ASTNode):
    """Field declaration inside a class body."""

    def __init__(
        self,
        key: Expr,
        value: Optional[Expr] = None,
        static: bool = False,
        computed: bool = False,
        decorators: Optional[List[Decorator]] = None,
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.key = key
        self.value = value
        self.static = static
        self.computed = computed
        self.decorators = decorators or []


class ClassBody(ASTNode):
    """Members of a class."""

    def __init__(self, body: List[ASTNode], line: int = 0, column: int = 0) -> None:
        super().__init__(line, column)
        self.body = body


class ClassDeclaration(Statement):
    """class Name extends Base { ... }"""

    def __init__(
        self,
        id: Optional[Identifier],
        super_class: Optional[Expr],
        body: ClassBody,
        decorators: Optional[List[Decorator]] = None,
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.id = id
        self.super_class = super_class
        self.body = body
        self.decorators = decorators or []


class ImportSpecifier(ASTNode):
    """{ imported as local }"""

    def __init__(
        self, imported: Identifier, local: Identifier, line: int = 0, column: int = 0
    ) -> None:
        super().__init__(line, column)
        self.imported = imported
        self.local = local


class ImportDefaultSpecifier(ASTNode):
    """import local from ..."""

    def __init__(self, local: Identifier, line: int = 0, column: int = 0) -> None:
        super().__init__(line, column)
        self.local = local


class ImportNamespaceSpecifier(ASTNode):
    """import * as local from ..."""

    def __init__(self, local: Identifier, line: int = 0, column: int = 0) -> None:
        super().__init__(line, column)
        self.local = local


class ImportDeclaration(Statement):
    """import specifiers from "source";"""

    def __init__(
        self,
        specifiers: List[ASTNode],
        source: StringLiteral,
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.specifiers = specifiers
        self.source = source


class ExportSpecifier(ASTNode):
    """{ local as exported }"""

    def __init__(
        self, local: Identifier, exported: Identifier, line: int = 0, column: int = 0
    ) -> None:
        super().__init__(line, column)
        self.local = local
        self.exported = exported


class ExportDefaultDeclaration(Statement):
    """export default declaration"""

    def __init__(self, declaration: ASTNode, line: int = 0, column: int = 0) -> None:
        super().__init__(line, column)
        self.declaration = declaration


class ExportNamedDeclaration(Statement):
    """export const ... / export function ... / export { a, b }"""

    def __init__(
        self,
        declaration: Optional[Statement] = None,
        specifiers: Optional[List[ExportSpecifier]] = None,
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.declaration = declaration
        self.specifiers = specifiers or []
