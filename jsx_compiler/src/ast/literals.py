"""Literal and binding-pattern node definitions."""

from __future__ import annotations

from typing import List, Optional, Union

from .base import ASTNode
from .expressions import Expr, Identifier


class Literal(Expr):
    """Base class for literal values."""

    def __init__(
        self, line: int = 0, column: int = 0, raw_text: Optional[str] = None
    ) -> None:
        super().__init__(line, column, raw_text=raw_text)


class StringLiteral(Literal):
    """String literal: "div"

    ``raw_text`` holds the quoted source spelling when the literal came from
    the parser and was not modified afterwards.
    """

    def __init__(
        self,
        value: str,
        line: int = 0,
        column: int = 0,
        raw_text: Optional[str] = None,
    ) -> None:
        super().__init__(line, column, raw_text=raw_text)
        self.value = value


class NumericLiteral(Literal):
    """Numeric literal: 42, 0xff, 1.5e3"""

    def __init__(
        self,
        value: Union[int, float],
        line: int = 0,
        column: int = 0,
        raw_text: Optional[str] = None,
    ) -> None:
        super().__init__(line, column, raw_text=raw_text)
        self.value = value


class BooleanLiteral(Literal):
    """true / false"""

    def __init__(self, value: bool, line: int = 0, column: int = 0) -> None:
        super().__init__(line, column)
        self.value = value


class NullLiteral(Literal):
    """null"""


class TemplateLiteral(Literal):
    """Template string, kept as its raw source text including backticks."""

    def __init__(self, raw: str, line: int = 0, column: int = 0) -> None:
        super().__init__(line, column, raw_text=raw)
        self.raw = raw


class AssignmentPattern(ASTNode):
    """Binding with default value: name = fallback"""

    def __init__(
        self, left: ASTNode, right: Expr, line: int = 0, column: int = 0
    ) -> None:
        super().__init__(line, column)
        self.left = left
        self.right = right


class RestElement(ASTNode):
    """...rest binding in parameter lists and patterns."""

    def __init__(self, argument: ASTNode, line: int = 0, column: int = 0) -> None:
        super().__init__(line, column)
        self.argument = argument


class ObjectPattern(ASTNode):
    """{ a, b: c, ...rest } binding."""

    def __init__(
        self, properties: List[ASTNode], line: int = 0, column: int = 0
    ) -> None:
        super().__init__(line, column)
        self.properties = properties


class ArrayPattern(ASTNode):
    """[a, b, ...rest] binding."""

    def __init__(
        self, elements: List[ASTNode], line: int = 0, column: int = 0
    ) -> None:
        super().__init__(line, column)
        self.elements = elements


Pattern = Union[Identifier, AssignmentPattern, RestElement, ObjectPattern, ArrayPattern]
