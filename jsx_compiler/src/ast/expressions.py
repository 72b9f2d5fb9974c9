from __future__ import annotations
from typing import List, Optional
from .base import ASTNode

"""Expression node definitions for the JavaScript subset."""


class Expr(ASTNode):
    """Base class for all expressions."""

    def __init__(
        self, line: int = 0, column: int = 0, raw_text: Optional[str] = None
    ) -> None:
        super().__init__(line, column, raw_text=raw_text)


class Identifier(Expr):
    """Name reference or binding: foo"""

    def __init__(self, name: str, line: int = 0, column: int = 0) -> None:
        super().__init__(line, column)
        self.name = name


class ThisExpression(Expr):
    """this"""


class MemberExpression(Expr):
    """object.property or object[property]"""

    def __init__(
        self,
        object: Expr,
        property: Expr,
        computed: bool = False,
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.object = object
        self.property = property
        self.computed = computed


class CallExpression(Expr):
    """Function call: callee(arguments...)"""

    def __init__(
        self,
        callee: Expr,
        arguments: List[Expr],
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.callee = callee
        self.arguments = arguments
        # Printer hint: one argument per line.
        self.pretty = False


class NewExpression(Expr):
    """new Callee(arguments...)"""

    def __init__(
        self,
        callee: Expr,
        arguments: List[Expr],
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.callee = callee
        self.arguments = arguments


class SpreadElement(Expr):
    """...argument inside arrays, objects and call arguments."""

    def __init__(self, argument: Expr, line: int = 0, column: int = 0) -> None:
        super().__init__(line, column)
        self.argument = argument


class UnaryExpression(Expr):
    """Prefix operator: !x, -x, typeof x"""

    def __init__(
        self, operator: str, argument: Expr, line: int = 0, column: int = 0
    ) -> None:
        super().__init__(line, column)
        self.operator = operator
        self.argument = argument


class UpdateExpression(Expr):
    """++x, x--"""

    def __init__(
        self,
        operator: str,
        argument: Expr,
        prefix: bool,
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.operator = operator
        self.argument = argument
        self.prefix = prefix


class BinaryExpression(Expr):
    """Binary operation: left op right"""

    def __init__(
        self, operator: str, left: Expr, right: Expr, line: int = 0, column: int = 0
    ) -> None:
        super().__init__(line, column)
        self.operator = operator  # + - * / % == != === !== < <= > >= in instanceof
        self.left = left
        self.right = right


class LogicalExpression(Expr):
    """Short-circuit operation: left && right, left || right, left ?? right"""

    def __init__(
        self, operator: str, left: Expr, right: Expr, line: int = 0, column: int = 0
    ) -> None:
        super().__init__(line, column)
        self.operator = operator
        self.left = left
        self.right = right


class ConditionalExpression(Expr):
    """test ? consequent : alternate"""

    def __init__(
        self,
        test: Expr,
        consequent: Expr,
        alternate: Expr,
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.test = test
        self.consequent = consequent
        self.alternate = alternate


class AssignmentExpression(Expr):
    """left = right (and compound forms)"""

    def __init__(
        self, operator: str, left: ASTNode, right: Expr, line: int = 0, column: int = 0
    ) -> None:
        super().__init__(line, column)
        self.operator = operator
        self.left = left
        self.right = right


class ArrayExpression(Expr):
    """[a, b, ...c]"""

    def __init__(self, elements: List[Expr], line: int = 0, column: int = 0) -> None:
        super().__init__(line, column)
        self.elements = elements


class ObjectExpression(Expr):
    """{ key: value, method() {}, ...spread }"""

    def __init__(
        self, properties: List[ASTNode], line: int = 0, column: int = 0
    ) -> None:
        super().__init__(line, column)
        self.properties = properties


class ObjectProperty(ASTNode):
    """key: value entry of an object literal or object pattern."""

    def __init__(
        self,
        key: Expr,
        value: ASTNode,
        computed: bool = False,
        shorthand: bool = False,
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.key = key
        self.value = value
        self.computed = computed
        self.shorthand = shorthand


class ObjectMethod(ASTNode):
    """Method shorthand inside an object literal: key(params) { body }"""

    def __init__(
        self,
        key: Expr,
        params: List[ASTNode],
        body: ASTNode,
        computed: bool = False,
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.key = key
        self.params = params
        self.body = body
        self.computed = computed


class FunctionExpression(Expr):
    """function name(params) { body }"""

    def __init__(
        self,
        id: Optional[Identifier],
        params: List[ASTNode],
        body: ASTNode,
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.id = id
        self.params = params
        self.body = body


class ArrowFunctionExpression(Expr):
    """(params) => body"""

    def __init__(
        self,
        params: List[ASTNode],
        body: ASTNode,
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.params = params
        self.body = body  # BlockStatement or a concise-body expression


class ClassExpression(Expr):
    """class Name extends Base { ... }"""

    def __init__(
        self,
        id: Optional[Identifier],
        super_class: Optional[Expr],
        body: ASTNode,
        decorators: Optional[List[ASTNode]] = None,
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.id = id
        self.super_class = super_class
        self.body = body
        self.decorators = decorators or []
