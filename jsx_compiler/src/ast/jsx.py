"""JSX node definitions.

These nodes only exist between parsing and lowering: after
``transform_program`` every :class:`JSXElement` has been replaced by a
``CallExpression``.
"""

from __future__ import annotations

from typing import List, Optional, Union

from .base import ASTNode
from .expressions import Expr


class JSXIdentifier(ASTNode):
    """Plain tag or attribute name: div, router-link, onClick"""

    def __init__(self, name: str, line: int = 0, column: int = 0) -> None:
        super().__init__(line, column)
        self.name = name


class JSXNamespacedName(ASTNode):
    """prefix:local name (always rejected by the transform)."""

    def __init__(
        self,
        namespace: JSXIdentifier,
        name: JSXIdentifier,
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.namespace = namespace
        self.name = name


class JSXMemberExpression(ASTNode):
    """Qualified tag name: Foo.Bar"""

    def __init__(
        self,
        object: Union["JSXMemberExpression", JSXIdentifier],
        property: JSXIdentifier,
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.object = object
        self.property = property


JSXTagName = Union[JSXIdentifier, JSXMemberExpression, JSXNamespacedName]


class JSXEmptyExpression(ASTNode):
    """Content of ``{}`` or ``{/* comment */}``."""


class JSXExpressionContainer(ASTNode):
    """{expression} used as attribute value or child."""

    def __init__(
        self,
        expression: Union[Expr, JSXEmptyExpression],
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.expression = expression


class JSXText(ASTNode):
    """Literal text between tags, entities already decoded."""

    def __init__(
        self, value: str, line: int = 0, column: int = 0, raw_text: Optional[str] = None
    ) -> None:
        super().__init__(line, column, raw_text=raw_text)
        self.value = value


class JSXAttribute(ASTNode):
    """name, name="literal" or name={expression}

    A ``value`` of ``None`` means the attribute was written without one and
    stands for boolean ``true``.
    """

    def __init__(
        self,
        name: Union[JSXIdentifier, JSXNamespacedName],
        value: Optional[ASTNode] = None,
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.name = name
        self.value = value


class JSXSpreadAttribute(ASTNode):
    """{...argument} inside an opening tag."""

    def __init__(self, argument: Expr, line: int = 0, column: int = 0) -> None:
        super().__init__(line, column)
        self.argument = argument


class JSXElement(Expr):
    """<name attributes...>children...</name>"""

    def __init__(
        self,
        name: JSXTagName,
        attributes: List[Union[JSXAttribute, JSXSpreadAttribute]],
        children: List[ASTNode],
        self_closing: bool = False,
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.name = name
        self.attributes = attributes
        self.children = children
        self.self_closing = self_closing
