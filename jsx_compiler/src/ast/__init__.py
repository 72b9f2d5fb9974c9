"""AST node definitions for the JavaScript + JSX subset."""

from .base import (
    ASTNode,
    ASTVisitor,
    ASTTransformer,
    copy_location,
    iter_child_nodes,
    iter_fields,
    walk,
)
from .expressions import (
    Expr,
    Identifier,
    ThisExpression,
    MemberExpression,
    CallExpression,
    NewExpression,
    SpreadElement,
    UnaryExpression,
    UpdateExpression,
    BinaryExpression,
    LogicalExpression,
    ConditionalExpression,
    AssignmentExpression,
    ArrayExpression,
    ObjectExpression,
    ObjectProperty,
    ObjectMethod,
    FunctionExpression,
    ArrowFunctionExpression,
    ClassExpression,
)
from .literals import (
    Literal,
    StringLiteral,
    NumericLiteral,
    BooleanLiteral,
    NullLiteral,
    TemplateLiteral,
    AssignmentPattern,
    RestElement,
    ObjectPattern,
    ArrayPattern,
)
from .statements import (
    Statement,
    Program,
    BlockStatement,
    ExpressionStatement,
    VariableDeclaration,
    VariableDeclarator,
    ReturnStatement,
    ThrowStatement,
    IfStatement,
    FunctionDeclaration,
    Decorator,
    ClassMethod,
    ClassProperty,
    ClassBody,
    ClassDeclaration,
    ImportSpecifier,
    ImportDefaultSpecifier,
    ImportNamespaceSpecifier,
    ImportDeclaration,
    ExportSpecifier,
    ExportDefaultDeclaration,
    ExportNamedDeclaration,
)
from .jsx import (
    JSXIdentifier,
    JSXNamespacedName,
    JSXMemberExpression,
    JSXEmptyExpression,
    JSXExpressionContainer,
    JSXText,
    JSXAttribute,
    JSXSpreadAttribute,
    JSXElement,
)

__all__ = [
    # Base classes
    "ASTNode",
    "ASTVisitor",
    "ASTTransformer",
    "copy_location",
    "iter_child_nodes",
    "iter_fields",
    "walk",
    # Expressions
    "Expr",
    "Identifier",
    "ThisExpression",
    "MemberExpression",
    "CallExpression",
    "NewExpression",
    "SpreadElement",
    "UnaryExpression",
    "UpdateExpression",
    "BinaryExpression",
    "LogicalExpression",
    "ConditionalExpression",
    "AssignmentExpression",
    "ArrayExpression",
    "ObjectExpression",
    "ObjectProperty",
    "ObjectMethod",
    "FunctionExpression",
    "ArrowFunctionExpression",
    "ClassExpression",
    # Literals and patterns
    "Literal",
    "StringLiteral",
    "NumericLiteral",
    "BooleanLiteral",
    "NullLiteral",
    "TemplateLiteral",
    "AssignmentPattern",
    "RestElement",
    "ObjectPattern",
    "ArrayPattern",
    # Statements
    "Statement",
    "Program",
    "BlockStatement",
    "ExpressionStatement",
    "VariableDeclaration",
    "VariableDeclarator",
    "ReturnStatement",
    "ThrowStatement",
    "IfStatement",
    "FunctionDeclaration",
    "Decorator",
    "ClassMethod",
    "ClassProperty",
    "ClassBody",
    "ClassDeclaration",
    "ImportSpecifier",
    "ImportDefaultSpecifier",
    "ImportNamespaceSpecifier",
    "ImportDeclaration",
    "ExportSpecifier",
    "ExportDefaultDeclaration",
    "ExportNamedDeclaration",
    # JSX
    "JSXIdentifier",
    "JSXNamespacedName",
    "JSXMemberExpression",
    "JSXEmptyExpression",
    "JSXExpressionContainer",
    "JSXText",
    "JSXAttribute",
    "JSXSpreadAttribute",
    "JSXElement",
]
