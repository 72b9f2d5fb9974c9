"""JavaScript source emission for lowered programs."""

from __future__ import annotations

import json
from typing import List

from jsx_compiler.src.ast import (
    ArrayExpression,
    ArrayPattern,
    ArrowFunctionExpression,
    AssignmentExpression,
    AssignmentPattern,
    ASTNode,
    ASTVisitor,
    BinaryExpression,
    BlockStatement,
    BooleanLiteral,
    CallExpression,
    ClassBody,
    ClassDeclaration,
    ClassExpression,
    ClassMethod,
    ClassProperty,
    ConditionalExpression,
    Decorator,
    ExportDefaultDeclaration,
    ExportNamedDeclaration,
    ExportSpecifier,
    ExpressionStatement,
    FunctionDeclaration,
    FunctionExpression,
    Identifier,
    IfStatement,
    ImportDeclaration,
    ImportDefaultSpecifier,
    ImportNamespaceSpecifier,
    ImportSpecifier,
    LogicalExpression,
    MemberExpression,
    NewExpression,
    NullLiteral,
    NumericLiteral,
    ObjectExpression,
    ObjectMethod,
    ObjectPattern,
    ObjectProperty,
    Program,
    RestElement,
    ReturnStatement,
    SpreadElement,
    StringLiteral,
    TemplateLiteral,
    ThisExpression,
    ThrowStatement,
    UnaryExpression,
    UpdateExpression,
    VariableDeclaration,
    VariableDeclarator,
)

# Operator precedence, higher binds tighter
PREC_ASSIGN = 2
PREC_CONDITIONAL = 3
PREC_UNARY = 15
PREC_POSTFIX = 16
PREC_CALL = 17
PREC_PRIMARY = 18

BINARY_PRECEDENCE = {
    "??": 4,
    "||": 4,
    "&&": 5,
    "|": 6,
    "^": 7,
    "&": 8,
    "==": 9,
    "!=": 9,
    "===": 9,
    "!==": 9,
    "<": 10,
    ">": 10,
    "<=": 10,
    ">=": 10,
    "in": 10,
    "instanceof": 10,
    "<<": 11,
    ">>": 11,
    ">>>": 11,
    "+": 12,
    "-": 12,
    "*": 13,
    "/": 13,
    "%": 13,
    "**": 14,
}

WORD_OPERATORS = {"typeof", "void", "delete"}

INDENT = "  "


class JSPrinter(ASTVisitor):
    """Prints a JavaScript AST back to source text.

    Parentheses are inserted only where operator precedence requires them.
    Calls flagged ``pretty`` put one argument per line when
    ``pretty_calls`` is enabled.
    """

    def __init__(self, pretty_calls: bool = True) -> None:
        self.pretty_calls = pretty_calls
        self.indent_level = 0

    def print(self, program: Program) -> str:
        self.indent_level = 0
        return self.visit(program)

    def generic_visit(self, node: ASTNode) -> str:
        raise NotImplementedError(f"Cannot print {type(node).__name__} node")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _indent(self) -> str:
        return INDENT * self.indent_level

    def _precedence(self, node: ASTNode) -> int:
        if isinstance(node, (AssignmentExpression, ArrowFunctionExpression)):
            return PREC_ASSIGN
        if isinstance(node, ConditionalExpression):
            return PREC_CONDITIONAL
        if isinstance(node, (BinaryExpression, LogicalExpression)):
            return BINARY_PRECEDENCE.get(node.operator, PREC_CONDITIONAL + 1)
        if isinstance(node, UnaryExpression):
            return PREC_UNARY
        if isinstance(node, UpdateExpression):
            return PREC_UNARY if node.prefix else PREC_POSTFIX
        if isinstance(node, (CallExpression, MemberExpression, NewExpression)):
            return PREC_CALL
        return PREC_PRIMARY

    def expr(self, node: ASTNode, min_precedence: int = 0) -> str:
        """Print ``node``, parenthesized when it binds looser than required."""
        text = self.visit(node)
        if self._precedence(node) < min_precedence:
            return f"({text})"
        return text

    def _list(self, nodes: List[ASTNode]) -> str:
        return ", ".join(self.expr(node, PREC_ASSIGN) for node in nodes)

    def _params(self, params: List[ASTNode]) -> str:
        return f"({self._list(params)})"

    def _block_lines(self, statements: List[ASTNode]) -> str:
        self.indent_level += 1
        lines = [self._indent() + self.visit(stmt) for stmt in statements]
        self.indent_level -= 1
        return "\n".join(lines)

    def _key(self, key: ASTNode, computed: bool) -> str:
        if computed:
            return f"[{self.expr(key, PREC_ASSIGN)}]"
        return self.visit(key)

    def _decorators(self, decorators: List[Decorator]) -> str:
        return "".join(
            self.visit(decorator) + "\n" + self._indent() for decorator in decorators
        )

    # ------------------------------------------------------------------
    # Program and statements
    # ------------------------------------------------------------------

    def visit_Program(self, node: Program) -> str:
        lines = [self.visit(stmt) for stmt in node.body]
        return "\n".join(lines) + "\n" if lines else ""

    def visit_BlockStatement(self, node: BlockStatement) -> str:
        if not node.body:
            return "{}"
        return "{\n" + self._block_lines(node.body) + "\n" + self._indent() + "}"

    def visit_ExpressionStatement(self, node: ExpressionStatement) -> str:
        text = self.expr(node.expression)
        if _starts_like_declaration(node.expression):
            text = f"({text})"
        return text + ";"

    def visit_VariableDeclaration(self, node: VariableDeclaration) -> str:
        declarators = ", ".join(self.visit(decl) for decl in node.declarations)
        return f"{node.kind} {declarators};"

    def visit_VariableDeclarator(self, node: VariableDeclarator) -> str:
        target = self.visit(node.id)
        if node.init is None:
            return target
        return f"{target} = {self.expr(node.init, PREC_ASSIGN)}"

    def visit_ReturnStatement(self, node: ReturnStatement) -> str:
        if node.argument is None:
            return "return;"
        return f"return {self.expr(node.argument)};"

    def visit_ThrowStatement(self, node: ThrowStatement) -> str:
        return f"throw {self.expr(node.argument)};"

    def visit_IfStatement(self, node: IfStatement) -> str:
        text = f"if ({self.expr(node.test)}) {self.visit(node.consequent)}"
        if node.alternate is None:
            return text
        if isinstance(node.consequent, BlockStatement):
            return f"{text} else {self.visit(node.alternate)}"
        return f"{text}\n{self._indent()}else {self.visit(node.alternate)}"

    def visit_FunctionDeclaration(self, node: FunctionDeclaration) -> str:
        name = f" {node.id.name}" if node.id is not None else ""
        return f"function{name}{self._params(node.params)} {self.visit(node.body)}"

    def _class(self, node, prefix: str = "") -> str:
        text = self._decorators(node.decorators) + prefix + "class"
        if node.id is not None:
            text += f" {node.id.name}"
        if node.super_class is not None:
            text += f" extends {self.expr(node.super_class, PREC_CALL)}"
        return f"{text} {self.visit(node.body)}"

    def visit_ClassDeclaration(self, node: ClassDeclaration) -> str:
        return self._class(node)

    def visit_ClassBody(self, node: ClassBody) -> str:
        if not node.body:
            return "{}"
        self.indent_level += 1
        members = [self._indent() + self.visit(member) for member in node.body]
        self.indent_level -= 1
        return "{\n" + "\n\n".join(members) + "\n" + self._indent() + "}"

    def visit_ClassMethod(self, node: ClassMethod) -> str:
        text = self._decorators(node.decorators)
        if node.static:
            text += "static "
        if node.kind in ("get", "set"):
            text += f"{node.kind} "
        text += self._key(node.key, node.computed)
        return f"{text}{self._params(node.params)} {self.visit(node.body)}"

    def visit_ClassProperty(self, node: ClassProperty) -> str:
        text = self._decorators(node.decorators)
        if node.static:
            text += "static "
        text += self._key(node.key, node.computed)
        if node.value is not None:
            text += f" = {self.expr(node.value, PREC_ASSIGN)}"
        return text + ";"

    def visit_Decorator(self, node: Decorator) -> str:
        return f"@{self.expr(node.expression, PREC_CALL)}"

    def visit_ImportDeclaration(self, node: ImportDeclaration) -> str:
        source = self.visit(node.source)
        if not node.specifiers:
            return f"import {source};"

        parts = []
        named = []
        for spec in node.specifiers:
            if isinstance(spec, ImportSpecifier):
                named.append(self.visit(spec))
            else:
                parts.append(self.visit(spec))
        if named:
            parts.append("{ " + ", ".join(named) + " }")
        return f"import {', '.join(parts)} from {source};"

    def visit_ImportSpecifier(self, node: ImportSpecifier) -> str:
        if node.imported.name == node.local.name:
            return node.local.name
        return f"{node.imported.name} as {node.local.name}"

    def visit_ImportDefaultSpecifier(self, node: ImportDefaultSpecifier) -> str:
        return node.local.name

    def visit_ImportNamespaceSpecifier(self, node: ImportNamespaceSpecifier) -> str:
        return f"* as {node.local.name}"

    def visit_ExportDefaultDeclaration(self, node: ExportDefaultDeclaration) -> str:
        declaration = node.declaration
        if isinstance(declaration, ClassDeclaration):
            return self._class(declaration, prefix="export default ")
        if isinstance(declaration, FunctionDeclaration):
            return "export default " + self.visit(declaration)
        text = self.expr(declaration, PREC_ASSIGN)
        # A leading function or class keyword would be read as a declaration
        if _starts_like_declaration(declaration) and not isinstance(
            declaration, (ObjectExpression, FunctionExpression, ClassExpression)
        ):
            text = f"({text})"
        return f"export default {text};"

    def visit_ExportNamedDeclaration(self, node: ExportNamedDeclaration) -> str:
        if node.declaration is not None:
            if isinstance(node.declaration, ClassDeclaration):
                return self._class(node.declaration, prefix="export ")
            return "export " + self.visit(node.declaration)
        specifiers = ", ".join(self.visit(spec) for spec in node.specifiers)
        return "export { " + specifiers + " };" if specifiers else "export {};"

    def visit_ExportSpecifier(self, node: ExportSpecifier) -> str:
        if node.local.name == node.exported.name:
            return node.local.name
        return f"{node.local.name} as {node.exported.name}"

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def visit_Identifier(self, node: Identifier) -> str:
        return node.name

    def visit_ThisExpression(self, node: ThisExpression) -> str:
        return "this"

    def visit_StringLiteral(self, node: StringLiteral) -> str:
        if node.raw_text is not None:
            return node.raw_text
        return json.dumps(node.value, ensure_ascii=False)

    def visit_NumericLiteral(self, node: NumericLiteral) -> str:
        if node.raw_text is not None:
            return node.raw_text
        return repr(node.value)

    def visit_BooleanLiteral(self, node: BooleanLiteral) -> str:
        return "true" if node.value else "false"

    def visit_NullLiteral(self, node: NullLiteral) -> str:
        return "null"

    def visit_TemplateLiteral(self, node: TemplateLiteral) -> str:
        return node.raw

    def visit_ArrayExpression(self, node: ArrayExpression) -> str:
        return f"[{self._list(node.elements)}]"

    def visit_ObjectExpression(self, node: ObjectExpression) -> str:
        if not node.properties:
            return "{}"
        inline = ", ".join(self.visit(prop) for prop in node.properties)
        if "\n" not in inline:
            return "{ " + inline + " }"

        self.indent_level += 1
        members = [self._indent() + self.visit(prop) for prop in node.properties]
        self.indent_level -= 1
        return "{\n" + ",\n".join(members) + "\n" + self._indent() + "}"

    def visit_ObjectProperty(self, node: ObjectProperty) -> str:
        value = node.value
        if node.shorthand and not node.computed:
            if isinstance(value, Identifier) and isinstance(node.key, Identifier):
                if value.name == node.key.name:
                    return value.name
            if isinstance(value, AssignmentPattern):
                return self.visit(value)
        return f"{self._key(node.key, node.computed)}: {self.expr(value, PREC_ASSIGN)}"

    def visit_ObjectMethod(self, node: ObjectMethod) -> str:
        key = self._key(node.key, node.computed)
        return f"{key}{self._params(node.params)} {self.visit(node.body)}"

    def visit_SpreadElement(self, node: SpreadElement) -> str:
        return f"...{self.expr(node.argument, PREC_ASSIGN)}"

    def visit_MemberExpression(self, node: MemberExpression) -> str:
        obj = self.expr(node.object, PREC_CALL)
        if node.computed:
            return f"{obj}[{self.expr(node.property)}]"
        return f"{obj}.{self.visit(node.property)}"

    def visit_CallExpression(self, node: CallExpression) -> str:
        callee = self.expr(node.callee, PREC_CALL)
        if not (self.pretty_calls and node.pretty and node.arguments):
            return f"{callee}({self._list(node.arguments)})"

        self.indent_level += 1
        args = [self._indent() + self.expr(arg, PREC_ASSIGN) for arg in node.arguments]
        self.indent_level -= 1
        return f"{callee}(\n" + ",\n".join(args) + "\n" + self._indent() + ")"

    def visit_NewExpression(self, node: NewExpression) -> str:
        callee = self.visit(node.callee)
        if isinstance(node.callee, CallExpression) or self._precedence(node.callee) < PREC_CALL:
            callee = f"({callee})"
        return f"new {callee}({self._list(node.arguments)})"

    def visit_UnaryExpression(self, node: UnaryExpression) -> str:
        argument = self.expr(node.argument, PREC_UNARY)
        if node.operator in WORD_OPERATORS:
            return f"{node.operator} {argument}"
        if argument.startswith(node.operator):
            # - -x, + +x
            return f"{node.operator} {argument}"
        return f"{node.operator}{argument}"

    def visit_UpdateExpression(self, node: UpdateExpression) -> str:
        if node.prefix:
            return f"{node.operator}{self.expr(node.argument, PREC_UNARY)}"
        return f"{self.expr(node.argument, PREC_POSTFIX)}{node.operator}"

    def visit_BinaryExpression(self, node: BinaryExpression) -> str:
        precedence = self._precedence(node)
        left = self.expr(node.left, precedence)
        right = self.expr(node.right, precedence + 1)
        return f"{left} {node.operator} {right}"

    visit_LogicalExpression = visit_BinaryExpression

    def visit_ConditionalExpression(self, node: ConditionalExpression) -> str:
        test = self.expr(node.test, PREC_CONDITIONAL + 1)
        consequent = self.expr(node.consequent, PREC_ASSIGN)
        alternate = self.expr(node.alternate, PREC_ASSIGN)
        return f"{test} ? {consequent} : {alternate}"

    def visit_AssignmentExpression(self, node: AssignmentExpression) -> str:
        left = self.expr(node.left, PREC_CALL)
        return f"{left} {node.operator} {self.expr(node.right, PREC_ASSIGN)}"

    def visit_FunctionExpression(self, node: FunctionExpression) -> str:
        name = f" {node.id.name}" if node.id is not None else ""
        return f"function{name}{self._params(node.params)} {self.visit(node.body)}"

    def visit_ArrowFunctionExpression(self, node: ArrowFunctionExpression) -> str:
        if len(node.params) == 1 and isinstance(node.params[0], Identifier):
            params = node.params[0].name
        else:
            params = self._params(node.params)

        if isinstance(node.body, BlockStatement):
            body = self.visit(node.body)
        elif isinstance(node.body, ObjectExpression):
            body = f"({self.visit(node.body)})"
        else:
            body = self.expr(node.body, PREC_ASSIGN)
        return f"{params} => {body}"

    def visit_ClassExpression(self, node: ClassExpression) -> str:
        return self._class(node)

    # ------------------------------------------------------------------
    # Patterns
    # ------------------------------------------------------------------

    def visit_AssignmentPattern(self, node: AssignmentPattern) -> str:
        return f"{self.visit(node.left)} = {self.expr(node.right, PREC_ASSIGN)}"

    def visit_RestElement(self, node: RestElement) -> str:
        return f"...{self.visit(node.argument)}"

    def visit_ObjectPattern(self, node: ObjectPattern) -> str:
        if not node.properties:
            return "{}"
        return "{ " + ", ".join(self.visit(prop) for prop in node.properties) + " }"

    def visit_ArrayPattern(self, node: ArrayPattern) -> str:
        return "[" + ", ".join(self.visit(elem) for elem in node.elements) + "]"


def print_program(program: Program, pretty_calls: bool = True) -> str:
    """Convenience wrapper around :class:`JSPrinter`."""
    return JSPrinter(pretty_calls=pretty_calls).print(program)


def _starts_like_declaration(node: ASTNode) -> bool:
    """True when the leftmost token of ``node`` would open a block or declaration."""
    while True:
        if isinstance(node, (ObjectExpression, FunctionExpression, ClassExpression)):
            return True
        if isinstance(node, CallExpression):
            node = node.callee
        elif isinstance(node, MemberExpression):
            node = node.object
        elif isinstance(node, (BinaryExpression, LogicalExpression, AssignmentExpression)):
            node = node.left
        elif isinstance(node, ConditionalExpression):
            node = node.test
        elif isinstance(node, UpdateExpression) and not node.prefix:
            node = node.argument
        else:
            return False
