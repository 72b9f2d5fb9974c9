"""Parse tree transformer producing AST nodes."""

from __future__ import annotations

import html
import re
from typing import Any, List, Optional, Tuple

from lark import Token, Transformer

from jsx_compiler.src.ast.base import ASTNode
from jsx_compiler.src.ast.expressions import (
    ArrayExpression,
    ArrowFunctionExpression,
    AssignmentExpression,
    BinaryExpression,
    CallExpression,
    ClassExpression,
    ConditionalExpression,
    Expr,
    FunctionExpression,
    Identifier,
    LogicalExpression,
    MemberExpression,
    NewExpression,
    ObjectExpression,
    ObjectMethod,
    ObjectProperty,
    SpreadElement,
    ThisExpression,
    UnaryExpression,
    UpdateExpression,
)
from jsx_compiler.src.ast.literals import (
    ArrayPattern,
    AssignmentPattern,
    BooleanLiteral,
    NullLiteral,
    NumericLiteral,
    ObjectPattern,
    RestElement,
    StringLiteral,
    TemplateLiteral,
)
from jsx_compiler.src.ast.statements import (
    BlockStatement,
    ClassBody,
    ClassDeclaration,
    ClassMethod,
    ClassProperty,
    Decorator,
    ExportDefaultDeclaration,
    ExportNamedDeclaration,
    ExportSpecifier,
    ExpressionStatement,
    FunctionDeclaration,
    IfStatement,
    ImportDeclaration,
    ImportDefaultSpecifier,
    ImportNamespaceSpecifier,
    ImportSpecifier,
    Program,
    ReturnStatement,
    ThrowStatement,
    VariableDeclaration,
    VariableDeclarator,
)
from jsx_compiler.src.ast.jsx import (
    JSXAttribute,
    JSXElement,
    JSXEmptyExpression,
    JSXExpressionContainer,
    JSXIdentifier,
    JSXMemberExpression,
    JSXNamespacedName,
    JSXSpreadAttribute,
    JSXText,
)

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}

_ESCAPE_RE = re.compile(
    r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\r\n|[\s\S])"
)

# JSX only decodes terminated character references
_ENTITY_RE = re.compile(r"&(?:#[xX][0-9a-fA-F]+|#[0-9]+|[A-Za-z][A-Za-z0-9]*);")


def _decode_entities(text: str) -> str:
    return _ENTITY_RE.sub(lambda match: html.unescape(match.group(0)), text)


class _ComputedKey:
    """Marks a ``[expression]`` property key until its owner is built."""

    def __init__(self, expression: Expr) -> None:
        self.expression = expression


def _split_key(key: Any) -> Tuple[Expr, bool]:
    if isinstance(key, _ComputedKey):
        return key.expression, True
    return key, False


def _compact(items) -> list:
    """Drop ``None`` placeholders produced by optional grammar items."""
    return [item for item in items if item is not None]


class JSXTransformer(Transformer):
    """Transforms Lark parse tree into typed AST nodes."""

    def __init__(self):
        super().__init__()

    @staticmethod
    def _parse_number(text: str):
        """Parse a numeric literal in hexadecimal or decimal notation."""
        if text.startswith(("0x", "0X")):
            return int(text, 16)
        if any(ch in text for ch in ".eE"):
            return float(text)
        return int(text, 10)

    @staticmethod
    def _unescape_string(raw: str) -> str:
        """Decode the escapes of a quoted JavaScript string literal."""

        def replace(match: re.Match) -> str:
            escape = match.group(1)
            if escape.startswith("u{"):
                return chr(int(escape[2:-1], 16))
            if escape.startswith("u") and len(escape) == 5:
                return chr(int(escape[1:], 16))
            if escape.startswith("x") and len(escape) == 3:
                return chr(int(escape[1:], 16))
            if escape in ("\n", "\r\n", "\r"):
                return ""
            return _SIMPLE_ESCAPES.get(escape, escape)

        return _ESCAPE_RE.sub(replace, raw[1:-1])

    def _set_position(self, node: ASTNode, token_or_node) -> ASTNode:
        """Set line/column position on AST node from a Lark token or child node."""
        if token_or_node is None:
            return node
        line = getattr(token_or_node, "line", None)
        if line:
            node.line = line
            node.column = getattr(token_or_node, "column", 0) or 0
        return node

    def _position_from(self, node: ASTNode, items) -> ASTNode:
        """Take the position of the first located item."""
        for item in items:
            if isinstance(item, list):
                if item:
                    return self._position_from(node, item)
                continue
            if getattr(item, "line", 0):
                return self._set_position(node, item)
        return node

    def _identifier(self, token: Token) -> Identifier:
        return self._set_position(Identifier(str(token)), token)

    def _to_pattern(self, expr: ASTNode) -> ASTNode:
        """Reinterpret an arrow-function parameter expression as a binding."""
        if isinstance(expr, Identifier):
            return expr
        if isinstance(expr, AssignmentExpression) and expr.operator == "=":
            pattern = AssignmentPattern(self._to_pattern(expr.left), expr.right)
            return self._set_position(pattern, expr)
        if isinstance(expr, SpreadElement):
            return self._set_position(RestElement(self._to_pattern(expr.argument)), expr)
        if isinstance(expr, ArrayExpression):
            elements = [self._to_pattern(item) for item in expr.elements]
            return self._set_position(ArrayPattern(elements), expr)
        if isinstance(expr, ObjectExpression):
            properties: List[ASTNode] = []
            for prop in expr.properties:
                if isinstance(prop, ObjectProperty):
                    converted = ObjectProperty(
                        prop.key,
                        self._to_pattern(prop.value),
                        computed=prop.computed,
                        shorthand=prop.shorthand,
                    )
                    properties.append(self._set_position(converted, prop))
                elif isinstance(prop, SpreadElement):
                    properties.append(self._to_pattern(prop))
                else:
                    raise SyntaxError(
                        f"Invalid destructuring target at {prop.line}:{prop.column}"
                    )
            return self._set_position(ObjectPattern(properties), expr)
        raise SyntaxError(
            f"Invalid arrow function parameter at {expr.line}:{expr.column}"
        )

    # ------------------------------------------------------------------
    # Program and statements
    # ------------------------------------------------------------------

    def start(self, statements) -> Program:
        """start: statement*"""
        return Program(body=_compact(statements))

    def expr_stmt(self, items) -> ASTNode:
        """expr_stmt: assign_nb ";"?

        A named function or class expression in statement position is a
        declaration.
        """
        expr = items[0]
        if isinstance(expr, FunctionExpression) and expr.id is not None:
            decl = FunctionDeclaration(expr.id, expr.params, expr.body)
            return self._set_position(decl, expr)
        if isinstance(expr, ClassExpression) and expr.id is not None:
            decl = ClassDeclaration(
                expr.id, expr.super_class, expr.body, decorators=expr.decorators
            )
            return self._set_position(decl, expr)
        return self._set_position(ExpressionStatement(expr), expr)

    def block(self, statements) -> BlockStatement:
        """block: "{" statement* "}" """
        body = _compact(statements)
        return self._position_from(BlockStatement(body), body)

    def return_stmt(self, items) -> ReturnStatement:
        """return_stmt: "return" [assign_expr] ";"?"""
        return self._position_from(ReturnStatement(items[0]), items)

    def throw_stmt(self, items) -> ThrowStatement:
        """throw_stmt: "throw" assign_expr ";"?"""
        return self._position_from(ThrowStatement(items[0]), items)

    def if_stmt(self, items) -> IfStatement:
        """if_stmt: "if" "(" assign_expr ")" statement ["else" statement]"""
        test, consequent, alternate = items
        return self._position_from(IfStatement(test, consequent, alternate), items)

    def var_kind(self, items) -> Token:
        return items[0]

    def var_decl(self, items) -> VariableDeclaration:
        """var_decl: var_kind declarator ("," declarator)*"""
        kind_token = items[0]
        declarations = _compact(items[1:])
        decl = VariableDeclaration(str(kind_token), declarations)
        return self._set_position(decl, kind_token)

    def declarator(self, items) -> VariableDeclarator:
        """declarator: pattern ["=" assign_expr]"""
        target, init = items
        return self._set_position(VariableDeclarator(target, init), target)

    # Imports / exports

    def import_from(self, items) -> ImportDeclaration:
        """import_decl: "import" import_clause "from" STRING"""
        specifiers, source_token = items
        source = self.string([source_token])
        return self._position_from(ImportDeclaration(specifiers, source), specifiers)

    def import_bare(self, items) -> ImportDeclaration:
        """import_decl: "import" STRING"""
        source = self.string(items)
        return self._set_position(ImportDeclaration([], source), source)

    def import_clause(self, items) -> List[ASTNode]:
        specifiers: List[ASTNode] = []
        for group in items:
            specifiers.extend(group)
        return specifiers

    def import_default(self, items) -> List[ASTNode]:
        local = self._identifier(items[0])
        return [self._set_position(ImportDefaultSpecifier(local), local)]

    def import_namespace(self, items) -> List[ASTNode]:
        local = self._identifier(items[0])
        return [self._set_position(ImportNamespaceSpecifier(local), local)]

    def import_named(self, items) -> List[ASTNode]:
        return _compact(items)

    def import_spec(self, items) -> ImportSpecifier:
        """import_spec: NAME ["as" NAME]"""
        imported = self._identifier(items[0])
        local = self._identifier(items[1]) if items[1] is not None else Identifier(imported.name)
        return self._set_position(ImportSpecifier(imported, local), imported)

    def _as_declaration(self, node: ASTNode) -> ASTNode:
        if isinstance(node, FunctionExpression):
            decl = FunctionDeclaration(node.id, node.params, node.body)
            return self._set_position(decl, node)
        if isinstance(node, ClassExpression):
            decl = ClassDeclaration(
                node.id, node.super_class, node.body, decorators=node.decorators
            )
            return self._set_position(decl, node)
        return node

    def export_default(self, items) -> ExportDefaultDeclaration:
        """export_decl: "export" "default" assign_expr"""
        declaration = self._as_declaration(items[0])
        return self._set_position(ExportDefaultDeclaration(declaration), declaration)

    def export_named(self, items) -> ExportNamedDeclaration:
        declaration = self._as_declaration(items[0])
        return self._set_position(ExportNamedDeclaration(declaration), declaration)

    def export_specifiers(self, items) -> ExportNamedDeclaration:
        specifiers = _compact(items)
        return self._position_from(ExportNamedDeclaration(specifiers=specifiers), specifiers)

    def export_spec(self, items) -> ExportSpecifier:
        """export_spec: NAME ["as" NAME]"""
        local = self._identifier(items[0])
        exported = self._identifier(items[1]) if items[1] is not None else Identifier(local.name)
        return self._set_position(ExportSpecifier(local, exported), local)

    def _decorate(self, items) -> Tuple[List[Decorator], ClassDeclaration]:
        decorators = [item for item in items[:-1] if isinstance(item, Decorator)]
        decl = self._as_declaration(items[-1])
        decl.decorators = decorators + decl.decorators
        if decorators:
            self._set_position(decl, decorators[0])
        return decorators, decl

    def decorated_class(self, items) -> ClassDeclaration:
        """decorated_decl: decorator+ class_expr"""
        _, decl = self._decorate(items)
        return decl

    def decorated_export_default(self, items) -> ExportDefaultDeclaration:
        """decorated_decl: decorator+ "export" "default" class_expr"""
        _, decl = self._decorate(items)
        return self._set_position(ExportDefaultDeclaration(decl), decl)

    def decorated_export_named(self, items) -> ExportNamedDeclaration:
        """decorated_decl: decorator+ "export" class_expr"""
        _, decl = self._decorate(items)
        return self._set_position(ExportNamedDeclaration(decl), decl)

    def decorator(self, items) -> Decorator:
        """decorator: "@" decorator_target [arguments]"""
        target, arguments = items
        expression = target
        if arguments is not None:
            expression = self._set_position(CallExpression(target, arguments), target)
        return self._set_position(Decorator(expression), target)

    def decorator_target(self, items) -> Identifier:
        return self._identifier(items[0])

    def decorator_member(self, items) -> MemberExpression:
        obj, name = items
        return self._set_position(MemberExpression(obj, self._identifier(name)), obj)

    # ------------------------------------------------------------------
    # Patterns
    # ------------------------------------------------------------------

    def identifier(self, items) -> Identifier:
        return self._identifier(items[0])

    def object_pattern(self, items) -> ObjectPattern:
        properties = _compact(items)
        return self._position_from(ObjectPattern(properties), properties)

    def array_pattern(self, items) -> ArrayPattern:
        elements = _compact(items)
        return self._position_from(ArrayPattern(elements), elements)

    def shorthand_pattern(self, items) -> ObjectProperty:
        key = self._identifier(items[0])
        prop = ObjectProperty(key, Identifier(key.name), shorthand=True)
        return self._set_position(prop, key)

    def shorthand_pattern_default(self, items) -> ObjectProperty:
        key = self._identifier(items[0])
        value = AssignmentPattern(Identifier(key.name), items[1])
        prop = ObjectProperty(key, self._set_position(value, key), shorthand=True)
        return self._set_position(prop, key)

    def pattern_property(self, items) -> ObjectProperty:
        key, computed = _split_key(items[0])
        prop = ObjectProperty(key, items[1], computed=computed)
        return self._set_position(prop, key)

    def pattern_property_default(self, items) -> ObjectProperty:
        key, computed = _split_key(items[0])
        value = self._set_position(AssignmentPattern(items[1], items[2]), items[1])
        prop = ObjectProperty(key, value, computed=computed)
        return self._set_position(prop, key)

    def rest_name(self, items) -> RestElement:
        argument = self._identifier(items[0])
        return self._set_position(RestElement(argument), argument)

    def assignment_pattern(self, items) -> AssignmentPattern:
        left, right = items
        return self._set_position(AssignmentPattern(left, right), left)

    def rest_element(self, items) -> RestElement:
        return self._set_position(RestElement(items[0]), items[0])

    def params(self, items) -> List[ASTNode]:
        return _compact(items)

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def assign_op(self, items) -> str:
        return str(items[0])

    def assign(self, items) -> AssignmentExpression:
        """assign: call_member assign_op assign_expr"""
        left, operator, right = items
        return self._set_position(AssignmentExpression(operator, left, right), left)

    def conditional(self, items) -> ConditionalExpression:
        test, consequent, alternate = items
        node = ConditionalExpression(test, consequent, alternate)
        return self._set_position(node, test)

    def logical(self, items) -> LogicalExpression:
        left, operator, right = items
        return self._set_position(LogicalExpression(str(operator), left, right), left)

    def binary(self, items) -> BinaryExpression:
        left, operator, right = items
        return self._set_position(BinaryExpression(str(operator), left, right), left)

    def unary_op(self, items) -> UnaryExpression:
        operator, argument = items
        return self._set_position(UnaryExpression(str(operator), argument), operator)

    def update_prefix(self, items) -> UpdateExpression:
        operator, argument = items
        node = UpdateExpression(str(operator), argument, prefix=True)
        return self._set_position(node, operator)

    def update_postfix(self, items) -> UpdateExpression:
        argument, operator = items
        node = UpdateExpression(str(operator), argument, prefix=False)
        return self._set_position(node, argument)

    def member(self, items) -> MemberExpression:
        obj, prop = items
        return self._set_position(MemberExpression(obj, prop), obj)

    def computed_member(self, items) -> MemberExpression:
        obj, prop = items
        return self._set_position(MemberExpression(obj, prop, computed=True), obj)

    def call(self, items) -> CallExpression:
        callee, arguments = items
        return self._set_position(CallExpression(callee, arguments), callee)

    def prop_name(self, items) -> Identifier:
        return self._identifier(items[0])

    def arguments(self, items) -> List[Expr]:
        return _compact(items)

    def this_expr(self, items) -> ThisExpression:
        return self._set_position(ThisExpression(), items[0])

    def true_literal(self, items) -> BooleanLiteral:
        return self._set_position(BooleanLiteral(True), items[0])

    def false_literal(self, items) -> BooleanLiteral:
        return self._set_position(BooleanLiteral(False), items[0])

    def null_literal(self, items) -> NullLiteral:
        return self._set_position(NullLiteral(), items[0])

    def string(self, items) -> StringLiteral:
        token = items[0]
        node = StringLiteral(self._unescape_string(str(token)), raw_text=str(token))
        return self._set_position(node, token)

    def number(self, items) -> NumericLiteral:
        token = items[0]
        node = NumericLiteral(self._parse_number(str(token)), raw_text=str(token))
        return self._set_position(node, token)

    def template(self, items) -> TemplateLiteral:
        token = items[0]
        return self._set_position(TemplateLiteral(str(token)), token)

    def array(self, items) -> ArrayExpression:
        elements = _compact(items)
        return self._position_from(ArrayExpression(elements), elements)

    def spread(self, items) -> SpreadElement:
        return self._set_position(SpreadElement(items[0]), items[0])

    def object(self, items) -> ObjectExpression:
        properties = _compact(items)
        return self._position_from(ObjectExpression(properties), properties)

    def object_property(self, items) -> ObjectProperty:
        key, computed = _split_key(items[0])
        prop = ObjectProperty(key, items[1], computed=computed)
        return self._set_position(prop, key)

    def shorthand_property(self, items) -> ObjectProperty:
        key = self._identifier(items[0])
        prop = ObjectProperty(key, Identifier(key.name), shorthand=True)
        return self._set_position(prop, key)

    def object_method(self, items) -> ObjectMethod:
        """object_member: prop_key "(" [params] ")" block"""
        key, computed = _split_key(items[0])
        method = ObjectMethod(key, items[1] or [], items[2], computed=computed)
        return self._set_position(method, key)

    def key_name(self, items) -> Identifier:
        return self._identifier(items[0])

    def key_string(self, items) -> StringLiteral:
        return self.string(items)

    def key_number(self, items) -> NumericLiteral:
        return self.number(items)

    def key_computed(self, items) -> _ComputedKey:
        return _ComputedKey(items[0])

    def new_expr(self, items) -> NewExpression:
        """new_expr: "new" new_callee [arguments]"""
        callee, arguments = items
        return self._set_position(NewExpression(callee, arguments or []), callee)

    def function_expr(self, items) -> FunctionExpression:
        """function_expr: "function" [NAME] "(" [params] ")" block"""
        name, params, body = items
        func_id = self._identifier(name) if name is not None else None
        node = FunctionExpression(func_id, params or [], body)
        return self._position_from(node, [func_id, body])

    def arrow_func(self, items) -> ArrowFunctionExpression:
        params, body = items
        node = ArrowFunctionExpression(params, body)
        return self._position_from(node, [params, body])

    def arrow_name(self, items) -> List[ASTNode]:
        return [self._identifier(items[0])]

    def arrow_empty(self, items) -> List[ASTNode]:
        return []

    def arrow_list(self, items) -> List[ASTNode]:
        return [self._to_pattern(item) for item in _compact(items)]

    def class_expr(self, items) -> ClassExpression:
        """class_expr: "class" [NAME] ["extends" call_member] class_body"""
        name, super_class, body = items
        class_id = self._identifier(name) if name is not None else None
        node = ClassExpression(class_id, super_class, body)
        return self._position_from(node, [class_id, super_class, body])

    def class_body(self, items) -> ClassBody:
        members = _compact(items)
        return self._position_from(ClassBody(members), members)

    def accessor(self, items) -> str:
        return str(items[0])

    def class_method(self, items) -> ClassMethod:
        """decorator* [STATIC] [accessor] prop_key "(" [params] ")" block"""
        decorators = [item for item in items[:-5] if isinstance(item, Decorator)]
        static_token, accessor, raw_key, params, body = items[-5:]
        key, computed = _split_key(raw_key)
        method = ClassMethod(
            key,
            params or [],
            body,
            kind=accessor or "method",
            static=static_token is not None,
            computed=computed,
            decorators=decorators,
        )
        return self._position_from(method, [decorators, static_token, key])

    def class_property(self, items) -> ClassProperty:
        """decorator* [STATIC] prop_key ["=" assign_expr] ";"?"""
        decorators = [item for item in items[:-3] if isinstance(item, Decorator)]
        static_token, raw_key, value = items[-3:]
        key, computed = _split_key(raw_key)
        prop = ClassProperty(
            key,
            value,
            static=static_token is not None,
            computed=computed,
            decorators=decorators,
        )
        return self._position_from(prop, [decorators, static_token, key])

    def empty_member(self, items) -> None:
        return None

    # ------------------------------------------------------------------
    # JSX
    # ------------------------------------------------------------------

    def _build_element(self, items, self_closing: bool) -> JSXElement:
        name = items[0]
        attributes: List[ASTNode] = []
        children: List[ASTNode] = []
        rest = items[1:] if self_closing else items[1:-1]
        for item in rest:
            if isinstance(item, (JSXAttribute, JSXSpreadAttribute)):
                attributes.append(item)
            elif item is not None:
                children.append(item)

        if not self_closing:
            closing = items[-1]
            opening_name = self._jsx_name_text(name)
            closing_name = self._jsx_name_text(closing)
            if opening_name != closing_name:
                raise SyntaxError(
                    f"Expected corresponding JSX closing tag for <{opening_name}> "
                    f"at {closing.line}:{closing.column}"
                )

        element = JSXElement(name, attributes, children, self_closing=self_closing)
        return self._set_position(element, name)

    def _jsx_name_text(self, node: ASTNode) -> str:
        if isinstance(node, JSXIdentifier):
            return node.name
        if isinstance(node, JSXNamespacedName):
            return f"{node.namespace.name}:{node.name.name}"
        if isinstance(node, JSXMemberExpression):
            return f"{self._jsx_name_text(node.object)}.{node.property.name}"
        return ""

    def jsx_paired(self, items) -> JSXElement:
        """"<" tag attrs ">" children "</" tag ">" """
        return self._build_element(items, self_closing=False)

    def jsx_self_closing(self, items) -> JSXElement:
        """"<" tag attrs "/>" """
        return self._build_element(items, self_closing=True)

    def jsx_text(self, items) -> JSXText:
        token = items[0]
        node = JSXText(_decode_entities(str(token)), raw_text=str(token))
        return self._set_position(node, token)

    def jsx_expression_container(self, items) -> JSXExpressionContainer:
        return self._set_position(JSXExpressionContainer(items[0]), items[0])

    def jsx_empty_expression(self, items) -> JSXExpressionContainer:
        return JSXExpressionContainer(JSXEmptyExpression())

    def jsx_identifier(self, items) -> JSXIdentifier:
        token = items[0]
        return self._set_position(JSXIdentifier(str(token)), token)

    def jsx_namespaced_name(self, items) -> JSXNamespacedName:
        namespace_token, name_token = items
        node = JSXNamespacedName(
            self.jsx_identifier([namespace_token]), self.jsx_identifier([name_token])
        )
        return self._set_position(node, namespace_token)

    def jsx_member(self, items) -> JSXMemberExpression:
        obj, prop_token = items
        node = JSXMemberExpression(obj, self.jsx_identifier([prop_token]))
        return self._set_position(node, obj)

    def jsx_attribute(self, items) -> JSXAttribute:
        """jsx_attribute: jsx_attr_name ["=" jsx_attr_value]"""
        name, value = items
        return self._set_position(JSXAttribute(name, value), name)

    def jsx_spread_attribute(self, items) -> JSXSpreadAttribute:
        return self._set_position(JSXSpreadAttribute(items[0]), items[0])

    def jsx_string(self, items) -> StringLiteral:
        """JSX attribute strings have no escapes; entities are decoded."""
        token = items[0]
        node = StringLiteral(_decode_entities(str(token)[1:-1]), raw_text=str(token))
        return self._set_position(node, token)
