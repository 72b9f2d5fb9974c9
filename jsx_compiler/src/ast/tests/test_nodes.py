"""
Tests for the expression, literal, statement and JSX node classes.
"""

from jsx_compiler.src.ast import (
    ArrowFunctionExpression,
    CallExpression,
    ClassDeclaration,
    ClassExpression,
    ClassMethod,
    ExportNamedDeclaration,
    Expr,
    Identifier,
    JSXAttribute,
    JSXElement,
    JSXIdentifier,
    JSXMemberExpression,
    JSXText,
    Literal,
    MemberExpression,
    NullLiteral,
    ObjectProperty,
    Statement,
    StringLiteral,
    TemplateLiteral,
    VariableDeclaration,
    VariableDeclarator,
)


class TestExpressionNodes:
    """Tests for expression nodes."""

    def test_member_defaults_to_dot_access(self):
        node = MemberExpression(Identifier("a"), Identifier("b"))
        assert node.computed is False

    def test_call_is_not_pretty_by_default(self):
        call = CallExpression(Identifier("h"), [])
        assert call.pretty is False

    def test_object_property_flags(self):
        prop = ObjectProperty(Identifier("a"), Identifier("a"), shorthand=True)
        assert prop.shorthand is True
        assert prop.computed is False

    def test_arrow_body_can_be_expression(self):
        arrow = ArrowFunctionExpression([Identifier("x")], Identifier("x"))
        assert isinstance(arrow.body, Expr)

    def test_class_expression_has_no_decorators_by_default(self):
        node = ClassExpression(None, None, None)
        assert node.decorators == []


class TestLiteralNodes:
    """Tests for literal nodes."""

    def test_literals_are_expressions(self):
        assert isinstance(NullLiteral(), Expr)
        assert isinstance(StringLiteral("x"), Literal)

    def test_string_keeps_raw_spelling(self):
        node = StringLiteral("x", raw_text="'x'")
        assert node.value == "x"
        assert node.raw_text == "'x'"

    def test_template_raw_is_raw_text(self):
        node = TemplateLiteral("`a${b}`")
        assert node.raw == node.raw_text == "`a${b}`"


class TestStatementNodes:
    """Tests for statement nodes."""

    def test_variable_declaration(self):
        decl = VariableDeclaration("const", [VariableDeclarator(Identifier("a"))])
        assert isinstance(decl, Statement)
        assert decl.declarations[0].init is None

    def test_class_method_defaults(self):
        method = ClassMethod(Identifier("render"), [], None)
        assert method.kind == "method"
        assert method.static is False
        assert method.decorators == []

    def test_class_declaration_decorators_default(self):
        assert ClassDeclaration(Identifier("A"), None, None).decorators == []

    def test_export_named_specifiers_default(self):
        node = ExportNamedDeclaration()
        assert node.declaration is None
        assert node.specifiers == []


class TestJSXNodes:
    """Tests for JSX nodes."""

    def test_element_is_expression(self):
        element = JSXElement(JSXIdentifier("div"), [], [], self_closing=True)
        assert isinstance(element, Expr)
        assert element.self_closing is True

    def test_attribute_without_value(self):
        attr = JSXAttribute(JSXIdentifier("disabled"))
        assert attr.value is None

    def test_member_tag_name(self):
        name = JSXMemberExpression(JSXIdentifier("Foo"), JSXIdentifier("Bar"))
        assert name.object.name == "Foo"
        assert name.property.name == "Bar"

    def test_text_keeps_raw(self):
        text = JSXText("a & b", raw_text="a &amp; b")
        assert text.value == "a & b"
        assert text.raw_text == "a &amp; b"
