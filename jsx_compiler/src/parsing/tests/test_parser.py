"""
Tests for parsing/parser.py - JSX parser functionality.
"""

from pathlib import Path

import pytest

from jsx_compiler.src.ast.expressions import (
    ArrowFunctionExpression,
    CallExpression,
    ClassExpression,
    ConditionalExpression,
    MemberExpression,
    ObjectExpression,
    ObjectMethod,
)
from jsx_compiler.src.ast.jsx import (
    JSXAttribute,
    JSXElement,
    JSXExpressionContainer,
    JSXMemberExpression,
    JSXNamespacedName,
    JSXSpreadAttribute,
    JSXText,
)
from jsx_compiler.src.ast.literals import ObjectPattern, StringLiteral
from jsx_compiler.src.ast.statements import (
    BlockStatement,
    ClassDeclaration,
    ClassMethod,
    ExportDefaultDeclaration,
    ExpressionStatement,
    IfStatement,
    ImportDeclaration,
    ImportDefaultSpecifier,
    ImportSpecifier,
    Program,
    ReturnStatement,
    VariableDeclaration,
)
from jsx_compiler.src.parsing.parser import JSXParser


def _expr(program):
    """Expression of the first statement."""
    stmt = program.body[0]
    assert isinstance(stmt, ExpressionStatement)
    return stmt.expression


class TestJSXParser:
    """Tests for JSXParser class."""

    @pytest.fixture
    def parser(self):
        """Create a new parser instance."""
        return JSXParser()

    def test_parse_returns_program(self, parser):
        """Test parse() returns a Program AST node."""
        result = parser.parse("const x = 42;")
        assert isinstance(result, Program)

    def test_parse_multiple_statements(self, parser):
        code = """
        const a = 1
        let b = a + 2;
        foo(a, b)
        """
        program = parser.parse(code)
        assert len(program.body) == 3
        assert isinstance(program.body[0], VariableDeclaration)
        assert program.body[1].kind == "let"

    def test_parse_raises_on_syntax_error(self, parser):
        with pytest.raises(SyntaxError):
            parser.parse("const x = ;")

    def test_parse_raises_on_unclosed_element(self, parser):
        with pytest.raises(SyntaxError):
            parser.parse("<div>")

    def test_parse_raises_on_mismatched_tag(self, parser):
        with pytest.raises(SyntaxError):
            parser.parse("<div></span>")

    def test_source_file_attached(self, parser):
        program = parser.parse("<div/>", "app.jsx")
        element = _expr(program)
        assert element.source_file == "app.jsx"
        assert element.name.source_file == "app.jsx"

    def test_positions_recorded(self, parser):
        program = parser.parse("\n  <div/>")
        element = _expr(program)
        assert element.line == 2

    def test_parse_file(self, parser, tmp_path):
        path = tmp_path / "comp.jsx"
        path.write_text("export default { render() { return <p/> } }\n", encoding="utf-8")
        program = parser.parse_file(path)
        assert isinstance(program.body[0], ExportDefaultDeclaration)

    def test_parse_file_missing(self, parser, tmp_path):
        with pytest.raises(FileNotFoundError):
            parser.parse_file(tmp_path / "missing.jsx")


class TestJSXParserJavaScript:
    """Tests for the JavaScript side of the grammar."""

    @pytest.fixture
    def parser(self):
        return JSXParser()

    def test_imports(self, parser):
        program = parser.parse('import Vue, { h as create } from "vue";\nimport "./style.css"')
        decl = program.body[0]
        assert isinstance(decl, ImportDeclaration)
        assert isinstance(decl.specifiers[0], ImportDefaultSpecifier)
        assert isinstance(decl.specifiers[1], ImportSpecifier)
        assert decl.specifiers[1].local.name == "create"
        assert decl.source.value == "vue"
        assert program.body[1].specifiers == []

    def test_object_with_methods(self, parser):
        program = parser.parse("export default { name: 'x', render(h) { return 1 } }")
        obj = program.body[0].declaration
        assert isinstance(obj, ObjectExpression)
        assert isinstance(obj.properties[1], ObjectMethod)
        assert obj.properties[1].params[0].name == "h"

    def test_class_with_methods(self, parser):
        code = """
        class App extends Vue {
          static items = []
          render() { return <div/> }
          get label() { return this.x }
        }
        """
        decl = parser.parse(code).body[0]
        assert isinstance(decl, ClassDeclaration)
        methods = [m for m in decl.body.body if isinstance(m, ClassMethod)]
        assert [m.kind for m in methods] == ["method", "get"]

    def test_decorated_class(self, parser):
        code = "@Component({})\nexport default class App extends Vue {}"
        decl = parser.parse(code).body[0]
        assert isinstance(decl, ExportDefaultDeclaration)
        assert len(decl.declaration.decorators) == 1

    def test_block_statement_at_top_level(self, parser):
        program = parser.parse("{ foo() }")
        assert isinstance(program.body[0], BlockStatement)

    def test_arrow_function_with_destructuring(self, parser):
        program = parser.parse("const f = ({ a, b }) => <div>{a}</div>")
        arrow = program.body[0].declarations[0].init
        assert isinstance(arrow, ArrowFunctionExpression)
        assert isinstance(arrow.params[0], ObjectPattern)
        assert isinstance(arrow.body, JSXElement)

    def test_arrow_function_block_body(self, parser):
        program = parser.parse("items.map(item => { return item })")
        call = _expr(program)
        assert isinstance(call, CallExpression)
        assert isinstance(call.arguments[0].body, BlockStatement)

    def test_if_else(self, parser):
        program = parser.parse("if (a) { return 1 } else return 2")
        stmt = program.body[0]
        assert isinstance(stmt, IfStatement)
        assert isinstance(stmt.alternate, ReturnStatement)

    def test_conditional_and_member(self, parser):
        expr = _expr(parser.parse("this.ok ? a.b[c] : d"))
        assert isinstance(expr, ConditionalExpression)
        assert isinstance(expr.test, MemberExpression)
        assert expr.consequent.computed

    def test_comments_are_ignored(self, parser):
        program = parser.parse("// leading\nfoo() /* trailing */")
        assert len(program.body) == 1

    def test_less_than_is_comparison_after_operand(self, parser):
        expr = _expr(parser.parse("a < b"))
        assert expr.operator == "<"


class TestJSXParserJSX:
    """Tests for JSX syntax."""

    @pytest.fixture
    def parser(self):
        return JSXParser()

    def test_self_closing_element(self, parser):
        element = _expr(parser.parse("<br/>"))
        assert isinstance(element, JSXElement)
        assert element.self_closing
        assert element.name.name == "br"

    def test_attributes(self, parser):
        element = _expr(
            parser.parse('<input type="text" disabled value={this.v} {...rest} />')
        )
        attrs = element.attributes
        assert isinstance(attrs[0].value, StringLiteral)
        assert attrs[0].value.value == "text"
        assert attrs[1].value is None
        assert isinstance(attrs[2].value, JSXExpressionContainer)
        assert isinstance(attrs[3], JSXSpreadAttribute)

    def test_dashed_names(self, parser):
        element = _expr(parser.parse('<router-link on-click={go} data-id="1"/>'))
        assert element.name.name == "router-link"
        assert element.attributes[0].name.name == "on-click"

    def test_member_tag(self, parser):
        element = _expr(parser.parse("<Foo.Bar.Baz/>"))
        assert isinstance(element.name, JSXMemberExpression)
        assert element.name.property.name == "Baz"

    def test_namespaced_names(self, parser):
        element = _expr(parser.parse('<svg:rect xlink:href="#a"/>'))
        assert isinstance(element.name, JSXNamespacedName)
        assert isinstance(element.attributes[0].name, JSXNamespacedName)

    def test_children(self, parser):
        element = _expr(parser.parse("<div>\n  hello {name}\n  <b>x</b>{}\n</div>"))
        kinds = [type(child) for child in element.children]
        assert kinds == [
            JSXText,
            JSXExpressionContainer,
            JSXText,
            JSXElement,
            JSXExpressionContainer,
            JSXText,
        ]
        assert element.children[0].value == "\n  hello "

    def test_text_keeps_punctuation(self, parser):
        element = _expr(parser.parse("<p>it's (really) done: yes; a/b</p>"))
        assert element.children[0].value == "it's (really) done: yes; a/b"

    def test_nested_jsx_in_expression(self, parser):
        element = _expr(
            parser.parse("<ul>{items.map(i => <li key={i}>{i}</li>)}</ul>")
        )
        call = element.children[0].expression
        inner = call.arguments[0].body
        assert isinstance(inner, JSXElement)
        assert isinstance(inner.attributes[0], JSXAttribute)

    def test_parenthesized_return(self, parser):
        code = "function r() {\n  return (\n    <div class=\"a\">text</div>\n  )\n}"
        func = parser.parse(code).body[0]
        ret = func.body.body[0]
        assert isinstance(ret.argument, JSXElement)

    def test_sample_programs(self, parser):
        examples = Path(__file__).resolve().parents[4] / "example_programs"
        paths = sorted(examples.glob("*.jsx"))
        assert paths
        for path in paths:
            program = parser.parse_file(path)
            assert len(program.body) > 0
