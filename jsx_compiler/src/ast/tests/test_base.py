"""
Tests for ast/base.py - Base AST node classes and traversal helpers.
"""

from jsx_compiler.src.ast.base import (
    ASTNode,
    ASTTransformer,
    ASTVisitor,
    copy_location,
    iter_child_nodes,
    iter_fields,
    walk,
)
from jsx_compiler.src.ast.expressions import (
    BinaryExpression,
    CallExpression,
    Identifier,
)
from jsx_compiler.src.ast.literals import NumericLiteral, StringLiteral
from jsx_compiler.src.ast.statements import ExpressionStatement, Program


def _sum_program():
    return Program(
        [
            ExpressionStatement(
                BinaryExpression("+", Identifier("a"), NumericLiteral(1))
            )
        ]
    )


class TestASTNode:
    """Tests for the ASTNode base class."""

    def test_literal_inherits_from_ast_node(self):
        assert isinstance(NumericLiteral(5), ASTNode)

    def test_node_with_location(self):
        node = NumericLiteral(value=42, line=10, column=5)
        assert node.line == 10
        assert node.column == 5
        assert node.source_file is None

    def test_repr_includes_location(self):
        assert repr(Identifier("x", 3, 4)) == "Identifier(3:4)"

    def test_copy_location(self):
        """copy_location moves position data but not raw_text."""
        old = StringLiteral("a", line=2, column=7, raw_text="'a'")
        old.source_file = "app.jsx"
        new = copy_location(Identifier("b"), old)
        assert (new.line, new.column, new.source_file) == (2, 7, "app.jsx")
        assert new.raw_text is None


class TestFieldIteration:
    """Tests for iter_fields, iter_child_nodes and walk."""

    def test_iter_fields_skips_location(self):
        node = Identifier("x", 1, 2)
        assert dict(iter_fields(node)) == {"name": "x"}

    def test_iter_child_nodes_in_field_order(self):
        call = CallExpression(Identifier("f"), [NumericLiteral(1), NumericLiteral(2)])
        children = list(iter_child_nodes(call))
        assert isinstance(children[0], Identifier)
        assert [c.value for c in children[1:]] == [1, 2]

    def test_walk_is_parents_first(self):
        names = [type(node).__name__ for node in walk(_sum_program())]
        assert names == [
            "Program",
            "ExpressionStatement",
            "BinaryExpression",
            "Identifier",
            "NumericLiteral",
        ]


class TestASTVisitor:
    """Tests for the ASTVisitor base class."""

    def test_generic_visit_returns_none(self):
        assert ASTVisitor().visit(NumericLiteral(42)) is None

    def test_visitor_calls_specific_method(self):
        class NumberVisitor(ASTVisitor):
            def visit_NumericLiteral(self, node):
                return f"visited number: {node.value}"

        assert NumberVisitor().visit(NumericLiteral(42)) == "visited number: 42"

    def test_generic_visit_reaches_nested_nodes(self):
        seen = []

        class Collector(ASTVisitor):
            def visit_Identifier(self, node):
                seen.append(node.name)

        Collector().visit(_sum_program())
        assert seen == ["a"]


class TestASTTransformer:
    """Tests for the ASTTransformer base class."""

    def test_replaces_child_fields(self):
        class Renamer(ASTTransformer):
            def visit_Identifier(self, node):
                return Identifier(node.name.upper())

        program = Renamer().visit(_sum_program())
        expr = program.body[0].expression
        assert expr.left.name == "A"

    def test_replaces_list_items_in_place(self):
        class Stringify(ASTTransformer):
            def visit_NumericLiteral(self, node):
                return StringLiteral(str(node.value))

        call = CallExpression(Identifier("f"), [NumericLiteral(1)])
        arguments = call.arguments
        Stringify().visit(call)
        assert call.arguments is arguments
        assert isinstance(arguments[0], StringLiteral)
