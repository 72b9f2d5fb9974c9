"""
Tests for lowering/identifiers.py - tag name conversion.
"""

import pytest

from jsx_compiler.src.ast import (
    Identifier,
    JSXIdentifier,
    JSXMemberExpression,
    MemberExpression,
    StringLiteral,
    ThisExpression,
)
from jsx_compiler.src.lowering.identifiers import (
    convert_jsx_identifier,
    is_compat_tag,
    is_identifier_name,
    is_valid_identifier,
    resolve_tag_name,
)


class TestIdentifierPredicates:
    """Tests for the identifier name checks."""

    @pytest.mark.parametrize("name", ["div", "Foo", "$refs", "_x", "class", "this"])
    def test_identifier_names(self, name):
        assert is_identifier_name(name)

    @pytest.mark.parametrize("name", ["router-link", "1abc", ""])
    def test_not_identifier_names(self, name):
        assert not is_identifier_name(name)

    def test_reserved_words_are_not_valid_identifiers(self):
        assert not is_valid_identifier("class")
        assert not is_valid_identifier("null")
        assert is_valid_identifier("className")

    @pytest.mark.parametrize(
        "tag,expected",
        [
            ("div", True),
            ("router-link", True),
            ("My-widget", True),
            ("MyWidget", False),
            ("", False),
            (None, False),
        ],
    )
    def test_compat_tags(self, tag, expected):
        assert is_compat_tag(tag) is expected


class TestConvertJSXIdentifier:
    """Tests for convert_jsx_identifier."""

    def test_plain_name(self):
        result = convert_jsx_identifier(JSXIdentifier("Foo", 3, 1))
        assert isinstance(result, Identifier)
        assert result.name == "Foo"
        assert result.line == 3

    def test_dashed_name_becomes_string(self):
        result = convert_jsx_identifier(JSXIdentifier("router-link"))
        assert isinstance(result, StringLiteral)
        assert result.value == "router-link"

    def test_this_becomes_this_expression(self):
        assert isinstance(convert_jsx_identifier(JSXIdentifier("this")), ThisExpression)

    def test_member_expression(self):
        name = JSXMemberExpression(JSXIdentifier("this"), JSXIdentifier("comp"))
        result = convert_jsx_identifier(name)
        assert isinstance(result, MemberExpression)
        assert isinstance(result.object, ThisExpression)
        assert result.property.name == "comp"
        assert result.computed is False

    def test_this_as_property_stays_identifier(self):
        name = JSXMemberExpression(JSXIdentifier("a"), JSXIdentifier("this"))
        result = convert_jsx_identifier(name)
        assert isinstance(result.property, Identifier)

    def test_dashed_property_is_computed(self):
        name = JSXMemberExpression(JSXIdentifier("Foo"), JSXIdentifier("bar-baz"))
        result = convert_jsx_identifier(name)
        assert result.computed is True
        assert result.property.value == "bar-baz"


class TestResolveTagName:
    """Tests for resolve_tag_name."""

    def test_names(self):
        assert resolve_tag_name(Identifier("Foo")) == "Foo"
        assert resolve_tag_name(StringLiteral("my-tag")) == "my-tag"

    def test_member_has_no_name(self):
        member = MemberExpression(Identifier("a"), Identifier("b"))
        assert resolve_tag_name(member) is None
        assert resolve_tag_name(ThisExpression()) is None
