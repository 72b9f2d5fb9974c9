"""
Tests for lowering/children.py - child materialization.
"""

import pytest

from jsx_compiler.src.ast import Identifier, JSXElement, StringLiteral
from jsx_compiler.src.lowering.children import build_children, clean_jsx_text


class TestCleanJSXText:
    """Tests for clean_jsx_text."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("hello", "hello"),
            ("  hello  ", "  hello  "),
            ("\n  Hello\n  world\n", "Hello world"),
            ("a\r\nb", "a b"),
            ("tab\there", "tab here"),
            ("\n   \n", None),
            ("", None),
            ("  trailing\n", "  trailing"),
            ("\n  leading  ", "leading  "),
        ],
    )
    def test_cleaning(self, raw, expected):
        assert clean_jsx_text(raw) == expected

    def test_inner_blank_lines_collapse(self):
        assert clean_jsx_text("one\n\n   two") == "one two"


class TestBuildChildren:
    """Tests for build_children."""

    def test_mixed_children(self, parse_element):
        element = parse_element("<div>\n  Hi {name}\n  {/* note */}\n  <b />\n</div>")
        children = build_children(element)
        assert isinstance(children[0], StringLiteral)
        assert children[0].value == "Hi "
        assert isinstance(children[1], Identifier)
        assert isinstance(children[2], JSXElement)
        assert len(children) == 3

    def test_whitespace_only_text_dropped(self, parse_element):
        element = parse_element("<ul>\n  <li />\n  <li />\n</ul>")
        assert len(build_children(element)) == 2

    def test_same_line_space_is_kept(self, parse_element):
        element = parse_element("<p><b>a</b> <i>b</i></p>")
        children = build_children(element)
        assert len(children) == 3
        assert children[1].value == " "

    def test_entities_decoded(self, parse_element):
        element = parse_element("<p>a &amp; b</p>")
        assert build_children(element)[0].value == "a & b"

    def test_empty_element(self, parse_element):
        assert build_children(parse_element("<br />")) == []
