"""Conversion of JSX names into JavaScript expressions."""

from __future__ import annotations

import re
from typing import Optional

from jsx_compiler.src.ast import (
    ASTNode,
    Expr,
    Identifier,
    JSXIdentifier,
    JSXMemberExpression,
    MemberExpression,
    StringLiteral,
    ThisExpression,
    copy_location,
)

# Tags starting lowercase or containing a dash are passed to h() by name.
_COMPAT_TAG_RE = re.compile(r"^[a-z]|-")

KEYWORDS = frozenset(
    """
    break case catch class const continue debugger default delete do else
    enum export extends finally for function if import in instanceof new
    return super switch this throw try typeof var void while with
    """.split()
)

STRICT_RESERVED_WORDS = frozenset(
    "implements interface package private protected public static yield let".split()
)

# Names that may appear after a dot but never as a bare binding.
RESERVED_WORDS = KEYWORDS | STRICT_RESERVED_WORDS | {"null", "true", "false", "await"}


def is_identifier_name(name: str) -> bool:
    """True for any ES2015 IdentifierName, keywords included."""
    if not name:
        return False
    return name.replace("$", "_").isidentifier()


def is_valid_identifier(name: str) -> bool:
    """True when ``name`` can be used unquoted as an identifier reference."""
    return is_identifier_name(name) and name not in RESERVED_WORDS


def is_compat_tag(tag_name: Optional[str]) -> bool:
    return bool(tag_name) and _COMPAT_TAG_RE.search(tag_name) is not None


def convert_jsx_identifier(node: ASTNode, parent: Optional[ASTNode] = None) -> Expr:
    """Turn a JSX tag name into the expression that names it.

    ``this`` becomes a ``ThisExpression`` unless it is the property of a
    member name. Names that are not identifier names (``router-link``)
    become string literals.
    """
    if isinstance(node, JSXIdentifier):
        is_property = isinstance(parent, JSXMemberExpression) and parent.property is node
        if node.name == "this" and not is_property:
            return copy_location(ThisExpression(), node)
        if is_identifier_name(node.name):
            return copy_location(Identifier(node.name), node)
        return copy_location(StringLiteral(node.name), node)

    if isinstance(node, JSXMemberExpression):
        obj = convert_jsx_identifier(node.object, node)
        prop = convert_jsx_identifier(node.property, node)
        computed = not isinstance(prop, Identifier)
        return copy_location(MemberExpression(obj, prop, computed=computed), node)

    return node


def resolve_tag_name(expr: Expr) -> Optional[str]:
    """Plain name of a converted tag, or ``None`` for member/this tags."""
    if isinstance(expr, Identifier):
        return expr.name
    if isinstance(expr, StringLiteral):
        return expr.value
    return None
