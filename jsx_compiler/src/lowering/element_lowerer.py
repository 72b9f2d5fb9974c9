"""Rewrites every JSX element into an ``h(tag, props[, children])`` call."""

from __future__ import annotations

import logging
from typing import Any

from jsx_compiler.src.ast import (
    ArrayExpression,
    ASTTransformer,
    CallExpression,
    Identifier,
    JSXElement,
    StringLiteral,
    copy_location,
)
from jsx_compiler.src.common.source_location import SourceLocation

from .children import build_children
from .custom_tags import resolve_custom_tag
from .identifiers import convert_jsx_identifier, is_compat_tag, resolve_tag_name

logger = logging.getLogger(__name__)


class ElementLowerer(ASTTransformer):
    """Post-order rewrite: nested elements are lowered before their parent."""

    def __init__(self, parent: Any) -> None:
        self.parent = parent

    @property
    def config(self):
        return self.parent.config

    @property
    def attr_lowerer(self):
        return self.parent.attr_lowerer

    def visit_JSXElement(self, node: JSXElement) -> CallExpression:
        self.generic_visit(node)

        children = build_children(node)

        tag_expr = convert_jsx_identifier(node.name, node)
        tag_name = resolve_tag_name(tag_expr)
        tag_name, attributes = resolve_custom_tag(
            tag_name, node.attributes, self.config.custom_tag
        )

        args = []
        if attributes is not node.attributes:
            # A custom tag names a registered component, always by string.
            args.append(copy_location(StringLiteral(tag_name), node.name))
        elif is_compat_tag(tag_name):
            args.append(copy_location(StringLiteral(tag_name), node.name))
        else:
            args.append(tag_expr)

        args.append(self.attr_lowerer.lower_attributes(tag_name, attributes))

        if children:
            args.append(ArrayExpression(children))

        call = CallExpression(Identifier(self.config.pragma), args)
        call.pretty = len(args) >= 3
        copy_location(call, node)

        self.parent.elements_lowered += 1
        logger.debug(
            "Lowered <%s> at %s", tag_name or "?", SourceLocation.from_node(node)
        )
        return call

